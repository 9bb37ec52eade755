import threading
import pytest
from src.monitoring.application.window_cursor import WindowCursor, iter_windows

RECORDS = list(range(20))

@pytest.fixture
def cursor():
    return WindowCursor()

def test_window_fits(cursor):
    window = cursor.take(RECORDS, 12)
    assert window.records == RECORDS[0:12]
    assert window.start == 0
    assert cursor.position == 1
    assert cursor.dataset_length == 20

def test_window_slides_one_record_per_take(cursor):
    starts = [cursor.take(RECORDS, 12).start for _ in range(9)]
    assert starts == list(range(9))
    assert cursor.position == 9

def test_last_full_window_then_reset(cursor):
    # Calls 1..8 move the cursor to 8
    for _ in range(8):
        cursor.take(RECORDS, 12)

    ninth = cursor.take(RECORDS, 12)
    assert ninth.records == RECORDS[8:20]
    assert cursor.position == 9

    # 9 + 12 > 20: restart from the beginning, no splicing
    tenth = cursor.take(RECORDS, 12)
    assert tenth.records == RECORDS[0:12]
    assert tenth.start == 0
    assert cursor.position == 1

def test_reset_ignores_previous_position():
    cursor = WindowCursor(position=15)
    window = cursor.take(RECORDS, 12)
    assert window.records == RECORDS[0:12]
    # 1 mod N, not 16
    assert cursor.position == 1

def test_wraps_at_dataset_end():
    cursor = WindowCursor(position=19)
    window = cursor.take(RECORDS, 1)
    assert window.records == [19]
    assert cursor.position == 0

def test_window_larger_than_dataset(cursor):
    window = cursor.take(RECORDS[:5], 12)
    assert window.records == RECORDS[:5]
    assert cursor.position == 1

def test_single_record_dataset(cursor):
    assert cursor.take([42], 1).records == [42]
    assert cursor.position == 0

def test_shrunk_dataset_resyncs():
    cursor = WindowCursor(position=15)
    shorter = RECORDS[:10]
    window = cursor.take(shorter, 5)
    assert window.records == shorter[0:5]
    assert cursor.position == 1
    assert cursor.dataset_length == 10

def test_empty_dataset(cursor):
    window = cursor.take([], 12)
    assert window.records == []
    assert cursor.position == 0
    assert cursor.dataset_length == 0

def test_invalid_window_size(cursor):
    with pytest.raises(ValueError):
        cursor.take(RECORDS, 0)

def test_reset():
    cursor = WindowCursor(position=7)
    cursor.reset()
    assert cursor.position == 0

def test_concurrent_takes_get_distinct_positions():
    records = list(range(1000))
    cursor = WindowCursor()
    starts = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            window = cursor.take(records, 1)
            with lock:
                starts.append(window.start)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(starts) == list(range(400))
    assert cursor.position == 400

def test_iter_windows_visits_every_start():
    windows = iter_windows(lambda: RECORDS, 3)
    starts = [next(windows).start for _ in range(25)]
    # Starts 0..17 fit; 18 and 19 would overflow and restart at 0
    assert starts[:18] == list(range(18))
    assert starts[18] == 0
    assert starts[19:25] == [1, 2, 3, 4, 5, 6]

def test_iter_windows_is_restartable():
    first = iter_windows(lambda: RECORDS, 12)
    next(first)
    next(first)
    second = iter_windows(lambda: RECORDS, 12)
    assert next(second).start == 0

def test_iter_windows_reloads_each_step():
    calls = []

    def loader():
        calls.append(1)
        return RECORDS

    windows = iter_windows(loader, 12)
    next(windows)
    next(windows)
    assert len(calls) == 2

def test_iter_windows_shared_cursor():
    shared = WindowCursor()
    windows = iter_windows(lambda: RECORDS, 12, cursor=shared)
    next(windows)
    assert shared.position == 1
