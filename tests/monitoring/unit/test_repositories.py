import pytest
from src.common.exceptions import DatasetError
from src.monitoring.domain import PredictionRecord
from src.monitoring.infrastructure import CSVTrafficFeedRepository, CSVPredictionLogRepository
from tests.factories import write_prediction_csv

def test_traffic_rows_keyed_by_header(traffic_file, traffic_rows):
    rows = CSVTrafficFeedRepository(traffic_file).load()
    assert len(rows) == 20
    assert rows[0] == traffic_rows[0]
    # Values are kept as strings
    assert rows[0]["Lane 1 Flow (Veh/5 Minutes)"] == "10"

def test_traffic_skips_empty_lines(tmp_path):
    path = tmp_path / "feed.csv"
    path.write_text("a,b\n1,2\n\n3,4\n")
    assert CSVTrafficFeedRepository(path).load() == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

def test_traffic_header_only(tmp_path):
    path = tmp_path / "feed.csv"
    path.write_text("a,b\n")
    assert CSVTrafficFeedRepository(path).load() == []

def test_traffic_missing_file(tmp_path):
    with pytest.raises(DatasetError):
        CSVTrafficFeedRepository(tmp_path / "missing.csv").load()

def test_traffic_inconsistent_record_length(tmp_path):
    path = tmp_path / "feed.csv"
    path.write_text("a,b\n1,2\n3,4,5\n")
    with pytest.raises(DatasetError):
        CSVTrafficFeedRepository(path).load()

def test_traffic_reloads_on_every_call(tmp_path):
    path = tmp_path / "feed.csv"
    path.write_text("a\n1\n")
    repo = CSVTrafficFeedRepository(path)
    assert len(repo.load()) == 1
    path.write_text("a\n1\n2\n")
    assert len(repo.load()) == 2

def test_prediction_row_mapping(tmp_path):
    path = write_prediction_csv(tmp_path / "pred.csv", [["t1", "modelX", "12.5", "11.0", "0.02", "99"]])
    assert CSVPredictionLogRepository(path).load() == [
        PredictionRecord(
            timestamp="t1", predicted_flow=12.5, actual_flow=11.0,
            prediction_time=0.02, global_time=99.0
        )
    ]

def test_prediction_invalid_rows_dropped(prediction_file):
    records = CSVPredictionLogRepository(prediction_file).load()
    assert [r.timestamp for r in records] == ["t1", "t3"]

@pytest.mark.parametrize("row", [
    ["t", "m", "x", "1", "0.1", "5"],
    ["t", "m", "1", "1", "", "5"],
    ["t", "m", "1", "1"],
    ["t", "m", "inf", "1", "0.1", "5"],
])
def test_prediction_drops_non_numeric(tmp_path, row):
    path = write_prediction_csv(tmp_path / "pred.csv", [row])
    assert CSVPredictionLogRepository(path).load() == []

def test_prediction_global_time_optional(tmp_path):
    path = write_prediction_csv(tmp_path / "pred.csv", [["t", "m", "1", "2", "0.1"]])
    records = CSVPredictionLogRepository(path).load()
    assert records[0].global_time is None

def test_prediction_missing_file_is_empty(tmp_path, caplog):
    repo = CSVPredictionLogRepository(tmp_path / "missing.csv")
    with caplog.at_level("WARNING"):
        assert repo.load() == []
    assert "Prediction file not found" in caplog.text

def test_prediction_not_configured():
    assert CSVPredictionLogRepository(None).load() == []

def test_prediction_reads_numeric_prefix(tmp_path):
    path = write_prediction_csv(tmp_path / "pred.csv", [["t", "m", "12.5veh", " 11", "0.02s", "7x"]])
    records = CSVPredictionLogRepository(path).load()
    assert len(records) == 1
    assert records[0].predicted_flow == 12.5
    assert records[0].actual_flow == 11.0
    assert records[0].prediction_time == 0.02
    assert records[0].global_time == 7.0

@pytest.mark.parametrize("value", ["veh12", "nan", "-", "."])
def test_prediction_without_numeric_prefix_dropped(tmp_path, value):
    path = write_prediction_csv(tmp_path / "pred.csv", [["t", "m", value, "1", "0.1", "5"]])
    assert CSVPredictionLogRepository(path).load() == []
