import pytest
from tests.factories import make_rows, write_traffic_csv, write_prediction_csv

@pytest.fixture
def traffic_rows():
    return make_rows(20)

@pytest.fixture
def traffic_file(tmp_path, traffic_rows):
    return write_traffic_csv(tmp_path / "traffic_feed.csv", traffic_rows)

@pytest.fixture
def prediction_file(tmp_path):
    return write_prediction_csv(tmp_path / "prediction_results.csv", [
        ["t1", "modelX", "12.5", "11.0", "0.02", "99"],
        ["t2", "modelX", "12.5", "abc", "0.02", "100"],
        ["t3", "modelX", "10", "10", "0.04", "101"],
    ])
