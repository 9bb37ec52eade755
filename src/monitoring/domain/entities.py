"""
Domain entities for the traffic monitoring module.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ...common.exceptions import RecordParseError

# Live-feed header, exactly as written by the detector export
TIMESTAMP_COLUMN = "5 Minutes"
LANE1_FLOW_COLUMN = "Lane 1 Flow (Veh/5 Minutes)"
LANE2_FLOW_COLUMN = "Lane 2 Flow (Veh/5 Minutes)"
LANE1_SPEED_COLUMN = "Lane 1 Speed (mph)"
LANE2_SPEED_COLUMN = "Lane 2 Speed (mph)"
TOTAL_FLOW_COLUMN = "Flow (Veh/5 Minutes)"
AVG_SPEED_COLUMN = "Speed (mph)"
LANE_POINTS_COLUMN = "# Lane Points"
OBSERVED_COLUMN = "% Observed"

TRAFFIC_COLUMNS = [
    TIMESTAMP_COLUMN,
    LANE1_FLOW_COLUMN,
    LANE2_FLOW_COLUMN,
    LANE1_SPEED_COLUMN,
    LANE2_SPEED_COLUMN,
    TOTAL_FLOW_COLUMN,
    AVG_SPEED_COLUMN,
    LANE_POINTS_COLUMN,
    OBSERVED_COLUMN,
]

# One record = 5 minutes
WINDOW_SIZES: Dict[str, int] = {
    "1h": 12,
    "3h": 36,
    "6h": 72,
    "12h": 144,
}
DEFAULT_RANGE = "1h"

DATA_TYPE_REALTIME = "realtime"
DATA_TYPE_PREDICTION = "prediction"
DATA_TYPE_BOTH = "both"
DATA_TYPES = (DATA_TYPE_REALTIME, DATA_TYPE_PREDICTION, DATA_TYPE_BOTH)

RawRow = Dict[str, Any]


def _number(row: Mapping[str, Any], column: str, cast):
    value = row.get(column)
    if value is None or str(value).strip() == "":
        raise RecordParseError(f"Missing value for column '{column}'")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise RecordParseError(f"Non-numeric value {value!r} for column '{column}'")
    if math.isnan(number):
        raise RecordParseError(f"NaN value for column '{column}'")
    return cast(number)


def _optional_number(row: Mapping[str, Any], column: str, cast):
    if str(row.get(column) or "").strip() == "":
        return None
    return _number(row, column, cast)


@dataclass
class TrafficRecord:
    """
    Typed view of one 5-minute live-feed row.
    The totals are trusted as read; they are not recomputed from the lanes.
    """
    timestamp: str
    lane1_flow: int
    lane2_flow: int
    lane1_speed: float # mph
    lane2_speed: float # mph
    total_flow: int
    avg_speed: float # mph
    lane_points: Optional[int] = None
    observed_pct: Optional[float] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TrafficRecord":
        timestamp = row.get(TIMESTAMP_COLUMN)
        if not timestamp:
            raise RecordParseError(f"Missing value for column '{TIMESTAMP_COLUMN}'")
        return cls(
            timestamp=str(timestamp),
            lane1_flow=_number(row, LANE1_FLOW_COLUMN, int),
            lane2_flow=_number(row, LANE2_FLOW_COLUMN, int),
            lane1_speed=_number(row, LANE1_SPEED_COLUMN, float),
            lane2_speed=_number(row, LANE2_SPEED_COLUMN, float),
            total_flow=_number(row, TOTAL_FLOW_COLUMN, int),
            avg_speed=_number(row, AVG_SPEED_COLUMN, float),
            lane_points=_optional_number(row, LANE_POINTS_COLUMN, int),
            observed_pct=_optional_number(row, OBSERVED_COLUMN, float),
        )


@dataclass
class PredictionRecord:
    """
    One prediction-log row: model output against ground truth.
    """
    timestamp: str
    predicted_flow: float
    actual_flow: float
    prediction_time: float # seconds
    global_time: Optional[float] = None

    @property
    def error(self) -> float:
        return abs(self.predicted_flow - self.actual_flow)


@dataclass
class TrafficWindow:
    """
    A contiguous slice of the live feed handed out for one request.
    """
    records: List[RawRow]
    start: int
    dataset_length: int
    next_position: int

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class PredictionMetrics:
    """Accuracy summary of a batch of predictions"""
    accuracy: float
    mape: float
    avg_prediction_time: float
    error_rate: float
    count: int
    skipped_zero_actual: int = 0

    def to_dict(self) -> Dict:
        return {
            'accuracy': self.accuracy,
            'mape': self.mape,
            'avg_prediction_time': self.avg_prediction_time,
            'error_rate': self.error_rate,
            'count': self.count,
            'skipped_zero_actual': self.skipped_zero_actual,
        }
