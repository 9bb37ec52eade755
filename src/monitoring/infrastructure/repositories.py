import csv
import math
import re
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ...common.exceptions import DatasetError
from ...common.logging import setup_logger, log_execution_time
from ..domain import TrafficFeedRepository, PredictionLogRepository, PredictionRecord, RawRow

logger = setup_logger(__name__)

# Prediction log positional layout (headerless)
TIMESTAMP_IDX = 0
PREDICTED_IDX = 2
ACTUAL_IDX = 3
LATENCY_IDX = 4
GLOBAL_TIME_IDX = 5


# Leading number of a cell; trailing text such as units is ignored
NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def _to_float(row: Sequence[str], index: int) -> float:
    """
    Reads the numeric prefix of a positional cell ('12.5veh' -> 12.5).
    NaN when the cell is missing or does not start with a number.
    """
    try:
        match = NUMBER_PREFIX.match(row[index])
    except (IndexError, TypeError):
        return math.nan
    return float(match.group(1)) if match else math.nan


class CSVTrafficFeedRepository(TrafficFeedRepository):
    """
    Reads the live-feed CSV. The header row names the columns and every
    value is kept as the string found in the file.
    """
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @log_execution_time(logger)
    def load(self) -> List[RawRow]:
        try:
            with open(self.path, mode='r', newline='', encoding='utf-8-sig') as f:
                reader = csv.reader(f, strict=True)
                header = next(reader, None)
                if header is None:
                    return []

                rows = []
                for values in reader:
                    if not values:
                        continue
                    if len(values) != len(header):
                        raise DatasetError(
                            f"Invalid record length on line {reader.line_num} of {self.path}: "
                            f"expected {len(header)} fields, got {len(values)}"
                        )
                    rows.append(dict(zip(header, values)))
                return rows
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DatasetError(f"Could not read live feed {self.path}: {e}") from e


class CSVPredictionLogRepository(PredictionLogRepository):
    """
    Reads the headerless prediction log.
    Columns: 0 timestamp, 2 predicted, 3 actual, 4 latency, 5 global time.
    Rows whose predicted, actual or latency value is not a finite number are dropped.
    """
    def __init__(self, path: Optional[Union[str, Path]]):
        self.path = Path(path) if path else None

    @log_execution_time(logger)
    def load(self) -> List[PredictionRecord]:
        if self.path is None:
            return []
        try:
            with open(self.path, mode='r', newline='', encoding='utf-8-sig') as f:
                return [
                    record
                    for record in (self._parse_row(row) for row in csv.reader(f, strict=True) if row)
                    if record is not None
                ]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.warning(f"Prediction file not found or error parsing ({self.path}): {e}")
            return []

    @staticmethod
    def _parse_row(row: Sequence[str]) -> Optional[PredictionRecord]:
        predicted = _to_float(row, PREDICTED_IDX)
        actual = _to_float(row, ACTUAL_IDX)
        latency = _to_float(row, LATENCY_IDX)
        if not all(math.isfinite(v) for v in (predicted, actual, latency)):
            return None

        global_time = _to_float(row, GLOBAL_TIME_IDX)
        return PredictionRecord(
            timestamp=row[TIMESTAMP_IDX],
            predicted_flow=predicted,
            actual_flow=actual,
            prediction_time=latency,
            global_time=global_time if math.isfinite(global_time) else None,
        )
