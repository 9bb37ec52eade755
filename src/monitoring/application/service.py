"""
Service layer for the traffic data API.
Composes the repositories, the shared cursor and the metrics reduction.
"""
import math
from typing import Iterator, List, Optional, Union

from omegaconf import DictConfig

from ...common.logging import setup_logger
from ...common.schemas.monitoring import (
    CombinedResponse,
    MetricsResponse,
    PredictionPoint,
    PredictionResponse,
    StatusResponse,
)
from ..domain import (
    DATA_TYPES,
    DATA_TYPE_BOTH,
    DATA_TYPE_PREDICTION,
    DATA_TYPE_REALTIME,
    DEFAULT_RANGE,
    WINDOW_SIZES,
    PredictionLogRepository,
    PredictionRecord,
    RawRow,
    TrafficFeedRepository,
    TrafficWindow,
)
from ..infrastructure import CSVPredictionLogRepository, CSVTrafficFeedRepository
from .metrics import compute_prediction_metrics
from .window_cursor import WindowCursor, iter_windows

logger = setup_logger(__name__)

TrafficDataPayload = Union[List[RawRow], PredictionResponse, CombinedResponse]


def resolve_window_size(range_key: Optional[str]) -> int:
    """Maps a range label to a record count. Unknown labels fall back to 1h."""
    if range_key is None:
        range_key = DEFAULT_RANGE
    size = WINDOW_SIZES.get(range_key)
    if size is None:
        logger.warning(f"Unknown range '{range_key}', using {DEFAULT_RANGE}")
        size = WINDOW_SIZES[DEFAULT_RANGE]
    return size


def resolve_data_type(data_type: Optional[str]) -> str:
    if data_type is None:
        return DATA_TYPE_BOTH
    if data_type not in DATA_TYPES:
        logger.warning(f"Unknown type '{data_type}', serving '{DATA_TYPE_BOTH}'")
        return DATA_TYPE_BOTH
    return data_type


def to_prediction_points(records: List[PredictionRecord]) -> List[PredictionPoint]:
    return [
        PredictionPoint(
            timestamp=r.timestamp,
            predicted_flow=r.predicted_flow,
            actual_flow=r.actual_flow,
            prediction_time=r.prediction_time,
            global_time=r.global_time,
        )
        for r in records
    ]


class TrafficDataService:
    """
    Serves successive windows of the live feed plus the prediction log.
    Not idempotent: every traffic request moves the shared cursor.
    """
    def __init__(
        self,
        traffic_repository: TrafficFeedRepository,
        prediction_repository: PredictionLogRepository,
        cursor: Optional[WindowCursor] = None,
        stream_interval: float = 5.0,
    ):
        self.traffic_repository = traffic_repository
        self.prediction_repository = prediction_repository
        self.cursor = cursor if cursor is not None else WindowCursor()
        self.stream_interval = stream_interval

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "TrafficDataService":
        """Builds the service from the ``monitoring`` config node."""
        logger.info(
            f"Live feed: {cfg.data.traffic_file} | Prediction log: {cfg.data.prediction_file}"
        )
        return cls(
            traffic_repository=CSVTrafficFeedRepository(cfg.data.traffic_file),
            prediction_repository=CSVPredictionLogRepository(cfg.data.prediction_file),
            stream_interval=float(cfg.stream.interval_seconds),
        )

    def next_window(self, range_key: Optional[str] = DEFAULT_RANGE) -> TrafficWindow:
        """
        Reloads the live feed and takes the window at the shared cursor.
        Raises DatasetError when the feed cannot be read.
        """
        window_size = resolve_window_size(range_key)
        records = self.traffic_repository.load()
        window = self.cursor.take(records, window_size)
        logger.debug(
            f"Window range={range_key} size={len(window)} start={window.start} "
            f"next={window.next_position}/{window.dataset_length}"
        )
        return window

    def get_traffic_data(
        self,
        range_key: Optional[str] = DEFAULT_RANGE,
        data_type: Optional[str] = DATA_TYPE_BOTH,
    ) -> TrafficDataPayload:
        data_type = resolve_data_type(data_type)
        window = self.next_window(range_key)

        if data_type == DATA_TYPE_REALTIME:
            return window.records

        predictions = to_prediction_points(self.prediction_repository.load())
        if data_type == DATA_TYPE_PREDICTION:
            return PredictionResponse(data=predictions)

        return CombinedResponse(traffic=window.records, predictions=predictions)

    def get_metrics(self) -> MetricsResponse:
        metrics = compute_prediction_metrics(self.prediction_repository.load())
        # Huge but finite log values can still overflow the reductions
        values = {
            key: None if isinstance(value, float) and not math.isfinite(value) else value
            for key, value in metrics.to_dict().items()
        }
        return MetricsResponse(**values)

    def get_status(self) -> StatusResponse:
        return StatusResponse(
            cursor=self.cursor.position,
            dataset_length=self.cursor.dataset_length,
        )

    def reset(self):
        self.cursor.reset()
        logger.info("Cursor reset to 0")

    def stream_windows(self, range_key: Optional[str] = DEFAULT_RANGE) -> Iterator[TrafficWindow]:
        """Private-cursor window sequence; the shared cursor is not touched."""
        return iter_windows(self.traffic_repository.load, resolve_window_size(range_key))
