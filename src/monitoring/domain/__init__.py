"""
Domain module initialization.
"""
from .entities import (
    TrafficRecord,
    PredictionRecord,
    PredictionMetrics,
    TrafficWindow,
    RawRow,
    TRAFFIC_COLUMNS,
    WINDOW_SIZES,
    DEFAULT_RANGE,
    DATA_TYPES,
    DATA_TYPE_REALTIME,
    DATA_TYPE_PREDICTION,
    DATA_TYPE_BOTH,
)
from .repositories import TrafficFeedRepository, PredictionLogRepository
