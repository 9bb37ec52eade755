from .monitoring import (
    PredictionPoint,
    PredictionResponse,
    CombinedResponse,
    MetricsResponse,
    StatusResponse,
    StreamWindow,
    utc_now_iso,
)

__all__ = [
    "PredictionPoint",
    "PredictionResponse",
    "CombinedResponse",
    "MetricsResponse",
    "StatusResponse",
    "StreamWindow",
    "utc_now_iso",
]
