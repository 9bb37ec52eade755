"""
Application module initialization.
"""
from .window_cursor import WindowCursor, iter_windows
from .metrics import compute_prediction_metrics, relative_error
from .service import TrafficDataService, resolve_window_size, resolve_data_type

__all__ = [
    "WindowCursor",
    "iter_windows",
    "compute_prediction_metrics",
    "relative_error",
    "TrafficDataService",
    "resolve_window_size",
    "resolve_data_type",
]
