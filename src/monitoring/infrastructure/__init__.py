"""
Infrastructure module initialization.
"""
from .repositories import CSVTrafficFeedRepository, CSVPredictionLogRepository

__all__ = [
    "CSVTrafficFeedRepository",
    "CSVPredictionLogRepository",
]
