"""
Domain repositories for the traffic monitoring module.
"""
from typing import List, Protocol
from .entities import RawRow, PredictionRecord

class TrafficFeedRepository(Protocol):
    """
    Source of the live-feed dataset, reloaded on every call.
    """
    def load(self) -> List[RawRow]:
        ...

class PredictionLogRepository(Protocol):
    """
    Source of the prediction log. Never raises; degrades to an empty list.
    """
    def load(self) -> List[PredictionRecord]:
        ...
