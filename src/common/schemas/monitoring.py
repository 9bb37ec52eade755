from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T10:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

class PredictionPoint(CamelModel):
    """
    One prediction-log row as served to dashboards.
    """
    timestamp: str = Field(..., description="Timestamp as written in the prediction log")
    predicted_flow: float = Field(..., alias="predictedFlow", description="Model output (veh/5 min)")
    actual_flow: float = Field(..., alias="actualFlow", description="Ground truth flow (veh/5 min)")
    prediction_time: float = Field(..., alias="predictionTime", description="Prediction latency in seconds")
    global_time: Optional[float] = Field(None, alias="globalTime", description="Global clock value, null if unparseable")

class PredictionResponse(CamelModel):
    data: List[PredictionPoint]
    last_update: str = Field(default_factory=utc_now_iso, alias="lastUpdate")

class CombinedResponse(CamelModel):
    traffic: List[Dict[str, Any]] = Field(..., description="Raw live-feed rows keyed by the file header")
    predictions: List[PredictionPoint]
    last_update: str = Field(default_factory=utc_now_iso, alias="lastUpdate")

class MetricsResponse(CamelModel):
    """
    Accuracy summary. A value that overflowed to infinity is served as null.
    """
    accuracy: Optional[float]
    mape: Optional[float]
    avg_prediction_time: Optional[float] = Field(..., alias="avgPredictionTime")
    error_rate: Optional[float] = Field(..., alias="errorRate")
    count: int = Field(..., ge=0)
    skipped_zero_actual: int = Field(0, ge=0, alias="skippedZeroActual")
    last_update: str = Field(default_factory=utc_now_iso, alias="lastUpdate")

class StatusResponse(CamelModel):
    status: str = "running"
    cursor: int = Field(..., ge=0)
    dataset_length: Optional[int] = Field(None, ge=0, alias="datasetLength")

class StreamWindow(CamelModel):
    traffic: List[Dict[str, Any]]
    last_update: str = Field(default_factory=utc_now_iso, alias="lastUpdate")
