"""
Polling endpoints for the traffic dashboard.
"""
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .....common.exceptions import DatasetError
from .....common.logging import setup_logger
from ....application.service import TrafficDataService
from ....domain import DATA_TYPE_BOTH, DEFAULT_RANGE

logger = setup_logger(__name__)

app = FastAPI()

# Singleton
_service: Optional[TrafficDataService] = None

def init_service(service: TrafficDataService):
    global _service
    _service = service

def get_service() -> TrafficDataService:
    if _service is None:
        raise HTTPException(status_code=503, detail="Traffic data service not initialized")
    return _service

@app.get("/traffic-data")
def get_traffic_data(
    range_key: str = Query(DEFAULT_RANGE, alias="range", description="1h, 3h, 6h or 12h"),
    data_type: str = Query(DATA_TYPE_BOTH, alias="type", description="realtime, prediction or both"),
    service: TrafficDataService = Depends(get_service),
):
    """
    Next window of the live feed, optionally with the prediction log.
    Every call slides the shared window forward by one record.
    """
    try:
        payload = service.get_traffic_data(range_key, data_type)
    except DatasetError as e:
        logger.error(f"Error reading data: {e}", exc_info=True)
        return JSONResponse({"error": "Failed to fetch data"}, status_code=500)
    return JSONResponse(jsonable_encoder(payload, by_alias=True))

@app.get("/traffic-data/metrics")
def get_prediction_metrics(service: TrafficDataService = Depends(get_service)):
    """Accuracy summary of the prediction log (MAPE, accuracy, error rate)."""
    return JSONResponse(jsonable_encoder(service.get_metrics(), by_alias=True))

@app.post("/traffic-data/reset")
def reset_cursor(service: TrafficDataService = Depends(get_service)):
    service.reset()
    return {"cursor": service.cursor.position}

@app.get("/status")
def status(service: TrafficDataService = Depends(get_service)):
    return JSONResponse(jsonable_encoder(service.get_status(), by_alias=True))
