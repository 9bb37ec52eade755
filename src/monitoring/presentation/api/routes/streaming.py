"""
Server-Sent Events transport for the window sequence.
"""
import asyncio
import json
from typing import AsyncIterator, Dict

from fastapi import Depends, FastAPI, Query
from sse_starlette.sse import EventSourceResponse
from starlette.concurrency import run_in_threadpool

from .....common.exceptions import DatasetError
from .....common.logging import setup_logger
from .....common.schemas.monitoring import StreamWindow
from ....application.service import TrafficDataService
from ....domain import DEFAULT_RANGE
from .traffic import get_service

logger = setup_logger(__name__)

app = FastAPI()

async def window_events(service: TrafficDataService, range_key: str) -> AsyncIterator[Dict[str, str]]:
    """
    Yields one ``window`` event per interval from a private cursor.
    A live-feed failure yields a single ``error`` event and ends the stream.
    """
    windows = service.stream_windows(range_key)
    while True:
        try:
            window = await run_in_threadpool(next, windows)
        except DatasetError as e:
            logger.error(f"Stream stopped, live feed unavailable: {e}")
            yield {"event": "error", "data": json.dumps({"error": "Failed to fetch data"})}
            return

        payload = StreamWindow(traffic=window.records).model_dump(by_alias=True)
        yield {"event": "window", "data": json.dumps(payload)}
        await asyncio.sleep(service.stream_interval)

@app.get("/traffic-data/stream")
async def stream_traffic(
    range_key: str = Query(DEFAULT_RANGE, alias="range"),
    service: TrafficDataService = Depends(get_service),
):
    """
    Pushes successive windows instead of waiting to be polled.

    Frontend usage:
    ```javascript
    const source = new EventSource('/traffic-data/stream?range=3h');
    source.addEventListener('window', (event) => {
        const { traffic } = JSON.parse(event.data);
        console.log('Rows:', traffic.length);
    });
    ```
    """
    return EventSourceResponse(window_events(service, range_key))
