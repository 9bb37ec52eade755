from dataclasses import dataclass, field
from typing import Optional

@dataclass
class DataConfig:
    traffic_file: str = "data/traffic_feed.csv"
    prediction_file: Optional[str] = "data/prediction_results.csv"

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class StreamConfig:
    interval_seconds: float = 5.0 # Dashboard polling period

@dataclass
class MonitoringConfig:
    data: DataConfig = field(default_factory=DataConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    stream: StreamConfig = field(default_factory=StreamConfig)
    log_level: str = "INFO"
