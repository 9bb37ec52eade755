from omegaconf import DictConfig, OmegaConf
from pathlib import Path
from typing import Optional

from conf.config_models import MonitoringConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Loads and validates the monitoring configuration."""

    REQUIRED_KEYS = ['data', 'server', 'stream']

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)

    def load_monitoring_config(self, profile: str = "default", overrides: Optional[list] = None) -> DictConfig:
        """Loads a monitoring profile on top of the structured defaults."""
        config_path = self.config_dir / "monitoring" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        raw = OmegaConf.load(config_path)
        for key in self.REQUIRED_KEYS:
            if key not in raw:
                raise ConfigurationError(f"Missing required config key: {key}")

        cfg = OmegaConf.merge(OmegaConf.structured(MonitoringConfig), raw)
        if overrides:
            cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(overrides))

        return self.validate(cfg)

    @staticmethod
    def validate(cfg: DictConfig) -> DictConfig:
        """Checks values that the schema alone cannot express."""
        if cfg.stream.interval_seconds <= 0:
            raise ConfigurationError("stream.interval_seconds must be positive")
        if not cfg.data.traffic_file:
            raise ConfigurationError("data.traffic_file must be set")
        return cfg
