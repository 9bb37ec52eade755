import os
import sys
import hydra
import uvicorn
from hydra.utils import to_absolute_path
from omegaconf import DictConfig, OmegaConf

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from conf.config_models import MonitoringConfig
from src.common.config import ConfigManager
from src.common.logging import setup_logger, set_log_level
from src.monitoring.presentation.api import app, configure

logger = setup_logger("src.scripts.run_server")

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    monitoring_cfg = OmegaConf.merge(OmegaConf.structured(MonitoringConfig), cfg.monitoring)
    monitoring_cfg = ConfigManager.validate(monitoring_cfg)

    # Data paths are given relative to the project root
    monitoring_cfg.data.traffic_file = to_absolute_path(monitoring_cfg.data.traffic_file)
    if monitoring_cfg.data.prediction_file:
        monitoring_cfg.data.prediction_file = to_absolute_path(monitoring_cfg.data.prediction_file)

    set_log_level(monitoring_cfg.log_level)
    logger.info("Configuration loaded.")

    configure(monitoring_cfg)

    server_cfg = monitoring_cfg.server
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()
