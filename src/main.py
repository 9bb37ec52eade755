import argparse
import sys
import os

# Add project root to sys.path to allow imports from 'src'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def main():
    """
    Command line entry point for the traffic monitoring service.
    """
    parser = argparse.ArgumentParser(description="Traffic Monitoring - Entry Point")
    parser.add_argument('command', choices=['serve', 'metrics', 'window'], help="What to run")
    parser.add_argument('--profile', default='default', help="Config profile under conf/monitoring")
    parser.add_argument('--range', dest='range_key', default='1h', help="Window range for 'window'")

    # Remaining arguments are OmegaConf dotlist overrides, e.g. server.port=9000
    args, overrides = parser.parse_known_args()

    from src.common.config import ConfigManager
    from src.common.logging import setup_logger, set_log_level

    logger = setup_logger("src.main")
    cfg = ConfigManager().load_monitoring_config(args.profile, overrides)
    set_log_level(cfg.log_level)

    if args.command == 'serve':
        import uvicorn
        from src.monitoring.presentation.api import app, configure

        configure(cfg)
        logger.info(f"Starting server at http://{cfg.server.host}:{cfg.server.port}")
        uvicorn.run(app, host=cfg.server.host, port=cfg.server.port)
        return

    import json
    from src.monitoring.application import TrafficDataService

    service = TrafficDataService.from_config(cfg)
    if args.command == 'metrics':
        print(service.get_metrics().model_dump_json(by_alias=True, indent=2))
    elif args.command == 'window':
        window = service.next_window(args.range_key)
        print(json.dumps(window.records, indent=2))

if __name__ == "__main__":
    main()
