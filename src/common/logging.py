import logging
import time
from functools import wraps
from typing import Callable, Optional, Union

# Level applied to loggers created after set_log_level() runs
_configured_level: Union[int, str] = logging.INFO

def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Sets up a logger with a standard format.
    Without an explicit level it uses the one last passed to set_log_level.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else _configured_level)
    return logger

def set_log_level(level: Union[int, str]):
    """
    Applies a level to every logger under the ``src`` namespace,
    including the ones set up later.
    """
    global _configured_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    _configured_level = level
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("src"):
            logging.getLogger(name).setLevel(level)

def log_execution_time(logger: logging.Logger, slow_threshold: float = 0.5):
    """
    Decorator to measure and log execution time of a function.
    Calls slower than ``slow_threshold`` seconds are reported at INFO.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}", exc_info=True)
                raise
            elapsed = time.time() - start
            if elapsed > slow_threshold:
                logger.info(f"{func.__name__} slow: {elapsed:.3f}s")
            else:
                logger.debug(f"{func.__name__} executed in {elapsed:.3f}s")
            return result
        return wrapper
    return decorator
