class MonitoringError(Exception):
    """Base exception for all traffic monitoring errors."""
    pass

class DatasetError(MonitoringError):
    """Raised when the live-feed dataset cannot be read or parsed."""
    pass

class RecordParseError(DatasetError):
    """Raised when a single live-feed row cannot be coerced to a TrafficRecord."""
    pass

class ConfigurationError(MonitoringError):
    """Raised when configuration is invalid."""
    pass
