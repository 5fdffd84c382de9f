import logging
import json
import sys
from datetime import datetime, timezone
import os

# LogRecord attributes that are not user supplied extras
_RESERVED_ATTRS = frozenset((
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'exc_info', 'exc_text', 'stack_info', 'lineno', 'funcName',
    'created', 'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'taskName', 'message', 'asctime',
    'coordinates', 'zone',
))


class StructuredJSONFormatter(logging.Formatter):
    """Formatter emitting one JSON object per log record"""

    def __init__(self, service_name: str = "utm-projection"):
        super().__init__()
        self.service_name = service_name
        self.hostname = os.environ.get('HOSTNAME', 'localhost')

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON"""

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "service": self.service_name,
            "hostname": self.hostname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Projection context
        if hasattr(record, 'coordinates'):
            log_entry["coordinates"] = record.coordinates
        if hasattr(record, 'zone'):
            log_entry["zone"] = str(record.zone)

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info)
            }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith('_'):
                log_entry.setdefault("extra", {})[key] = value

        return json.dumps(log_entry, default=str, separators=(',', ':'))


class DevelopmentFormatter(logging.Formatter):
    """Human-readable formatter for development"""

    def __init__(self):
        super().__init__(
            fmt='%(asctime)s | %(levelname)8s | %(name)20s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )


def setup_logging(
    level: str = None,
    use_json: bool = None,
    service_name: str = None
) -> None:
    """Setup logging configuration; unset arguments come from Settings"""
    if level is None or use_json is None or service_name is None:
        from .config import get_settings

        settings = get_settings()
        if level is None:
            level = settings.LOG_LEVEL
        if use_json is None:
            use_json = settings.LOG_FORMAT == "json"
        if service_name is None:
            service_name = settings.SERVICE_NAME

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)

    if use_json:
        formatter = StructuredJSONFormatter(service_name)
    else:
        formatter = DevelopmentFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    configure_projection_loggers(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured",
        extra={
            "log_format": "json" if use_json else "development",
            "log_level": level,
            "service": service_name
        }
    )


def configure_projection_loggers(level: str) -> None:
    """Set the level of the package loggers and quieten pyproj"""

    loggers = [
        'utm_projection.projection',
        'utm_projection.crs_service',
        'utm_projection.config',
    ]

    for logger_name in loggers:
        logging.getLogger(logger_name).setLevel(getattr(logging, level.upper()))

    logging.getLogger('pyproj').setLevel(logging.WARNING)
