"""
Structured logging configuration for the Materials API.
Console logging always; rotating log files when a log directory is configured.
"""
import logging
import logging.config
import os
import sys
from typing import Any, Dict, Optional

ROOT_LOGGER = "materials_api"


def build_logging_config(level: str = "INFO", log_dir: Optional[str] = None) -> Dict[str, Any]:
    """Build a dictConfig mapping; file handlers are added only with ``log_dir``."""
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "level": level,
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": sys.stdout,
        }
    }
    app_handlers = ["console"]
    audit_handlers = ["console"]

    if log_dir:
        handlers.update({
            "file": {
                "level": "DEBUG",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, "application.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
            },
            "error_file": {
                "level": "ERROR",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "detailed",
                "filename": os.path.join(log_dir, "error.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
            },
            "audit_file": {
                "level": "INFO",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "standard",
                "filename": os.path.join(log_dir, "audit.log"),
                "maxBytes": 10485760,  # 10MB
                "backupCount": 10,
            },
        })
        app_handlers += ["file", "error_file"]
        audit_handlers = ["audit_file"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
            },
        },
        "handlers": handlers,
        "loggers": {
            ROOT_LOGGER: {
                "level": "DEBUG",
                "handlers": app_handlers,
                "propagate": False,
            },
            f"{ROOT_LOGGER}.audit": {
                "level": "INFO",
                "handlers": audit_handlers,
                "propagate": False,
            },
            "werkzeug": {
                "level": "INFO",
                "handlers": app_handlers,
                "propagate": False,
            },
        },
    }


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """Initialize logging configuration."""
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logging.config.dictConfig(build_logging_config(level, log_dir))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.debug("Logging system initialized")
    return logger


class AuditLogger:
    """Specialized logger for audit events."""

    def __init__(self):
        self.logger = logging.getLogger(f"{ROOT_LOGGER}.audit")

    def log_material_action(
        self,
        action: str,
        material_id: int,
        barcode: Optional[str] = None,
    ):
        """Log a successful change to the material collection."""
        extra = {
            "action": action,
            "resource": f"material:{material_id}",
            "result": "success",
        }
        message = f"Material {material_id} {action}"
        if barcode:
            message += f" (barcode {barcode})"
        self.logger.info(message, extra=extra)


class PerformanceLogger:
    """Logger for performance monitoring."""

    def __init__(self):
        self.logger = logging.getLogger(f"{ROOT_LOGGER}.performance")

    def log_request_timing(
        self,
        endpoint: str,
        method: str,
        duration_ms: float,
        status_code: int,
    ):
        """Log API request performance."""
        extra = {
            "endpoint": endpoint,
            "method": method,
            "duration_ms": duration_ms,
            "status_code": status_code
        }

        # Determine log level based on performance
        if duration_ms > 5000:  # > 5 seconds
            log_level = "warning"
        elif duration_ms > 2000:  # > 2 seconds
            log_level = "info"
        else:
            log_level = "debug"

        log_method = getattr(self.logger, log_level)
        log_method(
            f"{method} {endpoint} completed in {duration_ms:.2f}ms (status: {status_code})",
            extra=extra
        )


# Global instances
audit_logger = AuditLogger()
performance_logger = PerformanceLogger()


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
