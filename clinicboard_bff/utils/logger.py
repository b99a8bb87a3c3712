"""
Logging utilities for the ClinicBoard BFF

Provides logging configuration and the inbound request logger.
"""

import os
import copy
import logging
import logging.config
from typing import Optional, Dict, Any
import yaml

# Default logging configuration
DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
        'detailed': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(lineno)d - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
        'json': {
            'format': '{"timestamp": "%(asctime)s", "logger": "%(name)s", "level": "%(levelname)s", "module": "%(module)s", "function": "%(funcName)s", "line": %(lineno)d, "message": "%(message)s"}',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'default',
            'stream': 'ext://sys.stdout'
        }
    },
    'loggers': {
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
            'propagate': False
        },
        'clinicboard_bff': {
            'level': 'INFO',
            'handlers': ['console'],
            'propagate': False
        }
    }
}


def load_logging_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a logging dict config

    Args:
        config_path: Path to a YAML logging configuration file

    Returns:
        The file's configuration, or a copy of the default configuration
        when no readable file is given
    """
    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)
            if isinstance(config, dict):
                return config
            logging.getLogger(__name__).warning(
                f"Logging config {config_path} is not a mapping, using defaults"
            )
        except (OSError, yaml.YAMLError) as e:
            logging.getLogger(__name__).warning(
                f"Failed to load logging config from {config_path}: {e}"
            )

    return copy.deepcopy(DEFAULT_LOGGING_CONFIG)


def setup_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None
) -> Dict[str, Any]:
    """
    Setup logging configuration

    Args:
        config_path: Path to logging configuration file
        log_level: Override log level
        log_format: Override log format ('default', 'detailed', 'json')

    Returns:
        The configuration that was applied
    """
    config = load_logging_config(config_path)

    # Override log level if specified
    if log_level:
        log_level = log_level.upper()
        for logger_config in config.get('loggers', {}).values():
            logger_config['level'] = log_level
        for handler_config in config.get('handlers', {}).values():
            handler_config['level'] = log_level

    # Override log format if specified
    if log_format and log_format in config.get('formatters', {}):
        for handler_config in config.get('handlers', {}).values():
            handler_config['formatter'] = log_format

    try:
        logging.config.dictConfig(config)
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        # Fallback to basic configuration
        logging.basicConfig(
            level=getattr(logging, log_level or 'INFO', logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        logging.getLogger(__name__).error(f"Failed to configure logging: {e}")

    return config


class RequestLogger:
    """Logger for inbound HTTP requests"""

    def __init__(self, name: str = "clinicboard_bff.requests"):
        self.logger = logging.getLogger(name)

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        response_time: float,
        correlation_id: Optional[str] = None
    ):
        """Log HTTP request"""
        self.logger.info(
            f"{method} {path} {status_code} {response_time:.3f}s",
            extra={
                'request_method': method,
                'request_path': path,
                'response_status': status_code,
                'response_time': response_time,
                'correlation_id': correlation_id,
                'event_type': 'http_request'
            }
        )


def get_request_logger() -> RequestLogger:
    """Get request logger instance"""
    return RequestLogger()
