"""
Structured Logging Setup
Configures structlog and a JSON stdlib handler for applications embedding the library
"""

import logging
import sys
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger

from fuzzy_substring.config import Settings, settings as default_config


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter tagging every record with service and environment.
    """

    def __init__(self, *args, service: str, environment: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service
        self.environment = environment

    def add_fields(self, log_record, record, message_dict):
        """
        Add custom fields to log record.

        Adds:
        - service: Application name for multi-service environments
        - environment: Deployment environment (development/production)
        """
        super().add_fields(log_record, record, message_dict)
        log_record['service'] = self.service
        log_record['environment'] = self.environment


def get_logger(name: str):
    """
    structlog logger bound to the stdlib logger of the same name.

    Events are handed to the stdlib logging module, so the host application's
    handlers and levels decide whether anything is written.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger
    )


def setup_logging(config: Optional[Settings] = None, stream=None) -> logging.Handler:
    """
    Configure structured logging.

    Sets up:
    - structlog routed through the stdlib logging module; in JSON mode event
      fields become record extras, otherwise events are rendered for the console
    - Root logger handler writing JSON (or console text) to stdout or the given stream
    - Root level from config.log_level

    The library itself never calls this; the embedding application does.

    Args:
        config: Settings to use (default: module-level settings from env)
        stream: Output stream (default: sys.stdout)

    Returns:
        logging.Handler: The configured handler (for testing)
    """
    config = config or default_config
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stdout)

    if config.log_json:
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs
        ]
        handler.setFormatter(ServiceJsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s',
            rename_fields={
                'asctime': 'timestamp',
                'levelname': 'level'
            },
            service=config.service_name,
            environment=config.environment,
        ))
    else:
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer()
        ]
        handler.setFormatter(logging.Formatter('%(message)s'))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    return handler
