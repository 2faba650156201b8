# phrasekit/shared/logging_config.py
import logging
import sys
from typing import Optional

import structlog

from phrasekit.shared.config import LogFormat, Settings, settings as default_settings


def configure_logging(config: Optional[Settings] = None) -> None:
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).

    The library never calls this itself; applications opt in at startup.
    """
    config = config or default_settings

    # 1. Define the chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if config.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.LOG_LEVEL.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 4. Standard library logging from third-party code goes to the same stream
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=config.LOG_LEVEL.upper(),
    )
