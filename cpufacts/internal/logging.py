import logging
import logging.handlers
import os
import sys
from pathlib import Path
import structlog

from cpufacts.internal.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL

_LOGGING_CONFIGURED = False

_FOREIGN_PRE_CHAIN = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
]

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def configure_default_logging():
    """
    Route structlog through stdlib logging without writing anywhere.
    Library callers that never run setup_logging get no output on stdout;
    their own stdlib handlers still receive cpufacts events.
    """
    structlog.configure(
        processors=_SHARED_PROCESSORS + [structlog.processors.KeyValueRenderer(key_order=["event"])],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    package_logger = logging.getLogger("cpufacts")
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())


def setup_logging(log_level_name: str | None = None, log_file_path: Path = None, console_output: bool = False):
    """
    Configure logging for cpufacts.
    - Uses structlog for structured logging.
    - Writes JSON logs to a rotating file if log_file_path is provided.
    - Can optionally send human-readable logs to stderr, keeping stdout free for reports.
    - An explicit log_level_name wins; otherwise CPUFACTS_LOG_LEVEL, then WARNING.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    effective_log_level_name = (log_level_name or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    log_level = getattr(logging, effective_log_level_name, logging.WARNING)

    handlers = []

    if log_file_path:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=1 * 1024 * 1024,  # 1 MB
            backupCount=3,
        )
        file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=_FOREIGN_PRE_CHAIN,
        ))
        handlers.append(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(),
            foreign_pre_chain=_FOREIGN_PRE_CHAIN,
        ))
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    structlog.configure(
        processors=_SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None):
    return structlog.get_logger(name)


# Quiet until an entry point calls setup_logging
if not structlog.is_configured():
    configure_default_logging()
