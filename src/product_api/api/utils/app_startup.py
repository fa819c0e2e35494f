"""Loguru setup for the product service.

Console output carries the request fields bound by the request logging
middleware (request id, method, path) and, on ``request.end`` records, the
status code and duration. Records from the standard library (uvicorn,
SQLAlchemy) are routed through loguru.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from src.product_api.runtime.config.config_data import ConfigData, LoggingConfig
from src.product_api.runtime.context import get_config

REQUEST_DEFAULTS = {"request_id": "-", "method": "-", "path": "-"}

_LINE = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] {extra[method]} {extra[path]} | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def format_record(record) -> str:
    """Loguru format callable for the plain-text sinks."""
    extra = record["extra"]
    line = _LINE
    if "status_code" in extra:
        line += " <magenta>{extra[status_code]}</magenta>"
        if "duration_ms" in extra:
            line += " ({extra[duration_ms]} ms)"
    return line + "\n{exception}"


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _stdlib_levels(config: ConfigData) -> dict[str, int]:
    return {
        "sqlalchemy.engine": logging.INFO if config.database.echo else logging.WARNING,
        "sqlalchemy.pool": logging.WARNING,
        "uvicorn": logging.INFO,
        "uvicorn.error": logging.INFO,
        # The request logging middleware replaces uvicorn's access log
        "uvicorn.access": logging.CRITICAL,
    }


def _add_file_sink(cfg: LoggingConfig, diagnose: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)
    serialize = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if serialize else format_record,
        serialize=serialize,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        enqueue=True,
        diagnose=diagnose,
    )


def configure_logging(config: ConfigData | None = None) -> None:
    config = config or get_config()
    cfg = config.logging
    diagnose = config.app.environment != "production"

    logger.remove()
    logger.configure(extra=dict(REQUEST_DEFAULTS))
    logger.add(
        sys.stderr,
        level=cfg.level,
        format=format_record,
        colorize=True,
        backtrace=diagnose,
        diagnose=diagnose,
    )
    if cfg.file:
        _add_file_sink(cfg, diagnose)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name, level in _stdlib_levels(config).items():
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True
        stdlog.setLevel(level)

    logger.info(
        "Logging configured for {} ({})", config.app.name, config.app.environment
    )
