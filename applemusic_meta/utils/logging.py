"""structlog setup for the plugin.

Rendering follows ``Settings.app_env``: a coloured console in development,
one JSON object per line in production, where the host ships plugin output to
its log files.  Stdlib records (the host's own and third-party libraries) go
through the same processors so plugin and library lines look alike.

httpx and httpcore log every request at INFO.  The page fetcher already
emits ``page_fetch_*`` events with the catalog URL, so those two loggers are
held at WARNING unless DEBUG is requested.
"""

import logging
import sys

import structlog

_CHATTY_LIBRARIES = ("httpx", "httpcore")


def _renderer(app_env: str) -> structlog.types.Processor:
    if app_env == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(log_level: str = "INFO", app_env: str = "development") -> None:
    """Configure structlog and bridge stdlib logging through it.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR.
        app_env: ``"production"`` selects JSON output; anything else the console.
    """
    level = logging.getLevelName(log_level.upper())
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer = _renderer(app_env)

    structlog.configure(
        processors=[*processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *processors,
                renderer,
            ],
        )
    )
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    library_level = logging.DEBUG if level == logging.DEBUG else logging.WARNING
    for name in _CHATTY_LIBRARIES:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger tagged with *name*, configuring defaults on first use."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(logger_name=name)
