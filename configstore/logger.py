import logging
from typing import Any

import structlog
from structlog.types import EventDict, Processor


def drop_color_message_key(_, __, event_dict: EventDict) -> EventDict:
    """
    Some servers log the message a second time in the extra `color_message`, but we
    don't need it. This processor drops the key from the event dict if it exists.
    """
    event_dict.pop("color_message", None)
    return event_dict


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the configstore package"""

    # Leave an application that already configured structlog alone
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
            isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        drop_color_message_key,
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class ConfigStoreLogger:
    """
    Structured logger for the configstore package.

    Instances are handed to the Store and to every provider it builds, so an
    application can swap the diagnostic sink without touching module globals.
    """

    def __init__(self, log_name: str = "configstore", logger=None):
        self.log_name = log_name
        self.logger = logger if logger is not None else structlog.stdlib.get_logger(log_name)

    def bind(self, **new_values: Any) -> "ConfigStoreLogger":
        """Return a logger carrying `new_values` on every event."""
        return ConfigStoreLogger(self.log_name, self.logger.bind(**new_values))

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)


class NullLogger(ConfigStoreLogger):
    """Logger that discards every event."""

    def __init__(self):
        self.log_name = "null"
        self.logger = None

    def bind(self, **new_values: Any) -> "NullLogger":
        return self

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        pass

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        pass

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        pass

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        pass


def get_configstore_logger(log_name: str = "configstore", log_level: str | None = None) -> ConfigStoreLogger:
    """
    Get the package logger.

    Until the application configures structlog, events below `log_level`
    are dropped instead of going through structlog's print-everything default.
    """
    if log_level is not None and not structlog.is_configured():
        level = logging.getLevelName(log_level.upper())
        if isinstance(level, int):
            return ConfigStoreLogger(log_name, structlog.wrap_logger(
                None, wrapper_class=structlog.make_filtering_bound_logger(level)
            ))
    return ConfigStoreLogger(log_name)


def init_logger(settings):
    """
    Initialize structured logging from a StoreSettings object.

    Args:
        settings: StoreSettings with `log_level` and `json_logs`

    Returns:
        ConfigStoreLogger: Configured structured logger instance
    """
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    return get_configstore_logger()
