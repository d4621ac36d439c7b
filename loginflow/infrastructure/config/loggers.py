import logging.config
from typing import Any
from typing import Final

from loginflow.infrastructure.types import LogHandler

LOGGER_LOGINFLOW: Final[str] = "loginflow"

FORMATTERS: Final[dict[str, dict[str, str]]] = {
    "default": {
        "format": "[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "rich": {
        # RichHandler renders time, level and path itself.
        "format": "%(message)s",
        "datefmt": "[%X]",
    },
}

HANDLERS: Final[dict[LogHandler, dict[str, Any]]] = {
    LogHandler.CONSOLE: {
        "class": "logging.StreamHandler",
        "formatter": "default",
        "stream": "ext://sys.stdout",
    },
    LogHandler.RICH: {
        "class": "rich.logging.RichHandler",
        "formatter": "rich",
        "markup": False,
        "rich_tracebacks": True,
        "show_path": True,
    },
    LogHandler.NULL: {
        "class": "logging.NullHandler",
    },
}


def build_logging_conf(level: str, handlers: list[str], propagate: bool = False) -> dict[str, Any]:
    """Builds a `dictConfig` mapping routing our logs to the given handlers.

    Only the handlers that are selected get declared, so an unused handler
    (e.g. rich) is never instantiated. The root logger shares the same
    handlers but stays at WARNING, so third party libraries remain quiet.

    Raises:
        ValueError: If one of the handler names is unknown.
    """
    selected = [LogHandler(name) for name in handlers]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {name: dict(formatter) for name, formatter in FORMATTERS.items()},
        "handlers": {handler.value: dict(HANDLERS[handler]) for handler in selected},
        "loggers": {
            LOGGER_LOGINFLOW: {
                "level": level,
                "handlers": [handler.value for handler in selected],
                "propagate": propagate,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": [handler.value for handler in selected],
        },
    }


def configure_loggers(level: str, handlers: list[str], propagate: bool = False) -> None:
    """Configures the application's loggers based on the provided level and handlers.

    Args:
        level: The minimum logging level of the `loginflow` logger (e.g., "INFO", "DEBUG").
        handlers: A list of handler names (e.g., ["console"], ["rich"]) to use.
        propagate: Whether messages should be propagated to ancestor loggers.
    """
    logging.config.dictConfig(build_logging_conf(level, handlers, propagate))
