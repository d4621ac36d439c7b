from enum import StrEnum


class LogLevel(StrEnum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NOTSET = "NOTSET"


class LogHandler(StrEnum):
    """Names of the handlers declared in the logging configuration."""

    CONSOLE = "console"
    RICH = "rich"
    NULL = "null"
