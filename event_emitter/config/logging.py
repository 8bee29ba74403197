import logging
import traceback
from colorlog import ColoredFormatter

LOG_FORMAT = "%(asctime)s %(log_color)s%(class_name)s:%(levelname)s%(reset)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Name of the logger owned by the emitter module
EMITTER_LOGGER_NAME = "EventEmitter"


class LoggerAdapter(logging.LoggerAdapter):
    def __init__(self, logger, extra):
        super().__init__(logger, extra)
        self.logger = logger
        self.extra = extra

    def log(self, level, msg, *args, **kwargs):
        exc_info = kwargs.pop("exc_info", None)
        if exc_info:
            # Inline the traceback so it picks up the coloured prefix
            if isinstance(exc_info, BaseException):
                exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
            if isinstance(exc_info, tuple) and exc_info[0] is not None:
                msg += "\n" + "".join(
                    traceback.format_exception(exc_info[0], exc_info[1], exc_info[2])
                )

        extra = {**self.extra, **kwargs.pop("extra", {})}
        if extra.get("formatter") and self.logger.handlers:
            self.logger.handlers[0].setFormatter(extra["formatter"])

        self.logger.log(level, msg, *args, extra=extra, **kwargs)


class_color_map = {
    "emitter": {
        "INFO": "light_blue",
        "DEBUG": "cyan",
        "ERROR": "red",
        "WARNING": "yellow",
        "CRITICAL": "red,bg_white",
    },
}


def get_color(type: str, level: str) -> str:
    return class_color_map.get(type, {}).get(level, "white")


def build_formatter(type: str) -> ColoredFormatter:
    """Create the coloured formatter used by every logger of the given type."""
    return ColoredFormatter(
        LOG_FORMAT,
        datefmt=DATE_FORMAT,
        reset=True,
        log_colors={level: get_color(type, level) for level in LOG_LEVELS},
    )


def apply_emitter_level(level: str) -> None:
    """Set the emitter logger's level. Called only when settings change."""
    logging.getLogger(EMITTER_LOGGER_NAME).setLevel(getattr(logging, level.upper()))
