from typing import Any
from event_emitter.config.logging import LoggerAdapter, build_formatter
import logging


class Logger:
    def __init__(self, name: str, type: str, level: str = "info"):
        self.name = name
        self.type = type
        self.formatter = build_formatter(self.type)

        self._logger = logging.getLogger(self.name)
        self._logger.setLevel(getattr(logging, level.upper()))

        # Ensure no duplicate handlers are added
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(self.formatter)
            self._logger.addHandler(handler)

        self.logger = LoggerAdapter(self._logger, {"class_name": self.name})

    def get_logger(self):
        return self._logger

    def is_enabled_for(self, level: str) -> bool:
        return self._logger.isEnabledFor(getattr(logging, level.upper()))

    def info(self, message: Any):
        self.logger.info(message, extra={"formatter": self.formatter})

    def debug(self, message: str):
        self.logger.debug(message, extra={"formatter": self.formatter})

    def warning(self, message: str, exc_info=None):
        self.logger.warning(
            message, extra={"formatter": self.formatter}, exc_info=exc_info
        )

    def error(self, message: str, exc_info=True):
        self.logger.error(message, extra={"formatter": self.formatter}, exc_info=exc_info)
