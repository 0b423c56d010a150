"""A collection of stageup-specific exceptions."""
import logging

from logzero import logger


class StageUpError(Exception):
    """Base class for stageup exceptions."""

    error_code = 1

    def __init__(self, message="An unhandled exception occured!"):
        # Log the exception if the logger is set to DEBUG
        if logger.level == logging.DEBUG and isinstance(message, Exception):
            logger.exception(message)
        self.message = message
        super().__init__(message)
        logger.error(f"{self.__class__.__name__}: {self.message}")


class ConfigurationError(StageUpError):
    """Raised when a stageup configuration error occurs."""

    error_code = 8


class UpgradeNotApplicableError(StageUpError):
    """Raised when an upgrader's required config entry is missing."""

    error_code = 13

    def __init__(self, name, message=None):
        self.name = name
        if message is None:
            message = f"Config '{name}' is missing, this upgrader cannot be applied."
        super().__init__(message=message)


class UpgradeTypeError(StageUpError):
    """Raised when a legacy config entry holds a value of the wrong type."""

    error_code = 14

    def __init__(self, config, expected=bool):
        self.config = config
        message = (
            f"Config '{config.name}' must be a {expected.__name__}, "
            f"got {type(config.value).__name__}."
        )
        super().__init__(message=message)
