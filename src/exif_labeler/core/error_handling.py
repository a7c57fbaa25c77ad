# src/exif_labeler/core/error_handling.py

import logging
from typing import Optional

from .exceptions import ExifLabelerError
from .logging_config import get_logger


class RunContext:
    """
    Context manager around a batch run.

    Logs the start, the successful end with the number of labeled files, or
    the abort together with the file that was being processed. It never
    suppresses the exception: a failure ends the run.
    """

    def __init__(
        self,
        operation_name: str = "Labeling run",
        logger: Optional[logging.Logger] = None,
    ):
        self.operation_name = operation_name
        self.current_item: Optional[str] = None
        self.completed = 0
        self.logger = logger or get_logger("exif-labeler.run")

    def __enter__(self) -> "RunContext":
        self.logger.info(f"Starting {self.operation_name}.")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.logger.info(
                f"{self.operation_name} completed: {self.completed} file(s) labeled."
            )
            return False

        item = self.current_item or "no file"
        if issubclass(exc_type, ExifLabelerError):
            self.logger.error(
                f"{self.operation_name} aborted on {item} after "
                f"{self.completed} file(s): {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb),
            )
        elif issubclass(exc_type, Exception):
            self.logger.error(
                f"{self.operation_name} failed unexpectedly on {item}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb),
            )
        else:
            # KeyboardInterrupt, CancelledError and friends
            self.logger.warning(f"{self.operation_name} interrupted on {item}.")
        return False

    def start_item(self, item: str) -> None:
        self.current_item = item
        self.logger.debug(f"Processing {item} in {self.operation_name}")

    def finish_item(self) -> None:
        self.completed += 1
        self.current_item = None
