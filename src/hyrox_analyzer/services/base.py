"""
Base service class.

Defines the shared logging setup for all services.
"""

from abc import ABC
from typing import Optional
import logging


class BaseService(ABC):
    """
    Abstract base class for all services.

    Provides a per-class logger that can be swapped out in tests.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger
