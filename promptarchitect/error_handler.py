#!/usr/bin/env python3
"""
Centralized error handling for Prompt Architect
"""

import logging
import os
import traceback
import sys
from typing import Optional, Dict, Any

from . import config

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


class ErrorHandler:
    """Centralized error handling with logging and per-type counts"""

    def __init__(self, log_file: Optional[str] = None):
        self.log_file = log_file or config.LOG_FILE
        self.setup_logging()
        self.error_counts: Dict[str, int] = {}

    def setup_logging(self):
        """Setup logging configuration"""
        logging.basicConfig(
            level=getattr(logging, config.LOG_LEVEL, logging.INFO),
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler(sys.stdout)]
        )
        self.logger = logging.getLogger("promptarchitect")

        # basicConfig is a no-op once the server has configured the root
        # logger, so the log file hangs off the app logger directly.
        if self.log_file:
            path = os.path.abspath(self.log_file)
            for handler in self.logger.handlers:
                if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
                    return
            file_handler = logging.FileHandler(path)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(file_handler)

    def handle_error(self, error: Exception, context: str = "",
                     fatal: bool = False) -> Dict[str, Any]:
        """Log an error and return a serializable description of it"""
        error_type = type(error).__name__
        error_info = {
            'type': error_type,
            'message': str(error),
            'context': context,
            'traceback': traceback.format_exc() if fatal else None,
            'fatal': fatal
        }

        self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1

        log_msg = f"Error in {context}: {error_type} - {error}"
        if fatal:
            self.logger.error(f"FATAL: {log_msg}")
        else:
            self.logger.warning(log_msg)

        return error_info

    def get_stats(self) -> Dict[str, Any]:
        """Error counts by type"""
        return {
            'total': sum(self.error_counts.values()),
            'by_type': dict(self.error_counts)
        }

    def reset(self):
        self.error_counts.clear()


_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Process-wide handler, created on first use."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler
