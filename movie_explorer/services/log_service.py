"""Logging service"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from ..config import settings

LOG_TYPES = ("error", "info", "requests")


class LogService:
    """Centralized logging service"""

    def __init__(self, log_dir: Path = None):
        self.log_dir = log_dir or settings.LOGS_DIR
        self.log_dir.mkdir(exist_ok=True, parents=True)

        # Setup loggers
        self.error_logger = self._setup_logger("error", logging.ERROR)
        self.info_logger = self._setup_logger("info", logging.INFO)
        self.request_logger = self._setup_logger("requests", logging.DEBUG)

    def _setup_logger(self, name: str, level: int) -> logging.Logger:
        """Setup a logger with rotating file handler"""
        logger = logging.getLogger(f"movie_explorer.{name}")
        logger.setLevel(level)

        # Prevent duplicate handlers
        if logger.handlers:
            return logger

        # Create rotating file handler (10MB max, 3 backups)
        log_file = self.log_dir / f"{name}.log"
        handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
        )

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def error(self, message: str, **kwargs):
        """Log error message"""
        self.error_logger.error(message, extra=kwargs)

    def info(self, message: str, **kwargs):
        """Log info message"""
        self.info_logger.info(message, extra=kwargs)

    def omdb_request(
        self,
        params: Dict,
        outcome: str,
        elapsed: float,
        status: Optional[int] = None,
    ):
        """Log one OMDb call: lookup params, HTTP status, outcome and latency"""
        lookup = " ".join(f"{key}={value}" for key, value in params.items())
        status_text = status if status is not None else "-"
        self.request_logger.info(
            f"{lookup} status={status_text} outcome={outcome} "
            f"elapsed_ms={elapsed * 1000:.0f}"
        )

    def get_logs(self, log_type: str = "error", limit: int = 100) -> List[str]:
        """Read last N lines from log file"""
        log_file = self.log_dir / f"{log_type}.log"

        if not log_file.exists():
            return []

        try:
            with open(log_file, "r") as f:
                lines = f.readlines()
                lines = [line.rstrip("\n") for line in lines]
                return lines[-limit:] if len(lines) > limit else lines
        except OSError as e:
            self.error(f"Failed to read log file {log_type}: {e}")
            return []


# Global log service instance
log_service = LogService()
