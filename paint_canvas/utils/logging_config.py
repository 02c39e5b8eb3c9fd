"""
Centralized logging configuration for Paint Canvas
"""
import logging
import sys
from pathlib import Path
from typing import Optional


class LoggingConfig:
    """Central logging configuration"""

    LOG_FILE_NAME = "paint_canvas.log"

    _initialized = False
    _log_file_path: Optional[Path] = None
    _handlers = []

    @classmethod
    def setup_logging(cls, log_dir: Path, console_level: int = logging.INFO):
        """Setup logging system"""
        if cls._initialized:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        cls._log_file_path = log_dir / cls.LOG_FILE_NAME

        # Root logger
        logger = logging.getLogger()
        logger.setLevel(logging.DEBUG)

        # File handler
        file_handler = logging.FileHandler(cls._log_file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        # Console handler (for terminal output)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_formatter = logging.Formatter('[%(levelname)s] %(message)s')
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        cls._handlers = [file_handler, console_handler]
        cls._initialized = True
        logger.info("Logging system initialized")

    @classmethod
    def shutdown(cls):
        """Remove and close the handlers installed by setup_logging"""
        logger = logging.getLogger()
        for handler in cls._handlers:
            logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._log_file_path = None
        cls._initialized = False

    @classmethod
    def get_logger(cls, name: str):
        """Get a logger instance"""
        return logging.getLogger(name)

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the log file path"""
        return cls._log_file_path


__all__ = ['LoggingConfig']
