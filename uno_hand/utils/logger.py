# Logging for the hand core
import logging
import os
from datetime import datetime
import threading
from typing import Optional

from uno_hand.config.settings import LOG_DIR, LOG_LEVEL

class GameLogger:
    """Hand Logger System (Singleton)"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._initialized = True
        self.logger = None
        self.log_file_path = None
        self.is_test_mode = False
        self._setup_logger()

    def _setup_logger(self):
        self.logger = logging.getLogger('uno_hand')
        self.logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
        self.logger.propagate = False
        # Clear existing handlers
        if self.logger.hasHandlers():
            self.logger.handlers.clear()
        # Nothing goes to the console; a file handler is attached by start_session.
        self.logger.addHandler(logging.NullHandler())

    def set_level(self, level: str):
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    def start_session(self, is_test: bool = False, log_dir: Optional[str] = None) -> str:
        """Start a new logging session and return the log file path."""
        if self.log_file_path:
            self.end_session()
        self.is_test_mode = is_test

        base_dir = log_dir or LOG_DIR
        session_dir = os.path.join(base_dir, 'test' if is_test else 'game')
        os.makedirs(session_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        prefix = "test_session" if is_test else "game_session"
        filename = f"{prefix}_{timestamp}.log"

        self.log_file_path = os.path.join(session_dir, filename)

        file_handler = logging.FileHandler(self.log_file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(formatter)

        self.logger.addHandler(file_handler)

        self.log_session_start()
        return self.log_file_path

    def end_session(self):
        if self.logger and self.log_file_path:
            self.logger.info("=" * 50)
            self.logger.info("Session Ended")
            self.logger.info("=" * 50)

            for handler in self.logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self.logger.removeHandler(handler)
                    handler.close()
            self.log_file_path = None

    def log_session_start(self):
        if self.logger:
            self.logger.info("=" * 50)
            self.logger.info("Session Started")
            self.logger.info(f"Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
            self.logger.info("=" * 50)

    def debug(self, message: str):
        if self.logger:
            self.logger.debug(message)

    def info(self, message: str):
        if self.logger:
            self.logger.info(message)

    def warning(self, message: str):
        if self.logger:
            self.logger.warning(message)

    def error(self, message: str):
        if self.logger:
            self.logger.error(message)

# Global Instance
game_logger = GameLogger()
