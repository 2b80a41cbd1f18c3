import logging
from pathlib import Path
from typing import Optional, Union


DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
SIMPLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class LogManager:
    """Logging setup for applications built on owl.

    The library itself only emits records through module loggers; call this
    once from the application to see them.
    """

    def __init__(self, log_level: str = "INFO", log_file: Optional[Union[str, Path]] = None):
        self.log_file = Path(log_file) if log_file else None
        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Set up console logging, plus a detailed file log when log_file is set"""
        level = getattr(logging, log_level.upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")

        detailed_formatter = logging.Formatter(DETAILED_FORMAT)
        simple_formatter = logging.Formatter(SIMPLE_FORMAT)

        owl_logger = logging.getLogger('owl')
        owl_logger.setLevel(level)

        # Clear existing handlers
        owl_logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(simple_formatter)
        owl_logger.addHandler(console_handler)

        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            owl_logger.addHandler(file_handler)

        self.logger = owl_logger
