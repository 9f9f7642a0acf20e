import logging
import sys


def configure_logging(log_level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configure the root logger with a stdout handler and, if `log_file` is
    given, a file handler.
    """
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging configured with level=%s, file=%s", log_level, log_file)
