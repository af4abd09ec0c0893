import logging

from pythonjsonlogger.json import JsonFormatter


def create_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Create a formatted logger that logs to the console."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    formatter = JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")

    consoleHandler = logging.StreamHandler()
    consoleHandler.setFormatter(formatter)
    consoleHandler.setLevel(level)

    logger.addHandler(consoleHandler)

    return logger
