import logging
import os


def setup_logging(name: str, log_file: str, level=logging.INFO):
    """Give a module its own logger writing to the shared debugger log.

    The log directory is created on first use. Calling this again for the same
    name replaces the handler instead of stacking a second one.

    Args:
        name: Logger name, usually the calling module's __name__
        log_file: Path of the log file, normally PATHS["app_log_file"]
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()

    # Debugger traces stay in the app log, not on the root logger
    logger.propagate = False

    logger.setLevel(level)

    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(file_handler)

    return logger
