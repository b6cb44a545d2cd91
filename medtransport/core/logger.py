import logging
import sys

def setup_logging():
    """
    Configure the application logger.
    """
    logger = logging.getLogger("medtransport")
    logger.setLevel(logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    # Reloads must not stack handlers
    if not logger.handlers:
        logger.addHandler(handler)

    return logger

logger = setup_logging()
