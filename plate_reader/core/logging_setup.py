import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
