import logging
import sys

from pythonjsonlogger import jsonlogger

JsonFormatter = jsonlogger.JsonFormatter


def setup_json_logging(log_level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    root_logger.handlers = []  # drop handlers installed by uvicorn/basicConfig
    handler = logging.StreamHandler(sys.stdout)

    formatter = JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
