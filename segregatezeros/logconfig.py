import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging():
    # stdout carries the results, so logs go to stderr
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        stream=sys.stderr,
        format=LOG_FORMAT,
        force=True
    )
