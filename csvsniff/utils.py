import logging
import os

from csvsniff.data.constants import LOG_FORMAT, LOG_LEVEL


def get_logger(name: str) -> logging.Logger:
    """
    Returns a module logger sharing one stream handler on the package root.
    Level comes from CSVSNIFF_LOG_LEVEL, falling back to the configured default.
    """
    root = logging.getLogger("csvsniff")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.environ.get("CSVSNIFF_LOG_LEVEL", LOG_LEVEL).upper())
        root.propagate = False
    if name == "csvsniff" or name.startswith("csvsniff."):
        return logging.getLogger(name)
    return root.getChild(name)
