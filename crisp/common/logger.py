import logging
import sys


_ROOT_NAME = "crisp"


def get_logger(name: str):
    return logging.getLogger(f"{_ROOT_NAME}.{name}")


def setup_logging(debug: bool = False):
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        root.addHandler(handler)

    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    return root
