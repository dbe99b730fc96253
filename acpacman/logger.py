import logging

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(FORMAT))


def setup_logging(level=logging.INFO):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int): level = logging.INFO

    root = logging.getLogger()
    # Re-running main() in the same process must not stack handlers
    if _handler not in root.handlers:
        root.addHandler(_handler)
    root.setLevel(level)
