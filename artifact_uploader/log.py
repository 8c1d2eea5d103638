import logging
import sys


class _StderrHandler(logging.StreamHandler):
    def __init__(self):
        super().__init__(sys.stderr)


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """
    Send log records to stderr so stdout only ever carries the final URL.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # main() may run several times in one process (tests, embedding)
    if not any(isinstance(h, _StderrHandler) for h in root.handlers):
        handler = _StderrHandler()
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return root
