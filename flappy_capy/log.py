import logging
import sys


class ConsoleFormatter(logging.Formatter):
    """One line per record, ``[INFO] message``."""

    def format(self, record):
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"[{record.levelname}] {message}"


def setup_logging(level="info"):
    """Configure the flappy_capy logger to write to stderr."""
    root = logging.getLogger("flappy_capy")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter())
    root.addHandler(console)
    root.propagate = False
    return root
