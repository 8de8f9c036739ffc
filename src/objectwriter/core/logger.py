import logging
import sys
import contextvars
from typing import Optional

# Context variable to carry the current run id across the call chain
_RUN_ID: contextvars.ContextVar[str] = contextvars.ContextVar("run_id", default="-")


class _RunIdFilter(logging.Filter):
    """Logging filter that injects the run_id from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.run_id = _RUN_ID.get()
        return True


class _StdoutHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stdout is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stdout

    @stream.setter
    def stream(self, value) -> None:
        pass


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | run=%(run_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: Optional[str] = None) -> None:
    """
    Configure the root logger and the objectwriter logger.

    Root logger stays at INFO; only the objectwriter namespace follows the
    requested level. When ``level`` is None the current level is kept.

    Safe to call multiple times; it will not duplicate handlers.
    """
    root = logging.getLogger()
    package_logger = logging.getLogger("objectwriter")
    if level is not None:
        package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(isinstance(h, _StdoutHandler) for h in root.handlers):
        return

    handler = _StdoutHandler()
    handler.setFormatter(_build_formatter())
    handler.addFilter(_RunIdFilter())
    root.addHandler(handler)
    root.setLevel(logging.INFO)


def get_logger(name: str = "objectwriter") -> logging.Logger:
    """Get a logger that writes to stdout with the current run id."""
    configure_root_logger()
    return logging.getLogger(name)


def push_run_id(run_id: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current run id in context and return a token for later reset."""
    if not run_id:
        return None
    return _RUN_ID.set(run_id)


def reset_run_id(token: Optional[contextvars.Token]) -> None:
    """Reset the run id context using the provided token (if any)."""
    if token is None:
        return
    _RUN_ID.reset(token)
