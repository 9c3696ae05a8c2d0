"""Wall-clock timing for CLI sections."""
import logging
import time
from contextlib import contextmanager


@contextmanager
def section_timer(name: str, logger: logging.Logger, level: int = logging.DEBUG):
    """Log the elapsed milliseconds of the enclosed block, even when it raises."""
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.log(level, "TIMER %s took %.3f ms", name, elapsed_ms)
