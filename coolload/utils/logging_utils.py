"""
Structured logging helpers for calculation stages.

Both helpers attach an `extra` payload (operation, context, status, duration)
so log handlers can index calculations by room or floor.
"""

import time
import logging
from typing import Dict, Any, Optional, Callable, TypeVar
from contextlib import contextmanager
from functools import wraps

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@contextmanager
def log_operation(operation_name: str, context: Dict[str, Any], logger: Optional[logging.Logger] = None):
    """
    Log the start, completion or failure of one calculation run.

    Start and completion are DEBUG so per-room runs stay quiet at INFO;
    failures are logged at ERROR and re-raised unchanged.

    Usage:
        with log_operation("cooling_load_calculation", {"room": "Office 101"}, logger):
            result = ...
    """
    logger = logger or logging.getLogger(__name__)
    payload = {'operation': operation_name, 'context': context}
    start = time.perf_counter()

    logger.debug(f"Starting {operation_name} {context}", extra={**payload, 'status': 'started'})
    try:
        yield
    except Exception as e:
        duration_ms = _elapsed_ms(start)
        logger.error(f"Failed {operation_name} {context} after {duration_ms:.2f}ms: {e}", extra={
            **payload,
            'status': 'failed',
            'duration_ms': duration_ms,
            'error_type': type(e).__name__,
        })
        raise

    duration_ms = _elapsed_ms(start)
    logger.debug(f"Completed {operation_name} in {duration_ms:.2f}ms", extra={
        **payload,
        'status': 'completed',
        'duration_ms': duration_ms,
    })


def timed_operation(operation_name: Optional[str] = None):
    """
    Decorator that logs how long an aggregation step took.

    Usage:
        @timed_operation("building_summary")
        def calculate_building_totals(floors):
            ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        name = operation_name or func.__name__

        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"[TIMING] {name} failed after {_elapsed_ms(start):.2f}ms: {e}")
                raise
            logger.debug(f"[TIMING] {name} completed in {_elapsed_ms(start):.2f}ms")
            return result

        return wrapper
    return decorator
