"""Prometheus metrics for monitoring"""
import logging
import time
from functools import wraps
from typing import Callable

from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry, generate_latest
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import InternalError

logger = logging.getLogger(__name__)

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

db_operations = Counter(
    'db_operations_total',
    'Total database operations',
    ['operation', 'table', 'status'],
    registry=registry
)

db_query_duration = Histogram(
    'db_query_duration_seconds',
    'Database query duration in seconds',
    ['table', 'operation'],
    registry=registry
)

auth_events = Counter(
    'auth_events_total',
    'Registration and login attempts',
    ['event', 'outcome'],
    registry=registry
)

db_connected = Gauge(
    'db_connected',
    'Database connection status (1=connected, 0=disconnected)',
    registry=registry
)


def track_db_operation(operation: str, table: str):
    """Record metrics for a storage operation and hide storage failures.

    Any ``SQLAlchemyError`` escaping the wrapped coroutine is logged and
    re-raised as ``InternalError``. Application errors pass through untouched.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
            except SQLAlchemyError as exc:
                db_operations.labels(operation=operation, table=table, status='error').inc()
                db_query_duration.labels(table=table, operation=operation).observe(time.time() - start_time)
                logger.error(f"Storage failure during {operation} on {table}: {exc}", exc_info=True)
                raise InternalError() from exc
            except Exception:
                db_operations.labels(operation=operation, table=table, status='rejected').inc()
                db_query_duration.labels(table=table, operation=operation).observe(time.time() - start_time)
                raise
            db_operations.labels(operation=operation, table=table, status='success').inc()
            db_query_duration.labels(table=table, operation=operation).observe(time.time() - start_time)
            return result
        return wrapper
    return decorator


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    return generate_latest(registry).decode('utf-8')
