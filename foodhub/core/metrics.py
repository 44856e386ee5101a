"""Prometheus metrics for the order and application workflows.

Everything is registered on a private ``registry`` under the ``foodhub``
namespace, so ``/metrics`` only exposes this service's series.
"""
import time
from functools import wraps
from typing import Callable, Union

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, generate_latest

NAMESPACE = "foodhub"

# Workflow writes are a handful of rows in one transaction
DB_WRITE_BUCKETS = (0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5)

registry = CollectorRegistry()

request_count = Counter(
    "http_requests_total",
    "Requests served by the monitoring app",
    ["method", "endpoint", "status"],
    namespace=NAMESPACE,
    registry=registry,
)

request_duration = Histogram(
    "http_request_duration_seconds",
    "Monitoring app request latency",
    ["method", "endpoint"],
    namespace=NAMESPACE,
    registry=registry,
)

db_operations = Counter(
    "db_operations_total",
    "Workflow writes by table and outcome",
    ["operation", "table", "status"],
    namespace=NAMESPACE,
    registry=registry,
)

db_query_duration = Histogram(
    "db_operation_duration_seconds",
    "Duration of workflow writes, commit included",
    ["operation", "table"],
    buckets=DB_WRITE_BUCKETS,
    namespace=NAMESPACE,
    registry=registry,
)

order_transitions = Counter(
    "order_transitions_total",
    "Order status change requests (applied or rejected)",
    ["from_status", "to_status", "result"],
    namespace=NAMESPACE,
    registry=registry,
)

application_decisions = Counter(
    "application_decisions_total",
    "Admin decisions on vendor, dish and review applications",
    ["kind", "decision", "result"],
    namespace=NAMESPACE,
    registry=registry,
)

db_connected = Gauge(
    "db_connected",
    "1 when the last database probe succeeded, 0 otherwise",
    namespace=NAMESPACE,
    registry=registry,
)


def record_transition(from_status, to_status, result: str) -> None:
    order_transitions.labels(
        from_status=str(from_status),
        to_status=str(to_status),
        result=result,
    ).inc()


def record_decision(kind, decision, result: str) -> None:
    application_decisions.labels(kind=str(kind), decision=str(decision), result=result).inc()


def track_db_operation(operation: str, table: Union[str, Callable[..., str]]):
    """Count and time an async service call that writes to ``table``.

    ``table`` may be a callable taking the wrapped function's arguments, for
    services whose target table depends on what they were given.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            table_name = table(*args, **kwargs) if callable(table) else table
            status = "error"
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
                status = "success"
                return result
            finally:
                db_operations.labels(operation=operation, table=table_name, status=status).inc()
                db_query_duration.labels(operation=operation, table=table_name).observe(
                    time.perf_counter() - start
                )
        return wrapper
    return decorator


def get_metrics_text() -> str:
    return generate_latest(registry).decode("utf-8")
