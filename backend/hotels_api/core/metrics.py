"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Eligibility metrics
eligibility_decisions = Counter(
    'eligibility_decisions_total',
    'Hotel eligibility decisions',
    ['outcome']  # unauthorized, not_found, payment_required, eligible
)

# Catalog metrics
catalog_reads = Counter(
    'catalog_reads_total',
    'Hotel catalog reads',
    ['operation', 'result']  # hotels/rooms, ok/not_found
)

# Request metrics
request_latency = Histogram(
    'request_latency_seconds',
    'HTTP request latency',
    ['route'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_eligibility(outcome: str):
    """Record eligibility decision. Outcome: unauthorized, not_found, payment_required, eligible"""
    eligibility_decisions.labels(outcome=outcome).inc()


def record_catalog_read(operation: str, found: bool):
    """Record catalog read. Operation: hotels, rooms"""
    result = "ok" if found else "not_found"
    catalog_reads.labels(operation=operation, result=result).inc()


def observe_request(route: str, seconds: float):
    request_latency.labels(route=route).observe(seconds)
