"""Prometheus metrics for the ETag middleware.

Metrics include:

- Tags by source (reused from the handler or computed from the body)
- Conditional verdicts by action and status code

Examples:
    Recording a computed tag::

        from etag_middleware.observability.metrics import record_tag

        record_tag(source="computed")

    Recording a 304::

        from etag_middleware.observability.metrics import record_verdict

        record_verdict(action="short_circuit", status_code=304)
"""

from prometheus_client import Counter

# Labels: source (upstream, computed)
tags_total = Counter(
    "etag_tags_total",
    "Total number of entity tags resolved by the ETag middleware",
    ["source"],
)

# Labels: action (proceed, short_circuit), status_code
verdicts_total = Counter(
    "etag_conditional_verdicts_total",
    "Total number of conditional request verdicts",
    ["action", "status_code"],
)


def record_tag(source: str) -> None:
    """Record how the entity tag for a response was obtained.

    Args:
        source: "upstream" when the handler set the tag, "computed" otherwise

    Examples:
        >>> record_tag("upstream")
        >>> record_tag("computed")
    """
    tags_total.labels(source=source).inc()


def record_verdict(action: str, status_code: int) -> None:
    """Record a conditional request verdict.

    Args:
        action: The verdict action (proceed, short_circuit)
        status_code: Status of the response the host will send

    Examples:
        >>> record_verdict("proceed", 200)
        >>> record_verdict("short_circuit", 304)
    """
    verdicts_total.labels(action=action, status_code=str(status_code)).inc()
