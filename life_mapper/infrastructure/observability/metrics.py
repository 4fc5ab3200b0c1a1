"""Prometheus metrics for record activity, report snapshots and calendar exports"""

from prometheus_client import Counter, Histogram

# Record metrics
record_mutation_counter = Counter(
    "life_mapper_record_mutations_total",
    "Record collection mutations",
    ["collection", "action"],  # create | update | delete | replace
)

# Report metrics
report_snapshot_counter = Counter(
    "life_mapper_report_snapshots_total",
    "Monthly report snapshots saved",
    ["outcome"],  # savings | no_savings
)

# Calendar metrics
calendar_export_counter = Counter(
    "life_mapper_calendar_exports_total",
    "Calendar files exported",
)

calendar_event_histogram = Histogram(
    "life_mapper_calendar_events",
    "Events per exported calendar",
    buckets=[0, 5, 10, 25, 50, 100, 250],
)

# Storage metrics
storage_failures_counter = Counter(
    "life_mapper_storage_failures_total",
    "Failed reads/writes against the record store",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report_snapshot(savings: float) -> None:
    """Count snapshots split by whether the month ended with positive savings"""
    outcome = "savings" if savings > 0 else "no_savings"
    report_snapshot_counter.labels(outcome=outcome).inc()


def record_calendar_export(event_count: int) -> None:
    calendar_export_counter.inc()
    calendar_event_histogram.observe(event_count)
