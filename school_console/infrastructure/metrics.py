from prometheus_client import Counter, Histogram, generate_latest

# Метрики для вызовов фасада
facade_requests_total = Counter(
    'school_console_facade_requests_total',
    'Total data access facade calls',
    ['entity', 'operation', 'status']
)

facade_request_duration_seconds = Histogram(
    'school_console_facade_request_duration_seconds',
    'Data access facade call duration in seconds',
    ['entity', 'operation']
)

def render_metrics() -> str:
    """Prometheus text exposition"""
    return generate_latest().decode("utf-8")
