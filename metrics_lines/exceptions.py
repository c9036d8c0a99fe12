"""Errors raised while building or serializing metrics"""


class MetricError(ValueError):
    """Base class for all metric errors"""


class InvalidMetricDefinition(MetricError):
    """Raised when a metric or metric value is constructed with invalid data"""


class UndefinedMetricKey(MetricError):
    """Raised when the metric key normalizes to nothing usable"""

    def __init__(self, message: str = "Metric key can't be undefined."):
        super().__init__(message)


class LineTooLong(MetricError):
    """Raised when a serialized line exceeds the protocol line length"""

    def __init__(self, metric_name: str, max_length: int):
        self.metric_name = metric_name
        self.max_length = max_length
        super().__init__(
            f"Metric line exceeds line length of {max_length} characters "
            f"(Metric name: '{metric_name}')."
        )
