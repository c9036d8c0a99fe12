"""Serialization of metrics into the line protocol of the metrics ingest API"""
from .constants import (
    DEFAULT_ONEAGENT_ENDPOINT,
    MAX_DIMENSIONS,
    MAX_LINE_LENGTH,
    PAYLOAD_LINES_LIMIT,
)
from .exceptions import InvalidMetricDefinition, LineTooLong, MetricError, UndefinedMetricKey
from .formatting import format_double
from .models import Metric
from .serializer import MetricsSerializer, merge_dimensions
from .values import (
    FloatCounterValue,
    FloatGaugeValue,
    FloatSummaryValue,
    IntCounterValue,
    IntGaugeValue,
    IntSummaryValue,
    MetricValue,
)

__all__ = [
    'DEFAULT_ONEAGENT_ENDPOINT',
    'PAYLOAD_LINES_LIMIT',
    'MAX_LINE_LENGTH',
    'MAX_DIMENSIONS',
    'MetricError',
    'InvalidMetricDefinition',
    'UndefinedMetricKey',
    'LineTooLong',
    'format_double',
    'Metric',
    'MetricValue',
    'IntCounterValue',
    'IntGaugeValue',
    'IntSummaryValue',
    'FloatCounterValue',
    'FloatGaugeValue',
    'FloatSummaryValue',
    'MetricsSerializer',
    'merge_dimensions',
]
