"""Serializer turning metrics into lines for the metrics ingest endpoint"""
import threading
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from environment.metadata import MetadataEnricher
from logging_config import get_logger
from .constants import (
    MAX_DIMENSIONS,
    MAX_LINE_LENGTH,
    METRICS_SOURCE_DIMENSION,
    TIMESTAMP_WARNING_THROTTLE_FACTOR,
)
from .exceptions import LineTooLong, UndefinedMetricKey
from .models import DimensionsInput, Metric, as_dimension_pairs
from .normalize import normalize_dimension_list, normalize_metric_key

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MIN_TIMESTAMP_YEAR = 2000
_MAX_TIMESTAMP_YEAR = 3000


class TimestampWarningThrottle:
    """Thread-safe counter that lets one out of every ``factor`` warnings through"""

    def __init__(self, factor: int = TIMESTAMP_WARNING_THROTTLE_FACTOR):
        self.factor = factor
        self._count = 0
        self._lock = threading.Lock()

    def should_warn(self) -> bool:
        """Count one occurrence and report whether it should be logged"""
        with self._lock:
            self._count += 1
            current = self._count
            if self._count >= self.factor:
                self._count = 0
        return current == 1

    def reset(self) -> None:
        with self._lock:
            self._count = 0


# shared by all serializer instances for the lifetime of the process
timestamp_warning_throttle = TimestampWarningThrottle()


def merge_dimensions(*dimension_lists: Optional[Iterable[Tuple[str, str]]]) -> List[Tuple[str, str]]:
    """Merge normalized dimension lists.

    Values from lists passed further right overwrite values from lists
    further left. The position of a key is fixed by its first occurrence.
    Only pass lists that were already normalized.
    """
    merged: Dict[str, str] = {}
    for dimension_list in dimension_lists:
        if dimension_list is None:
            continue
        for key, value in dimension_list:
            merged[key] = value
    return list(merged.items())


class MetricsSerializer:
    """Serializes metrics into ingest lines.

    Default dimensions have the lowest precedence, followed by the dimensions
    of each metric. Static dimensions (metadata and the metrics source) always
    win. Default and static dimensions are normalized once, here.
    """

    def __init__(self, prefix: Optional[str] = None, default_dimensions: DimensionsInput = None,
                 metrics_source: Optional[str] = None, enrich_with_metadata: bool = True,
                 enricher: Optional[MetadataEnricher] = None, logger=None):
        self.logger = logger if logger is not None else get_logger(__name__)
        self.prefix = prefix
        self.default_dimensions = normalize_dimension_list(as_dimension_pairs(default_dimensions))
        self.static_dimensions = normalize_dimension_list(
            self._prepare_static_dimensions(enrich_with_metadata, metrics_source, enricher)
        )
        self.logger.debug(
            "Metrics serializer created",
            prefix=prefix,
            default_dimensions_count=len(self.default_dimensions),
            static_dimensions_count=len(self.static_dimensions),
        )

    @classmethod
    def from_config(cls, config, enricher: Optional[MetadataEnricher] = None, logger=None) -> "MetricsSerializer":
        """Create a serializer from a SerializerConfig"""
        return cls(
            prefix=config.prefix,
            default_dimensions=config.default_dimensions,
            metrics_source=config.metrics_source,
            enrich_with_metadata=config.enrich_with_metadata,
            enricher=enricher,
            logger=logger,
        )

    def _prepare_static_dimensions(self, enrich_with_metadata: bool, metrics_source: Optional[str],
                                   enricher: Optional[MetadataEnricher]) -> List[Tuple[str, str]]:
        static_dimensions: List[Tuple[str, str]] = []

        if enrich_with_metadata:
            enricher = enricher or MetadataEnricher(logger=self.logger)
            try:
                enricher.enrich(static_dimensions)
            except Exception as e:
                self.logger.warning("Metadata enrichment failed, continuing without metadata", error=str(e))
                static_dimensions = []

        if metrics_source:
            static_dimensions.append((METRICS_SOURCE_DIMENSION, metrics_source))

        return static_dimensions

    def serialize_metric(self, metric: Metric) -> str:
        """Serialize a metric into a single line.

        Raises UndefinedMetricKey if the metric name normalizes to nothing and
        LineTooLong if the assembled line exceeds the maximum line length.
        """
        parts = [self._create_metric_key(metric)]

        # metric dimensions are normalized here, default and static ones upon creation
        dimensions = merge_dimensions(
            self.default_dimensions,
            normalize_dimension_list(metric.dimensions),
            self.static_dimensions,
        )
        self._write_dimensions(parts, dimensions)

        parts.append(f" {metric.value.serialize()}")
        self._write_timestamp(parts, metric.timestamp)

        line = "".join(parts)
        if len(line) > MAX_LINE_LENGTH:
            raise LineTooLong(metric.name, MAX_LINE_LENGTH)
        return line

    serialize = serialize_metric

    def _create_metric_key(self, metric: Metric) -> str:
        if self.prefix:
            raw_key = f"{self.prefix}.{metric.name}"
        else:
            raw_key = metric.name

        metric_key = normalize_metric_key(raw_key)
        if not metric_key:
            raise UndefinedMetricKey()
        return metric_key

    @staticmethod
    def _write_dimensions(parts: List[str], dimensions: List[Tuple[str, str]]) -> None:
        # keep the last MAX_DIMENSIONS entries, dropping from the front
        if len(dimensions) > MAX_DIMENSIONS:
            dimensions = dimensions[-MAX_DIMENSIONS:]

        for key, value in dimensions:
            parts.append(f",{key}={value}")

    def _write_timestamp(self, parts: List[str], timestamp: Optional[datetime]) -> None:
        if timestamp is None:
            return

        if timestamp.year < _MIN_TIMESTAMP_YEAR or timestamp.year > _MAX_TIMESTAMP_YEAR:
            if timestamp_warning_throttle.should_warn():
                self.logger.warning(
                    "Order of magnitude of the timestamp seems off. The timestamp represents a time "
                    "before the year 2000 or after the year 3000. Skipping setting timestamp, the "
                    "current server time will be added upon ingestion.",
                    invalid_timestamp=timestamp.isoformat(),
                    throttle_factor=timestamp_warning_throttle.factor,
                )
            return

        parts.append(f" {to_epoch_millis(timestamp)}")


def to_epoch_millis(timestamp: datetime) -> int:
    """Unix epoch milliseconds; naive datetimes are taken as local time"""
    if timestamp.tzinfo is None:
        timestamp = timestamp.astimezone()
    return (timestamp - _EPOCH) // timedelta(milliseconds=1)
