"""Metric data models"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Mapping, Optional, Tuple, Union

from .exceptions import InvalidMetricDefinition
from .values import MetricValue

DimensionList = Tuple[Tuple[str, str], ...]
DimensionsInput = Optional[Union[Mapping[str, str], Iterable[Tuple[str, str]]]]


def as_dimension_pairs(dimensions: DimensionsInput) -> DimensionList:
    """Turn a mapping or an iterable of pairs into an ordered tuple of pairs"""
    if dimensions is None:
        return ()
    if isinstance(dimensions, Mapping):
        return tuple(dimensions.items())
    return tuple((key, value) for key, value in dimensions)


@dataclass(frozen=True)
class Metric:
    """A single observation ready to be serialized.

    Dimensions are kept raw; they are normalized by the serializer. A missing
    timestamp lets the ingest endpoint assign the time of receipt.
    """
    name: str
    value: MetricValue
    dimensions: DimensionList = ()
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if not self.name:
            raise InvalidMetricDefinition("Metric name can't be null or empty.")
        # Ensure dimensions is never None
        object.__setattr__(self, "dimensions", as_dimension_pairs(self.dimensions))
