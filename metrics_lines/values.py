"""Metric value variants and their line protocol representation"""
import abc
import math
from dataclasses import dataclass

from .exceptions import InvalidMetricDefinition
from .formatting import format_double


def _ensure_finite(*values: float) -> None:
    for value in values:
        if math.isnan(value):
            raise InvalidMetricDefinition("Value is NaN.")
        if math.isinf(value):
            raise InvalidMetricDefinition("Value is infinite.")


def _ensure_int(*values) -> None:
    for value in values:
        # bool is an int subclass but would render as True/False
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidMetricDefinition(f"Value must be an integer, got {type(value).__name__}.")


def _ensure_valid_summary(min_value, max_value, count: int) -> None:
    if count < 0:
        raise InvalidMetricDefinition("Count cannot be less than 0.")
    if min_value > max_value:
        raise InvalidMetricDefinition("Min cannot be larger than max.")


class MetricValue(abc.ABC):
    """A value that knows how to render its own value segment"""

    @abc.abstractmethod
    def serialize(self) -> str:
        """Render the value segment, e.g. ``gauge,3``"""
        pass


@dataclass(frozen=True)
class IntCounterValue(MetricValue):
    """Integer counter, either a delta or a cumulative total"""
    value: int
    is_delta: bool = True

    def __post_init__(self):
        _ensure_int(self.value)

    def serialize(self) -> str:
        if self.is_delta:
            return f"count,delta={self.value}"
        return f"count,{self.value}"


@dataclass(frozen=True)
class IntGaugeValue(MetricValue):
    """Integer gauge"""
    value: int

    def __post_init__(self):
        _ensure_int(self.value)

    def serialize(self) -> str:
        return f"gauge,{self.value}"


@dataclass(frozen=True)
class IntSummaryValue(MetricValue):
    """Pre-aggregated integer observations"""
    min: int
    max: int
    sum: int
    count: int

    def __post_init__(self):
        _ensure_int(self.min, self.max, self.sum, self.count)
        _ensure_valid_summary(self.min, self.max, self.count)

    def serialize(self) -> str:
        return f"gauge,min={self.min},max={self.max},sum={self.sum},count={self.count}"


@dataclass(frozen=True)
class FloatCounterValue(MetricValue):
    """Floating point counter, either a delta or a cumulative total"""
    value: float
    is_delta: bool = True

    def __post_init__(self):
        _ensure_finite(self.value)

    def serialize(self) -> str:
        if self.is_delta:
            return f"count,delta={format_double(self.value)}"
        return f"count,{format_double(self.value)}"


@dataclass(frozen=True)
class FloatGaugeValue(MetricValue):
    """Floating point gauge"""
    value: float

    def __post_init__(self):
        _ensure_finite(self.value)

    def serialize(self) -> str:
        return f"gauge,{format_double(self.value)}"


@dataclass(frozen=True)
class FloatSummaryValue(MetricValue):
    """Pre-aggregated floating point observations"""
    min: float
    max: float
    sum: float
    count: int

    def __post_init__(self):
        _ensure_int(self.count)
        _ensure_valid_summary(self.min, self.max, self.count)
        _ensure_finite(self.min, self.max, self.sum)

    def serialize(self) -> str:
        return (
            f"gauge,min={format_double(self.min)},max={format_double(self.max)},"
            f"sum={format_double(self.sum)},count={self.count}"
        )
