"""Factory functions for creating metrics"""
from datetime import datetime
from typing import Optional

from .models import DimensionsInput, Metric
from .values import (
    FloatCounterValue,
    FloatGaugeValue,
    FloatSummaryValue,
    IntCounterValue,
    IntGaugeValue,
    IntSummaryValue,
)


def create_int_counter_delta(name: str, value: int, dimensions: DimensionsInput = None,
                             timestamp: Optional[datetime] = None) -> Metric:
    """Integer counter serialized as ``count,delta=<value>``"""
    return Metric(name, IntCounterValue(value, is_delta=True), dimensions, timestamp)


def create_int_total_counter(name: str, value: int, dimensions: DimensionsInput = None,
                             timestamp: Optional[datetime] = None) -> Metric:
    """Integer counter serialized as ``count,<value>``"""
    return Metric(name, IntCounterValue(value, is_delta=False), dimensions, timestamp)


def create_int_gauge(name: str, value: int, dimensions: DimensionsInput = None,
                     timestamp: Optional[datetime] = None) -> Metric:
    """Integer gauge serialized as ``gauge,<value>``"""
    return Metric(name, IntGaugeValue(value), dimensions, timestamp)


def create_int_summary(name: str, min: int, max: int, sum: int, count: int,
                       dimensions: DimensionsInput = None,
                       timestamp: Optional[datetime] = None) -> Metric:
    """Integer summary serialized as ``gauge,min=..,max=..,sum=..,count=..``

    Raises InvalidMetricDefinition if count is negative or min is larger than max.
    """
    return Metric(name, IntSummaryValue(min, max, sum, count), dimensions, timestamp)


def create_float_counter_delta(name: str, value: float, dimensions: DimensionsInput = None,
                               timestamp: Optional[datetime] = None) -> Metric:
    """Float counter serialized as ``count,delta=<value>``"""
    return Metric(name, FloatCounterValue(value, is_delta=True), dimensions, timestamp)


def create_float_total_counter(name: str, value: float, dimensions: DimensionsInput = None,
                               timestamp: Optional[datetime] = None) -> Metric:
    """Float counter serialized as ``count,<value>``"""
    return Metric(name, FloatCounterValue(value, is_delta=False), dimensions, timestamp)


def create_float_gauge(name: str, value: float, dimensions: DimensionsInput = None,
                       timestamp: Optional[datetime] = None) -> Metric:
    """Float gauge serialized as ``gauge,<value>``"""
    return Metric(name, FloatGaugeValue(value), dimensions, timestamp)


def create_float_summary(name: str, min: float, max: float, sum: float, count: int,
                         dimensions: DimensionsInput = None,
                         timestamp: Optional[datetime] = None) -> Metric:
    """Float summary serialized as ``gauge,min=..,max=..,sum=..,count=..``

    Raises InvalidMetricDefinition for negative counts, min larger than max,
    and NaN or infinite operands.
    """
    return Metric(name, FloatSummaryValue(min, max, sum, count), dimensions, timestamp)
