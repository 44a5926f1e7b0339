"""Core metadata types, builder and gauge discovery."""

from .builder import MetadataBuilder
from .decorator import GaugeRegistration, find_gauges, gauge, is_gauge, metric_name
from .types import Metadata, MetricType, MetricUnits

__all__ = [
    "Metadata",
    "MetadataBuilder",
    "MetricType",
    "MetricUnits",
    "gauge",
    "is_gauge",
    "metric_name",
    "find_gauges",
    "GaugeRegistration",
]
