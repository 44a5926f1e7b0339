"""mpmetrics - Metric Metadata for Vendor-Neutral Instrumentation

Builds the immutable Metadata records a metrics registry uses to register
metrics, and marks gauge accessors for discovery.

Usage:
    from mpmetrics import Metadata, MetricType, MetricUnits

    metadata = (
        Metadata.builder()
        .with_name("heap_used")
        .with_display_name("Heap Used")
        .with_type(MetricType.GAUGE)
        .with_unit(MetricUnits.BYTES)
        .add_tags("pool=eden, gc=g1")
        .build()
    )

Global Tags:
    Every new builder starts with the tags in MP_METRICS_TAGS:

        MP_METRICS_TAGS="app=shop,region=eu-west"

    Override the source per context with mpmetrics.configure().

Gauge Usage:
    from mpmetrics import gauge, find_gauges

    class Pool:
        @gauge(name="active", unit=MetricUnits.NONE)
        def get_active(self) -> int:
            ...

    registrations = find_gauges(Pool())
"""

from .config import (
    GLOBAL_TAGS_VARIABLE,
    configure,
    get_config,
    get_global_tags,
    reset_config,
)
from .core.builder import MetadataBuilder
from .core.decorator import (
    GaugeRegistration,
    find_gauges,
    gauge,
    is_gauge,
    metric_name,
)
from .core.types import Metadata, MetricType, MetricUnits
from .exceptions import InvalidStateError, MetricsError, NullArgumentError
from .tags import format_tags, parse_tag, parse_tags

__version__ = "0.1.0"


__all__ = [
    # Core API
    "Metadata",
    "MetadataBuilder",
    "MetricType",
    "MetricUnits",
    # Gauges
    "gauge",
    "is_gauge",
    "metric_name",
    "find_gauges",
    "GaugeRegistration",
    # Configuration
    "GLOBAL_TAGS_VARIABLE",
    "configure",
    "get_config",
    "reset_config",
    "get_global_tags",
    # Tags
    "parse_tag",
    "parse_tags",
    "format_tags",
    # Errors
    "MetricsError",
    "NullArgumentError",
    "InvalidStateError",
]
