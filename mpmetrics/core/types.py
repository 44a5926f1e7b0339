"""
Core type definitions for mpmetrics.

This module provides the fundamental types used throughout the library:
- MetricType: The kind of metric a piece of metadata describes
- MetricUnits: Common unit-of-measure tokens
- Metadata: Immutable descriptor used to register a metric
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from ..exceptions import NullArgumentError
from ..tags import FrozenTags, format_tags

if TYPE_CHECKING:
    from .builder import MetadataBuilder


class MetricType(Enum):
    """Kinds of metrics a registry can hold."""

    COUNTER = "counter"  # Monotonically increasing count
    GAUGE = "gauge"  # Instantaneous value read on demand
    METERED = "meter"  # Rate of events (mean, 1/5/15 minute rates)
    HISTOGRAM = "histogram"  # Distribution of values
    TIMER = "timer"  # Distribution of durations plus call rate
    CONCURRENT_GAUGE = "concurrent gauge"  # Parallel invocation count
    INVALID = "invalid"  # Not set

    @classmethod
    def from_name(cls, name: str) -> "MetricType":
        """
        Look up a type by its string value (e.g. "meter").

        Raises:
            ValueError: If no type has that name
        """
        return cls(name)

    def __str__(self) -> str:
        return self.value


class MetricUnits:
    """Unit-of-measure tokens. Any other string is accepted as a unit too."""

    NONE = "none"

    BITS = "bits"
    KILOBITS = "kilobits"
    MEGABITS = "megabits"
    GIGABITS = "gigabits"
    KIBIBITS = "kibibits"
    MEBIBITS = "mebibits"
    GIBIBITS = "gibibits"

    BYTES = "bytes"
    KILOBYTES = "kilobytes"
    MEGABYTES = "megabytes"
    GIGABYTES = "gigabytes"

    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    PERCENT = "percent"
    PER_SECOND = "per_second"


@dataclass(frozen=True)
class Metadata:
    """
    Immutable description of a metric.

    Build instances with MetadataBuilder rather than calling this directly;
    the builder applies global tags and validates required fields.

    Attributes:
        name: Unique identifier within a registry
        display_name: Human-readable label (defaults to name)
        description: Optional free-text description
        type: Kind of metric (INVALID when not set)
        unit: Unit of measure (MetricUnits.NONE when not set)
        reusable: Whether several registrations may share this name
        tags: Read-only key/value labels
    """

    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    type: MetricType = MetricType.INVALID
    unit: str = MetricUnits.NONE
    reusable: bool = False
    tags: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.name is None:
            raise NullArgumentError("name is required")
        if self.display_name is None:
            object.__setattr__(self, "display_name", self.name)
        object.__setattr__(self, "type", MetricType(self.type))
        object.__setattr__(self, "tags", FrozenTags(self.tags))

    @property
    def type_name(self) -> str:
        """The metric type as its string value."""
        return self.type.value

    def tags_as_string(self) -> str:
        """Tags rendered as ``key="value"`` pairs joined by commas."""
        return format_tags(self.tags)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "description": self.description,
            "type": self.type.value,
            "unit": self.unit,
            "reusable": self.reusable,
            "tags": dict(self.tags),
        }

    @staticmethod
    def builder(metadata: Optional["Metadata"] = None) -> "MetadataBuilder":
        """
        Create a MetadataBuilder.

        Args:
            metadata: Existing metadata to seed the builder with. When omitted
                the builder starts from defaults plus global tags.
        """
        from .builder import MetadataBuilder

        return MetadataBuilder(metadata)


__all__ = [
    "MetricType",
    "MetricUnits",
    "Metadata",
]
