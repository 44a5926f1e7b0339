"""
Metadata Builder

Fluent builder for Metadata. Every setter validates its argument, mutates
the builder in place and returns it, so calls chain:

    from mpmetrics import MetadataBuilder, MetricType, MetricUnits

    metadata = (
        MetadataBuilder()
        .with_name("queue_size")
        .with_type(MetricType.GAUGE)
        .with_unit(MetricUnits.NONE)
        .add_tags("queue=orders, priority=high")
        .build()
    )

Defaults:
    type      MetricType.INVALID
    unit      MetricUnits.NONE
    reusable  False
    tags      whatever MP_METRICS_TAGS holds (see mpmetrics.config)

Structured setters reject None with NullArgumentError. Tag parsing is
lenient: malformed entries are dropped without error.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..config import get_global_tags
from ..exceptions import InvalidStateError, NullArgumentError
from ..tags import parse_tag, parse_tags
from .types import Metadata, MetricType, MetricUnits


def _require(value: Any, field_name: str) -> Any:
    if value is None:
        raise NullArgumentError(f"{field_name} is required")
    return value


class MetadataBuilder:
    """
    Mutable builder that produces immutable Metadata.

    Instantiation Patterns:
    ---------------------

    1. Fresh builder (defaults plus global tags):
        MetadataBuilder().with_name("requests").build()

    2. Seeded from existing metadata (copy and modify):
        MetadataBuilder(existing).with_description("updated").build()

    A seeded builder does not re-read global tags; it starts with exactly the
    tags of the metadata it was given.
    """

    __slots__ = (
        "_name",
        "_display_name",
        "_description",
        "_type",
        "_unit",
        "_reusable",
        "_tags",
    )

    def __init__(self, metadata: Optional[Metadata] = None):
        self._name: Optional[str] = None
        self._display_name: Optional[str] = None
        self._description: Optional[str] = None
        self._type = MetricType.INVALID
        self._unit = MetricUnits.NONE
        self._reusable = False
        self._tags: Dict[str, str] = {}

        if metadata is None:
            self.add_tags(get_global_tags())
            return

        self._name = metadata.name
        self._type = metadata.type
        self._reusable = metadata.reusable
        self._tags.update(metadata.tags)
        self._display_name = metadata.display_name
        if metadata.description is not None:
            self.with_description(metadata.description)
        if metadata.unit is not None:
            self.with_unit(metadata.unit)

    @property
    def name(self) -> Optional[str]:
        """The name set so far, or None."""
        return self._name

    @property
    def tags(self) -> Dict[str, str]:
        """Copy of the tags accumulated so far."""
        return dict(self._tags)

    def with_name(self, name: str) -> MetadataBuilder:
        """
        Set the name. Empty strings are accepted.

        Raises:
            NullArgumentError: If name is None
        """
        self._name = _require(name, "name")
        return self

    def with_display_name(self, display_name: str) -> MetadataBuilder:
        """
        Set the display name.

        Raises:
            NullArgumentError: If display_name is None
        """
        self._display_name = _require(display_name, "displayName")
        return self

    def with_description(self, description: str) -> MetadataBuilder:
        """
        Set the description.

        Raises:
            NullArgumentError: If description is None
        """
        self._description = _require(description, "description")
        return self

    def with_type(self, type: MetricType | str) -> MetadataBuilder:
        """
        Set the metric type. Strings are looked up by value ("gauge").

        Raises:
            NullArgumentError: If type is None
            ValueError: If type is not a known MetricType
        """
        self._type = MetricType(_require(type, "type"))
        return self

    def with_unit(self, unit: str) -> MetadataBuilder:
        """
        Set the unit. Any string is accepted; see MetricUnits for common ones.

        Raises:
            NullArgumentError: If unit is None
        """
        self._unit = _require(unit, "unit")
        return self

    def reusable(self) -> MetadataBuilder:
        """Allow several registrations under the same name."""
        self._reusable = True
        return self

    def not_reusable(self) -> MetadataBuilder:
        """Disallow several registrations under the same name (the default)."""
        self._reusable = False
        return self

    def add_tags(self, tags_string: Optional[str]) -> MetadataBuilder:
        """
        Add tags from a comma-separated string like ``"k1=v1, k2=v2"``.

        None or an empty string is a no-op. Entries are applied left to
        right, so a later duplicate key overwrites an earlier one.
        """
        self._tags.update(parse_tags(tags_string))
        return self

    def add_tag(self, kv_string: Optional[str]) -> MetadataBuilder:
        """
        Add one ``key=value`` tag.

        The key ends at the first '='; the value may itself contain '='.
        Input that is None, empty or has no '=' is ignored.
        """
        parsed = parse_tag(kv_string)
        if parsed is not None:
            key, value = parsed
            self._tags[key] = value
        return self

    def build(self) -> Metadata:
        """
        Snapshot the current state into a new Metadata.

        Raises:
            InvalidStateError: If no name was set
        """
        if self._name is None:
            raise InvalidStateError("Name is required")

        return Metadata(
            name=self._name,
            display_name=self._display_name,
            description=self._description,
            type=self._type,
            unit=self._unit,
            reusable=self._reusable,
            tags=dict(self._tags),
        )

    def __repr__(self) -> str:
        return (
            f"MetadataBuilder(name={self._name!r}, type={self._type.value!r}, "
            f"unit={self._unit!r}, reusable={self._reusable}, tags={self._tags!r})"
        )


__all__ = ["MetadataBuilder"]
