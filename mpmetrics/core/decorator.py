"""
Gauge Decorator for mpmetrics

The @gauge decorator marks a zero-argument accessor as the read point of a
gauge. It does not wrap the function; it only records the gauge options on
it so a container (or find_gauges) can discover it later.

Usage:
    from mpmetrics import gauge, find_gauges, MetricUnits

    class QueueBean:
        def __init__(self):
            self._items = []

        @gauge(name="queueSize", unit=MetricUnits.NONE)
        def get_size(self) -> int:
            return len(self._items)

    for registration in find_gauges(QueueBean()):
        print(registration.metadata.name, registration.read())

Discovery walks the class MRO, so accessors declared on a base class are
found through subclasses too. Names are prefixed with the declaring class
(module.Class.name) unless absolute=True.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, Union

from ..exceptions import InvalidStateError
from .builder import MetadataBuilder
from .types import Metadata, MetricType, MetricUnits

GAUGE_ATTRIBUTE = "_gauge_options"


def gauge(
    name: Optional[str] = None,
    unit: str = MetricUnits.NONE,
    display_name: Optional[str] = None,
    description: Optional[str] = None,
    tags: Optional[str] = None,
    reusable: bool = False,
    absolute: bool = False,
) -> Callable:
    """
    Mark a method as a gauge.

    Args:
        name: Gauge name (default: the function name)
        unit: Unit of the returned value
        display_name: Optional human-readable label
        description: Optional description
        tags: Comma-separated ``key=value`` tags
        reusable: Whether the name may be registered more than once
        absolute: If True, use name as-is instead of prefixing the class

    Raises:
        TypeError: If the decorated function requires arguments besides self
    """

    def decorator(func: Callable) -> Callable:
        required = [
            p
            for p in inspect.signature(func).parameters.values()
            if p.default is inspect.Parameter.empty
            and p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
        if len(required) > 1:
            raise TypeError(
                f"Gauge accessor {func.__qualname__} must not take arguments"
            )

        setattr(
            func,
            GAUGE_ATTRIBUTE,
            {
                "name": func.__name__ if name is None else name,
                "unit": unit,
                "display_name": display_name,
                "description": description,
                "tags": tags,
                "reusable": reusable,
                "absolute": absolute,
            },
        )
        return func

    return decorator


def is_gauge(func: Any) -> bool:
    """Check whether a function carries @gauge options."""
    return getattr(func, GAUGE_ATTRIBUTE, None) is not None


def metric_name(owner: Type, name: str) -> str:
    """Qualify a metric name with the declaring class."""
    return f"{owner.__module__}.{owner.__qualname__}.{name}"


@dataclass(frozen=True)
class GaugeRegistration:
    """A discovered gauge: its metadata and where it was declared."""

    metadata: Metadata
    owner: Type
    method: str
    instance: Any = None

    def read(self) -> Any:
        """
        Invoke the accessor on the bound instance.

        Raises:
            InvalidStateError: If the gauge was discovered on a class
        """
        if self.instance is None:
            raise InvalidStateError(
                f"Gauge {self.metadata.name} is not bound to an instance"
            )
        return getattr(self.instance, self.method)()


def _build_metadata(owner: Type, options: Dict[str, Any]) -> Metadata:
    name = options["name"]
    builder = (
        MetadataBuilder()
        .with_name(name if options["absolute"] else metric_name(owner, name))
        .with_type(MetricType.GAUGE)
        .with_unit(options["unit"])
        .add_tags(options["tags"])
    )
    if options["display_name"] is not None:
        builder.with_display_name(options["display_name"])
    if options["description"] is not None:
        builder.with_description(options["description"])
    if options["reusable"]:
        builder.reusable()
    return builder.build()


def find_gauges(target: Union[Type, Any]) -> List[GaugeRegistration]:
    """
    Discover the gauges exposed by a class or instance.

    Each attribute name is resolved once, from the most derived class that
    defines it; a subclass overriding a gauge accessor without @gauge hides
    the inherited gauge.

    Args:
        target: A class, or an instance whose accessors should be readable

    Returns:
        Registrations ordered from the most derived class to the base
    """
    if isinstance(target, type):
        cls, instance = target, None
    else:
        cls, instance = type(target), target

    seen: set[str] = set()
    registrations: List[GaugeRegistration] = []

    for owner in cls.__mro__:
        for attr_name, attr in vars(owner).items():
            if attr_name in seen:
                continue
            seen.add(attr_name)

            options = getattr(attr, GAUGE_ATTRIBUTE, None)
            if options is None:
                continue

            registrations.append(
                GaugeRegistration(
                    metadata=_build_metadata(owner, options),
                    owner=owner,
                    method=attr_name,
                    instance=instance,
                )
            )

    return registrations


__all__ = [
    "gauge",
    "is_gauge",
    "metric_name",
    "find_gauges",
    "GaugeRegistration",
]
