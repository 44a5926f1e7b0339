"""Beans used to check gauge discovery through inheritance."""

from ..core.decorator import gauge
from ..core.types import MetricUnits


class InheritedParentGaugeMethodBean:
    """Declares a gauge accessor that subclasses inherit."""

    def __init__(self):
        self._gauge = 0

    @gauge(name="inheritedParentGaugeMethod", unit=MetricUnits.NONE)
    def get_gauge(self) -> int:
        return self._gauge

    def set_gauge(self, gauge: int) -> None:
        self._gauge = gauge


class InheritedChildGaugeMethodBean(InheritedParentGaugeMethodBean):
    """Adds its own gauge on top of the inherited one."""

    def __init__(self):
        super().__init__()
        self._child_gauge = 0

    @gauge(name="childGaugeMethod", unit=MetricUnits.NONE)
    def get_child_gauge(self) -> int:
        return self._child_gauge

    def set_child_gauge(self, gauge: int) -> None:
        self._child_gauge = gauge
