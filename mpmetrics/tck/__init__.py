"""
Compatibility kit fixtures.

Beans an implementation's discovery mechanism is checked against.
"""

from .beans import InheritedChildGaugeMethodBean, InheritedParentGaugeMethodBean

__all__ = [
    "InheritedParentGaugeMethodBean",
    "InheritedChildGaugeMethodBean",
]
