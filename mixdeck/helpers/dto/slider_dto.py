"""
Slider reading DTOs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SliderMoveEvent:
    """A significant slider change, normalized to two decimal places."""

    slider_index: int
    value: float
