"""
Slider state service.

Keeps the last accepted value per slider and turns raw readings into
SliderMoveEvents only when a reading is a real move rather than noise.
"""

from __future__ import annotations

import logging
import threading

from mixdeck.helpers.dto.slider_dto import SliderMoveEvent
from mixdeck.helpers.scalar_helper import NoiseProfile, is_significant, normalize_scalar

logger = logging.getLogger(__name__)


class SliderService:
    """Per-slider noise filtering for incoming readings."""

    def __init__(self, noise_profile: NoiseProfile | str = NoiseProfile.DEFAULT) -> None:
        self.noise_profile = NoiseProfile.from_value(noise_profile)
        self._values: dict[int, float] = {}
        self._lock = threading.Lock()

    def current_value(self, slider_index: int) -> float | None:
        with self._lock:
            return self._values.get(slider_index)

    def handle_reading(self, slider_index: int, reading: float) -> SliderMoveEvent | None:
        """
        Accept or drop a raw reading.

        The first reading of a slider is always accepted.

        Returns:
            SliderMoveEvent with the normalized value, or None for noise
        """
        value = normalize_scalar(reading)
        with self._lock:
            previous = self._values.get(slider_index)
            if previous is not None and not is_significant(previous, value, self.noise_profile):
                return None
            self._values[slider_index] = value

        logger.debug(f"[slider] Slider {slider_index} -> {value:.2f}")
        return SliderMoveEvent(slider_index=slider_index, value=value)

    def handle_readings(self, readings: list[float]) -> list[SliderMoveEvent]:
        """Process one line of readings (index = position) and return the moves."""
        events = []
        for index, reading in enumerate(readings):
            event = self.handle_reading(index, reading)
            if event is not None:
                events.append(event)
        return events

    def reset(self) -> None:
        with self._lock:
            self._values.clear()
