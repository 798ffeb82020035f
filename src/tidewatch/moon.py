"""
Lunar phase classification.

Maps the moon's position in its cycle (0 = new, 0.5 = full, 1 = back to
new) onto eight named phases of equal width. Each bucket owns its lower
bound; the last bucket also owns 1.0.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from enum import StrEnum

from tidewatch.exceptions import ValidationError


class MoonPhase(StrEnum):
    """Named lunar phases, in cycle order."""

    NEW = "New"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL = "Full"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"

    @property
    def glyph(self) -> str:
        return PHASE_GLYPHS[self]


PHASE_GLYPHS: dict[MoonPhase, str] = {
    MoonPhase.NEW: "\U0001f311",
    MoonPhase.WAXING_CRESCENT: "\U0001f312",
    MoonPhase.FIRST_QUARTER: "\U0001f313",
    MoonPhase.WAXING_GIBBOUS: "\U0001f314",
    MoonPhase.FULL: "\U0001f315",
    MoonPhase.WANING_GIBBOUS: "\U0001f316",
    MoonPhase.LAST_QUARTER: "\U0001f317",
    MoonPhase.WANING_CRESCENT: "\U0001f318",
}

_PHASES = list(MoonPhase)

# Lower bound of every bucket after the first
_BOUNDARIES = [0.125, 0.25, 0.375, 0.5, 0.625, 0.75, 0.875]


@dataclass(frozen=True)
class MoonPhaseReading:
    """A classified phase with its pictograph and the fraction it came from."""

    phase: MoonPhase
    glyph: str
    illumination: float

    @property
    def label(self) -> str:
        return f"{self.glyph} {self.phase}"


def classify(illumination_fraction: float) -> MoonPhaseReading:
    """
    Classify a cycle fraction in [0, 1] into one of eight phases.

    Raises:
        ValidationError: If the input is not a number or lies outside [0, 1].
    """
    if isinstance(illumination_fraction, bool) or not isinstance(
        illumination_fraction, (int, float)
    ):
        msg = f"Illumination fraction must be a number, got {illumination_fraction!r}"
        raise ValidationError(msg)

    fraction = float(illumination_fraction)
    if math.isnan(fraction) or not 0.0 <= fraction <= 1.0:
        msg = f"Illumination fraction must be within [0, 1], got {illumination_fraction!r}"
        raise ValidationError(msg)

    # bisect_right sends a value sitting on a boundary to the upper bucket;
    # 1.0 falls past the last boundary, into the waning crescent bucket.
    phase = _PHASES[bisect_right(_BOUNDARIES, fraction)]
    return MoonPhaseReading(phase=phase, glyph=phase.glyph, illumination=fraction)
