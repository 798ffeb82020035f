"""Display symbols per measurement system."""

from __future__ import annotations

from dataclasses import dataclass

from tidewatch.exceptions import ValidationError
from tidewatch.schemas import MeasurementSystem


@dataclass(frozen=True)
class UnitSymbolSet:
    """Symbols appended to magnitudes of each physical quantity."""

    degree: str
    height: str
    speed: str
    pressure: str


IMPERIAL_SYMBOLS = UnitSymbolSet(degree="°F", height="ft", speed="kts", pressure="mb")
METRIC_SYMBOLS = UnitSymbolSet(degree="°C", height="m", speed="m/s", pressure="mb")

_SYMBOLS: dict[MeasurementSystem, UnitSymbolSet] = {
    MeasurementSystem.IMPERIAL: IMPERIAL_SYMBOLS,
    MeasurementSystem.METRIC: METRIC_SYMBOLS,
}


def symbols_for(system: MeasurementSystem | str) -> UnitSymbolSet:
    """
    Resolve the symbol set for a measurement system.

    Accepts the enum or its wire string (``"english"``/``"metric"``).
    Pressure is reported in millibars under both systems.

    Raises:
        ValidationError: If ``system`` is not a known measurement system.
    """
    try:
        resolved = MeasurementSystem(system)
    except ValueError as exc:
        choices = [s.value for s in MeasurementSystem]
        msg = f"Unknown measurement system {system!r}; use one of {choices}"
        raise ValidationError(msg) from exc
    return _SYMBOLS[resolved]
