"""Resistance calculation and E24 colour-band coding."""

from __future__ import annotations

import math
from dataclasses import dataclass

KNOWN_RESISTANCE = 9810
"""Reference resistor of the divider, in ohms (a nominal 10k measured at 9.81k)."""

ADC_RESOLUTION = 4048
"""Measured full-scale ADC count."""

ADC_VREF = 3.33
"""ADC reference voltage, in volts."""

E24: tuple[float, ...] = (
    10, 11, 12, 13, 15, 16, 18, 20,
    22, 24, 27, 30, 33, 36, 39, 43,
    47, 51, 56, 62, 68, 75, 82, 91, 100,
)

COLOR_NAMES: tuple[str, ...] = (
    "preto", "marrom", "vermelho", "laranja", "amarelo",
    "verde", "azul", "violeta", "cinza", "branco",
)

COLOR_GRB: tuple[int, ...] = (
    0x000000, 0x021000, 0x005000, 0x104000, 0x203000,
    0x500000, 0x000060, 0x005050, 0x101010, 0x505050,
)
"""LED colour for each band digit, in GRB order."""


@dataclass(frozen=True)
class ColorCode:
    """The three colour bands of a resistor and the commercial value they encode."""

    first: int
    second: int
    multiplier: int
    value: int

    def names(self) -> tuple[str, str, str]:
        """Colour names of the first, second and multiplier bands."""
        bands = (self.first, self.second, self.multiplier)
        for band in bands:
            if not 0 <= band < len(COLOR_NAMES):
                raise ValueError(f"band digit {band} has no colour")
        return tuple(COLOR_NAMES[band] for band in bands)


def nearest_e24(value: float) -> float:
    """Return the E24 entry closest to ``value``; on a tie the smaller one wins."""
    return min(E24, key=lambda entry: abs(value - entry))


def color_code(resistance: float) -> ColorCode:
    """Round ``resistance`` to the nearest E24 value and encode it as colour bands."""
    if not math.isfinite(resistance):
        raise ValueError(f"resistance must be finite, got {resistance!r}")

    base = resistance
    multiplier = 0
    while base >= 100:
        base /= 10.0
        multiplier += 1

    nearest = nearest_e24(base)
    value = int(nearest * 10 ** multiplier)

    if nearest == 100:
        first, second = divmod(int(nearest), 100)
        multiplier += 1
    else:
        first, second = divmod(int(nearest), 10)

    return ColorCode(first=first, second=second, multiplier=multiplier, value=value)


def resistance_from_adc(
    reading: float,
    known_resistance: float = KNOWN_RESISTANCE,
    resolution: float = ADC_RESOLUTION,
) -> float:
    """Unknown resistance of a divider whose lower leg gives ``reading`` ADC counts."""
    if reading == resolution:
        raise ValueError("reading equals the ADC resolution: the circuit is open")
    return (known_resistance * reading) / (resolution - reading)