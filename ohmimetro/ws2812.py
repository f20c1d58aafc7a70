"""Driving a WS2812 LED matrix that shows the resistor's colour bands."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .resistor import COLOR_GRB

NUM_PIXELS = 25
DATA_PIN = 7
FREQUENCY = 800_000

T1, T2, T3 = 3, 3, 4
CYCLES_PER_BIT = T1 + T2 + T3

PROGRAM: tuple[int, ...] = (0x6321, 0x1223, 0x1200, 0xA242)
"""State-machine program for a single WS2812 data line (wraps 0..3)."""

PARALLEL_PROGRAM: tuple[int, ...] = (0x6020, 0xA20B, 0xA201, 0xA203)
"""State-machine program for several data lines driven in parallel (wraps 0..3)."""

_FIRST_BAND = frozenset({13, 6})
_SECOND_BAND = frozenset({12, 7})
_MULTIPLIER_BAND = frozenset({11, 8})


def pixel_word(grb: int) -> int:
    """Left-align a GRB colour in the 32-bit word the transmitter shifts out MSB first."""
    if not 0 <= grb <= 0xFFFFFFFF:
        raise ValueError(f"colour {grb!r} does not fit in 32 bits")
    return (grb << 8) & 0xFFFFFFFF


def _band_colour(digit: int) -> int:
    if not 0 <= digit < len(COLOR_GRB):
        raise ValueError(f"band digit {digit} has no colour")
    return COLOR_GRB[digit]


def band_pixels(first: int, second: int, multiplier: int) -> list[int]:
    """GRB colours for the whole matrix: three LED pairs show the bands, the rest are off."""
    colours = (_band_colour(first), _band_colour(second), _band_colour(multiplier))
    pixels = []
    for index in range(NUM_PIXELS):
        if index in _FIRST_BAND:
            pixels.append(colours[0])
        elif index in _SECOND_BAND:
            pixels.append(colours[1])
        elif index in _MULTIPLIER_BAND:
            pixels.append(colours[2])
        else:
            pixels.append(0)
    return pixels


def clock_divider(sys_clock_hz: float, frequency: float = FREQUENCY) -> float:
    """Clock divider giving ``frequency`` bits per second from the system clock."""
    if frequency <= 0:
        raise ValueError("frequency must be positive")
    return sys_clock_hz / (frequency * CYCLES_PER_BIT)


class Ws2812Strip:
    """A chain of WS2812 LEDs fed one 32-bit word per pixel through ``sink``."""

    def __init__(self, sink: Callable[[int], object], rgbw: bool = False) -> None:
        self._sink = sink
        self.rgbw = rgbw

    @property
    def bits_per_pixel(self) -> int:
        return 32 if self.rgbw else 24

    def show(self, pixels: Iterable[int]) -> None:
        """Send every pixel colour, in order, to the strip."""
        for grb in pixels:
            self._sink(pixel_word(grb))

    def show_bands(self, first: int, second: int, multiplier: int) -> None:
        """Light the matrix with the three colour bands of a resistor."""
        self.show(band_pixels(first, second, multiplier))