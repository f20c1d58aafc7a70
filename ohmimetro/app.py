"""The ohmmeter loop: sample the divider, decode the colour bands, show the results."""

from __future__ import annotations

import argparse
import itertools
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .resistor import (
    ADC_RESOLUTION,
    KNOWN_RESISTANCE,
    ColorCode,
    color_code,
    resistance_from_adc,
)
from .ssd1306 import SSD1306
from .ws2812 import Ws2812Strip

SAMPLES = 500
"""ADC readings averaged for one measurement."""

SCREEN_SECONDS = 2.0
"""How long each of the two screens stays up."""

Sampler = Callable[[], float]


@dataclass(frozen=True)
class Reading:
    """One measurement: mean ADC count, computed resistance and its colour code."""

    adc: float
    resistance: float
    code: ColorCode

    @property
    def adc_text(self) -> str:
        return f"{self.adc:.0f}"

    @property
    def resistance_text(self) -> str:
        return f"{self.resistance:.0f}"

    @property
    def commercial_text(self) -> str:
        return str(self.code.value)


class Ohmmeter:
    """Measures an unknown resistor and reports it on an OLED display and an LED matrix."""

    def __init__(
        self,
        display: SSD1306,
        strip: Ws2812Strip,
        sampler: Sampler,
        known_resistance: float = KNOWN_RESISTANCE,
        resolution: float = ADC_RESOLUTION,
        samples: int = SAMPLES,
    ) -> None:
        if samples < 1:
            raise ValueError(f"samples must be at least 1, got {samples}")
        self.display = display
        self.strip = strip
        self.sampler = sampler
        self.known_resistance = known_resistance
        self.resolution = resolution
        self.samples = samples

    def measure(self) -> Reading:
        """Average the sampler's readings and turn the mean into a resistance."""
        mean = sum(self.sampler() for _ in range(self.samples)) / self.samples
        resistance = resistance_from_adc(mean, self.known_resistance, self.resolution)
        return Reading(adc=mean, resistance=resistance, code=color_code(resistance))

    def show_measurement(self, reading: Reading) -> None:
        """Draw the screen with the measured resistance, ADC count and commercial value."""
        d = self.display
        d.fill(False)
        d.rect(3, 3, 122, 60, True, False)
        d.line(3, 25, 123, 25, True)
        d.line(3, 37, 123, 37, True)
        d.draw_string("Ohmimetro", 25, 6)
        d.draw_string("Resitencia", 25, 16)
        d.draw_string(reading.resistance_text, 40, 28)
        d.draw_string("ADC", 13, 41)
        d.draw_string("Comercial", 50, 41)
        d.line(44, 37, 44, 60, True)
        d.draw_string(reading.adc_text, 10, 52)
        d.draw_string(reading.commercial_text, 59, 52)
        d.send_data()

    def show_colors(self, reading: Reading) -> None:
        """Draw the screen listing the names of the three band colours."""
        first, second, multiplier = reading.code.names()
        d = self.display
        d.fill(False)
        d.rect(3, 3, 122, 60, True, False)
        d.draw_string("Cores", 35, 6)
        d.draw_string(first, 30, 20)
        d.draw_string(second, 30, 30)
        d.draw_string(multiplier, 30, 40)
        d.send_data()

    def run(self, cycles: int | None = None,
            sleep: Callable[[float], object] = time.sleep) -> Reading | None:
        """Repeat measure-and-show ``cycles`` times, or forever when ``cycles`` is None.

        Returns the last reading, or None when no cycle ran.
        """
        if cycles is not None and cycles < 0:
            raise ValueError(f"cycles must not be negative, got {cycles}")
        rounds = itertools.count() if cycles is None else range(cycles)
        last = None
        for _ in rounds:
            last = self.measure()
            code = last.code
            self.strip.show_bands(code.first, code.second, code.multiplier)
            self.show_measurement(last)
            sleep(SCREEN_SECONDS)
            self.show_colors(last)
            sleep(SCREEN_SECONDS)
        return last


def _render(display: SSD1306) -> str:
    return "\n".join(
        "".join("#" if display.get_pixel(x, y) else "." for x in range(display.width))
        for y in range(display.height)
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ohmimetro",
        description="Simulate the ohmmeter with a fixed ADC reading or resistor.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--adc", type=float, help="ADC count read across the unknown resistor")
    source.add_argument("--resistance", type=float, help="unknown resistance in ohms")
    parser.add_argument("--cycles", type=int, default=1, help="measurement cycles (default 1)")
    parser.add_argument("--samples", type=int, default=SAMPLES, help="readings per measurement")
    parser.add_argument("--wait", action="store_true", help="keep each screen up for real")
    args = parser.parse_args(argv)
    if args.cycles < 0:
        parser.error("--cycles must not be negative")
    if args.samples < 1:
        parser.error("--samples must be at least 1")
    if args.resistance is not None and args.resistance < 0:
        parser.error("--resistance must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ohmmeter against a simulated divider and print each screen."""
    args = _parse_args(argv)

    if args.adc is not None:
        count = args.adc
    else:
        count = ADC_RESOLUTION * args.resistance / (args.resistance + KNOWN_RESISTANCE)

    display = SSD1306(lambda address, data: None)
    strip = Ws2812Strip(lambda word: None)
    meter = Ohmmeter(display, strip, lambda: count, samples=args.samples)

    def pause(seconds: float) -> None:
        print(_render(display))
        print()
        if args.wait:
            time.sleep(seconds)

    for _ in range(args.cycles):
        try:
            reading = meter.run(cycles=1, sleep=pause)
        except ValueError as error:
            print(f"error: {error}")
            return 1
        first, second, multiplier = reading.code.names()
        print(
            f"ADC {reading.adc_text}  R {reading.resistance_text} ohm  "
            f"comercial {reading.commercial_text} ohm  "
            f"cores {first}/{second}/{multiplier}"
        )
    return 0