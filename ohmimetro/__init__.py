"""Ohmmeter logic: resistance from ADC counts, E24 colour codes, SSD1306 and WS2812 helpers."""

__version__ = "0.1.0"

__all__ = ["font", "resistor", "ws2812", "ssd1306", "app"]