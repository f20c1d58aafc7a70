# ohmimetro

The logic of a resistance meter built around a voltage divider and an ADC.
It works out the unknown resistance from averaged ADC counts, snaps it to
the nearest E24 value and turns that into a resistor colour code (two digit
bands and a multiplier). The result is drawn into a 128x64 SSD1306 OLED
framebuffer and turned into band colours for a 25-pixel WS2812 LED matrix.

The display bus, the LED data line and the ADC are plain callables that you
pass in, so the whole measurement cycle runs on an ordinary computer.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Command line

The `ohmimetro` command runs the measurement cycle against a simulated
divider. Give it either a fixed ADC count or a resistance:

    ohmimetro --adc 2024
    ohmimetro --resistance 4700

Options:

- `--adc COUNT` – ADC count read across the unknown resistor.
- `--resistance OHMS` – unknown resistance; the matching ADC count is
  computed from the 9810 Ω reference and a full scale of 4048.
- `--cycles N` – number of measurement cycles (default 1).
- `--samples N` – readings averaged per measurement (default 500).
- `--wait` – keep each screen up for its two seconds instead of going on
  at once.

For each cycle it prints both display screens as text (`#` for a lit
pixel, `.` for a dark one) and then a summary line with the ADC count, the
resistance, the commercial value and the three colour names. An impossible
reading (for example an ADC count equal to full scale) prints an error and
exits with status 1.

## Library

- `ohmimetro.resistor`: `resistance_from_adc(reading, known_resistance,
  resolution)`, `nearest_e24(value)`, `color_code(resistance)` and the
  `ColorCode` result (`first`, `second`, `multiplier`, `value`), whose
  `names()` gives the band colours (`preto`, `marrom`, `vermelho`, …).
  `E24`, `COLOR_NAMES` and `COLOR_GRB` hold the tables.
- `ohmimetro.ssd1306`: the `SSD1306` framebuffer with `pixel`, `get_pixel`,
  `fill`, `rect`, `line`, `hline`, `vline`, `draw_char`, `draw_string`, and
  `config`, `command`, `send_data`, which call `bus(address, data)` for
  every I2C write. `Command` lists the controller's command bytes. Drawing
  outside the display raises `ValueError`; `draw_char` clips instead.
- `ohmimetro.font`: 8x8 glyphs through `glyph` (printable ASCII) and
  `legacy_glyph` (letters only; anything else draws blank).
- `ohmimetro.ws2812`: `Ws2812Strip`, which hands one 32-bit word per pixel
  to a sink callable, with `pixel_word`, `band_pixels` and `clock_divider`.
- `ohmimetro.app`: `Ohmmeter`, which samples, computes, draws both screens
  and lights the bands, and the `Reading` each measurement produces.

Example:

    from ohmimetro.resistor import color_code, resistance_from_adc

    r = resistance_from_adc(2024.0, 9810, 4048)   # 9810.0
    code = color_code(r)
    print(code.value, code.names())   # 10000 ('marrom', 'preto', 'laranja')

## What it does not do

The package holds no hardware drivers. It does not read a real ADC, talk to
a real I2C bus or drive a real LED data line by itself: you supply those as
callables. There is no button handling, and the command line only ever
measures a simulated divider.