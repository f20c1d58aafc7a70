"""Frame buffer and I2C command stream for an SSD1306 monochrome OLED display."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from .font import GLYPH_SIZE, glyph

WIDTH = 128
HEIGHT = 64
ADDRESS = 0x3C

CONTROL_COMMAND = 0x80
CONTROL_DATA = 0x40

Bus = Callable[[int, bytes], object]
GlyphSource = Callable[[str], bytes]


class Command(IntEnum):
    """SSD1306 command opcodes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class SSD1306:
    """An SSD1306 display in vertical addressing mode.

    ``bus`` is called as ``bus(address, data)`` for every I2C write.
    ``glyphs`` maps a character to its column bytes.
    """

    def __init__(
        self,
        bus: Bus,
        width: int = WIDTH,
        height: int = HEIGHT,
        address: int = ADDRESS,
        external_vcc: bool = False,
        glyphs: GlyphSource = glyph,
    ) -> None:
        if not 0 < width <= 256:
            raise ValueError(f"width must be between 1 and 256, got {width}")
        if not 0 < height <= 256 or height % 8:
            raise ValueError(f"height must be a positive multiple of 8 up to 256, got {height}")
        self._bus = bus
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self._glyphs = glyphs
        self._buffer = bytearray(self.pages * width + 1)
        self._buffer[0] = CONTROL_DATA

    @property
    def buffer(self) -> bytes:
        """The data frame sent to the display: control byte followed by the pixels."""
        return bytes(self._buffer)

    def config(self) -> None:
        """Send the power-up configuration sequence and switch the display on."""
        sequence = (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, self.height - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        )
        for byte in sequence:
            self.command(byte)

    def command(self, command: int) -> None:
        """Write a single command byte."""
        if not 0 <= command <= 0xFF:
            raise ValueError(f"command {command!r} does not fit in a byte")
        self._bus(self.address, bytes((CONTROL_COMMAND, int(command))))

    def send_data(self) -> None:
        """Set the full address window and write the whole frame buffer."""
        for byte in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(byte)
        self._bus(self.address, bytes(self._buffer))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} display")
        return (y >> 3) + x * self.pages + 1

    def pixel(self, x: int, y: int, value: bool) -> None:
        """Set or clear one pixel."""
        index = self._index(x, y)
        mask = 1 << (y & 0b111)
        if value:
            self._buffer[index] |= mask
        else:
            self._buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Whether the pixel at (x, y) is lit."""
        return bool(self._buffer[self._index(x, y)] & (1 << (y & 0b111)))

    def fill(self, value: bool) -> None:
        """Set every pixel to ``value``."""
        byte = 0xFF if value else 0x00
        self._buffer[1:] = bytes((byte,)) * (len(self._buffer) - 1)

    def rect(self, top: int, left: int, width: int, height: int,
             value: bool = True, fill: bool = False) -> None:
        """Draw a rectangle outline, and fill its inside too when ``fill`` is set."""
        right = left + width - 1
        bottom = top + height - 1
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, bottom, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(right, y, value)
        if fill:
            for x in range(left + 1, right):
                for y in range(top + 1, bottom):
                    self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value: bool = True) -> None:
        """Draw a straight line between two points, both included."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0: int, x1: int, y: int, value: bool = True) -> None:
        """Draw a horizontal line from ``x0`` to ``x1`` inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value: bool = True) -> None:
        """Draw a vertical line from ``y0`` to ``y1`` inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, char: str, x: int, y: int) -> None:
        """Draw one 8x8 character with its top-left corner at (x, y).

        Lit and unlit glyph pixels are both written; parts off the display are clipped.
        """
        for column, bits in enumerate(self._glyphs(char)[:GLYPH_SIZE]):
            px = x + column
            if not 0 <= px < self.width:
                continue
            for row in range(8):
                py = y + row
                if 0 <= py < self.height:
                    self.pixel(px, py, bool(bits & (1 << row)))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw ``text``, wrapping to the next text line and stopping at the bottom edge."""
        for char in text:
            self.draw_char(char, x, y)
            x += 8
            if x + 8 >= self.width:
                x = 0
                y += 8
            if y + 8 >= self.height:
                break