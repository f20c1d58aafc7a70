import pytest

from ohmimetro.font import glyph, legacy_glyph
from ohmimetro.ssd1306 import SSD1306, Command


class Recorder:
    def __init__(self):
        self.writes = []

    def __call__(self, address, data):
        self.writes.append((address, bytes(data)))


@pytest.fixture
def bus():
    return Recorder()


@pytest.fixture
def display(bus):
    return SSD1306(bus)


def lit_pixels(display):
    return {
        (x, y)
        for x in range(display.width)
        for y in range(display.height)
        if display.get_pixel(x, y)
    }


def glyph_matches(display, char, x, y, source=glyph):
    columns = source(char)
    return all(
        display.get_pixel(x + i, y + j) == bool(columns[i] & (1 << j))
        for i in range(8)
        for j in range(8)
    )


def test_new_buffer_has_data_control_byte_and_is_blank(display):
    assert display.buffer[0] == 0x40
    assert len(display.buffer) == display.pages * display.width + 1
    assert lit_pixels(display) == set()


def test_command_writes_control_prefix(display, bus):
    display.command(Command.SET_CONTRAST)
    addresses = [address for address, _ in bus.writes]
    payloads = [data for _, data in bus.writes]
    assert addresses == [0x3C]
    assert payloads == [bytes((0x80, 0x81))]
    assert lit_pixels(display) == set()


def test_command_rejects_values_over_a_byte(display):
    with pytest.raises(ValueError):
        display.command(0x100)


def test_config_switches_display_off_then_on(display, bus):
    display.config()
    commands = [data[1] for _, data in bus.writes]
    assert commands[0] == Command.SET_DISP
    assert commands[-1] == Command.SET_DISP | 0x01
    assert commands[commands.index(Command.SET_MUX_RATIO) + 1] == display.height - 1
    assert {data[0] for _, data in bus.writes} == {0x80}


def test_send_data_sets_window_then_writes_buffer(display, bus):
    display.pixel(5, 9, True)
    display.send_data()
    commands = [data[1] for _, data in bus.writes[:-1]]
    assert commands == [
        Command.SET_COL_ADDR, 0, display.width - 1,
        Command.SET_PAGE_ADDR, 0, display.pages - 1,
    ]
    assert bus.writes[-1] == (0x3C, display.buffer)


def test_pixel_layout_first_byte(display):
    display.pixel(0, 0, True)
    assert display.buffer[1] == 0x01


def test_pixel_set_and_clear_round_trip(display):
    display.pixel(100, 37, True)
    assert display.get_pixel(100, 37) is True
    assert lit_pixels(display) == {(100, 37)}
    display.pixel(100, 37, False)
    assert lit_pixels(display) == set()


@pytest.mark.parametrize("x, y", [(-1, 0), (128, 0), (0, 64), (0, -1)])
def test_pixel_out_of_range(display, x, y):
    with pytest.raises(ValueError):
        display.pixel(x, y, True)


@pytest.mark.parametrize("width, height", [(0, 64), (128, 0), (128, 60)])
def test_bad_geometry_rejected(bus, width, height):
    with pytest.raises(ValueError):
        SSD1306(bus, width, height)


def test_fill_sets_and_clears_all(display):
    display.fill(True)
    assert len(lit_pixels(display)) == display.width * display.height
    assert display.buffer[0] == 0x40
    display.fill(False)
    assert lit_pixels(display) == set()


def test_rect_outline_only(display):
    display.rect(3, 3, 122, 60, True, False)
    lit = lit_pixels(display)
    assert (3, 3) in lit and (124, 62) in lit and (3, 62) in lit and (124, 3) in lit
    assert (50, 30) not in lit
    assert len(lit) == 2 * 122 + 2 * 60 - 4


def test_rect_filled(display):
    display.rect(10, 20, 5, 4, True, True)
    expected = {(x, y) for x in range(20, 25) for y in range(10, 14)}
    assert lit_pixels(display) == expected


def test_horizontal_line(display):
    display.line(3, 25, 123, 25, True)
    assert lit_pixels(display) == {(x, 25) for x in range(3, 124)}


def test_vertical_line_reversed(display):
    display.line(44, 60, 44, 37, True)
    assert lit_pixels(display) == {(44, y) for y in range(37, 61)}


def test_diagonal_line_endpoints_and_count(display):
    display.line(0, 0, 20, 10, True)
    lit = lit_pixels(display)
    assert (0, 0) in lit and (20, 10) in lit
    assert len(lit) == 21
    assert len({x for x, _ in lit}) == 21


def test_hline_and_vline_inclusive(display):
    display.hline(2, 6, 8, True)
    display.vline(30, 1, 4, True)
    expected = {(x, 8) for x in range(2, 7)} | {(30, y) for y in range(1, 5)}
    assert lit_pixels(display) == expected


def test_draw_char_matches_glyph(display):
    display.fill(True)
    display.draw_char("R", 40, 28)
    assert glyph_matches(display, "R", 40, 28)
    assert display.get_pixel(39, 28) is True


def test_legacy_font_draws_digits_blank(bus):
    display = SSD1306(bus, glyphs=legacy_glyph)
    display.draw_char("7", 0, 0)
    assert lit_pixels(display) == set()
    display.draw_char("Q", 0, 0)
    assert glyph_matches(display, "Q", 0, 0, legacy_glyph)
    assert lit_pixels(display)


def test_draw_char_clips_at_edge(display):
    display.draw_char("W", 124, 60)
    assert all(x >= 124 and y >= 60 for x, y in lit_pixels(display))


def test_draw_string_places_characters(display):
    display.draw_string("Ohm", 25, 6)
    assert glyph_matches(display, "O", 25, 6)
    assert glyph_matches(display, "h", 33, 6)
    assert glyph_matches(display, "m", 41, 6)


def test_draw_string_wraps_to_next_line(display):
    display.draw_string("AB", 112, 0)
    assert glyph_matches(display, "A", 112, 0)
    assert glyph_matches(display, "B", 0, 8)
    assert not any(display.get_pixel(x, y) for x in range(120, 128) for y in range(8))


def test_draw_string_stops_at_bottom(display):
    display.draw_string("AB", 0, 56)
    assert glyph_matches(display, "A", 0, 56)
    assert not any(display.get_pixel(x, y) for x in range(8, 16) for y in range(56, 64))