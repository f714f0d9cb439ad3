import pytest

from shadelab.core.conversions import (
    clamp_rgb,
    cmyk_to_rgb,
    format_hex,
    hsb_to_rgb,
    hsl_to_rgb,
    is_hex,
    normalize_hex,
    parse_hex,
    rgb_to_cmyk,
    rgb_to_hsb,
    rgb_to_hsl,
)

SAMPLE_RGB = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
    (63, 81, 181),
    (200, 100, 50),
    (0, 0, 0),
    (128, 128, 128),
    (255, 255, 255),
]


def test_parse_hex_accepts_six_digits_any_case():
    assert parse_hex("#3f51b5") == (63, 81, 181)
    assert parse_hex("#3F51B5") == (63, 81, 181)
    assert parse_hex("#3f51b5").r == 63


@pytest.mark.parametrize(
    "value",
    ["3f51b5", "#fff", "#3f51b5ff", "#3g51b5", "", " #3f51b5", "#3f51b5 ", "#3f51b5\n", "#3f51b5\r\n", None, 0x3F51B5, ["#3f51b5"]],
)
def test_parse_hex_rejects_everything_else(value):
    assert parse_hex(value) is None
    assert not is_hex(value)


def test_format_hex_pads_and_lowercases():
    assert format_hex(0, 0, 0) == "#000000"
    assert format_hex(255, 10, 1) == "#ff0a01"
    assert len(format_hex(1, 2, 3)) == 7


@pytest.mark.parametrize("hex_code", ["#000000", "#ffffff", "#3F51B5", "#0a0B0c", "#9fa8da"])
def test_hex_round_trip_is_case_normalized(hex_code):
    assert format_hex(*parse_hex(hex_code)) == hex_code.lower()
    assert normalize_hex(hex_code) == hex_code.lower()


def test_clamp_rgb_rounds_and_clamps():
    assert clamp_rgb(-4, 300, 127.5) == (0, 255, 128)
    assert format_hex(*clamp_rgb(-4, 300, 127.5)) == "#00ff80"
    assert clamp_rgb(float("nan"), 0.49, 254.5) == (0, 0, 255)


def test_reference_color_in_every_space():
    assert rgb_to_hsl(63, 81, 181) == (231, 48, 48)
    assert rgb_to_hsb(63, 81, 181) == (231, 65, 71)
    assert rgb_to_cmyk(63, 81, 181) == (65, 55, 0, 29)


def test_named_fields():
    hsl = rgb_to_hsl(63, 81, 181)
    hsb = rgb_to_hsb(63, 81, 181)
    cmyk = rgb_to_cmyk(63, 81, 181)
    assert (hsl.h, hsl.s, hsl.l) == (231, 48, 48)
    assert (hsb.h, hsb.s, hsb.b) == (231, 65, 71)
    assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (65, 55, 0, 29)


@pytest.mark.parametrize("v", [0, 1, 64, 127, 128, 200, 254, 255])
def test_gray_has_zero_hue_and_saturation(v):
    h, s, _ = rgb_to_hsl(v, v, v)
    assert (h, s) == (0, 0)
    h, s, _ = rgb_to_hsb(v, v, v)
    assert (h, s) == (0, 0)


def test_primary_hues():
    assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
    assert rgb_to_hsl(0, 255, 0) == (120, 100, 50)
    assert rgb_to_hsl(0, 0, 255) == (240, 100, 50)
    assert rgb_to_hsb(255, 0, 255) == (300, 100, 100)


def test_cmyk_black_is_not_nan():
    assert rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 100)
    assert rgb_to_cmyk(255, 255, 255) == (0, 0, 0, 0)


def test_cmyk_to_rgb():
    assert cmyk_to_rgb(0, 0, 0, 100) == (0, 0, 0)
    assert cmyk_to_rgb(0, 0, 0, 0) == (255, 255, 255)
    assert cmyk_to_rgb(65, 55, 0, 29) == (63, 81, 181)


def test_hsb_to_rgb_reference():
    assert hsb_to_rgb(231, 65, 71) == (63, 81, 181)


def test_saturation_zero_shortcuts_to_gray():
    assert hsl_to_rgb(123, 0, 50) == (128, 128, 128)
    assert hsb_to_rgb(300, 0, 50) == (128, 128, 128)
    assert hsl_to_rgb(0, 0, 0) == (0, 0, 0)
    assert hsb_to_rgb(0, 0, 100) == (255, 255, 255)


def test_hue_360_is_red():
    assert hsl_to_rgb(360, 100, 50) == (255, 0, 0)
    assert hsb_to_rgb(360, 100, 100) == (255, 0, 0)


def test_out_of_range_inputs_are_clamped():
    assert hsl_to_rgb(400, 150, 50) == hsl_to_rgb(360, 100, 50)
    assert hsb_to_rgb(-20, 50, 200) == hsb_to_rgb(0, 50, 100)
    assert cmyk_to_rgb(-10, 0, 0, 120) == (0, 0, 0)
    assert rgb_to_cmyk(300, -5, 0) == rgb_to_cmyk(255, 0, 0)


@pytest.mark.parametrize("rgb", SAMPLE_RGB)
def test_outputs_stay_in_range(rgb):
    h, s, l = rgb_to_hsl(*rgb)
    assert 0 <= h <= 360 and 0 <= s <= 100 and 0 <= l <= 100
    h, s, b = rgb_to_hsb(*rgb)
    assert 0 <= h <= 360 and 0 <= s <= 100 and 0 <= b <= 100
    assert all(0 <= v <= 100 for v in rgb_to_cmyk(*rgb))


# Integer degrees and percents cannot hold every triple to +-1; 5 is the
# analytic worst case (quantized L/V, S and a half-degree hue error).
ROUND_TRIP_MAX_ERROR = 5
GRID = range(0, 256, 5)


def _worst_round_trip(to_space, from_space):
    worst = 0
    for r in GRID:
        for g in GRID:
            for b in GRID:
                back = from_space(*to_space(r, g, b))
                worst = max(worst, abs(back[0] - r), abs(back[1] - g), abs(back[2] - b))
    return worst


def test_hsl_round_trip_bound_over_grid():
    assert _worst_round_trip(rgb_to_hsl, hsl_to_rgb) <= ROUND_TRIP_MAX_ERROR


def test_hsb_round_trip_bound_over_grid():
    assert _worst_round_trip(rgb_to_hsb, hsb_to_rgb) <= ROUND_TRIP_MAX_ERROR


def test_cmyk_round_trip_over_grid():
    # Half-percent errors on one ink and on K add up to 2.55 before rounding
    assert _worst_round_trip(rgb_to_cmyk, cmyk_to_rgb) <= 3
