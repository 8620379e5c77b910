import pytest

from chromagrad import Color


def test_from_rgba8():
    assert Color.from_rgba8(255, 0, 0).to_tuple() == (1.0, 0.0, 0.0, 1.0)
    assert Color.from_rgba8(0, 0, 0, 0).a == 0.0


def test_to_rgba8_saturates():
    assert Color(1.5, -0.2, 0.5, 1.0).to_rgba8() == (255, 0, 128, 255)


def test_to_rgba8_rounds_half_up():
    assert Color(2.5 / 255, 0.0, 0.0).to_rgba8() == (3, 0, 0, 255)


def test_to_hex_string():
    assert Color.from_rgba8(255, 20, 147).to_hex_string() == "#ff1493"
    assert Color.from_rgba8(255, 20, 147, 128).to_hex_string() == "#ff149380"


@pytest.mark.parametrize("text, expected", [
    ("gold", (255, 215, 0, 255)),
    ("#C41189", (196, 17, 137, 255)),
    ("#00f", (0, 0, 255, 255)),
    ("rgb(125,110,221)", (125, 110, 221, 255)),
    ("  deeppink ", (255, 20, 147, 255)),
    ("rgba(255, 0, 0, 0.5)", (255, 0, 0, 128)),
    ("rgb(100% 0% 50%)", (255, 0, 128, 255)),
    ("hsl(120, 50%, 50%)", (64, 191, 64, 255)),
    ("hsla(120, 50%, 50%, 0.5)", (64, 191, 64, 128)),
    ("hwb(120 20% 20%)", (51, 204, 51, 255)),
    ("#f008", (255, 0, 0, 136)),
    ("hsv(240, 100%, 100%)", (0, 0, 255, 255)),
])
def test_from_html(text, expected):
    assert Color.from_html(text).to_rgba8() == expected


@pytest.mark.parametrize("text", ["not-a-color", "#zzz", ""])
def test_from_html_invalid(text):
    with pytest.raises(ValueError):
        Color.from_html(text)


def test_immutable():
    c = Color(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        c.r = 0.5
    with pytest.raises(AttributeError):
        c.extra = 1


def test_equality_and_hash():
    assert Color(0.1, 0.2, 0.3) == Color(0.1, 0.2, 0.3, 1.0)
    assert Color(0.1, 0.2, 0.3) != Color(0.1, 0.2, 0.3, 0.5)
    assert len({Color(0.1, 0.2, 0.3), Color(0.1, 0.2, 0.3)}) == 1


def test_iter_unpacks_channels():
    r, g, b, a = Color(0.1, 0.2, 0.3, 0.4)
    assert (r, g, b, a) == (0.1, 0.2, 0.3, 0.4)


def test_interpolate_rgb(black, white):
    assert black.interpolate_rgb(white, 0.25) == Color(0.25, 0.25, 0.25, 1.0)


def test_from_hsva_primaries(close):
    assert close(Color.from_hsva(0.0, 1.0, 1.0), Color(1.0, 0.0, 0.0))
    assert close(Color.from_hsva(120.0, 1.0, 1.0), Color(0.0, 1.0, 0.0))
    assert close(Color.from_hsva(240.0, 1.0, 1.0, 0.5), Color(0.0, 0.0, 1.0, 0.5))
    assert close(Color.from_hsva(-120.0, 1.0, 1.0), Color(0.0, 0.0, 1.0))


def test_to_hsva():
    assert Color(1.0, 0.0, 0.0).to_hsva() == (0.0, 1.0, 1.0, 1.0)
    assert Color(0.0, 0.0, 1.0).to_hsva() == (240.0, 1.0, 1.0, 1.0)
    # achromatic colors report hue 0
    assert Color(0.5, 0.5, 0.5).to_hsva() == (0.0, 0.0, 0.5, 1.0)


def test_to_linear_rgba():
    r, g, b, a = Color(0.5, 0.0, 1.0, 0.3).to_linear_rgba()
    assert abs(r - 0.2140) < 1e-4
    assert g == 0.0
    assert abs(b - 1.0) < 1e-12
    assert a == 0.3


def test_to_oklab_white():
    l, a, b, alpha = Color(1.0, 1.0, 1.0).to_oklab()
    assert abs(l - 1.0) < 1e-4
    assert abs(a) < 1e-4
    assert abs(b) < 1e-4
    assert alpha == 1.0
