import pytest

from chromagrad import Color


@pytest.fixture
def black():
    return Color(0.0, 0.0, 0.0, 1.0)


@pytest.fixture
def white():
    return Color(1.0, 1.0, 1.0, 1.0)


@pytest.fixture
def rgb_primaries():
    return [
        Color(1.0, 0.0, 0.0, 1.0),
        Color(0.0, 1.0, 0.0, 1.0),
        Color(0.0, 0.0, 1.0, 1.0),
    ]


@pytest.fixture
def close():
    return Color.is_close
