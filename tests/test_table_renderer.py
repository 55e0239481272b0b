import numpy as np
import pytest

from roadnet.adapters.rendering import FixedWidthTableRenderer
from roadnet.config import DisplayConfig
from roadnet.domain.errors import ConfigurationError
from roadnet.domain.models import NO_EDGE


def test_renders_header_rows_and_placeholders():
    matrix = np.array([[NO_EDGE, 5], [NO_EDGE, NO_EDGE]], dtype=np.int64)
    text = FixedWidthTableRenderer(DisplayConfig()).render(["A", "B"], matrix)

    assert text.splitlines() == [
        "       A      B      ",
        "A      *      5      ",
        "B      *      *      ",
    ]


def test_diagonal_always_shows_placeholder():
    matrix = np.array([[11]], dtype=np.int64)
    text = FixedWidthTableRenderer(DisplayConfig()).render(["A"], matrix)
    assert text.splitlines()[1] == "A      *      "


def test_custom_layout():
    config = DisplayConfig(cell_width=3, separator="|", placeholder="-")
    matrix = np.array([[NO_EDGE, 1234], [7, NO_EDGE]], dtype=np.int64)
    text = FixedWidthTableRenderer(config).render(["Alpha", "B"], matrix)

    assert text.splitlines() == [
        "   |Alpha|B  |",
        "Alpha|-  |1234|",
        "B  |7  |-  |",
    ]


def test_empty_network_renders_header_only():
    text = FixedWidthTableRenderer(DisplayConfig()).render([], np.empty((0, 0), dtype=np.int64))
    assert text == "       "


def test_shape_mismatch_is_rejected():
    with pytest.raises(ValueError):
        FixedWidthTableRenderer(DisplayConfig()).render(["A"], np.zeros((2, 2), dtype=np.int64))


def test_non_positive_width_is_a_configuration_error():
    config = DisplayConfig.model_construct(cell_width=0, separator=" ", placeholder="*")
    with pytest.raises(ConfigurationError):
        FixedWidthTableRenderer(config)
