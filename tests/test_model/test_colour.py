"""Tests for colour normalisation."""

import pytest

from hexcube.model import colour_to_hex, normalise_colour


class TestNormaliseColour:
    def test_hex_string(self):
        assert normalise_colour("#FFFFFF") == (1.0, 1.0, 1.0)

    def test_css_name(self):
        assert normalise_colour("black") == (0.0, 0.0, 0.0)

    def test_grey_float(self):
        assert normalise_colour(0.5) == (0.5, 0.5, 0.5)

    def test_rgb_tuple(self):
        assert normalise_colour((0.1, 0.2, 0.3)) == (0.1, 0.2, 0.3)

    def test_rgb_list(self):
        assert normalise_colour([1.0, 0.0, 0.0]) == (1.0, 0.0, 0.0)

    def test_grey_out_of_range(self):
        with pytest.raises(ValueError, match="Grey value"):
            normalise_colour(1.5)

    def test_wrong_length(self):
        with pytest.raises(ValueError, match="3 elements"):
            normalise_colour((1.0, 0.0))

    def test_component_out_of_range(self):
        with pytest.raises(ValueError, match="component g"):
            normalise_colour((0.0, 2.0, 0.0))

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unrecognised"):
            normalise_colour("not-a-colour")

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="Cannot interpret"):
            normalise_colour(True)


class TestColourToHex:
    def test_upper_case(self):
        assert colour_to_hex("#4a5568") == "#4A5568"

    def test_from_tuple(self):
        assert colour_to_hex((1.0, 0.0, 0.0)) == "#FF0000"
