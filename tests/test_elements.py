"""Tests for molball.elements."""

import pytest

from molball.elements import ELEMENTS, find_element_id, get_element, unpack_color


class TestElementTable:
    def test_symbols_are_unique(self):
        symbols = [e.symbol for e in ELEMENTS]
        assert len(symbols) == len(set(symbols))

    def test_find_element_id_matches_position(self):
        for element_id, element in enumerate(ELEMENTS):
            assert find_element_id(element.symbol) == element_id

    def test_find_is_case_sensitive(self):
        assert find_element_id("Cl") is not None
        assert find_element_id("CL") is None
        assert find_element_id("cl") is None

    def test_unknown_symbol(self):
        assert find_element_id("Zz") is None

    def test_get_element(self):
        assert get_element(find_element_id("O")).symbol == "O"

    @pytest.mark.parametrize("element_id", [-1, len(ELEMENTS)])
    def test_get_element_out_of_range(self, element_id):
        with pytest.raises(IndexError):
            get_element(element_id)

    def test_radii_positive(self):
        assert all(e.radius > 0 for e in ELEMENTS)


class TestUnpackColor:
    def test_red(self):
        assert unpack_color(0xFF0000FF) == (1.0, 0.0, 0.0, 1.0)

    def test_channel_order(self):
        r, g, b, a = unpack_color(0x11223344)
        assert r == pytest.approx(0x11 / 255)
        assert g == pytest.approx(0x22 / 255)
        assert b == pytest.approx(0x33 / 255)
        assert a == pytest.approx(0x44 / 255)
