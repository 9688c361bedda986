"""Tests for the glyph dictionary."""

import pytest

from hexcube.glyphs import (
    ALPHABET_GLYPHS,
    DIGIT_GLYPHS,
    active_vertices,
    glyph_edges,
    is_digit,
    supported_characters,
)


EXPECTED_GLYPHS = {
    " ": [],
    "A": [3, 2, 10, 5],
    "B": [1, 10, 6, 9, 4, 7],
    "C": [10, 2, 3, 8, 4],
    "D": [1, 10, 5, 4, 7],
    "E": [2, 11, 0, 8],
    "F": [10, 1, 9, 7],
    "G": [10, 2, 3, 8, 4, 9],
    "H": [3, 5],
    "I": [1, 7],
    "J": [1, 7, 8],
    "K": [1, 7, 6, 9],
    "L": [1, 7, 4],
    "M": [3, 11, 6, 5],
    "N": [3, 11, 9, 5],
    "O": [10, 5, 4, 8, 3, 2],
    "P": [7, 1, 10, 6],
    "Q": [10, 5, 4, 8, 3, 2, 9],
    "R": [7, 1, 10, 6, 9],
    "S": [2, 11, 0],
    "T": [2, 10, 1, 7],
    "U": [3, 8, 4, 5],
    "V": [11, 9, 5],
    "W": [3, 0, 9, 5],
    "X": [11, 9, 0, 6],
    "Y": [11, 6, 7],
    "Z": [10, 6, 0, 8],
    "*": [1, 6, 9, 7, 0, 11],
    "0": [10, 5, 4, 8, 3, 2],
    "1": [2, 1, 7],
    "2": [2, 10, 6, 0, 8, 4],
    "3": [10, 6, 9, 4],
    "4": [3, 0, 1, 7],
    "5": [10, 2, 11, 9, 4, 8],
    "6": [10, 2, 3, 8, 4, 9, 0],
    "7": [2, 10, 6, 7],
    "8": [2, 10, 11, 6, 0, 9, 8, 4],
    "9": [6, 11, 2, 10, 5, 4, 8],
}


class TestGlyphTables:
    def test_alphabet_contents(self):
        expected = set("ABCDEFGHIJKLMNOPQRSTUVWXYZ") | {" ", "*"}
        assert set(ALPHABET_GLYPHS) == expected

    def test_digit_contents(self):
        assert set(DIGIT_GLYPHS) == set("0123456789")

    def test_all_indices_valid(self):
        for table in (ALPHABET_GLYPHS, DIGIT_GLYPHS):
            for char, edges in table.items():
                assert all(0 <= e < 12 for e in edges), char

    def test_no_duplicate_edges(self):
        for table in (ALPHABET_GLYPHS, DIGIT_GLYPHS):
            for char, edges in table.items():
                assert len(set(edges)) == len(edges), char

    def test_tables_read_only(self):
        with pytest.raises(TypeError):
            ALPHABET_GLYPHS["A"] = ()

    @pytest.mark.parametrize("char, edges", [
        ("A", [3, 2, 10, 5]),
        ("H", [3, 5]),
        ("*", [1, 6, 9, 7, 0, 11]),
        ("0", [10, 5, 4, 8, 3, 2]),
        ("8", [2, 10, 11, 6, 0, 9, 8, 4]),
    ])
    def test_known_glyphs(self, char, edges):
        assert glyph_edges(char) == edges

    @pytest.mark.parametrize("char", sorted(EXPECTED_GLYPHS))
    def test_every_glyph_matches_table(self, char):
        assert glyph_edges(char) == EXPECTED_GLYPHS[char]
        assert glyph_edges(char.lower()) == EXPECTED_GLYPHS[char]

    def test_table_covers_every_character(self):
        assert supported_characters() == frozenset(EXPECTED_GLYPHS)

    def test_supported_characters(self):
        chars = supported_characters()
        assert "Q" in chars
        assert "7" in chars
        assert len(chars) == 38


class TestGlyphLookup:
    def test_lowercase_matches_uppercase(self):
        for char in "abcxyz":
            assert glyph_edges(char) == glyph_edges(char.upper())

    def test_space_is_empty(self):
        assert glyph_edges(" ") == []

    @pytest.mark.parametrize("char", ["!", "?", "é", "\n", "", "AB"])
    def test_unknown_gives_empty(self, char):
        assert glyph_edges(char) == []

    def test_returns_fresh_list(self):
        edges = glyph_edges("A")
        edges.append(0)
        assert glyph_edges("A") == [3, 2, 10, 5]

    def test_digit_zero_differs_from_letter_o_lookup_path(self):
        assert is_digit("0")
        assert not is_digit("O")
        assert glyph_edges("0") == list(DIGIT_GLYPHS["0"])


class TestActiveVertices:
    def test_union_of_endpoints(self):
        assert active_vertices([3, 5]) == frozenset({0, 3, 5, 6})

    def test_empty(self):
        assert active_vertices([]) == frozenset()

    def test_letter_a(self):
        # (3,0), (2,3), (2,6), (5,6)
        assert active_vertices(glyph_edges("A")) == frozenset({0, 2, 3, 5, 6})

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            active_vertices([12])
