"""
Unit tests for the OCR text normalizer.
"""

import pytest

from dni_scanner.infrastructure.parsers.normalizer import normalize, normalize_back, normalize_front


class TestNormalize:

    def test_collapses_whitespace_and_drops_blank_lines(self):
        result = normalize("  JUAN   CARLOS \n\n   \n\tPEREZ\t\tGOMEZ ")
        assert result.lines == ("JUAN CARLOS", "PEREZ GOMEZ")

    def test_joined_text_keeps_line_order(self):
        result = normalize("B\nA\nC")
        assert result.text == "B\nA\nC"

    @pytest.mark.parametrize("raw", [None, "", "   ", "\n\n \t\n"])
    def test_empty_input_gives_empty_text(self, raw):
        result = normalize(raw)
        assert result.is_empty()
        assert result.text == ""
        assert len(result) == 0

    def test_splits_on_every_line_break_style(self):
        assert normalize("A\r\nB\rC\nD").lines == ("A", "B", "C", "D")

    def test_composes_decomposed_accents(self):
        assert normalize_front("PE\u0301REZ").lines == ("P\u00c9REZ",)


class TestFrontVariant:

    def test_strips_noise_but_keeps_date_punctuation(self):
        result = normalize_front("APELLIDO | Surname*\n12.345.678\n15/03/1985 @\n20-12345678-1")
        assert result.lines == ("APELLIDO Surname", "12.345.678", "15/03/1985", "20-12345678-1")

    def test_noise_only_lines_are_dropped(self):
        assert normalize_front("***\n|| ~~\nPEREZ").lines == ("PEREZ",)

    def test_all_noise_input_is_empty(self):
        assert normalize_front("*** @@@\n### !!").is_empty()

    def test_keeps_accented_letters(self):
        assert normalize_front("MUÑOZ PÉREZ ÜBER").lines == ("MUÑOZ PÉREZ ÜBER",)

    def test_strips_colons_and_underscores(self):
        assert normalize_front("APELLIDO: GOMEZ_").lines == ("APELLIDO GOMEZ",)


class TestBackVariant:

    def test_keeps_punctuation(self):
        result = normalize_back("DOMICILIO:   AV. SIEMPREVIVA  742 (CABA)")
        assert result.lines == ("DOMICILIO: AV. SIEMPREVIVA 742 (CABA)",)


class TestIdempotence:

    @pytest.mark.parametrize("raw", [
        "APELLIDO | Surname*\n  PEREZ  \n\n12.345.678",
        "REPUBLICA  ARGENTINA\r\n* * *\r\nMUÑOZ  |  PÉREZ",
        "DOMICILIO:  AV  SIEMPREVIVA 742\n\n CUIL 20-12345678-1 ",
        "",
    ])
    @pytest.mark.parametrize("normalizer", [normalize_front, normalize_back])
    def test_normalizing_twice_changes_nothing(self, raw, normalizer):
        once = normalizer(raw)
        twice = normalizer(once.text)
        assert twice == once
