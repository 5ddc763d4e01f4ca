"""Test suite for case mirroring."""

import pytest
from spelling_variants.case_mirror import match_case


class TestUniformPatterns:
    """Tests for titlecase, uppercase and lowercase patterns."""

    def test_uppercase_pattern(self):
        assert match_case("color", "COLOUR") == "COLOR"

    def test_lowercase_pattern(self):
        assert match_case("color", "colour") == "color"

    def test_titlecase_pattern(self):
        assert match_case("color", "Colour") == "Color"

    def test_titlecase_lowercases_rest_of_candidate(self):
        assert match_case("COLOR", "Colour") == "Color"

    def test_lowercase_pattern_lowercases_candidate(self):
        assert match_case("CoLoR", "colour") == "color"

    def test_single_uppercase_letter_is_titlecase(self):
        """A single capital letter titlecases instead of uppercasing."""
        assert match_case("ax", "A") == "Ax"

    def test_single_lowercase_letter_is_lowercase(self):
        assert match_case("AX", "a") == "ax"

    def test_uncased_first_character_counts_as_titlecase(self):
        assert match_case("color", "1colour") == "Color"

    def test_uppercase_with_digits(self):
        assert match_case("color", "C0LOUR") == "COLOR"


class TestMixedPatterns:
    """Tests for per-character case transfer."""

    def test_transfers_case_where_letters_match(self):
        assert match_case("color", "coLour") == "coLor"

    def test_differing_letter_keeps_candidate_case(self):
        assert match_case("color", "coloUr") == "color"

    def test_aeroplane_to_airplane(self):
        assert match_case("airplane", "AeRopLaNe") == "AiRplane"

    def test_greyish_to_grayish(self):
        assert match_case("grayish", "GrEyIsH") == "GrayIsH"

    def test_longer_candidate_keeps_surplus_verbatim(self):
        assert match_case("colour", "ColoR") == "Colour"
        assert match_case("colour", "coLor") == "coLour"

    def test_surplus_is_not_recased(self):
        assert match_case("abcDEF", "aBc") == "aBcDEF"

    def test_non_ascii_capitals_transfer_case(self):
        assert match_case("élan", "ÉlAn") == "ÉlAn"

    def test_shorter_candidate_is_not_padded(self):
        assert match_case("ab", "aBcDe") == "aB"


class TestEdgeCases:
    """Tests for empty inputs."""

    @pytest.mark.parametrize(("candidate", "pattern"), [("", "Colour"), ("color", ""), ("", "")])
    def test_empty_input_returns_candidate(self, candidate, pattern):
        assert match_case(candidate, pattern) == candidate
