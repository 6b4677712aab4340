"""Tests for password strength checker."""

import pytest
from password_checker import (
    COMMON_PASSWORDS,
    CRITERIA_KEYS,
    STRENGTH_TIERS,
    calculate_score,
    check_password_strength,
    evaluate_criteria,
    generate_suggestions,
    select_tier,
)


NO_CRITERIA = {key: False for key in CRITERIA_KEYS}


class TestCriteria:
    """Test cases for the six criteria."""

    def test_empty_password_meets_nothing(self):
        """Empty password should fail every criterion."""
        assert evaluate_criteria("") == NO_CRITERIA

    def test_common_password(self):
        """'password' is long enough and lowercase but denylisted."""
        criteria = evaluate_criteria("password")
        assert criteria == {
            "length": True,
            "lowercase": True,
            "uppercase": False,
            "numbers": False,
            "symbols": False,
            "no_common": False,
        }

    def test_case_insensitive_common_check(self):
        """Common password check should be case-insensitive."""
        for variant in ["PASSWORD", "Password", "pAsSwOrD"]:
            assert evaluate_criteria(variant)["no_common"] is False

    def test_common_check_is_exact_match(self):
        """Denylisted words inside a longer password are not flagged."""
        assert evaluate_criteria("password1")["no_common"] is True
        assert evaluate_criteria("mypassword")["no_common"] is True

    def test_length_boundary(self):
        """Length criterion starts at 8 characters."""
        assert evaluate_criteria("abcdxyz")["length"] is False
        assert evaluate_criteria("abcdxyzw")["length"] is True

    def test_criteria_independence(self):
        """Adding an uppercase letter flips only the uppercase criterion."""
        before = evaluate_criteria("zebrafish")
        after = evaluate_criteria("zebrafisH")
        changed = [key for key in CRITERIA_KEYS if before[key] != after[key]]
        assert changed == ["uppercase"]

    def test_symbol_set(self):
        """Every character of the symbol class should count."""
        for symbol in "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?":
            assert evaluate_criteria(f"x{symbol}")["symbols"] is True

    def test_characters_outside_symbol_set(self):
        """Backtick, tilde and spaces are not symbols."""
        assert evaluate_criteria("a`b~c d")["symbols"] is False

    def test_digits_are_ascii_only(self):
        """Non-ASCII digits should not satisfy the numbers criterion."""
        assert evaluate_criteria("\u0661\u0662\u0663")["numbers"] is False

    def test_common_passwords_set(self):
        """Denylist holds the 18 known entries."""
        assert len(COMMON_PASSWORDS) == 18
        assert "superman" in COMMON_PASSWORDS


class TestScore:
    """Test cases for the additive score."""

    def test_password_example(self):
        """'password' scores 10 (length) + 10 (lowercase) with no bonuses."""
        result = check_password_strength("password")
        assert result.score == 20
        assert result.tier.label == "Weak"

    def test_mixed_fourteen_characters(self):
        """All criteria, length >= 10 and 13 distinct characters."""
        result = check_password_strength("Tr0ub4dor&3XyZ")
        assert all(result.criteria.values())
        assert result.score == 80
        assert result.tier.label == "Strong"

    def test_mixed_fifteen_characters(self):
        """Crossing 15 characters adds the second length bonus."""
        result = check_password_strength("Tr0ub4dor&3XyZ!")
        assert result.score == 95
        assert result.tier.label == "Very Strong"
        assert result.suggestions == []

    def test_repeat_penalty_only(self):
        """'aaa111' repeats characters but has no sequential substring."""
        result = check_password_strength("aaa111")
        assert result.score == 20
        assert "Avoid repeating characters" in result.suggestions
        assert "Avoid sequential patterns" not in result.suggestions

    def test_sequential_penalty_is_case_insensitive(self):
        """'ABC' counts as a sequential pattern."""
        result = check_password_strength("xyABCzw")
        assert result.score == 15
        assert "Avoid sequential patterns" in result.suggestions

    def test_score_clamped_at_zero(self):
        """Penalties cannot push the score below zero."""
        assert check_password_strength("abcaaa").score == 0

    def test_bonuses_without_criteria(self):
        """Length and uniqueness bonuses stack independently of criteria."""
        assert calculate_score("zyxwvutsrq", NO_CRITERIA) == 15
        assert calculate_score("zyxwvutsrqponml", NO_CRITERIA) == 35

    def test_score_range(self):
        """Score should stay within [0, 100] for assorted inputs."""
        samples = ["a", "zzzzzzzz", "qwe123abc", "Aa1!" * 10, "🔐🔐🔐", " " * 30]
        for password in samples:
            assert 0 <= check_password_strength(password).score <= 100

    def test_deterministic(self):
        """Evaluating the same password twice gives identical results."""
        assert check_password_strength("S0me-Passw0rd") == check_password_strength("S0me-Passw0rd")


class TestTiers:
    """Test cases for tier selection."""

    @pytest.mark.parametrize("score,label", [
        (0, "Very Weak"),
        (19, "Very Weak"),
        (20, "Weak"),
        (39, "Weak"),
        (40, "Fair"),
        (59, "Fair"),
        (60, "Good"),
        (79, "Good"),
        (80, "Strong"),
        (94, "Strong"),
        (95, "Very Strong"),
        (100, "Very Strong"),
    ])
    def test_boundaries(self, score, label):
        """Upper bounds are exclusive."""
        assert select_tier(score).label == label

    def test_out_of_range_falls_back_to_first_tier(self):
        """Scores past the last bound use the first tier."""
        assert select_tier(101) == STRENGTH_TIERS[0]

    def test_widths(self):
        """Display widths grow with the tiers."""
        assert [tier.width for tier in STRENGTH_TIERS] == [0.15, 0.30, 0.50, 0.70, 0.85, 1.0]


class TestSuggestions:
    """Test cases for suggestion ordering."""

    def test_common_password_suggestions(self):
        """Suggestions follow the fixed check order."""
        result = check_password_strength("password")
        assert result.suggestions == [
            "Add uppercase letters",
            "Include numbers",
            "Add special characters (!@#$%...)",
            "Avoid common passwords",
            "Consider using 10+ characters for better security",
        ]

    def test_short_password_gets_both_length_hints(self):
        """Length hints fire independently."""
        suggestions = generate_suggestions("aaa111", evaluate_criteria("aaa111"))
        assert suggestions == [
            "Use at least 8 characters",
            "Add uppercase letters",
            "Add special characters (!@#$%...)",
            "Consider using 10+ characters for better security",
            "Avoid repeating characters",
        ]

    def test_length_hint_threshold_is_twelve(self):
        """The '10+ characters' hint stays until 12 characters."""
        hint = "Consider using 10+ characters for better security"
        assert hint in check_password_strength("Xk7!mQ2#pL9").suggestions
        assert hint not in check_password_strength("Xk7!mQ2#pL9$").suggestions


class TestEmptyPassword:
    """Test cases for the empty-state result."""

    def test_empty_password(self):
        """Empty password has zero score, no tier and no suggestions."""
        result = check_password_strength("")
        assert result.score == 0
        assert result.tier is None
        assert result.criteria == NO_CRITERIA
        assert result.suggestions == []

    def test_empty_password_dict(self):
        """Serialized empty state uses blank label and zero width."""
        data = check_password_strength("").to_dict()
        assert data["strength"] == ""
        assert data["width"] == 0.0
        assert data["score"] == 0
