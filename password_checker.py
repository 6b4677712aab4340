"""Rule-based password strength scoring.

Scores a password from six criteria plus length/uniqueness bonuses and two
pattern penalties, maps the score to a strength tier and lists suggestions.
This is a heuristic checklist, not an entropy estimate.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

# common weak passwords, matched case-insensitively and exactly
COMMON_PASSWORDS = frozenset({
    "password", "123456", "123456789", "qwerty", "abc123",
    "password123", "admin", "letmein", "welcome", "monkey",
    "1234567890", "dragon", "master", "login", "passw0rd",
    "football", "baseball", "superman",
})

MIN_LENGTH = 8

LOWERCASE_RE = re.compile(r"[a-z]")
UPPERCASE_RE = re.compile(r"[A-Z]")
DIGIT_RE = re.compile(r"[0-9]")
SYMBOL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
REPEATED_CHAR_RE = re.compile(r"(.)\1{2,}")
SEQUENTIAL_RE = re.compile(r"123|abc|qwe", re.IGNORECASE)

CRITERIA_KEYS = ("length", "lowercase", "uppercase", "numbers", "symbols", "no_common")

CRITERIA_LABELS = {
    "length": "At least 8 characters long",
    "lowercase": "Contains lowercase letters",
    "uppercase": "Contains uppercase letters",
    "numbers": "Contains numbers",
    "symbols": "Contains special characters (!@#$%...)",
    "no_common": "Not a common password",
}


@dataclass(frozen=True)
class StrengthTier:
    """A qualitative strength band; scores below max_score fall into it."""
    label: str
    css_class: str
    max_score: int
    width: float


STRENGTH_TIERS = (
    StrengthTier("Very Weak", "very-weak", 20, 0.15),
    StrengthTier("Weak", "weak", 40, 0.30),
    StrengthTier("Fair", "fair", 60, 0.50),
    StrengthTier("Good", "good", 80, 0.70),
    StrengthTier("Strong", "strong", 95, 0.85),
    StrengthTier("Very Strong", "very-strong", 101, 1.0),
)


@dataclass(frozen=True)
class StrengthResult:
    """Outcome of a single evaluation.

    tier is None only for the empty password.
    """
    score: int
    tier: Optional[StrengthTier]
    criteria: dict[str, bool]
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return a JSON-serializable view of the result."""
        return {
            "score": self.score,
            "strength": self.tier.label if self.tier else "",
            "css_class": self.tier.css_class if self.tier else "",
            "width": self.tier.width if self.tier else 0.0,
            "criteria": dict(self.criteria),
            "suggestions": list(self.suggestions),
        }


def evaluate_criteria(password: str) -> dict[str, bool]:
    """Evaluate the six named criteria for a password.

    Args:
        password: Password to inspect (may be empty)

    Returns:
        Mapping of criterion name to whether it is satisfied
    """
    if not password:
        return {key: False for key in CRITERIA_KEYS}

    return {
        "length": len(password) >= MIN_LENGTH,
        "lowercase": bool(LOWERCASE_RE.search(password)),
        "uppercase": bool(UPPERCASE_RE.search(password)),
        "numbers": bool(DIGIT_RE.search(password)),
        "symbols": bool(SYMBOL_RE.search(password)),
        "no_common": password.lower() not in COMMON_PASSWORDS,
    }


def has_repeated_characters(password: str) -> bool:
    """True if any character appears three or more times in a row."""
    return REPEATED_CHAR_RE.search(password) is not None


def has_sequential_pattern(password: str) -> bool:
    """True if the password contains '123', 'abc' or 'qwe' in any case."""
    return SEQUENTIAL_RE.search(password) is not None


def calculate_score(password: str, criteria: dict[str, bool]) -> int:
    """Compute the 0-100 score for a password.

    Args:
        password: Password being scored
        criteria: Result of evaluate_criteria() for the same password

    Returns:
        Integer score clamped to [0, 100]
    """
    score = 10 * sum(1 for met in criteria.values() if met)

    # length bonuses stack
    if len(password) >= 10:
        score += 10
    if len(password) >= 15:
        score += 15

    unique_chars = len(set(password))
    if unique_chars >= 8:
        score += 5
    if unique_chars >= 12:
        score += 5

    if has_repeated_characters(password):
        score -= 10
    if has_sequential_pattern(password):
        score -= 15

    return max(0, min(100, score))


def select_tier(score: int) -> StrengthTier:
    """Return the first tier whose upper bound is strictly above score."""
    for tier in STRENGTH_TIERS:
        if score < tier.max_score:
            return tier
    return STRENGTH_TIERS[0]


def generate_suggestions(password: str, criteria: dict[str, bool]) -> list[str]:
    """Build the improvement checklist for a password.

    Each check fires independently, so related advice may appear twice
    (e.g. both length hints for a 6-character password).
    """
    suggestions = []

    if not criteria["length"]:
        suggestions.append("Use at least 8 characters")
    if not criteria["lowercase"]:
        suggestions.append("Add lowercase letters")
    if not criteria["uppercase"]:
        suggestions.append("Add uppercase letters")
    if not criteria["numbers"]:
        suggestions.append("Include numbers")
    if not criteria["symbols"]:
        suggestions.append("Add special characters (!@#$%...)")
    if not criteria["no_common"]:
        suggestions.append("Avoid common passwords")
    # threshold is 12 even though the message says 10+
    if len(password) < 12:
        suggestions.append("Consider using 10+ characters for better security")
    if has_repeated_characters(password):
        suggestions.append("Avoid repeating characters")
    if has_sequential_pattern(password):
        suggestions.append("Avoid sequential patterns")

    return suggestions


def check_password_strength(password: str) -> StrengthResult:
    """Score a password and explain the result.

    Args:
        password: Candidate password; the empty string is allowed

    Returns:
        StrengthResult with score, tier, criteria and suggestions. An empty
        password yields score 0, no tier, all criteria False and no
        suggestions.
    """
    criteria = evaluate_criteria(password)
    if not password:
        return StrengthResult(score=0, tier=None, criteria=criteria, suggestions=[])

    score = calculate_score(password, criteria)
    return StrengthResult(
        score=score,
        tier=select_tier(score),
        criteria=criteria,
        suggestions=generate_suggestions(password, criteria),
    )
