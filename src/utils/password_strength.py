import logging
from typing import Any, Callable, Dict, List, NamedTuple

logger = logging.getLogger(__name__)

WEAK = "weak"
MEDIUM = "medium"
STRONG = "strong"
VERY_STRONG = "very strong"

STRENGTH_LABELS = (WEAK, MEDIUM, STRONG, VERY_STRONG)

MIN_LENGTH = 8

SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{}|;:,.<>?")


def _has_char_between(password: str, low: str, high: str) -> bool:
    # ASCII ranges only, str.isupper() etc. would accept non-ASCII letters
    return any(low <= char <= high for char in password)


class Criterion(NamedTuple):
    name: str
    hint: str
    check: Callable[[str], bool]


CRITERIA = (
    Criterion("length", "Password is too short", lambda pw: len(pw) >= MIN_LENGTH),
    Criterion("uppercase", "Add an uppercase letter", lambda pw: _has_char_between(pw, "A", "Z")),
    Criterion("lowercase", "Add a lowercase letter", lambda pw: _has_char_between(pw, "a", "z")),
    Criterion("digit", "Add a number", lambda pw: _has_char_between(pw, "0", "9")),
    Criterion("special", "Add a special character", lambda pw: any(char in SPECIAL_CHARACTERS for char in pw)),
)


class PasswordReport(NamedTuple):
    score: int
    strength: str
    feedback: List[str]


def _is_checkable(password: Any) -> bool:
    if not isinstance(password, str):
        logger.debug("Rejected non-string password of type %s", type(password).__name__)
        return False
    return password != ""


def evaluate_criteria(password: Any) -> Dict[str, bool]:
    """
    Evaluate every criterion against the password.

    Args:
        password (Any): Candidate password, of any type.

    Returns:
        Dict[str, bool]: Criterion name mapped to whether it is satisfied.
            Non-string or empty input satisfies nothing.
    """
    if not _is_checkable(password):
        return {criterion.name: False for criterion in CRITERIA}
    return {criterion.name: criterion.check(password) for criterion in CRITERIA}


def score_password(password: Any) -> int:
    return sum(evaluate_criteria(password).values())


def strength_for_score(score: int) -> str:
    """Map a criteria count to its label. Out-of-range scores are clamped."""
    score = max(0, min(score, len(CRITERIA)))
    if score <= 1:
        return WEAK
    if score <= 3:
        return MEDIUM
    if score == 4:
        return STRONG
    return VERY_STRONG


def analyze_password(password: Any) -> PasswordReport:
    results = evaluate_criteria(password)
    score = sum(results.values())
    feedback = [criterion.hint for criterion in CRITERIA if not results[criterion.name]]
    return PasswordReport(score=score, strength=strength_for_score(score), feedback=feedback)


def check_password_strength(password: Any) -> str:
    """
    Classify a password as "weak", "medium", "strong" or "very strong".

    Never raises: non-string or empty input is "weak".

    Args:
        password (Any): Candidate password.

    Returns:
        str: One of STRENGTH_LABELS.
    """
    return analyze_password(password).strength
