"""Ordered pass/fail judgments produced by the format validators."""

from typing import Any, NamedTuple


class CheckResult(NamedTuple):
    """Outcome of a single structural check."""

    passed: bool
    message: str


# Ordered by check sequence; callers map positions to structural properties.
ValidationResult = tuple[CheckResult, ...]


def record(
    outcome: Any,
    results: ValidationResult = (),
    pass_message: str = "",
    fail_message: str | None = None,
) -> ValidationResult:
    """Append one judgment to ``results``.

    Args:
        outcome: Check outcome, evaluated for truthiness.
        results: Judgments recorded so far. Not modified.
        pass_message: Message recorded on success, and on failure when no
            ``fail_message`` is given.
        fail_message: Message recorded on failure.

    Returns:
        A new tuple with the judgment appended.
    """
    if outcome:
        return (*results, CheckResult(True, pass_message))
    message = fail_message if fail_message is not None else pass_message
    return (*results, CheckResult(False, message))


def summarize(results: ValidationResult) -> tuple[int, int]:
    """Return ``(passes, failures)`` counts."""
    passes = sum(1 for result in results if result.passed)
    return passes, len(results) - passes
