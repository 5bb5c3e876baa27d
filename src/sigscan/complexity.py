"""Keyword-counting complexity proxy."""

from collections.abc import Iterable

# Counted as plain substrings, so tokens inside strings and comments score too.
BRANCH_TOKENS = (
    "if ",
    "else if",
    "elif ",
    " while ",
    " for ",
    " match ",
    "case ",
    " catch ",
    " except ",
    "&&",
    "||",
    "? ",
)


def estimate_complexity(lines: Iterable[str]) -> int:
    """Estimate cyclomatic complexity of a block of source lines.

    Starts at 1 and adds one per occurrence of each branch token on each
    line. Tokens are counted independently, so "else if " scores for both
    "else if" and "if ".

    Args:
        lines: Source lines making up the block

    Returns:
        Complexity score, always >= 1
    """
    complexity = 1
    for line in lines:
        for token in BRANCH_TOKENS:
            complexity += line.count(token)
    return complexity
