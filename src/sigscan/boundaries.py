"""Block boundary resolution: brace depth, indentation and keyword depth.

All resolvers take the file's lines (see `sigscan.linemap.split_lines`) and
1-based line numbers, and return the 1-based line on which the block ends.
"""

from enum import Enum

# Lines scanned past the signature before the brace scanner gives up.
BRACE_SCAN_LIMIT = 80

# A quote opens a char literal only if it closes within this many characters.
CHAR_LITERAL_WINDOW = 12

RUBY_OPENERS = (
    "def ",
    "class ",
    "module ",
    "if ",
    "unless ",
    "while ",
    "for ",
    "case ",
    "begin",
)


class StringState(Enum):
    """Literal the brace scanner is currently inside."""
    NONE = "none"
    DOUBLE_QUOTE = '"'
    BACKTICK = "`"
    CHAR_LITERAL = "'"


def _closes_char_literal(line: str, quote_index: int) -> bool:
    """Check whether the quote at `quote_index` is closed soon enough to be a char literal."""
    closing = line.find("'", quote_index + 1)
    return closing != -1 and closing - quote_index < CHAR_LITERAL_WINDOW


def find_closing_brace(lines: list[str], start_line: int, limit: int = BRACE_SCAN_LIMIT) -> int:
    """Find the line holding the brace that closes the block opened at `start_line`.

    Scans forward tracking {} depth. Braces inside double-quoted, backtick
    and short single-quoted literals are ignored, and "//" ends the line.
    String state is dropped at end of line unless the literal is a backtick
    literal or the line ends in an escape.

    Args:
        lines: File lines
        start_line: 1-based line of the signature
        limit: Lines to scan before falling back

    Returns:
        1-based line where depth returns to zero, or
        min(start_line + limit, len(lines)) if it never does.
    """
    depth = 0
    started = False
    state = StringState.NONE

    for index, line in enumerate(lines[max(start_line - 1, 0):]):
        escaped_eol = False
        i = 0
        length = len(line)

        while i < length:
            ch = line[i]

            if state is not StringState.NONE:
                if ch == "\\":
                    if i + 1 >= length:
                        escaped_eol = True
                    i += 2
                    continue
                if ch == state.value:
                    state = StringState.NONE
                i += 1
                continue

            if ch == '"':
                state = StringState.DOUBLE_QUOTE
            elif ch == "`":
                state = StringState.BACKTICK
            elif ch == "'":
                if _closes_char_literal(line, i):
                    state = StringState.CHAR_LITERAL
            elif ch == "/" and line.startswith("/", i + 1):
                break
            elif ch == "{":
                depth += 1
                started = True
            elif ch == "}":
                depth -= 1
                if started and depth <= 0:
                    return start_line + index
            i += 1

        if state is not StringState.NONE and state is not StringState.BACKTICK and not escaped_eol:
            state = StringState.NONE

    return min(start_line + limit, len(lines))


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def find_indentation_end(lines: list[str], header_end_line: int, base_indent: int) -> int:
    """Find the last line of an indentation-delimited block.

    Blank and "#" comment lines are skipped. The block ends just before the
    first line indented no deeper than the signature itself.

    Args:
        lines: File lines
        header_end_line: 1-based line on which the signature header ends
        base_indent: Leading whitespace width of the signature line

    Returns:
        1-based last line of the block (end of file if never dedented)
    """
    for offset, line in enumerate(lines[header_end_line:]):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if _indent_width(line) <= base_indent:
            return header_end_line + offset
    return len(lines)


def _opens_ruby_block(stripped: str) -> bool:
    return stripped.startswith(RUBY_OPENERS) or stripped.endswith(" do") or stripped == "do"


def _closes_ruby_block(stripped: str) -> bool:
    return stripped == "end" or stripped.startswith("end ") or stripped.endswith(" end")


def find_keyword_end(lines: list[str], start_line: int) -> int:
    """Find the "end" that closes a Ruby def/class/module.

    The signature line counts as the first opener whatever it starts with;
    later lines open and close blocks by keyword. Comment lines are skipped.

    Args:
        lines: File lines
        start_line: 1-based line of the signature

    Returns:
        1-based line where depth returns to zero, or the last line of the file
    """
    depth = 0
    for index, line in enumerate(lines[max(start_line - 1, 0):]):
        stripped = line.strip()
        if index == 0:
            depth += 1
        elif stripped.startswith("#"):
            continue
        elif _opens_ruby_block(stripped):
            depth += 1

        if _closes_ruby_block(stripped):
            depth -= 1
            if depth <= 0:
                return start_line + index
    return len(lines)
