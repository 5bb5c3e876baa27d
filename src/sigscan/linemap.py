"""Offset to line-number lookup and line splitting."""

from bisect import bisect_right


def split_lines(text: str) -> list[str]:
    """Split text into lines on "\\n" only.

    A trailing newline does not produce an extra empty line and a single
    trailing "\\r" is dropped from each line, so the result lines up with
    the numbering used by LineMap.

    Args:
        text: Full source text

    Returns:
        List of lines without their terminators
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LineMap:
    """Immutable index from character offsets to 1-based line numbers.

    Offsets are positions in a Python str, i.e. code points, so a lookup can
    never land in the middle of a multi-byte sequence.
    """

    __slots__ = ("_offsets",)

    def __init__(self, text: str):
        offsets = [0]
        start = text.find("\n")
        while start != -1:
            offsets.append(start + 1)
            start = text.find("\n", start + 1)
        self._offsets = tuple(offsets)

    def offset_to_line(self, offset: int) -> int:
        """Return the 1-based line containing `offset`."""
        return bisect_right(self._offsets, offset)
