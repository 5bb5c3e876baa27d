import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from sigscan.boundaries import find_closing_brace
from sigscan.complexity import estimate_complexity
from sigscan.config import ExtractionConfig
from sigscan.linemap import LineMap, split_lines
from sigscan.models import ExtractedSignature

# A line holding nothing but whitespace, including its newline
BLANK_LINE = re.compile(r"\n[ \t]*\r?\n")


class Source:
    """Source text with its line list and offset index, shared by one extraction."""

    def __init__(self, source_code: str):
        self.text = source_code
        self.lines = split_lines(source_code)
        self.line_map = LineMap(source_code)

    def line_of(self, offset: int) -> int:
        return self.line_map.offset_to_line(offset)

    def block(self, line_start: int, line_end: int) -> list[str]:
        """Lines line_start..line_end inclusive (1-based)."""
        return self.lines[max(line_start - 1, 0):line_end]


def name_of(match: re.Match) -> str:
    """Captured name, or "?" when the capture is missing."""
    return match.group("name") or "?"


def group_text(match: re.Match, group: str) -> str:
    return match.group(group) or ""


def unique_matches(
    patterns: Iterable[re.Pattern],
    text: str,
    seen: set[int],
    denylist: frozenset[str] = frozenset(),
) -> Iterator[re.Match]:
    """Yield matches of each pattern in turn, skipping repeated start offsets.

    Matches whose name is in `denylist` are dropped. `seen` is updated in
    place, so it can be shared between calls for the same text.
    """
    for pattern in patterns:
        for match in pattern.finditer(text):
            start = match.start()
            if start in seen:
                continue
            seen.add(start)
            if match.group("name") in denylist:
                continue
            yield match


def sort_signatures(signatures: list[ExtractedSignature]) -> list[ExtractedSignature]:
    return sorted(signatures, key=lambda sig: sig.line_start)


class BaseExtractor(ABC):
    """Abstract base class for language-specific signature extractors."""

    def __init__(self, config: ExtractionConfig | None = None):
        self.config = config if config is not None else ExtractionConfig()

    @abstractmethod
    def extract(self, source_code: str) -> list[ExtractedSignature]:
        """Extract all function, method and class signatures from source code.

        Args:
            source_code: The full text of the file

        Returns:
            List of ExtractedSignature objects sorted by line_start
        """
        pass

    def brace_end(self, source: Source, line_start: int) -> int:
        line_end = find_closing_brace(source.lines, line_start, self.config.brace_scan_limit)
        return max(line_end, line_start)

    def brace_function(
        self,
        source: Source,
        match: re.Match,
        parameters: list[str],
        is_async: bool = False,
        is_method: bool = False,
        decorators: list[str] | None = None,
    ) -> ExtractedSignature:
        """Build a function record whose body is delimited by braces."""
        line_start = source.line_of(match.start())
        line_end = self.brace_end(source, line_start)

        return ExtractedSignature(
            name=name_of(match),
            line_start=line_start,
            line_end=line_end,
            parameters=parameters,
            is_async=is_async,
            is_method=is_method,
            decorators=decorators or [],
            complexity=estimate_complexity(source.block(line_start, line_end)),
        )

    def brace_class(self, source: Source, match: re.Match) -> ExtractedSignature:
        """Build a class record whose body is delimited by braces."""
        line_start = source.line_of(match.start())

        return ExtractedSignature(
            name=name_of(match),
            line_start=line_start,
            line_end=self.brace_end(source, line_start),
            is_class=True,
        )
