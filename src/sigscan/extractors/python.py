import re

from sigscan.boundaries import find_indentation_end
from sigscan.complexity import estimate_complexity
from sigscan.extractors.base import BaseExtractor, Source, group_text, name_of, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import declaration_side, split_params, strip_punctuation

DEF_PATTERN = re.compile(
    r"^(?P<indent>[ \t]*)(?P<async>async\s+)?def\s+(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)"
    r"\s*\((?P<params>[^)]*)\)\s*(?:->[^:]+)?:",
    re.MULTILINE,
)

CLASS_PATTERN = re.compile(
    r"^(?P<indent>[ \t]*)class\s+(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)(?:\((?P<bases>[^)]*)\))?\s*:",
    re.MULTILINE,
)

DECORATOR_PATTERN = re.compile(r"^[ \t]*@([a-zA-Z_][a-zA-Z0-9_.]*)")

METHOD_RECEIVERS = ("self", "cls")

DOCSTRING_QUOTES = ('"""', "'''")


def collect_decorators(lines: list[str], line_start: int) -> list[str]:
    """Collect @decorators between a signature and the nearest blank line above it.

    Args:
        lines: File lines
        line_start: 1-based line of the signature

    Returns:
        Decorator names, top to bottom
    """
    decorators = []
    index = line_start - 2
    while index >= 0 and lines[index].strip():
        match = DECORATOR_PATTERN.match(lines[index])
        if match:
            decorators.append(match.group(1))
        index -= 1
    decorators.reverse()
    return decorators


def extract_docstring(body: list[str]) -> str | None:
    """Find a docstring among the first lines of a body.

    The first line starting with triple quotes wins. If the closing quotes
    are on the same line the text between them is used, otherwise the rest
    of the line after the opening quotes.
    """
    for line in body:
        stripped = line.strip()
        for quote in DOCSTRING_QUOTES:
            if stripped.startswith(quote):
                inner = stripped[3:]
                end = inner.find(quote)
                if end != -1:
                    return inner[:end].strip()
                return inner.strip()
    return None


def is_method_params(params: list[str]) -> bool:
    if not params:
        return False
    return strip_punctuation(declaration_side(params[0]).strip()) in METHOD_RECEIVERS


class PythonExtractor(BaseExtractor):
    """Extracts functions, methods and classes from Python source code."""

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []
        seen: set[int] = set()

        for match in unique_matches([DEF_PATTERN], source_code, seen):
            params = split_params(group_text(match, "params"))
            line_start, header_end, line_end = self._extent(source, match)

            signatures.append(ExtractedSignature(
                name=name_of(match),
                line_start=line_start,
                line_end=line_end,
                parameters=params,
                is_async=match.group("async") is not None,
                is_method=is_method_params(params),
                docstring=self._docstring(source, header_end, line_end),
                decorators=collect_decorators(source.lines, line_start),
                complexity=estimate_complexity(source.block(line_start, line_end)),
            ))

        for match in unique_matches([CLASS_PATTERN], source_code, seen):
            line_start, header_end, line_end = self._extent(source, match)

            signatures.append(ExtractedSignature(
                name=name_of(match),
                line_start=line_start,
                line_end=line_end,
                parameters=split_params(group_text(match, "bases")),
                is_class=True,
                docstring=self._docstring(source, header_end, line_end),
                decorators=collect_decorators(source.lines, line_start),
            ))

        return sort_signatures(signatures)

    def _extent(self, source: Source, match: re.Match) -> tuple[int, int, int]:
        """Return (line_start, header_end, line_end) for a def or class match."""
        line_start = source.line_of(match.start())
        header_end = source.line_of(match.end() - 1)
        indent = len(group_text(match, "indent"))
        line_end = find_indentation_end(source.lines, header_end, indent)
        return line_start, header_end, max(line_end, line_start)

    def _docstring(self, source: Source, header_end: int, line_end: int) -> str | None:
        window_end = min(header_end + self.config.docstring_scan_lines, line_end)
        return extract_docstring(source.block(header_end + 1, window_end))
