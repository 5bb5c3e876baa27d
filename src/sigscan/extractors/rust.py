import re

from sigscan.extractors.base import BLANK_LINE, BaseExtractor, Source, group_text, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import parameter_names

FN_PATTERN = re.compile(
    r"^[ \t]*(?P<pub>pub(?:\([^)]+\))?\s+)?(?P<async>async\s+)?fn\s+"
    r"(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)(?:<[^>]*>)?\s*\((?P<params>[^)]*)\)",
    re.MULTILINE,
)

STRUCT_PATTERN = re.compile(
    r"^[ \t]*(?:pub(?:\([^)]+\))?\s+)?struct\s+(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)",
    re.MULTILINE,
)

TEST_ATTRIBUTES = ("#[test]", "#[tokio::test")


def is_inside_impl(text: str, offset: int) -> bool:
    """Check whether the nearest preceding "impl " is not cut off by a blank line.

    This is a text heuristic: a top-level fn written directly after an impl
    block with no blank line between them is reported as a method, and an
    impl method preceded by a blank line is not.
    """
    impl_pos = text.rfind("impl ", 0, offset)
    if impl_pos == -1:
        return False
    return BLANK_LINE.search(text, impl_pos, offset) is None


def has_test_attribute(lines: list[str], line_start: int) -> bool:
    """Check the attribute lines directly above `line_start` for a test marker."""
    index = line_start - 2
    while index >= 0:
        stripped = lines[index].strip()
        if not stripped.startswith("#["):
            return False
        if stripped.startswith(TEST_ATTRIBUTES):
            return True
        index -= 1
    return False


class RustExtractor(BaseExtractor):
    """Extracts fns and structs from Rust source code."""

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []
        seen: set[int] = set()

        for match in unique_matches([FN_PATTERN], source_code, seen):
            line_start = source.line_of(match.start())
            if self.config.skip_test_functions and has_test_attribute(source.lines, line_start):
                continue

            signatures.append(self.brace_function(
                source,
                match,
                parameters=parameter_names(group_text(match, "params")),
                is_async=match.group("async") is not None,
                is_method=is_inside_impl(source_code, match.start()),
                decorators=["pub"] if match.group("pub") else [],
            ))

        for match in unique_matches([STRUCT_PATTERN], source_code, seen):
            signatures.append(self.brace_class(source, match))

        return sort_signatures(signatures)
