import re

from sigscan.boundaries import find_keyword_end
from sigscan.complexity import estimate_complexity
from sigscan.extractors.base import BaseExtractor, Source, group_text, name_of, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import split_params

DEF_PATTERN = re.compile(
    r"^[ \t]*def\s+(?:self\.)?(?P<name>[a-zA-Z_][a-zA-Z0-9_!?=]*)(?:\s*\((?P<params>[^)]*)\))?",
    re.MULTILINE,
)

CLASS_PATTERN = re.compile(
    r"^[ \t]*(?:class|module)\s+(?P<name>[A-Z][a-zA-Z0-9_]*)(?:\s*<\s*[A-Z][a-zA-Z0-9_:]*)?",
    re.MULTILINE,
)


class RubyExtractor(BaseExtractor):
    """Extracts methods, classes and modules from Ruby source code.

    `def self.name` is reported as a method; blocks are closed by counting
    keywords against `end`.
    """

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []
        seen: set[int] = set()

        for match in unique_matches([DEF_PATTERN], source_code, seen):
            line_start = source.line_of(match.start())
            line_end = max(find_keyword_end(source.lines, line_start), line_start)

            signatures.append(ExtractedSignature(
                name=name_of(match),
                line_start=line_start,
                line_end=line_end,
                parameters=split_params(group_text(match, "params")),
                is_method="self." in match.group(0),
                complexity=estimate_complexity(source.block(line_start, line_end)),
            ))

        for match in unique_matches([CLASS_PATTERN], source_code, seen):
            line_start = source.line_of(match.start())

            signatures.append(ExtractedSignature(
                name=name_of(match),
                line_start=line_start,
                line_end=max(find_keyword_end(source.lines, line_start), line_start),
                is_class=True,
            ))

        return sort_signatures(signatures)
