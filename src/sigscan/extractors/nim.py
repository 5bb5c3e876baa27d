import re

from sigscan.boundaries import find_indentation_end
from sigscan.complexity import estimate_complexity
from sigscan.extractors.base import BaseExtractor, Source, group_text, name_of, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import split_params

ROUTINE_PATTERN = re.compile(
    r"^(?P<indent>[ \t]*)(?P<keyword>proc|func|method|iterator|macro|template)\s+"
    r"(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)\s*(?P<export>\*)?\s*(?:\[[^\]]*\])?\s*\((?P<params>[^)]*)\)"
    r"(?:[^=\n{]*(?P<pragmas>\{\.[^}\n]*\}))?",
    re.MULTILINE,
)

# Nim's export marker is reported as a decorator
EXPORT_DECORATOR = "public(*)"


class NimExtractor(BaseExtractor):
    """Extracts procs, funcs, methods, iterators, macros and templates from Nim source code."""

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []

        for match in unique_matches([ROUTINE_PATTERN], source_code, set()):
            line_start = source.line_of(match.start())
            header_end = source.line_of(match.end() - 1)
            indent = len(group_text(match, "indent"))
            line_end = max(find_indentation_end(source.lines, header_end, indent), line_start)

            signatures.append(ExtractedSignature(
                name=name_of(match),
                line_start=line_start,
                line_end=line_end,
                parameters=split_params(group_text(match, "params")),
                is_async="async" in group_text(match, "pragmas"),
                is_method=match.group("keyword") == "method",
                decorators=[EXPORT_DECORATOR] if match.group("export") else [],
                complexity=estimate_complexity(source.block(line_start, line_end)),
            ))

        return sort_signatures(signatures)
