import re

from sigscan.extractors.base import BaseExtractor, Source, group_text, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import parameter_names

FUNCTION_PATTERN = re.compile(
    r"^[ \t]*(?:(?:public|private|protected|static|final|abstract)\s+)*function\s+"
    r"(?P<name>[a-zA-Z_\x7f-\xff][a-zA-Z0-9_\x7f-\xff]*)\s*\((?P<params>[^)]*)\)",
    re.MULTILINE,
)

CLASS_PATTERN = re.compile(
    r"^[ \t]*(?:(?:abstract|final)\s+)?(?:class|interface|trait)\s+"
    r"(?P<name>[a-zA-Z_\x7f-\xff][a-zA-Z0-9_\x7f-\xff]*)",
    re.MULTILINE,
)

VISIBILITY_KEYWORDS = ("public", "private", "protected")


class PhpExtractor(BaseExtractor):
    """Extracts functions, methods, classes, interfaces and traits from PHP source code."""

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []
        seen: set[int] = set()

        for match in unique_matches([FUNCTION_PATTERN], source_code, seen):
            span = match.group(0)
            signatures.append(self.brace_function(
                source,
                match,
                parameters=parameter_names(group_text(match, "params")),
                is_method=any(keyword in span for keyword in VISIBILITY_KEYWORDS),
            ))

        for match in unique_matches([CLASS_PATTERN], source_code, seen):
            signatures.append(self.brace_class(source, match))

        return sort_signatures(signatures)
