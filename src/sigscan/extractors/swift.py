import re

from sigscan.extractors.base import BaseExtractor, Source, group_text, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import parameter_names

FUNC_PATTERN = re.compile(
    r"^[ \t]*(?:(?:public|private|internal|fileprivate|open|mutating|nonmutating|class|static"
    r"|override|final)\s+)*func\s+(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)\s*(?:<[^>]*>)?\s*"
    r"\((?P<params>[^)]*)\)\s*(?:async\s+)?(?:throws\s+)?",
    re.MULTILINE,
)

TYPE_PATTERN = re.compile(
    r"^[ \t]*(?:(?:public|private|internal|fileprivate|open|final)\s+)*"
    r"(?:class|struct|enum|protocol)\s+(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)",
    re.MULTILINE,
)

# "class func" and "class var" declare members, not types
TYPE_DENYLIST = frozenset({"func", "var", "let"})

METHOD_MARKERS = ("mutating ", "override ", "static ", "class func")


class SwiftExtractor(BaseExtractor):
    """Extracts functions and types (class, struct, enum, protocol) from Swift source code."""

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []
        seen: set[int] = set()

        for match in unique_matches([FUNC_PATTERN], source_code, seen):
            span = match.group(0)
            signatures.append(self.brace_function(
                source,
                match,
                parameters=parameter_names(group_text(match, "params")),
                is_async="async" in span,
                is_method=any(marker in span for marker in METHOD_MARKERS),
            ))

        for match in unique_matches([TYPE_PATTERN], source_code, seen, TYPE_DENYLIST):
            signatures.append(self.brace_class(source, match))

        return sort_signatures(signatures)
