import re

from sigscan.extractors.base import BaseExtractor, Source, group_text, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import parameter_names

METHOD_PATTERN = re.compile(
    r"^[ \t]*(?:(?:public|private|protected|internal|open|override|abstract|static|final|sealed"
    r"|async|virtual|extern|suspend)\s+)*(?:\w+(?:<[^>]*>)?[*& \t]+)*"
    r"(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)\s*\((?P<params>[^)]*)\)\s*(?:throws\s+\w+\s*)?(?:\{|=>)",
    re.MULTILINE,
)

# Statements that look like "word(...) {" in Java, Kotlin, C# or Scala
DENYLIST = frozenset({
    "if", "for", "while", "switch", "catch", "try", "else", "do",
    "synchronized", "using", "lock", "foreach", "fixed", "when", "return",
})

ASYNC_MARKERS = ("async ", "suspend ")


class JavaExtractor(BaseExtractor):
    """Extracts methods from Java, Kotlin, C# and Scala source code.

    Every match is reported as a method, including top-level Kotlin and
    Scala functions.
    """

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []

        for match in unique_matches([METHOD_PATTERN], source_code, set(), DENYLIST):
            span = match.group(0)
            signatures.append(self.brace_function(
                source,
                match,
                parameters=parameter_names(group_text(match, "params")),
                is_async=any(marker in span for marker in ASYNC_MARKERS),
                is_method=True,
            ))

        return sort_signatures(signatures)
