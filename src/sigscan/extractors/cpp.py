import re

from sigscan.extractors.base import BaseExtractor, Source, group_text, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import parameter_names

# Return type words and the name must be followed by a parameter list and an
# opening brace; preprocessor and // comment lines never match.
FUNCTION_PATTERN = re.compile(
    r"^(?![ \t]*#)(?![ \t]*//)[ \t]*(?:(?:static|inline|virtual|explicit)\s+)?"
    r"(?:\w+[\s*&]+)+(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)\s*\((?P<params>[^)]*)\)"
    r"\s*(?:const\s*)?(?:noexcept\s*)?(?:override\s*)?\{",
    re.MULTILINE,
)

DENYLIST = frozenset({"if", "for", "while", "switch", "do", "return"})


class CppExtractor(BaseExtractor):
    """Extracts function definitions from C and C++ source code."""

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = [
            self.brace_function(source, match, parameters=parameter_names(group_text(match, "params")))
            for match in unique_matches([FUNCTION_PATTERN], source_code, set(), DENYLIST)
        ]
        return sort_signatures(signatures)
