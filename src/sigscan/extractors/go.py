import re

from sigscan.extractors.base import BaseExtractor, Source, group_text, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import parameter_names

FUNC_PATTERN = re.compile(
    r"^func\s+(?:\([^)]+\)\s+)?(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)\s*\((?P<params>[^)]*)\)",
    re.MULTILINE,
)

RECEIVER_PATTERN = re.compile(r"^func\s+\([^)]+\)")


class GoExtractor(BaseExtractor):
    """Extracts functions and methods from Go source code.

    Parameters keep their type words ("id int" gives "id" and "int") since
    Go writes the name before the type.
    """

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []

        for match in unique_matches([FUNC_PATTERN], source_code, set()):
            signatures.append(self.brace_function(
                source,
                match,
                parameters=parameter_names(group_text(match, "params"), split_words=True),
                is_method=RECEIVER_PATTERN.match(match.group(0)) is not None,
            ))

        return sort_signatures(signatures)
