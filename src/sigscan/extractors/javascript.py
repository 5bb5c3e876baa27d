import re

from sigscan.extractors.base import BaseExtractor, Source, group_text, sort_signatures, unique_matches
from sigscan.models import ExtractedSignature
from sigscan.params import parameter_names

DECLARED_FUNCTION = re.compile(
    r"^[ \t]*(?:export\s+(?:default\s+)?)?(?:async\s+)?function\s+"
    r"(?P<name>[a-zA-Z_$][a-zA-Z0-9_$]*)\s*\((?P<params>[^)]*)\)",
    re.MULTILINE,
)

BOUND_FUNCTION = re.compile(
    r"^[ \t]*(?:export\s+)?(?:const|let|var)\s+(?P<name>[a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*"
    r"(?:async\s+)?(?:function\s*)?\((?P<params>[^)]*)\)\s*(?:=>)?",
    re.MULTILINE,
)

METHOD_SHORTHAND = re.compile(
    r"^[ \t]+(?:async\s+)?(?:static\s+)?(?:get\s+|set\s+)?"
    r"(?P<name>[a-zA-Z_$][a-zA-Z0-9_$]*)\s*\((?P<params>[^)]*)\)\s*\{",
    re.MULTILINE,
)

CLASS_PATTERN = re.compile(
    r"^[ \t]*(?:export\s+(?:default\s+)?)?class\s+(?P<name>[a-zA-Z_$][a-zA-Z0-9_$]*)",
    re.MULTILINE,
)

DENYLIST = frozenset({
    "if", "for", "while", "switch", "catch", "constructor", "return", "function", "with",
})


class JavascriptExtractor(BaseExtractor):
    """Extracts functions and classes from JavaScript and TypeScript source code.

    Method shorthand inside a class body is folded into the class record;
    only object-literal shorthand outside classes is reported on its own.
    """

    def extract(self, source_code: str) -> list[ExtractedSignature]:
        source = Source(source_code)
        signatures = []
        seen: set[int] = set()

        classes = [
            self.brace_class(source, match)
            for match in unique_matches([CLASS_PATTERN], source_code, seen)
        ]

        for match in unique_matches(
            [DECLARED_FUNCTION, BOUND_FUNCTION, METHOD_SHORTHAND], source_code, seen, DENYLIST
        ):
            if match.re is METHOD_SHORTHAND and self._in_class_body(source, match, classes):
                continue

            signatures.append(self.brace_function(
                source,
                match,
                parameters=parameter_names(group_text(match, "params")),
                is_async="async " in match.group(0),
            ))

        return sort_signatures(signatures + classes)

    @staticmethod
    def _in_class_body(source: Source, match: re.Match, classes: list[ExtractedSignature]) -> bool:
        line = source.line_of(match.start())
        return any(cls.line_start < line <= cls.line_end for cls in classes)
