import logging
from pathlib import Path

from sigscan.config import ExtractionConfig, normalize_extension
from sigscan.extractors.base import BaseExtractor
from sigscan.extractors.cpp import CppExtractor
from sigscan.extractors.go import GoExtractor
from sigscan.extractors.java import JavaExtractor
from sigscan.extractors.javascript import JavascriptExtractor
from sigscan.extractors.nim import NimExtractor
from sigscan.extractors.php import PhpExtractor
from sigscan.extractors.python import PythonExtractor
from sigscan.extractors.ruby import RubyExtractor
from sigscan.extractors.rust import RustExtractor
from sigscan.extractors.swift import SwiftExtractor
from sigscan.models import ExtractedSignature

logger = logging.getLogger(__name__)

EXTRACTORS: dict[str, type[BaseExtractor]] = {
    ".rs": RustExtractor,
    ".py": PythonExtractor,
    ".pyw": PythonExtractor,
    ".pyi": PythonExtractor,
    ".js": JavascriptExtractor,
    ".mjs": JavascriptExtractor,
    ".cjs": JavascriptExtractor,
    ".ts": JavascriptExtractor,
    ".tsx": JavascriptExtractor,
    ".jsx": JavascriptExtractor,
    ".go": GoExtractor,
    ".c": CppExtractor,
    ".h": CppExtractor,
    ".cpp": CppExtractor,
    ".cc": CppExtractor,
    ".cxx": CppExtractor,
    ".hpp": CppExtractor,
    ".hxx": CppExtractor,
    ".java": JavaExtractor,
    ".kt": JavaExtractor,
    ".kts": JavaExtractor,
    ".cs": JavaExtractor,
    ".scala": JavaExtractor,
    ".php": PhpExtractor,
    ".php3": PhpExtractor,
    ".php4": PhpExtractor,
    ".php5": PhpExtractor,
    ".phtml": PhpExtractor,
    ".swift": SwiftExtractor,
    ".rb": RubyExtractor,
    ".rake": RubyExtractor,
    ".gemspec": RubyExtractor,
    ".nim": NimExtractor,
    ".nims": NimExtractor,
}

LANGUAGE_NAMES: dict[type[BaseExtractor], str] = {
    RustExtractor: "Rust",
    PythonExtractor: "Python",
    JavascriptExtractor: "JavaScript/TypeScript",
    GoExtractor: "Go",
    CppExtractor: "C/C++",
    JavaExtractor: "Java/Kotlin/C#/Scala",
    PhpExtractor: "PHP",
    SwiftExtractor: "Swift",
    RubyExtractor: "Ruby",
    NimExtractor: "Nim",
}


def supported_extensions() -> list[str]:
    return sorted(EXTRACTORS)


def get_extractor(extension: str, config: ExtractionConfig | None = None) -> BaseExtractor | None:
    """Get the extractor for a file extension.

    Args:
        extension: File extension, with or without the leading dot
        config: Extraction config (defaults used if None)

    Returns:
        Extractor instance, or None if the extension is not supported
    """
    extension = normalize_extension(extension)
    if config is not None:
        extension = config.extension_aliases.get(extension, extension)

    extractor_class = EXTRACTORS.get(extension)
    if extractor_class is None:
        return None

    return extractor_class(config)


def get_extractor_for_file(file_path: Path, config: ExtractionConfig | None = None) -> BaseExtractor | None:
    """Get the extractor for a file based on its suffix."""
    return get_extractor(file_path.suffix, config)


def extract_signatures(
    source_code: str,
    extension: str,
    config: ExtractionConfig | None = None,
) -> list[ExtractedSignature]:
    """Extract signatures from source text of the language named by `extension`.

    Unsupported extensions are not an error; they produce no signatures.

    Args:
        source_code: Full decoded text of the file
        extension: File extension, e.g. ".py"
        config: Extraction config (defaults used if None)

    Returns:
        Signatures sorted by line_start
    """
    extractor = get_extractor(extension, config)
    if extractor is None:
        logger.debug(f"No extractor for extension {extension!r}")
        return []

    return extractor.extract(source_code)
