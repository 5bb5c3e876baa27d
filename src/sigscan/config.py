"""Configuration management for sigscan extraction."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from sigscan.boundaries import BRACE_SCAN_LIMIT

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".sigscan"


@dataclass
class ExtractionConfig:
    """Configuration for signature extraction.

    Attributes:
        brace_scan_limit: Lines the brace scanner reads past a signature
            before giving up and using that bound as the block end.
        docstring_scan_lines: Body lines searched for a Python docstring.
        skip_test_functions: Skip Rust functions annotated #[test] or
            #[tokio::test].
        extension_aliases: Extra extensions mapped onto a supported one,
            e.g. {".es6": ".js"}.
    """
    brace_scan_limit: int = BRACE_SCAN_LIMIT
    docstring_scan_lines: int = 5
    skip_test_functions: bool = True
    extension_aliases: dict[str, str] = field(default_factory=dict)


def normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    return extension


def _positive_int(value, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def load_extraction_config(project_root: Path | None = None) -> ExtractionConfig:
    """Load extraction configuration from a .sigscan file in the project root.

    Args:
        project_root: Directory holding the .sigscan file. If None, uses
            current directory.

    Returns:
        ExtractionConfig object with loaded or default values.

    Notes:
        If the file doesn't exist or can't be parsed, returns default config.
        Fields with the wrong type fall back to their defaults.
        Expected YAML structure:

        ```yaml
        extraction:
          brace_scan_limit: 80
          docstring_scan_lines: 5
          skip_test_functions: true
          extension_aliases:
            .es6: .js
        ```
    """
    if project_root is None:
        project_root = Path.cwd()

    config_path = project_root / CONFIG_FILENAME

    if not config_path.exists():
        return ExtractionConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {config_path} ({e}), using default extraction config")
        return ExtractionConfig()

    if not isinstance(data, dict):
        return ExtractionConfig()

    section = data.get("extraction", {})
    if not isinstance(section, dict):
        return ExtractionConfig()

    defaults = ExtractionConfig()

    skip_tests = section.get("skip_test_functions", defaults.skip_test_functions)
    if not isinstance(skip_tests, bool):
        skip_tests = defaults.skip_test_functions

    aliases = {}
    raw_aliases = section.get("extension_aliases", {})
    if isinstance(raw_aliases, dict):
        for alias, target in raw_aliases.items():
            if isinstance(alias, str) and isinstance(target, str):
                aliases[normalize_extension(alias)] = normalize_extension(target)

    return ExtractionConfig(
        brace_scan_limit=_positive_int(
            section.get("brace_scan_limit"), defaults.brace_scan_limit
        ),
        docstring_scan_lines=_positive_int(
            section.get("docstring_scan_lines"), defaults.docstring_scan_lines
        ),
        skip_test_functions=skip_tests,
        extension_aliases=aliases,
    )
