"""Extraction over explicit file paths with per-file failure isolation."""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from sigscan.config import ExtractionConfig
from sigscan.extractors import get_extractor_for_file
from sigscan.models import FileSignatures

logger = logging.getLogger(__name__)


def extract_file(file_path: Path, config: ExtractionConfig | None = None) -> FileSignatures:
    """Extract signatures from a single file.

    Files that cannot be read or decoded as UTF-8 are skipped with a
    warning and yield no signatures; unsupported file types yield none
    without reading the file.

    Args:
        file_path: File to read
        config: Extraction config (defaults used if None)

    Returns:
        FileSignatures for the file
    """
    result = FileSignatures(path=str(file_path))

    extractor = get_extractor_for_file(file_path, config)
    if extractor is None:
        return result

    try:
        source_code = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping {file_path}: {e}")
        return result

    result.signatures = extractor.extract(source_code)
    return result


def extract_files(
    file_paths: Iterable[Path],
    config: ExtractionConfig | None = None,
    max_workers: int | None = None,
) -> list[FileSignatures]:
    """Extract signatures from many files.

    Files are independent, so they are processed on a thread pool when
    `max_workers` is above 1. The result is ordered by path, and each
    file's signatures by line_start, whatever order the files finish in.

    Args:
        file_paths: Files to read
        config: Extraction config (defaults used if None)
        max_workers: Thread pool size; None or 1 runs sequentially

    Returns:
        One FileSignatures per input path, sorted by path
    """
    paths = [Path(p) for p in file_paths]

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(lambda p: extract_file(p, config), paths))
    else:
        results = [extract_file(p, config) for p in paths]

    for result in results:
        result.signatures.sort(key=lambda sig: sig.line_start)

    return sorted(results, key=lambda result: result.path)
