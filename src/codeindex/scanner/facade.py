import os
from pathlib import Path
from typing import Dict, Iterator, List, Optional, TYPE_CHECKING

import pathspec

from codeindex.logging_config import logger
from codeindex.schemas import ElementSpec, ReindexReport
from codeindex.tracing import trace
from .config import DEFAULT_IGNORE_PATTERNS, LANGUAGE_BY_SUFFIX, SCANNER_CONFIG
from .extractor import extract_elements

if TYPE_CHECKING:
    from codeindex.code_index import CodeIndex


def _load_ignore_spec(directory: Path, respect_gitignore: bool) -> pathspec.PathSpec:
    all_patterns: List[str] = []
    if respect_gitignore:
        all_patterns.extend(DEFAULT_IGNORE_PATTERNS)
        gitignore_path = directory / ".gitignore"
        if gitignore_path.is_file():
            try:
                gitignore_patterns = gitignore_path.read_text(encoding="utf-8", errors="ignore").splitlines()
                all_patterns.extend(gitignore_patterns)
                logger.debug(f"Loaded {len(gitignore_patterns)} patterns from '{gitignore_path}'")
            except OSError as e:
                logger.warning(f"Could not read .gitignore file at '{gitignore_path}'. Error: {e}")

    return pathspec.PathSpec.from_lines("gitwildmatch", all_patterns)


def walk_sources(
    directory: Path,
    extensions: Optional[List[str]] = None,
    respect_gitignore: bool = True,
    max_bytes: Optional[int] = None,
) -> Iterator[Path]:
    """
    Yield source files under a directory, relative to it.

    Args:
        directory: The root directory to walk
        extensions: File suffixes to include (default from SCANNER_CONFIG)
        respect_gitignore: Apply default ignore patterns and the root .gitignore
        max_bytes: Skip files larger than this (default from SCANNER_CONFIG)

    Yields:
        Paths relative to directory, in sorted order per directory
    """
    directory = Path(directory)
    allowed_extensions = set(extensions if extensions is not None else SCANNER_CONFIG["extensions"])
    if max_bytes is None:
        max_bytes = SCANNER_CONFIG["max_bytes"]
    spec = _load_ignore_spec(directory, respect_gitignore)

    for root, dirs, files in os.walk(directory):
        root_path = Path(root)

        # Prune ignored directories in place so os.walk does not descend into them
        kept_dirs = []
        for d in sorted(dirs):
            dir_path_to_check = (root_path.relative_to(directory) / d).as_posix() + "/"
            if spec.match_file(dir_path_to_check):
                logger.debug(f"Ignoring directory '{dir_path_to_check}' due to ignore rules.")
            else:
                kept_dirs.append(d)
        dirs[:] = kept_dirs

        for file_name in sorted(files):
            file_path = root_path / file_name
            relative_path = file_path.relative_to(directory)

            if spec.match_file(relative_path.as_posix()):
                continue
            if file_path.suffix not in allowed_extensions:
                continue

            try:
                size = file_path.stat().st_size
            except OSError as e:
                logger.warning(f"Could not stat '{relative_path}': {e}")
                continue
            if max_bytes is not None and size > max_bytes:
                logger.debug(f"Skipping '{relative_path}' due to size filter ({size} > {max_bytes})")
                continue

            yield relative_path


def collect_elements(
    directory: Path,
    extensions: Optional[List[str]] = None,
    respect_gitignore: bool = True,
    max_bytes: Optional[int] = None,
) -> Dict[str, List[ElementSpec]]:
    """
    Extract the elements of every source file under a directory.

    Returns:
        Mapping of POSIX relative path -> extracted elements
    """
    directory = Path(directory)
    collected: Dict[str, List[ElementSpec]] = {}

    for relative_path in walk_sources(directory, extensions, respect_gitignore, max_bytes):
        try:
            content = (directory / relative_path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Could not read '{relative_path}': {e}")
            continue

        language = LANGUAGE_BY_SUFFIX.get(relative_path.suffix)
        collected[relative_path.as_posix()] = extract_elements(content, language)

    logger.info(f"Collected elements from {len(collected)} files under '{directory}'")
    return collected


@trace
def index_project(
    index: "CodeIndex",
    directory: Path,
    extensions: Optional[List[str]] = None,
    respect_gitignore: bool = True,
    max_bytes: Optional[int] = None,
) -> ReindexReport:
    """
    Run a reindex pass of a project directory into an index.

    Unchanged files are skipped by content hash; files that disappeared
    since the previous pass are removed from the index.
    """
    files = collect_elements(directory, extensions, respect_gitignore, max_bytes)
    return index.sync(files)
