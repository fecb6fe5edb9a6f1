"""Discovery of Python source files to extract class dependencies from."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from fnmatch import fnmatch
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)

GitignoreMatcher = Callable[[str], bool]


@dataclass(frozen=True)
class _SourceFilter:
    root: Path
    gitignore_matches: GitignoreMatcher | None
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]

    def accepts(self, path: Path) -> bool:
        if not path.is_file() or path.is_symlink():
            return False

        relative = _relative_within(path, self.root)
        if relative is None:
            return False

        if self.gitignore_matches is not None and self.gitignore_matches(str(path)):
            return False

        if self.include_patterns and not any(
            fnmatch(relative, pattern) for pattern in self.include_patterns
        ):
            return False

        return not any(fnmatch(relative, pattern) for pattern in self.exclude_patterns)


def _relative_within(path: Path, root: Path) -> str | None:
    """Return ``path`` relative to ``root`` when it resolves inside it."""
    try:
        resolved = path.resolve().relative_to(root.resolve())
    except (OSError, ValueError):
        return None
    return resolved.as_posix()


def _gitignore_files(root: Path, *, nested: bool) -> list[Path]:
    candidates = [root / ".gitignore"]
    if nested:
        candidates.extend(root.rglob(".gitignore"))
    unique = {path for path in candidates if path.is_file() and not path.is_symlink()}
    return sorted(unique, key=lambda p: p.relative_to(root).as_posix())


def build_gitignore_matcher(
    root: Path,
    *,
    nested_gitignore: bool = False,
) -> GitignoreMatcher | None:
    """Combine the root (and optionally nested) .gitignore files into one matcher."""
    gitignore_paths = _gitignore_files(root, nested=nested_gitignore)
    if not gitignore_paths:
        return None

    if len(gitignore_paths) == 1:
        return cast("GitignoreMatcher", parse_gitignore(gitignore_paths[0]))

    matchers = [parse_gitignore(path) for path in gitignore_paths]

    def matches(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                # Path lies outside the directory this .gitignore governs.
                continue
        return False

    return matches


def find_python_files(
    directory: Path,
    *,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
) -> Iterator[Path]:
    """Find Python files under ``directory``, respecting .gitignore.

    Args:
        directory: Directory to search
        include_patterns: Optional fnmatch patterns; when given, a file must
            match one of them
        exclude_patterns: Optional fnmatch patterns; matching files are skipped
        nested_gitignore: Also honor .gitignore files below the root

    Yields:
        Python files sorted by relative path. Symlinks and files that resolve
        outside ``directory`` are skipped.
    """
    source_filter = _SourceFilter(
        root=directory,
        gitignore_matches=build_gitignore_matcher(
            directory, nested_gitignore=nested_gitignore
        ),
        include_patterns=tuple(include_patterns or ()),
        exclude_patterns=tuple(exclude_patterns or ()),
    )

    matched = [path for path in directory.rglob("*.py") if source_filter.accepts(path)]
    matched.sort(key=lambda p: p.relative_to(directory).as_posix())
    logger.debug("Found %d Python files under %s", len(matched), directory)

    yield from matched


__all__ = ["build_gitignore_matcher", "find_python_files"]
