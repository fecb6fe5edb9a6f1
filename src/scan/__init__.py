"""Source file discovery."""

from scan.files import build_gitignore_matcher, find_python_files

__all__ = ["build_gitignore_matcher", "find_python_files"]
