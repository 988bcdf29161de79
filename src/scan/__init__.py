"""Source file discovery."""

from scan.files import find_ruby_files

__all__ = ["find_ruby_files"]
