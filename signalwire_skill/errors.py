from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification for error logging."""

    LOOKUP = "lookup"
    CONTENT = "content"
    CONFIG = "config"


class SkillError(Exception):
    """Base class for every error raised by this package."""

    category: ErrorCategory = ErrorCategory.CONTENT


class DocumentNotFound(SkillError, KeyError):
    category = ErrorCategory.LOOKUP

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"document not found: {self.name!r}"


class UnknownCategory(SkillError, ValueError):
    category = ErrorCategory.LOOKUP

    def __init__(self, value: str) -> None:
        super().__init__(f"unknown category: {value!r}")
        self.value = value


class DuplicateDocument(SkillError, ValueError):
    category = ErrorCategory.CONTENT

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate document name: {name!r}")
        self.name = name


class ContentError(SkillError):
    """The bundle on disk is missing or malformed."""

    category = ErrorCategory.CONTENT
