"""Centralized exceptions for the docsmith application."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class DocsmithError(Exception):
    """Base exception for all docsmith errors."""


class MissingSourceError(DocsmithError):
    """Raised when the markdown source folder does not exist."""

    def __init__(self, source: Path) -> None:
        self.source = source
        super().__init__(f"{source} folder does not exist, unable to create website")


class NoTemplateError(DocsmithError):
    """Raised when no usable site template can be found."""


class MissingIndexError(DocsmithError):
    """Raised when the source folder has no entry document."""

    def __init__(self, source: Path) -> None:
        self.source = source
        super().__init__(f"index.md not found at {source} folder, it is needed to create the site")


class CleanError(DocsmithError):
    """Raised when the previous build output cannot be removed."""

    def __init__(self, destination: Path, reason: str) -> None:
        self.destination = destination
        self.reason = reason
        super().__init__(f"Error cleaning {destination} folder: {reason}")


class BuildError(DocsmithError):
    """Raised when a transform of the build pipeline fails."""

    def __init__(self, step: str, original_exception: Exception) -> None:
        self.step = step
        super().__init__(f"Build failed during '{step}': {original_exception}")
        self.__cause__ = original_exception


class PublishError(DocsmithError):
    """Raised when pushing the site to the pages branch fails."""


class PromptUnavailableError(DocsmithError):
    """Raised when a question needs an answer but no terminal is available."""

    def __init__(self, question: str) -> None:
        self.question = question
        super().__init__(f"Cannot ask '{question}' in a non-interactive session")


class ScaffoldError(DocsmithError):
    """Raised when the template's init files cannot be written into the source folder."""

    def __init__(self, source: Path, original_exception: Exception) -> None:
        self.source = source
        super().__init__(f"Failed to scaffold {source}: {original_exception}")
        self.__cause__ = original_exception
