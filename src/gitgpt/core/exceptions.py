# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the git-gpt CLI application.

Every failure in the summarization pipeline surfaces as one of these
exceptions. None of them is recovered from inside the pipeline: they abort
the current file or batch and reach the command layer unchanged, where
handle_gitgpt_exception turns them into a user facing error and exit code.
"""

import contextlib

import typer
from loguru import logger


class GitGptError(Exception):
    """
    Base exception for all git-gpt errors.

    All git-gpt specific exceptions inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a GitGptError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class GitError(GitGptError):
    """
    Errors related to git operations.

    Raised when git commands fail or when git repository
    state is invalid for the requested operation.
    """

    pass


class NoStagedChangesError(GitError):
    """Raised when there is nothing staged to summarize."""

    pass


class ConfigurationError(GitGptError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid, missing,
    or contain incompatible settings.
    """

    pass


class TemplateRenderError(ConfigurationError):
    """Raised when a prompt template is unknown or has unresolved variables."""

    pass


class UnsupportedModelError(ConfigurationError):
    """Raised when no token counting rule or context limit exists for a model."""

    def __init__(self, model: str):
        super().__init__(
            f"Unsupported model: {model}",
            "No tokenizer rule or context window size is known for this model family",
        )
        self.model = model


class TooManyTokensError(GitGptError):
    """
    Raised before a request is sent when its prompt would not leave enough
    room in the context window for the reserved completion tokens.
    """

    def __init__(self, estimate: int, limit: int, reserved: int):
        super().__init__(
            f"Too many tokens used {estimate} ({limit})",
            f"Prompt needs {estimate} tokens but only {limit - reserved} of the "
            f"{limit} token context window are available after reserving "
            f"{reserved} completion tokens. Try a smaller max_chunk_size.",
        )
        self.estimate = estimate
        self.limit = limit
        self.reserved = reserved


class TransportError(GitGptError):
    """
    AI service related errors.

    Raised when completion API calls fail, time out, or return
    invalid responses.
    """

    pass


# Convenience functions for creating common errors
def not_git_repository(path: str = ".") -> GitError:
    """Create a GitError for when not in a git repository."""
    return GitError(
        f"Not a git repository: {path}",
        "Run 'git init' to initialize a git repository or navigate to an existing repository",
    )


def no_staged_changes() -> NoStagedChangesError:
    """Create a NoStagedChangesError with a hint on how to stage files."""
    return NoStagedChangesError(
        "No staged changes found",
        "Please add your staged changes using git add <files...>",
    )


@contextlib.contextmanager
def handle_gitgpt_exception(exit_on_fail: bool = True):
    """
    Log git-gpt errors in a user friendly way and exit with a non-zero code.

    Unknown exceptions are logged with their traceback before exiting.
    """
    try:
        yield
    except GitGptError as e:
        logger.error(e.message)
        if e.details:
            logger.info(e.details)
        if exit_on_fail:
            raise typer.Exit(1) from e
        raise
    except (typer.Exit, typer.Abort, KeyboardInterrupt):
        raise
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        if exit_on_fail:
            raise typer.Exit(1) from e
        raise
