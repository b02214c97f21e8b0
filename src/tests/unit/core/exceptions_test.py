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

import pytest
import typer

from gitgpt.core.exceptions import (
    ConfigurationError,
    GitError,
    GitGptError,
    NoStagedChangesError,
    TooManyTokensError,
    UnsupportedModelError,
    handle_gitgpt_exception,
    no_staged_changes,
    not_git_repository,
)


def test_hierarchy():
    assert issubclass(NoStagedChangesError, GitError)
    assert issubclass(UnsupportedModelError, ConfigurationError)
    assert issubclass(TooManyTokensError, GitGptError)


def test_too_many_tokens_message():
    error = TooManyTokensError(5000, 4096, 300)

    assert str(error) == "Too many tokens used 5000 (4096)"
    assert "3796" in error.details


def test_helpers():
    assert isinstance(no_staged_changes(), NoStagedChangesError)
    assert "git add" in no_staged_changes().details
    assert not_git_repository("/tmp/x").message == "Not a git repository: /tmp/x"


def test_gitgpt_errors_exit_with_code_one():
    with pytest.raises(typer.Exit) as exc_info:
        with handle_gitgpt_exception():
            raise GitError("broken")

    assert exc_info.value.exit_code == 1


def test_unexpected_errors_exit_with_code_one():
    with pytest.raises(typer.Exit) as exc_info:
        with handle_gitgpt_exception():
            raise RuntimeError("unexpected")

    assert exc_info.value.exit_code == 1


def test_errors_are_reraised_without_exit():
    with pytest.raises(ConfigurationError):
        with handle_gitgpt_exception(exit_on_fail=False):
            raise ConfigurationError("bad config")


def test_exit_passes_through():
    with pytest.raises(typer.Exit) as exc_info:
        with handle_gitgpt_exception():
            raise typer.Exit(130)

    assert exc_info.value.exit_code == 130
