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

from gitgpt.core.data.changes import GitOperation
from gitgpt.core.prompts.assembler import PromptAssembler
from gitgpt.core.prompts.developer_type import DEFAULT_DEVELOPER_TYPE, developer_type


@pytest.fixture
def assembler():
    return PromptAssembler()


# -----------------------------------------------------------------------------
# Assembler
# -----------------------------------------------------------------------------


def test_file_messages_first_chunk(assembler):
    messages = assembler.file_messages(GitOperation.ADD, "src/app/main.py")

    assert len(messages) == 1
    assert "expert Python developer" in messages[0]
    assert "`main.py`" in messages[0]
    assert "src/app" not in messages[0]
    assert "was added" in messages[0]


def test_file_messages_removed(assembler):
    messages = assembler.file_messages(GitOperation.DEL, "old.rb")

    assert "was removed" in messages[0]
    assert "expert Ruby developer" in messages[0]


def test_file_messages_carry_previous_summary(assembler):
    messages = assembler.file_messages(
        GitOperation.ADD, "main.py", prev_summary="Parses arguments"
    )

    assert len(messages) == 2
    assert "Parses arguments" in messages[1]


def test_diff_messages(assembler):
    first = assembler.diff_messages("web/index.html")
    continued = assembler.diff_messages("web/index.html", prev_summary="Adds a form")

    assert len(first) == 1
    assert "diff" in first[0]
    assert "expert Frontend developer" in first[0]
    assert "`index.html`" in first[0]
    assert continued[0] == first[0]
    assert "Adds a form" in continued[1]


def test_changes_messages(assembler):
    messages = assembler.changes_messages()

    assert len(messages) == 1
    assert "commit message" in messages[0]


# -----------------------------------------------------------------------------
# Developer Type
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "file_name,expected",
    [
        ("main.py", "expert Python developer"),
        ("types.pyi", "expert Python developer"),
        ("App.JAVA", "expert Java developer"),
        ("src/lib.rs", "expert Rust developer"),
        ("build.kts", "expert Kotlin developer"),
        ("deploy.ps1", "expert Shell or batch scripts developer"),
        ("schema.sql", "expert SQL developer"),
        ("win\\path\\util.cpp", "expert C++ developer"),
    ],
)
def test_developer_type_by_extension(file_name, expected):
    assert developer_type(file_name) == expected


@pytest.mark.parametrize("file_name", ["README", "notes.txt", "Makefile", ".env"])
def test_developer_type_unknown(file_name):
    assert developer_type(file_name) == DEFAULT_DEVELOPER_TYPE
