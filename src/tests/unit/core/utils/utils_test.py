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

from gitgpt.core.utils.binary import is_binary_file
from gitgpt.core.utils.sanitize import sanitize_llm_text, unescape_commit_message


@pytest.mark.parametrize(
    "file_name", ["logo.png", "assets/Photo.JPG", "dist/app.exe", "font.woff2", "a.tar"]
)
def test_binary_extensions(file_name):
    assert is_binary_file(file_name)


@pytest.mark.parametrize("file_name", ["main.py", "README", "image.svg", "data.json"])
def test_text_extensions(file_name):
    assert not is_binary_file(file_name)


def test_sanitize_llm_text():
    assert sanitize_llm_text("  a\x00b \n") == "ab"
    assert sanitize_llm_text("") == ""
    assert sanitize_llm_text(None) == ""


def test_unescape_commit_message():
    assert unescape_commit_message("Fix &quot;quotes&quot; &amp; apostrophes&#39;\n") == (
        "Fix \"quotes\" & apostrophes'"
    )
