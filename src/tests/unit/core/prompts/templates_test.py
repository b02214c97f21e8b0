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

from gitgpt.core.exceptions import ConfigurationError, TemplateRenderError
from gitgpt.core.prompts.templates import (
    PREV_CHUNK_SUMMARY,
    SUMMARIZE_CHANGES,
    SUMMARIZE_DIFF,
    SUMMARIZE_FILE,
    TEMPLATES,
    render_template,
)

VARIABLES = {
    SUMMARIZE_FILE: {"dev_type": "expert Go developer", "file": "main.go", "operation": "added"},
    SUMMARIZE_DIFF: {"dev_type": "expert Go developer", "file": "main.go"},
    PREV_CHUNK_SUMMARY: {"prev_chunk_summary": "Sets up the server"},
    SUMMARIZE_CHANGES: {},
}


def test_every_template_has_test_variables():
    assert set(VARIABLES) == set(TEMPLATES)


@pytest.mark.parametrize("name", sorted(VARIABLES))
def test_render_leaves_no_placeholders(name):
    rendered = render_template(name, **VARIABLES[name])

    assert rendered
    assert rendered == rendered.strip()
    assert "{" not in rendered and "}" not in rendered


def test_render_substitutes_variables():
    rendered = render_template(SUMMARIZE_FILE, **VARIABLES[SUMMARIZE_FILE])

    assert "expert Go developer" in rendered
    assert "`main.go`" in rendered
    assert "was added" in rendered


def test_missing_variable_is_an_error():
    with pytest.raises(TemplateRenderError, match="prev_chunk_summary"):
        render_template(PREV_CHUNK_SUMMARY)


def test_unknown_template_is_an_error():
    with pytest.raises(TemplateRenderError) as exc_info:
        render_template("summarize-everything")

    assert isinstance(exc_info.value, ConfigurationError)
    assert SUMMARIZE_CHANGES in exc_info.value.details
