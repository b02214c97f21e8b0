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

import os

import pytest
from typer.testing import CliRunner

from gitgpt.cli import app

runner = CliRunner()


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("GITGPT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "git-gpt version" in result.output


def test_config_shows_effective_values(isolated):
    (isolated / "gitgptconfig.toml").write_text(
        'model = "gpt-4o"\napi_key = "sk-secret-value"\n'
    )

    result = runner.invoke(app, ["--max-tokens", "123", "config"])

    assert result.exit_code == 0, result.output
    assert "gpt-4o" in result.output
    assert "Local Config" in result.output
    assert "123" in result.output
    assert "Input Args" in result.output
    assert "sk-secret-value" not in result.output


def test_invalid_config_exits_with_error(isolated):
    result = runner.invoke(app, ["--max-tokens", "0", "config"])

    assert result.exit_code == 1
