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

from gitgpt.context import GlobalConfig
from gitgpt.core.config.config_loader import ConfigLoader
from gitgpt.core.exceptions import ConfigurationError

PREFIX = "GITGPT_"


@pytest.fixture
def clean_env(monkeypatch):
    import os

    for key in list(os.environ):
        if key.upper().startswith(PREFIX):
            monkeypatch.delenv(key)


# -----------------------------------------------------------------------------
# Sources
# -----------------------------------------------------------------------------


def test_load_toml_missing_file(tmp_path):
    assert ConfigLoader.load_toml(tmp_path / "missing.toml") == {}


def test_load_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('model = "gpt-4o"\nmax_tokens = 200\n')

    assert ConfigLoader.load_toml(path) == {"model": "gpt-4o", "max_tokens": 200}


def test_load_toml_invalid(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("model = \n")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        ConfigLoader.load_toml(path)


def test_load_env(clean_env, monkeypatch):
    monkeypatch.setenv("GITGPT_MODEL", "gpt-4")
    monkeypatch.setenv("GITGPT_MAX_CHUNK_SIZE", "2000")

    assert ConfigLoader.load_env(PREFIX) == {"model": "gpt-4", "max_chunk_size": "2000"}


# -----------------------------------------------------------------------------
# Build
# -----------------------------------------------------------------------------


def test_build_respects_priority():
    model, used, used_defaults, key_sources = ConfigLoader.build(
        GlobalConfig,
        [{"model": "first"}, {"model": "second", "max_tokens": 5}, {}],
    )

    assert model.model == "first"
    assert model.max_tokens == 5
    assert model.temperature == 0.4
    assert used == {0, 1}
    assert used_defaults is True
    assert key_sources == {"model": 0, "max_tokens": 1}


def test_build_coerces_strings():
    model, *_ = ConfigLoader.build(
        GlobalConfig,
        [{"temperature": "0.7", "stream": "true", "exclude_list": "*.min.js, dist/*"}],
    )

    assert model.temperature == 0.7
    assert model.stream is True
    assert model.exclude_list == ["*.min.js", "dist/*"]


@pytest.mark.parametrize(
    "data",
    [
        {"max_tokens": 0},
        {"temperature": 3},
        {"top_p": 0},
        {"max_chunk_size": -1},
        {"concurrency": 0},
        {"model": ""},
    ],
)
def test_build_rejects_invalid_values(data):
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        ConfigLoader.build(GlobalConfig, [data])


# -----------------------------------------------------------------------------
# Full Config
# -----------------------------------------------------------------------------


def test_get_full_config(tmp_path, clean_env, monkeypatch):
    local = tmp_path / "local.toml"
    local.write_text('model = "local-model"\nmax_tokens = 111\n')
    global_ = tmp_path / "global.toml"
    global_.write_text('model = "global-model"\ntop_p = 0.5\n')
    monkeypatch.setenv("GITGPT_MAX_TOKENS", "222")
    monkeypatch.setenv("GITGPT_TEMPERATURE", "0.1")

    config, used_names, used_defaults, key_sources = ConfigLoader.get_full_config(
        GlobalConfig,
        {"model": "cli-model"},
        local,
        PREFIX,
        global_,
    )

    assert config.model == "cli-model"
    assert config.max_tokens == 111
    assert config.temperature == 0.1
    assert config.top_p == 0.5
    assert used_names == [
        "Input Args",
        "Local Config",
        "Environment Variables",
        "Global Config",
    ]
    assert used_defaults is True
    assert key_sources["model"] == "Input Args"
    assert key_sources["temperature"] == "Environment Variables"


def test_custom_config_overrides_local(tmp_path, clean_env):
    local = tmp_path / "local.toml"
    local.write_text('model = "local-model"\n')
    custom = tmp_path / "custom.toml"
    custom.write_text('model = "custom-model"\n')

    config, used_names, _, key_sources = ConfigLoader.get_full_config(
        GlobalConfig, {}, local, PREFIX, tmp_path / "none.toml", custom
    )

    assert config.model == "custom-model"
    assert used_names == ["Custom Config"]
    assert key_sources == {"model": "Custom Config"}


def test_missing_custom_config(tmp_path, clean_env):
    with pytest.raises(ConfigurationError, match="Custom config file not found"):
        ConfigLoader.get_full_config(
            GlobalConfig,
            {},
            tmp_path / "local.toml",
            PREFIX,
            tmp_path / "global.toml",
            tmp_path / "custom.toml",
        )
