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

from dataclasses import asdict
from textwrap import shorten

import typer
from colorama import Fore, Style, init

from gitgpt.constants import ENV_APP_PREFIX, GLOBAL_CONFIG_FILE, LOCAL_CONFIG_FILE
from gitgpt.context import GlobalConfig
from gitgpt.core.exceptions import handle_gitgpt_exception

# Initialize colorama
init(autoreset=True)

SECRET_KEYS = {"api_key"}


def display_config(data: list[dict], max_value_length: int = 50) -> None:
    """
    Display config data in a two-line format:
    Key: Description
      Value (Source)
    """
    for item in data:
        value_display = shorten(
            str(item["Value"]), width=max_value_length, placeholder="..."
        )

        # Line 1: Key + Description
        print(
            f"{Fore.CYAN}{Style.BRIGHT}{item['Key']}{Style.RESET_ALL}: "
            f"{Fore.WHITE}{item['Description']}{Style.RESET_ALL}"
        )
        # Line 2: Value + Source (Indented)
        print(
            f"  {Fore.GREEN}{value_display}{Style.RESET_ALL} "
            f"{Fore.YELLOW}({item['Source']}){Style.RESET_ALL}"
        )
        print()


def mask_secret(value) -> str:
    if not value:
        return str(value)
    value = str(value)
    return value[:3] + "*" * max(0, len(value) - 3)


def config_rows(config: GlobalConfig, key_sources: dict[str, str]) -> list[dict]:
    rows = []
    for key, value in sorted(asdict(config).items()):
        if key in SECRET_KEYS:
            value = mask_secret(value)
        elif isinstance(value, list):
            value = ", ".join(value) or "[]"

        rows.append(
            {
                "Key": key,
                "Description": GlobalConfig.descriptions.get(
                    key, "No description available"
                ),
                "Value": value,
                "Source": key_sources.get(key, "Default"),
            }
        )
    return rows


def main(ctx: typer.Context) -> None:
    """
    Show the effective git-gpt configuration and where each value comes from.

    Priority order: program arguments > custom config > local config > environment variables > global config
    """
    # config is loaded here rather than in the global callback, so a broken
    # config can still be inspected
    from gitgpt.cli import load_global_config

    with handle_gitgpt_exception():
        parent_params = dict(ctx.parent.params) if ctx.parent is not None else {}
        custom_config = parent_params.pop("custom_config", None)
        input_args = {
            key: value
            for key, value in parent_params.items()
            if key in GlobalConfig.descriptions
        }

        config, used_sources, _, key_sources = load_global_config(
            custom_config, **input_args
        )

        print(f"{Fore.WHITE}{Style.BRIGHT}Effective configuration:{Style.RESET_ALL}\n")
        display_config(config_rows(config, key_sources))

        print(
            f"{Fore.WHITE}Sources used:{Style.RESET_ALL} "
            f"{', '.join(used_sources) if used_sources else 'defaults only'}"
        )
        print(f"{Fore.WHITE}Local config:{Style.RESET_ALL} {LOCAL_CONFIG_FILE.absolute()}")
        print(f"{Fore.WHITE}Global config:{Style.RESET_ALL} {GLOBAL_CONFIG_FILE}")
        print(f"{Fore.WHITE}Environment prefix:{Style.RESET_ALL} {ENV_APP_PREFIX}")
