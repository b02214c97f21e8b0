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

import inspect
import sys
from pathlib import Path

import typer
from colorama import init
from dotenv import load_dotenv
from loguru import logger

from gitgpt.commands import commit, config, hook
from gitgpt.constants import (
    APP_NAME,
    CLI_NAME,
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from gitgpt.context import GlobalConfig, GlobalContext
from gitgpt.core.config.config_loader import ConfigLoader
from gitgpt.core.exceptions import handle_gitgpt_exception, not_git_repository
from gitgpt.core.logging.logging import setup_logger
from gitgpt.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

# Initialize colorama (colored output in terminal)
init(autoreset=True)

# main cli app
app = typer.Typer(
    help=f"{APP_NAME}: Commit messages written from your staged changes",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

# Main cli commands
app.command(name="commit")(commit.main)
app.command(name="config")(config.main)
app.add_typer(hook.app, name="hook")

# the config command loads configuration itself, so a broken config can still be shown
no_context_commands = {"config"}


def load_global_config(custom_config_path: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {key: item for key, item in input_args.items() if item is not None}

    return ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        LOCAL_CONFIG_FILE,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        custom_config_path=Path(custom_config_path)
        if custom_config_path is not None
        else None,
    )


def create_global_callback():
    """
    Dynamically creates the main callback function with GlobalConfig parameters.
    This allows the CLI arguments to be automatically synced with GlobalConfig fields.
    """
    cli_params = GlobalConfig.get_cli_params()

    def callback(
        ctx: typer.Context,
        version: bool = typer.Option(
            False,
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
        log_path: bool = typer.Option(
            False,
            "--log-dir",
            "-LD",
            callback=get_log_dir_callback,
            is_eager=True,
            help=f"Show log path (where logs for {CLI_NAME} live) and exit",
        ),
        repo_path: str = typer.Option(
            ".",
            "--repo",
            help="Path to the git repository to operate on.",
        ),
        custom_config: str | None = typer.Option(
            None,
            "--custom-config",
            help="Path to a custom config file",
        ),
        **kwargs,  # Dynamic GlobalConfig params injected here
    ) -> None:
        """
        Global setup callback. Initialize global context/config used by commands
        """
        with handle_gitgpt_exception(exit_on_fail=True):
            if ctx.invoked_subcommand is None:
                print(ctx.get_help())
                raise typer.Exit()

            # skip --help in subcommands
            if any(arg in ctx.help_option_names for arg in sys.argv):
                return

            if ctx.invoked_subcommand in no_context_commands:
                return

            config, used_config_sources, _, _ = load_global_config(
                custom_config,
                **kwargs,
            )

            setup_logger(
                ctx.invoked_subcommand, debug=config.verbose, silent=config.silent
            )

            logger.debug(f"Used {used_config_sources} to build global context.")
            global_context = GlobalContext.from_global_config(config, Path(repo_path))

            # fail immediately if we arent in a valid git repo as we expect one
            if not global_context.git_commands.is_git_repo():
                raise not_git_repository(repo_path)

            setup_signal_handlers()

            ctx.obj = global_context

    # Dynamically add GlobalConfig parameters to function signature
    # This is necessary for typer to recognize them
    sig = inspect.signature(callback)
    params = [p for p in sig.parameters.values() if p.name != "kwargs"]
    for param_name, (param_type, param_default) in cli_params.items():
        params.append(
            inspect.Parameter(
                param_name,
                inspect.Parameter.KEYWORD_ONLY,
                default=param_default,
                annotation=param_type,
            )
        )

    callback.__signature__ = sig.replace(parameters=params)
    return callback


# Register the dynamically created callback
main = create_global_callback()
app.callback(invoke_without_command=True)(main)


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8
    ensure_utf8_output()
    # load any .env files (config values possibly set through env)
    load_dotenv()
    # launch cli
    app(prog_name=CLI_NAME)


if __name__ == "__main__":
    run_app()
