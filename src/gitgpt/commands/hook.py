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

from pathlib import Path

import typer
from colorama import Fore, Style
from loguru import logger

from gitgpt.constants import HOOK_FILE_NAME, HOOK_TEMPLATE
from gitgpt.context import GlobalContext
from gitgpt.core.exceptions import GitError, handle_gitgpt_exception

app = typer.Typer(help="Manage the prepare-commit-msg hook", add_completion=False)


def install_hook(global_context: GlobalContext) -> Path:
    hooks_dir = global_context.git_commands.hooks_dir()
    hook_path = hooks_dir / HOOK_FILE_NAME

    if hook_path.exists():
        raise GitError(
            f"Hook already exists: {hook_path}",
            "Remove it first with 'git-gpt hook uninstall'",
        )

    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(HOOK_TEMPLATE, encoding="utf-8")
    hook_path.chmod(0o755)

    logger.debug(f"Wrote hook to {hook_path}")
    return hook_path


def uninstall_hook(global_context: GlobalContext) -> Path:
    hook_path = global_context.git_commands.hooks_dir() / HOOK_FILE_NAME

    if not hook_path.exists():
        raise GitError(f"Hook does not exist: {hook_path}")

    hook_path.unlink()

    logger.debug(f"Removed hook {hook_path}")
    return hook_path


@app.command("install")
def install(ctx: typer.Context) -> None:
    """Install the prepare-commit-msg hook in the current repository."""
    with handle_gitgpt_exception():
        hook_path = install_hook(ctx.obj)
        print(f"{Fore.GREEN}Installed hook {hook_path}{Style.RESET_ALL}")


@app.command("uninstall")
def uninstall(ctx: typer.Context) -> None:
    """Remove the prepare-commit-msg hook from the current repository."""
    with handle_gitgpt_exception():
        hook_path = uninstall_hook(ctx.obj)
        print(f"{Fore.GREEN}Removed hook {hook_path}{Style.RESET_ALL}")
