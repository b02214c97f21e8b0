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

from gitgpt.constants import COMMIT_MESSAGE_FILE
from gitgpt.context import CommitContext, GlobalContext
from gitgpt.core.exceptions import handle_gitgpt_exception, no_staged_changes
from gitgpt.core.utils.binary import is_binary_file
from gitgpt.core.utils.sanitize import unescape_commit_message
from gitgpt.pipelines.commit_pipeline import CommitPipeline, PipelineResult

BANNER = "=" * 50


def generate_message(global_context: GlobalContext) -> PipelineResult:
    """Summarize the staged changes of the repository into a commit message."""
    git_commands = global_context.git_commands
    config = global_context.config

    if not git_commands.staged_file_names():
        raise no_staged_changes()

    changes = git_commands.staged_changes()
    if changes.is_empty():
        raise no_staged_changes()

    binary = git_commands.binary_files()
    logger.debug(
        "Staged changes: added={a} removed={r} modified={m} binary={b}",
        a=len(changes.added),
        r=len(changes.removed),
        m=len(changes.modified),
        b=len(binary),
    )

    pipeline = CommitPipeline.create(
        config.completion_params(),
        global_context.create_transport(),
        git_commands,
        lambda path: is_binary_file(path) or path in binary,
        config.max_chunk_size,
        config.concurrency,
    )

    return pipeline.run(changes)


def print_result(result: PipelineResult, message: str) -> None:
    print(f"{Fore.WHITE}{Style.BRIGHT}{BANNER}{Style.RESET_ALL}")
    print(message)
    print(f"{Fore.WHITE}{Style.BRIGHT}{BANNER}{Style.RESET_ALL}")
    print(f"{Fore.CYAN}{result.stats}{Style.RESET_ALL}")


def run_commit(global_context: GlobalContext, commit_context: CommitContext) -> str:
    result = generate_message(global_context)
    message = unescape_commit_message(result.message)

    print_result(result, message)

    output_file = commit_context.output_file
    if output_file is None:
        output_file = global_context.git_commands.git_dir() / COMMIT_MESSAGE_FILE

    output_file.write_text(message, encoding="utf-8")
    logger.debug(f"Commit message written to {output_file}")

    if commit_context.preview:
        logger.info(
            f"{Fore.YELLOW}Preview only, nothing was committed{Style.RESET_ALL}"
        )
        return message

    global_context.git_commands.commit(message)
    logger.success("Committed staged changes")

    return message


def main(
    ctx: typer.Context,
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Write the commit message to this file instead of .git/COMMIT_EDITMSG",
    ),
    preview: bool = typer.Option(
        False,
        "--preview",
        "-p",
        help="Only generate and write the message, do not commit",
    ),
) -> None:
    """
    Generate a commit message for the staged changes and commit them.

    Examples:
        # Summarize and commit the staged changes
        git-gpt commit

        # Only write the message (used by the prepare-commit-msg hook)
        git-gpt commit --file .git/COMMIT_EDITMSG --preview
    """
    with handle_gitgpt_exception():
        global_context: GlobalContext = ctx.obj
        run_commit(global_context, CommitContext(output_file=file, preview=preview))
