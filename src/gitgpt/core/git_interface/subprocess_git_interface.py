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

import subprocess
from pathlib import Path

from loguru import logger

from gitgpt.core.exceptions import GitError

from .interface import GitInterface

_LOG_TRUNCATE = 2000


class SubprocessGitInterface(GitInterface):
    def __init__(self, repo_path: str | Path | None = None) -> None:
        self.repo_path = Path(repo_path) if repo_path is not None else Path.cwd()

    def run_git_text_out(
        self,
        args: list[str],
        input_text: str | None = None,
        cwd: str | Path | None = None,
    ) -> str | None:
        result = self.run_git_text(args, input_text, cwd)
        return result.stdout if result else None

    def run_git_text(
        self,
        args: list[str],
        input_text: str | None = None,
        cwd: str | Path | None = None,
    ) -> subprocess.CompletedProcess[str] | None:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = ["git"] + args
        logger.debug(f"Running git command: {' '.join(cmd)} cwd={effective_cwd}")

        try:
            result = subprocess.run(
                cmd,
                input=input_text,
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=True,
                cwd=effective_cwd,
            )
        except FileNotFoundError as e:
            raise GitError(
                "Git is not installed or not in PATH",
                "Please install git and ensure it's available in your PATH environment variable",
            ) from e
        except subprocess.CalledProcessError as e:
            logger.warning(
                f"Git command failed: {' '.join(e.cmd)} code={e.returncode} stderr={e.stderr}"
            )
            return None

        if result.stdout:
            logger.debug(
                f"git stdout: {result.stdout[:_LOG_TRUNCATE]}"
                + ("...(truncated)" if len(result.stdout) > _LOG_TRUNCATE else "")
            )
        if result.stderr:
            logger.debug(f"git stderr: {result.stderr[:_LOG_TRUNCATE]}")

        return result
