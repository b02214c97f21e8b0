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

from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from gitgpt.core.data.changes import GitOperation, StagedChanges
from gitgpt.core.exceptions import GitError
from gitgpt.core.git_interface.interface import GitInterface

# lock files and snapshots are noise for a commit message
DEFAULT_EXCLUDE_LIST = (
    "package-lock.json",
    "*.lock",
    "*.snap",
    "go.sum",
)


def parse_status(status: str) -> StagedChanges:
    """
    Partition `git status --porcelain -z --no-renames` output by index state.

    Entries are NUL terminated and paths are never quoted, so names with
    spaces or non-ASCII characters come through verbatim. Only the index
    column (X in "XY path") is used, since the staged state is what gets
    committed. "AM" is therefore an added file.
    """
    added: list[str] = []
    removed: list[str] = []
    modified: list[str] = []

    for entry in status.split("\0"):
        if len(entry) < 4:
            continue

        index_state = entry[0]
        path = entry[3:]

        if index_state == GitOperation.ADD.value:
            added.append(path)
        elif index_state == GitOperation.DEL.value:
            removed.append(path)
        elif index_state == GitOperation.MOD.value:
            modified.append(path)

    return StagedChanges(added, removed, modified)


class GitCommands:
    """Git queries needed to summarize the staged changes of a repository."""

    def __init__(
        self,
        git: GitInterface,
        exclude_list: Sequence[str] = (),
        diff_unified: int = 3,
    ):
        self.git = git
        self.exclude_list = list(DEFAULT_EXCLUDE_LIST) + [
            item for item in exclude_list if item not in DEFAULT_EXCLUDE_LIST
        ]
        self.diff_unified = diff_unified

    def _exclude_pathspecs(self) -> list[str]:
        return [f":(top,exclude){item}" for item in self.exclude_list]

    def _run(self, args: list[str], error: str) -> str:
        out = self.git.run_git_text_out(args)
        if out is None:
            raise GitError(error, f"git {' '.join(args)} failed")
        return out

    def is_git_repo(self) -> bool:
        out = self.git.run_git_text_out(["rev-parse", "--is-inside-work-tree"])
        return out is not None and out.strip() == "true"

    def toplevel(self) -> Path | None:
        """Root of the working tree, or None outside a repository."""
        out = self.git.run_git_text_out(["rev-parse", "--show-toplevel"])
        if out is None or not out.strip():
            return None
        return Path(out.strip())

    def staged_file_names(self) -> list[str]:
        out = self._run(
            [
                "diff",
                "--name-only",
                "-z",
                "--staged",
                "--",
                *self._exclude_pathspecs(),
            ],
            "Failed to list staged files",
        )
        return [name for name in out.split("\0") if name.strip()]

    def status(self) -> str:
        return self._run(
            ["status", "--porcelain", "-z", "--no-renames"],
            "Failed to read repository status",
        )

    def staged_changes(self) -> StagedChanges:
        """Staged files partitioned into added/removed/modified, minus excluded files."""
        staged = set(self.staged_file_names())
        changes = parse_status(self.status())

        return StagedChanges(
            added=[path for path in changes.added if path in staged],
            removed=[path for path in changes.removed if path in staged],
            modified=[path for path in changes.modified if path in staged],
        )

    def diff_file(self, path: str) -> str:
        return self._run(
            [
                "diff",
                "--ignore-all-space",
                "--no-color",
                "--diff-algorithm=minimal",
                f"--unified={self.diff_unified}",
                "--staged",
                "--",
                # names from status are root relative, whatever the cwd
                f":(top){path}",
                *self._exclude_pathspecs(),
            ],
            f"Failed to diff {path}",
        )

    def read_staged_file(self, path: str) -> str:
        """Content of the file as staged in the index."""
        return self._run(["show", f":{path}"], f"Failed to read staged file {path}")

    def show_deleted_file(self, path: str) -> str:
        """Content of a removed file as of HEAD."""
        return self._run(
            ["show", f"HEAD:{path}"], f"Failed to read deleted file {path}"
        )

    def binary_files(self) -> set[str]:
        """Staged files git itself considers binary (numstat reports '-' counts)."""
        out = self._run(
            ["diff", "--staged", "--numstat", "-z", "--no-renames"],
            "Failed to read staged numstat",
        )
        binary = set()
        for entry in out.split("\0"):
            parts = entry.split("\t", 2)
            if len(parts) == 3 and parts[0] == "-" and parts[1] == "-":
                binary.add(parts[2])
        return binary

    def git_dir(self) -> Path:
        out = self._run(
            ["rev-parse", "--absolute-git-dir"], "Failed to locate the git directory"
        )
        return Path(out.strip())

    def hooks_dir(self) -> Path:
        out = self._run(
            ["rev-parse", "--path-format=absolute", "--git-path", "hooks"],
            "Failed to locate the git hooks directory",
        )
        return Path(out.strip())

    def commit(self, message: str) -> str:
        logger.debug("Committing staged changes")
        return self._run(
            ["commit", "--no-verify", "--signoff", f"--message={message}"],
            "Failed to commit staged changes",
        )
