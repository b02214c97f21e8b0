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

from dataclasses import dataclass, field
from enum import Enum


class GitOperation(str, Enum):
    ADD = "A"
    DEL = "D"
    MOD = "M"

    @property
    def verb(self) -> str:
        return {
            GitOperation.ADD: "Added",
            GitOperation.DEL: "Removed",
            GitOperation.MOD: "Modified",
        }[self]

    @property
    def binary_verb(self) -> str:
        # a modified binary cannot be diffed, it is treated as a replacement
        return {
            GitOperation.ADD: "Added",
            GitOperation.DEL: "Removed",
            GitOperation.MOD: "Replaced",
        }[self]


@dataclass(frozen=True)
class StagedChanges:
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)

    def items(self) -> list[tuple[GitOperation, str]]:
        """All changed files in the order they are summarized: added, removed, modified."""
        return (
            [(GitOperation.ADD, path) for path in self.added]
            + [(GitOperation.DEL, path) for path in self.removed]
            + [(GitOperation.MOD, path) for path in self.modified]
        )

    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.modified)

    def __len__(self) -> int:
        return len(self.added) + len(self.removed) + len(self.modified)
