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

from pathlib import PurePosixPath

from gitgpt.core.data.changes import GitOperation
from gitgpt.core.prompts.developer_type import developer_type
from gitgpt.core.prompts.templates import (
    PREV_CHUNK_SUMMARY,
    SUMMARIZE_CHANGES,
    SUMMARIZE_DIFF,
    SUMMARIZE_FILE,
    render_template,
)


class PromptAssembler:
    """Builds the system messages sent along with each chunk."""

    def file_messages(
        self, operation: GitOperation, file_name: str, prev_summary: str = ""
    ) -> list[str]:
        first = render_template(
            SUMMARIZE_FILE,
            operation=operation.verb.lower(),
            dev_type=developer_type(file_name),
            file=_base_name(file_name),
        )
        return self._with_continuation(first, prev_summary)

    def diff_messages(self, file_name: str, prev_summary: str = "") -> list[str]:
        first = render_template(
            SUMMARIZE_DIFF,
            dev_type=developer_type(file_name),
            file=_base_name(file_name),
        )
        return self._with_continuation(first, prev_summary)

    def changes_messages(self) -> list[str]:
        return [render_template(SUMMARIZE_CHANGES)]

    @staticmethod
    def _with_continuation(first: str, prev_summary: str) -> list[str]:
        messages = [first]
        if prev_summary:
            messages.append(
                render_template(PREV_CHUNK_SUMMARY, prev_chunk_summary=prev_summary)
            )
        return messages


def _base_name(file_name: str) -> str:
    return PurePosixPath(file_name.replace("\\", "/")).name
