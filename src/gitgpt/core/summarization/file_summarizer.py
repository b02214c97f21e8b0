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

"""
Per-file summarization.

A file's content (or its diff) is split into chunks that are summarized in
order. Each chunk's summary is handed to the next chunk as continuation
context, so chunks of one file can never be processed out of order. Different
files are independent and may be summarized concurrently.
"""

from collections.abc import Callable

from loguru import logger

from gitgpt.core.chunker.text_chunker import split_text
from gitgpt.core.data.changes import GitOperation
from gitgpt.core.llm.invoker import CompletionInvoker
from gitgpt.core.llm.stats import Stats
from gitgpt.core.prompts.assembler import PromptAssembler


class FileSummarizer:
    def __init__(
        self,
        invoker: CompletionInvoker,
        assembler: PromptAssembler,
        stats: Stats,
        max_chunk_size: int,
    ):
        self.invoker = invoker
        self.assembler = assembler
        self.stats = stats
        self.max_chunk_size = max_chunk_size

    def summarize_file(
        self, operation: GitOperation, file_name: str, content: str
    ) -> str:
        """Summarize the whole content of an added or removed file."""
        summary = self._summarize_chunks(
            f"{operation.verb} file `{file_name}`:",
            content,
            lambda prev: self.assembler.file_messages(operation, file_name, prev),
        )
        self.stats.record_file()
        return summary

    def summarize_diff(self, file_name: str, diff: str) -> str:
        """Summarize the staged diff of a modified file."""
        summary = self._summarize_chunks(
            f"{GitOperation.MOD.verb} file `{file_name}`:",
            diff,
            lambda prev: self.assembler.diff_messages(file_name, prev),
        )
        self.stats.record_file()
        return summary

    def summarize_binary(self, operation: GitOperation, file_name: str) -> str:
        """Binary files are never sent to the model."""
        self.stats.record_file()
        return f"{operation.binary_verb} binary file `{file_name}`"

    def _summarize_chunks(
        self,
        prefix: str,
        text: str,
        build_messages: Callable[[str], list[str]],
    ) -> str:
        chunks = split_text(text, self.max_chunk_size)
        logger.debug(f"{prefix} {len(chunks)} chunk(s)")

        results = [prefix]
        prev_chunk_summary = ""

        for chunk in chunks:
            completion = self.invoker.invoke(build_messages(prev_chunk_summary), chunk)
            prev_chunk_summary = completion
            results.append(completion)

        return " ".join(results).strip()
