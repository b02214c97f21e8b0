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

from collections.abc import Iterable

from loguru import logger

from gitgpt.core.llm.invoker import CompletionInvoker
from gitgpt.core.prompts.assembler import PromptAssembler


class ChangeAggregator:
    """
    Two phase reduce of per-file summaries into one commit message.

    Summaries are packed into batches of at most max_chunk_size characters
    and each batch is summarized by one request. The batch results are then
    collapsed by a single finalize request. The request count depends on
    the total summary size, not on the number of files.
    """

    def __init__(
        self,
        invoker: CompletionInvoker,
        assembler: PromptAssembler,
        max_chunk_size: int,
    ):
        self.invoker = invoker
        self.assembler = assembler
        self.max_chunk_size = max_chunk_size

    def summarize_changes(self, summaries: Iterable[str]) -> str:
        system_messages = self.assembler.changes_messages()
        results: list[str] = []
        buffer = ""

        for summary in summaries:
            # the "\n" separator counts toward the batch size
            if buffer and len(buffer) + 1 + len(summary) > self.max_chunk_size:
                results.append(self.invoker.invoke(system_messages, buffer))
                buffer = ""

            buffer = f"{buffer}\n{summary}" if buffer else summary

        if buffer.strip():
            results.append(self.invoker.invoke(system_messages, buffer))

        logger.debug(f"Aggregated summaries in {len(results)} batch(es)")
        return "\n".join(results).strip()

    def finalize(self, digest: str) -> str:
        return self.invoker.invoke(self.assembler.changes_messages(), digest)

    def aggregate(self, summaries: Iterable[str]) -> str:
        return self.finalize(self.summarize_changes(summaries))
