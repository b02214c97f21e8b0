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
End to end commit message pipeline: summarize every staged file, then reduce
the summaries into a single commit message.
"""

from collections.abc import Callable
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from gitgpt.core.data.changes import GitOperation, StagedChanges
from gitgpt.core.llm.invoker import CompletionInvoker
from gitgpt.core.llm.models import CompletionParams
from gitgpt.core.llm.stats import Stats, StatsSnapshot
from gitgpt.core.llm.token_budget import TokenBudgeter
from gitgpt.core.llm.transport import CompletionTransport
from gitgpt.core.logging.utils import time_block
from gitgpt.core.prompts.assembler import PromptAssembler
from gitgpt.core.summarization.aggregator import ChangeAggregator
from gitgpt.core.summarization.file_summarizer import FileSummarizer


class ChangeSource(Protocol):
    """Where file contents and diffs come from (GitCommands in production)."""

    def read_staged_file(self, path: str) -> str: ...

    def show_deleted_file(self, path: str) -> str: ...

    def diff_file(self, path: str) -> str: ...


@dataclass(frozen=True)
class PipelineResult:
    message: str
    summaries: list[str]
    stats: StatsSnapshot


class CommitPipeline:
    def __init__(
        self,
        summarizer: FileSummarizer,
        aggregator: ChangeAggregator,
        stats: Stats,
        source: ChangeSource,
        is_binary: Callable[[str], bool],
        concurrency: int = 1,
    ):
        self.summarizer = summarizer
        self.aggregator = aggregator
        self.stats = stats
        self.source = source
        self.is_binary = is_binary
        self.concurrency = max(1, concurrency)

    @classmethod
    def create(
        cls,
        params: CompletionParams,
        transport: CompletionTransport,
        source: ChangeSource,
        is_binary: Callable[[str], bool],
        max_chunk_size: int,
        concurrency: int = 1,
        budgeter: TokenBudgeter | None = None,
    ) -> "CommitPipeline":
        """Wire a pipeline with its own Stats, so every run is accounted separately."""
        stats = Stats()
        invoker = CompletionInvoker(
            transport, budgeter or TokenBudgeter(), params, stats
        )
        assembler = PromptAssembler()

        return cls(
            summarizer=FileSummarizer(invoker, assembler, stats, max_chunk_size),
            aggregator=ChangeAggregator(invoker, assembler, max_chunk_size),
            stats=stats,
            source=source,
            is_binary=is_binary,
            concurrency=concurrency,
        )

    def summarize_one(self, operation: GitOperation, path: str) -> str:
        if self.is_binary(path):
            return self.summarizer.summarize_binary(operation, path)

        if operation == GitOperation.MOD:
            return self.summarizer.summarize_diff(path, self.source.diff_file(path))

        if operation == GitOperation.ADD:
            content = self.source.read_staged_file(path)
        else:
            content = self.source.show_deleted_file(path)

        return self.summarizer.summarize_file(operation, path, content.strip())

    def summarize_all(self, changes: StagedChanges) -> list[str]:
        """Summaries in input order: added, then removed, then modified files."""
        items = changes.items()

        if self.concurrency == 1 or len(items) <= 1:
            return [self.summarize_one(operation, path) for operation, path in items]

        with ThreadPoolExecutor(max_workers=self.concurrency) as executor:
            futures = [
                executor.submit(self.summarize_one, operation, path)
                for operation, path in items
            ]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)

            for future in futures:
                if future in done and future.exception() is not None:
                    for pending_future in pending:
                        pending_future.cancel()
                    raise future.exception()

        return [future.result() for future in futures]

    def run(self, changes: StagedChanges) -> PipelineResult:
        with time_block("Summarize files"):
            summaries = self.summarize_all(changes)

        logger.debug(f"Summarized {len(summaries)} file(s)")

        with time_block("Aggregate summaries"):
            message = self.aggregator.aggregate(summaries)

        return PipelineResult(message, summaries, self.stats.snapshot())
