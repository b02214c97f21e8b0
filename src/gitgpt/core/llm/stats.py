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

import threading
from dataclasses import dataclass

from gitgpt.core.llm.models import Usage


@dataclass(frozen=True)
class StatsSnapshot:
    num_files: int
    num_requests: int
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    cost: float | None

    def __str__(self) -> str:
        text = (
            f"Files: {self.num_files} | Requests: {self.num_requests} | "
            f"Tokens: prompt {self.prompt_tokens}, completion {self.completion_tokens}, "
            f"total {self.total_tokens}"
        )
        if self.cost is not None:
            text += f" | Cost: ~${self.cost:.4f}"
        return text


class Stats:
    """
    Usage accumulator for a single pipeline run.

    Completion calls may finish concurrently when files are summarized in
    parallel, so every mutation happens under a lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._num_files = 0
        self._num_requests = 0
        self._prompt_tokens = 0
        self._completion_tokens = 0
        self._total_tokens = 0
        self._cost: float | None = None

    def record_usage(self, usage: Usage) -> None:
        with self._lock:
            self._num_requests += 1
            self._prompt_tokens += usage.prompt_tokens
            self._completion_tokens += usage.completion_tokens
            self._total_tokens += usage.total_tokens
            if usage.cost is not None:
                self._cost = (self._cost or 0.0) + usage.cost

    def record_file(self) -> None:
        with self._lock:
            self._num_files += 1

    def snapshot(self) -> StatsSnapshot:
        with self._lock:
            return StatsSnapshot(
                num_files=self._num_files,
                num_requests=self._num_requests,
                prompt_tokens=self._prompt_tokens,
                completion_tokens=self._completion_tokens,
                total_tokens=self._total_tokens,
                cost=self._cost,
            )
