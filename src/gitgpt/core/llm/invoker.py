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

from loguru import logger

from gitgpt.core.llm.models import CompletionParams, CompletionRequest, Message
from gitgpt.core.llm.stats import Stats
from gitgpt.core.llm.token_budget import TokenBudgeter
from gitgpt.core.llm.transport import CompletionTransport
from gitgpt.core.utils.sanitize import sanitize_llm_text


class CompletionInvoker:
    """
    Performs one budget-checked round trip to the completion backend and
    folds the response usage into the run's Stats.
    """

    def __init__(
        self,
        transport: CompletionTransport,
        budgeter: TokenBudgeter,
        params: CompletionParams,
        stats: Stats,
    ):
        self.transport = transport
        self.budgeter = budgeter
        self.params = params
        self.stats = stats

    @property
    def budget_model(self) -> str:
        return self.params.tokenizer_model or self.params.model

    def build_messages(
        self, system_messages: Sequence[str], user_content: str
    ) -> list[Message]:
        messages = [Message("system", msg.strip()) for msg in system_messages]
        messages.append(Message("user", user_content.strip()))
        return messages

    def invoke(self, system_messages: Sequence[str], user_content: str) -> str:
        """
        Send the system messages and user content as one completion request.

        Raises:
            TooManyTokensError: The prompt does not fit; nothing was sent
            UnsupportedModelError: The model has no token counting rule
            TransportError: The backend call failed
        """
        messages = self.build_messages(system_messages, user_content)

        # must run before the transport, a failing check means no request
        self.budgeter.check(self.budget_model, messages, self.params.max_tokens)

        request = CompletionRequest.build(self.params, messages)
        response = self.transport.complete(request)

        self.stats.record_usage(response.usage)
        logger.debug(
            "Completion done: prompt_tokens={prompt} completion_tokens={completion}",
            prompt=response.usage.prompt_tokens,
            completion=response.usage.completion_tokens,
        )

        return sanitize_llm_text(response.text)
