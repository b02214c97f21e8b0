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

"""LLM integration module for git-gpt."""

from .invoker import CompletionInvoker
from .litellm_transport import LiteLLMTransport
from .models import CompletionParams, CompletionRequest, CompletionResponse, Message, Usage
from .stats import Stats, StatsSnapshot
from .token_budget import TokenBudgeter, TokenRule
from .transport import CompletionTransport

__all__ = [
    "CompletionInvoker",
    "CompletionParams",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionTransport",
    "LiteLLMTransport",
    "Message",
    "Stats",
    "StatsSnapshot",
    "TokenBudgeter",
    "TokenRule",
    "Usage",
]
