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
Token estimation and context window enforcement for chat completion requests.

Counting follows the OpenAI chat format: every message costs a fixed number
of framing tokens plus its encoded fields, and every reply is primed with
three more tokens. The framing constants differ between model snapshots, so
they are kept in an injectable rules table rather than hardcoded.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

import tiktoken
from loguru import logger

from gitgpt.core.exceptions import TooManyTokensError, UnsupportedModelError
from gitgpt.core.llm.models import Message

# every reply is primed with <|start|>assistant<|message|>
REPLY_PRIMING_TOKENS = 3


@dataclass(frozen=True)
class TokenRule:
    tokens_per_message: int
    # added when a message carries a name, negative when the name replaces the role
    tokens_per_name: int


DEFAULT_MODEL_LIMITS: Mapping[str, int] = MappingProxyType(
    {
        "gpt-4o": 128000,
        "gpt-4o-mini": 128000,
        "gpt-4-turbo": 128000,
        "gpt-4-32k-0613": 32768,
        "gpt-4-32k-0314": 32768,
        "gpt-4-32k": 32768,
        "gpt-4-0613": 8192,
        "gpt-4-0314": 8192,
        "gpt-4": 8192,
        "gpt-3.5-turbo-0125": 16385,
        "gpt-3.5-turbo-1106": 16385,
        "gpt-3.5-turbo-0613": 4096,
        "gpt-3.5-turbo-0301": 4096,
        "gpt-3.5-turbo-16k": 16384,
        "gpt-3.5-turbo-16k-0613": 16384,
        "gpt-3.5-turbo": 4096,
        "gpt-3.5-turbo-instruct": 4096,
    }
)

DEFAULT_TOKEN_RULES: Mapping[str, TokenRule] = MappingProxyType(
    {
        "gpt-3.5-turbo-0301": TokenRule(tokens_per_message=4, tokens_per_name=-1),
        "gpt-3.5-turbo-0613": TokenRule(tokens_per_message=3, tokens_per_name=1),
        "gpt-3.5-turbo-16k-0613": TokenRule(tokens_per_message=3, tokens_per_name=1),
        "gpt-4-0314": TokenRule(tokens_per_message=3, tokens_per_name=1),
        "gpt-4-32k-0314": TokenRule(tokens_per_message=3, tokens_per_name=1),
        "gpt-4-0613": TokenRule(tokens_per_message=3, tokens_per_name=1),
        "gpt-4-32k-0613": TokenRule(tokens_per_message=3, tokens_per_name=1),
        "gpt-4o": TokenRule(tokens_per_message=3, tokens_per_name=1),
        "gpt-4o-mini": TokenRule(tokens_per_message=3, tokens_per_name=1),
    }
)

# checked in order, so more specific prefixes come first
DEFAULT_PREFIX_FALLBACKS: tuple[tuple[str, str], ...] = (
    ("gpt-4o-mini", "gpt-4o-mini"),
    ("gpt-4o", "gpt-4o"),
    ("gpt-3.5-turbo", "gpt-3.5-turbo-0613"),
    ("gpt-4", "gpt-4-0613"),
)

EncoderFactory = Callable[[str], Callable[[str], Sequence[int]]]


def tiktoken_encoder(model: str) -> Callable[[str], Sequence[int]]:
    return tiktoken.encoding_for_model(model).encode


def strip_provider(model: str) -> str:
    """'openai/gpt-4' -> 'gpt-4'. Model strings use the litellm provider/model format."""
    return model.rsplit("/", 1)[-1]


class TokenBudgeter:
    """
    Estimates prompt size and rejects requests that would not leave room for
    the completion inside the model's context window.
    """

    def __init__(
        self,
        model_limits: Mapping[str, int] = DEFAULT_MODEL_LIMITS,
        token_rules: Mapping[str, TokenRule] = DEFAULT_TOKEN_RULES,
        prefix_fallbacks: Sequence[tuple[str, str]] = DEFAULT_PREFIX_FALLBACKS,
        encoder_factory: EncoderFactory = tiktoken_encoder,
    ):
        self.model_limits = MappingProxyType(dict(model_limits))
        self.token_rules = MappingProxyType(dict(token_rules))
        self.prefix_fallbacks = tuple(prefix_fallbacks)
        self._encoder_factory = encoder_factory
        self._encoders: dict[str, Callable[[str], Sequence[int]]] = {}
        self._warned: set[str] = set()

    def resolve(self, model: str) -> str:
        """Return the model name whose token rules apply to the given model."""
        name = strip_provider(model)
        if name in self.token_rules:
            return name

        for prefix, baseline in self.prefix_fallbacks:
            if name.startswith(prefix) and baseline in self.token_rules:
                if name not in self._warned:
                    self._warned.add(name)
                    logger.warning(
                        f"{name} may update over time. Counting tokens assuming {baseline}."
                    )
                return baseline

        raise UnsupportedModelError(model)

    def limit(self, model: str) -> int:
        """Context window size of the model, in tokens."""
        name = strip_provider(model)
        if name in self.model_limits:
            return self.model_limits[name]

        baseline = self.resolve(name)
        if baseline in self.model_limits:
            return self.model_limits[baseline]

        raise UnsupportedModelError(model)

    def _encoder(self, model: str) -> Callable[[str], Sequence[int]]:
        if model not in self._encoders:
            self._encoders[model] = self._encoder_factory(model)
        return self._encoders[model]

    def estimate(self, model: str, messages: Sequence[Message]) -> int:
        baseline = self.resolve(model)
        rule = self.token_rules[baseline]
        encode = self._encoder(baseline)

        num_tokens = 0
        for message in messages:
            num_tokens += rule.tokens_per_message
            num_tokens += len(encode(message.content))
            num_tokens += len(encode(message.role))
            if message.name:
                num_tokens += len(encode(message.name))
                num_tokens += rule.tokens_per_name

        return num_tokens + REPLY_PRIMING_TOKENS

    def check(self, model: str, messages: Sequence[Message], reserved: int) -> int:
        """
        Verify the messages fit the model's context window after reserving
        completion tokens. Returns the estimate.

        Raises:
            TooManyTokensError: If the estimate exceeds limit - reserved
            UnsupportedModelError: If the model is unknown
        """
        limit = self.limit(model)
        estimate = self.estimate(model, messages)

        if estimate > limit - reserved:
            raise TooManyTokensError(estimate, limit, reserved)

        logger.debug(
            "Token budget ok: estimate={estimate} limit={limit} reserved={reserved}",
            estimate=estimate,
            limit=limit,
            reserved=reserved,
        )
        return estimate
