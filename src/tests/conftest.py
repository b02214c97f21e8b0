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

import pytest
from loguru import logger

from gitgpt.core.llm import (
    CompletionInvoker,
    CompletionParams,
    CompletionResponse,
    CompletionTransport,
    Stats,
    TokenBudgeter,
    Usage,
)


class FakeTransport(CompletionTransport):
    """
    Records every request. Replies are taken from `responses` in order, then
    `default`. An exception in `responses` is raised instead of replying.
    With `echo`, the reply is the user content of the request.
    """

    def __init__(self, responses=None, default="summary", echo=False, usage=None):
        self.requests = []
        self.responses = list(responses or [])
        self.default = default
        self.echo = echo
        self.usage = usage or Usage(prompt_tokens=10, completion_tokens=5, total_tokens=15)
        self._lock = threading.Lock()

    @property
    def calls(self) -> int:
        return len(self.requests)

    def complete(self, request):
        with self._lock:
            self.requests.append(request)
            reply = self.responses.pop(0) if self.responses else self.default

        if isinstance(reply, Exception):
            raise reply
        if self.echo:
            reply = request.messages[-1].content

        return CompletionResponse(text=reply, usage=self.usage)


def word_encoder(model):
    # one token per whitespace separated word, no tokenizer download needed
    return lambda text: text.split()


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def make_budgeter():
    def factory(**kwargs):
        kwargs.setdefault("encoder_factory", word_encoder)
        return TokenBudgeter(**kwargs)

    return factory


@pytest.fixture
def budgeter(make_budgeter):
    return make_budgeter()


@pytest.fixture
def params():
    return CompletionParams(model="gpt-4o", max_tokens=100)


@pytest.fixture
def stats():
    return Stats()


@pytest.fixture
def invoker(fake_transport, budgeter, params, stats):
    return CompletionInvoker(fake_transport, budgeter, params, stats)


@pytest.fixture
def log_messages():
    """Messages logged through loguru at WARNING or above while the test runs."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="WARNING"
    )
    yield messages
    logger.remove(handler_id)
