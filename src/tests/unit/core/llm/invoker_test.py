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

import pytest

from gitgpt.core.exceptions import (
    TooManyTokensError,
    TransportError,
    UnsupportedModelError,
)
from gitgpt.core.llm import CompletionInvoker, CompletionParams


def test_invoke_sends_trimmed_messages(invoker, fake_transport, params):
    invoker.invoke(["  system one \n", "system two"], "\n user content  ")

    assert fake_transport.calls == 1
    request = fake_transport.requests[0]
    assert [m.role for m in request.messages] == ["system", "system", "user"]
    assert [m.content for m in request.messages] == [
        "system one",
        "system two",
        "user content",
    ]
    assert request.model == params.model
    assert request.max_tokens == params.max_tokens
    assert request.temperature == params.temperature
    assert request.top_p == params.top_p
    assert request.n == 1


def test_invoke_sanitizes_completion(make_transport, budgeter, params, stats):
    transport = make_transport(responses=["  hello\x00 world \n"])
    invoker = CompletionInvoker(transport, budgeter, params, stats)

    assert invoker.invoke(["system"], "user") == "hello world"


def test_invoke_records_usage(invoker, stats):
    invoker.invoke(["system"], "user")
    invoker.invoke(["system"], "user")

    snapshot = stats.snapshot()
    assert snapshot.num_requests == 2
    assert snapshot.prompt_tokens == 20
    assert snapshot.completion_tokens == 10
    assert snapshot.total_tokens == 30


def test_too_many_tokens_never_reaches_transport(
    fake_transport, make_budgeter, params, stats
):
    budgeter = make_budgeter(model_limits={"gpt-4o": 50})
    invoker = CompletionInvoker(fake_transport, budgeter, params, stats)

    with pytest.raises(TooManyTokensError):
        invoker.invoke(["system"], "user")

    assert fake_transport.calls == 0
    assert stats.snapshot().num_requests == 0


def test_transport_errors_propagate(make_transport, budgeter, params, stats):
    transport = make_transport(responses=[TransportError("down")])
    invoker = CompletionInvoker(transport, budgeter, params, stats)

    with pytest.raises(TransportError):
        invoker.invoke(["system"], "user")

    assert stats.snapshot().num_requests == 0


# -----------------------------------------------------------------------------
# Deployment Names
# -----------------------------------------------------------------------------


def test_deployment_name_without_tokenizer_model_is_rejected(
    fake_transport, budgeter, stats
):
    params = CompletionParams(model="azure/my-deployment", max_tokens=100)
    invoker = CompletionInvoker(fake_transport, budgeter, params, stats)

    with pytest.raises(UnsupportedModelError):
        invoker.invoke(["system"], "user")

    assert fake_transport.calls == 0


def test_tokenizer_model_budgets_a_deployment_name(fake_transport, budgeter, stats):
    params = CompletionParams(
        model="azure/my-deployment", tokenizer_model="gpt-4o", max_tokens=100
    )
    invoker = CompletionInvoker(fake_transport, budgeter, params, stats)

    assert invoker.invoke(["system"], "user") == "summary"

    # the deployment name is what goes over the wire
    assert fake_transport.requests[0].model == "azure/my-deployment"


def test_tokenizer_model_limits_apply(fake_transport, make_budgeter, stats):
    budgeter = make_budgeter(model_limits={"gpt-4o": 50})
    params = CompletionParams(
        model="azure/my-deployment", tokenizer_model="gpt-4o", max_tokens=100
    )
    invoker = CompletionInvoker(fake_transport, budgeter, params, stats)

    with pytest.raises(TooManyTokensError):
        invoker.invoke(["system"], "user")

    assert fake_transport.calls == 0
