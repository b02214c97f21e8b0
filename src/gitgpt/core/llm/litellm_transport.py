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

import logging
import os

import litellm
from loguru import logger

from gitgpt.core.exceptions import TransportError
from gitgpt.core.llm.models import CompletionRequest, CompletionResponse, Usage
from gitgpt.core.llm.transport import CompletionTransport

# Disable LiteLLM logging at module level to prevent any logging worker errors
os.environ["LITELLM_LOG"] = "CRITICAL"
litellm.success_callback = []
litellm.failure_callback = []
litellm.callbacks = []
litellm.set_verbose = False
litellm.suppress_debug_info = True
litellm.drop_params = True

logging.getLogger("LiteLLM").setLevel(logging.CRITICAL)
logging.getLogger("LiteLLM Router").setLevel(logging.CRITICAL)
logging.getLogger("httpx").setLevel(logging.CRITICAL)


class LiteLLMTransport(CompletionTransport):
    """
    Completion transport backed by LiteLLM.
    Supports all LiteLLM providers via the provider/model format
    (e.g. "openai/gpt-4o", "azure/my-deployment"). Deployment names need a
    tokenizer_model for budgeting, see CompletionParams.
    """

    def __init__(self, api_key: str | None = None, api_base: str | None = None):
        self.api_key = api_key
        self.api_base = api_base

    def complete(self, request: CompletionRequest) -> CompletionResponse:
        messages = [message.to_dict() for message in request.messages]

        logger.debug(
            f"Invoking {request.model} messages={len(messages)} stream={request.stream}"
        )

        try:
            kwargs = {}
            if request.stream:
                kwargs["stream_options"] = {"include_usage": True}

            response = litellm.completion(
                model=request.model,
                messages=messages,
                temperature=request.temperature,
                top_p=request.top_p,
                max_tokens=request.max_tokens,
                n=request.n,
                stream=request.stream,
                api_key=self.api_key,
                api_base=self.api_base,
                **kwargs,
            )

            if request.stream:
                response = litellm.stream_chunk_builder(
                    list(response), messages=messages
                )

            text = response.choices[0].message.content or ""
        except litellm.AuthenticationError as e:
            provider = request.model.partition("/")[0]
            raise TransportError(
                f"Authentication failed for {provider}. "
                f"Please check your API key is set correctly.",
                str(e),
            ) from e
        except litellm.NotFoundError as e:
            raise TransportError(
                f"Model {request.model} not found. "
                f"Please check the model name is correct.",
                str(e),
            ) from e
        except litellm.RateLimitError as e:
            raise TransportError(
                f"Rate limit exceeded for {request.model}. Please try again later.",
                str(e),
            ) from e
        except litellm.APIConnectionError as e:
            raise TransportError(
                f"Failed to connect to API for {request.model}. "
                f"Please check your internet connection.",
                str(e),
            ) from e
        except (AttributeError, IndexError, TypeError) as e:
            raise TransportError(
                f"Malformed response from {request.model}", str(e)
            ) from e
        except Exception as e:
            raise TransportError(
                f"LLM request failed for {request.model}: {str(e)}"
            ) from e

        return CompletionResponse(text=text, usage=self._usage(request.model, response))

    @staticmethod
    def _usage(model: str, response) -> Usage:
        usage = getattr(response, "usage", None)
        prompt_tokens = getattr(usage, "prompt_tokens", 0) or 0
        completion_tokens = getattr(usage, "completion_tokens", 0) or 0
        total_tokens = (
            getattr(usage, "total_tokens", 0) or prompt_tokens + completion_tokens
        )

        return Usage(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=total_tokens,
            cost=estimate_cost(model, prompt_tokens, completion_tokens),
        )


def estimate_cost(model: str, prompt_tokens: int, completion_tokens: int) -> float | None:
    """USD cost of a call from LiteLLM's price map, None for unpriced models."""
    try:
        prompt_cost, completion_cost = litellm.cost_per_token(
            model=model,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
        )
    except Exception as e:
        logger.debug(f"No pricing available for {model}: {e}")
        return None

    return prompt_cost + completion_cost
