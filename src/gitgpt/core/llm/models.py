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

from dataclasses import dataclass
from typing import Literal

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    role: Role
    content: str
    name: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"role": self.role, "content": self.content}
        if self.name:
            data["name"] = self.name
        return data


@pydantic_dataclass(frozen=True)
class CompletionParams:
    """
    Generation parameters shared by every request of a pipeline run.
    Values are validated on construction.

    `tokenizer_model` only drives token budgeting and is never sent.
    """

    model: str = Field(default="gpt-3.5-turbo", min_length=1)
    # deployment names (azure/...) say nothing about the tokenizer
    tokenizer_model: str | None = None
    max_tokens: int = Field(default=300, gt=0)
    temperature: float = Field(default=0.4, ge=0.0, le=2.0)
    top_p: float = Field(default=1.0, gt=0.0, le=1.0)
    stream: bool = False
    api_key: str | None = None
    api_base: str | None = None


@dataclass(frozen=True)
class CompletionRequest:
    model: str
    messages: tuple[Message, ...]
    max_tokens: int
    temperature: float
    top_p: float
    stream: bool = False
    n: int = 1

    @classmethod
    def build(
        cls, params: CompletionParams, messages: list[Message]
    ) -> "CompletionRequest":
        return cls(
            model=params.model,
            messages=tuple(messages),
            max_tokens=params.max_tokens,
            temperature=params.temperature,
            top_p=params.top_p,
            stream=params.stream,
        )


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    # estimated USD, None when the model has no known pricing
    cost: float | None = None


@dataclass(frozen=True)
class CompletionResponse:
    text: str
    usage: Usage
