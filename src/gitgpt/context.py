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

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Annotated, Any, ClassVar, Optional, get_args, get_origin

import typer
from pydantic import Field, ValidationError, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from gitgpt.core.exceptions import ConfigurationError
from gitgpt.core.git_commands.git_commands import GitCommands
from gitgpt.core.git_interface.interface import GitInterface
from gitgpt.core.git_interface.subprocess_git_interface import SubprocessGitInterface
from gitgpt.core.llm import CompletionParams, LiteLLMTransport


@pydantic_dataclass(frozen=True)
class GlobalConfig:
    model: Annotated[str, Field(min_length=1)] = "gpt-3.5-turbo"
    tokenizer_model: str | None = None
    api_key: str | None = None
    api_base: str | None = None
    max_tokens: Annotated[int, Field(gt=0)] = 300
    temperature: Annotated[float, Field(ge=0.0, le=2.0)] = 0.4
    top_p: Annotated[float, Field(gt=0.0, le=1.0)] = 1.0
    stream: bool = False
    max_chunk_size: Annotated[int, Field(gt=0)] = 6000
    diff_unified: Annotated[int, Field(ge=0)] = 3
    exclude_list: list[str] = field(default_factory=list)
    concurrency: Annotated[int, Field(ge=1)] = 1
    verbose: bool = False
    silent: bool = False

    descriptions: ClassVar[dict[str, str]] = {
        "model": "LLM model in LiteLLM format (e.g. gpt-4o or azure/my-deployment)",
        "tokenizer_model": "Model family for token counting when model is a deployment name (e.g. gpt-4o)",
        "api_key": "API key for the LLM provider",
        "api_base": "Custom API base URL (Azure endpoint, proxy, local server)",
        "max_tokens": "Tokens reserved for each completion",
        "temperature": "Sampling temperature (0.0-2.0)",
        "top_p": "Nucleus sampling probability mass (0.0 exclusive to 1.0)",
        "stream": "Stream completions from the provider",
        "max_chunk_size": "Split big files and diffs into chunks of at most this many characters",
        "diff_unified": "Lines of context around each diff hunk",
        "exclude_list": "Extra pathspecs excluded from the summary (comma separated)",
        "concurrency": "Number of files summarized in parallel",
        "verbose": "Enable verbose logging output",
        "silent": "Do not output any text to the console except the commit message",
    }

    @field_validator("exclude_list", mode="before")
    @classmethod
    def _split_exclude_list(cls, value: Any) -> Any:
        # env vars and TOML strings arrive as "a,b,c"
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @classmethod
    def get_cli_params(cls) -> dict[str, tuple[Any, Any]]:
        """
        Typer option per config field. Defaults are None so that unset options
        do not shadow lower priority config sources.
        """
        params = {}
        for config_field in fields(cls):
            option_type = _cli_type(config_field.type)
            flag = "--" + config_field.name.replace("_", "-")
            if option_type is bool:
                flag = f"{flag}/--no-{flag[2:]}"

            params[config_field.name] = (
                Optional[option_type],
                typer.Option(
                    None,
                    flag,
                    help=cls.descriptions.get(config_field.name, ""),
                    show_default=False,
                ),
            )
        return params

    def completion_params(self) -> CompletionParams:
        try:
            return CompletionParams(
                model=self.model,
                tokenizer_model=self.tokenizer_model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                top_p=self.top_p,
                stream=self.stream,
                api_key=self.api_key,
                api_base=self.api_base,
            )
        except ValidationError as e:
            raise ConfigurationError("Invalid completion parameters", str(e)) from e


def _cli_type(annotation: Any) -> Any:
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    args = [arg for arg in get_args(annotation) if arg is not type(None)]
    if get_origin(annotation) is list:
        return list[str]
    if args:
        return args[0]
    return annotation


@dataclass(frozen=True)
class GlobalContext:
    repo_path: Path
    git_interface: GitInterface
    git_commands: GitCommands
    config: GlobalConfig

    @classmethod
    def from_global_config(cls, config: GlobalConfig, repo_path: Path):
        git_interface = SubprocessGitInterface(repo_path)
        git_commands = GitCommands(
            git_interface,
            exclude_list=config.exclude_list,
            diff_unified=config.diff_unified,
        )

        # git runs from the working tree root so every query sees root relative
        # paths; outside a repo the path is kept and is_git_repo fails later
        toplevel = git_commands.toplevel()
        if toplevel is not None and toplevel != git_interface.repo_path:
            repo_path = toplevel
            git_interface = SubprocessGitInterface(repo_path)
            git_commands = GitCommands(
                git_interface,
                exclude_list=config.exclude_list,
                diff_unified=config.diff_unified,
            )

        return GlobalContext(repo_path, git_interface, git_commands, config)

    def create_transport(self) -> LiteLLMTransport:
        return LiteLLMTransport(api_key=self.config.api_key, api_base=self.config.api_base)


@dataclass(frozen=True)
class CommitContext:
    output_file: Path | None = None
    preview: bool = False
