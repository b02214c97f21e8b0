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
Prompt templates for chunked change summarization.

Templates use str.format placeholders. Rendering is plain variable
substitution; a missing variable is a configuration error, never a blank.
"""

from types import MappingProxyType

from gitgpt.core.exceptions import TemplateRenderError

SUMMARIZE_FILE = "summarize-file"
SUMMARIZE_DIFF = "summarize-diff"
PREV_CHUNK_SUMMARY = "prev-chunk-summary"
SUMMARIZE_CHANGES = "summarize-changes"

# -----------------------------------------------------------------------------
# Per File Prompts
# -----------------------------------------------------------------------------

SUMMARIZE_FILE_SYSTEM = """You are an {dev_type} reviewing a commit.

The file `{file}` was {operation} in this commit. You will receive its content, possibly one chunk of a larger file.

Rules:
- Summarize what the code in this chunk does and why it matters for the commit
- At most 3 short sentences
- Do not repeat the file name
- Output only the summary"""

SUMMARIZE_DIFF_SYSTEM = """You are an {dev_type} reviewing a commit.

You will receive a unified git diff of the file `{file}`, possibly one chunk of a larger diff.
Lines starting with "+" were added, lines starting with "-" were removed.

Rules:
- Summarize what changed and the likely intent of the change
- At most 3 short sentences
- Do not describe unchanged context lines
- Output only the summary"""

PREV_CHUNK_SUMMARY_SYSTEM = """This chunk continues the previous one. Summary of the previous chunk:

{prev_chunk_summary}

Keep your summary consistent with it and do not repeat it."""


# -----------------------------------------------------------------------------
# Aggregation Prompts
# -----------------------------------------------------------------------------

SUMMARIZE_CHANGES_SYSTEM = """You are an expert developer writing Git commit messages.

You will receive summaries of the changes made to the files of one commit.
Write a commit message that covers all of them.

Rules:
- First line: imperative mood, max 72 characters, no trailing period
- Then a blank line and a short bullet list of the most important changes
- Describe what changed, not how you found out
- Output only the commit message"""


TEMPLATES = MappingProxyType(
    {
        SUMMARIZE_FILE: SUMMARIZE_FILE_SYSTEM,
        SUMMARIZE_DIFF: SUMMARIZE_DIFF_SYSTEM,
        PREV_CHUNK_SUMMARY: PREV_CHUNK_SUMMARY_SYSTEM,
        SUMMARIZE_CHANGES: SUMMARIZE_CHANGES_SYSTEM,
    }
)


def render_template(name: str, **variables: str) -> str:
    """
    Render the named template with the given variables.

    Raises:
        TemplateRenderError: Unknown template name, missing variable,
            or malformed placeholder.
    """
    template = TEMPLATES.get(name)
    if template is None:
        raise TemplateRenderError(
            f"Template {name} not found",
            f"Available templates: {', '.join(sorted(TEMPLATES))}",
        )

    try:
        return template.format(**variables).strip()
    except KeyError as e:
        raise TemplateRenderError(
            f"Template {name} is missing variable {e.args[0]}"
        ) from e
    except (IndexError, ValueError) as e:
        raise TemplateRenderError(f"Template {name} is malformed: {e}") from e
