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

"""Utilities for sanitizing LLM outputs."""

import html


def sanitize_llm_text(text: str | None) -> str:
    """
    Removes null bytes and surrounding whitespace from LLM output.

    Null bytes break subprocess arguments on Windows, and the git commit
    message is passed to git as an argument.
    """
    if not text:
        return ""

    return text.replace("\x00", "").strip()


def unescape_commit_message(message: str) -> str:
    """Models sometimes answer with HTML entities (&quot;, &#39;); git wants plain text."""
    return html.unescape(message).strip()
