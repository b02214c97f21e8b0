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

"""Greedy word-boundary text splitter used to fit content into model prompts."""


def split_text(text: str, chunk_size: int) -> list[str]:
    """
    Split text into chunks of whole words.

    Each word costs its character length plus one separator. Words are added
    to the current chunk while the running cost stays within chunk_size; the
    first word that would overflow starts a new chunk. A single word longer
    than chunk_size is kept whole and becomes an oversized chunk of its own.

    Whitespace is normalized to single spaces. Empty input yields a single
    empty chunk so callers always get at least one item.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    chunks: list[str] = []
    current: list[str] = []
    remaining = chunk_size

    for word in text.split():
        word_length = len(word) + 1

        if word_length <= remaining:
            current.append(word)
            remaining -= word_length
            continue

        # never emit an empty chunk when the very first word overflows
        if current:
            chunks.append(" ".join(current))
        current = [word]
        remaining = chunk_size - word_length

    if current or not chunks:
        chunks.append(" ".join(current))

    return chunks
