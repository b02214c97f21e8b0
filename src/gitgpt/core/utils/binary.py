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

from pathlib import PurePosixPath

BINARY_EXTENSIONS = frozenset(
    {
        # images
        ".ai", ".bmp", ".eps", ".gif", ".ico", ".jng", ".jp2", ".jpg", ".jpeg",
        ".jpx", ".jxr", ".pdf", ".png", ".psb", ".psd", ".svgz", ".tif", ".tiff",
        ".wbmp", ".webp",
        # audio
        ".kar", ".m4a", ".mid", ".midi", ".mp3", ".ogg", ".ra",
        # video
        ".3gpp", ".3gp", ".as", ".asf", ".asx", ".fla", ".flv", ".m4v", ".mng",
        ".mov", ".mp4", ".mpeg", ".mpg", ".ogv", ".swc", ".swf", ".webm",
        # archives
        ".7z", ".gz", ".jar", ".rar", ".tar", ".zip",
        # fonts
        ".ttf", ".eot", ".otf", ".woff", ".woff2",
        # executables and bytecode
        ".exe", ".pyc",
    }
)  # fmt: skip


def is_binary_file(file_name: str) -> bool:
    """Classify by extension only; git's own numstat detection is layered on top."""
    extension = PurePosixPath(file_name.replace("\\", "/")).suffix.lower()
    return extension in BINARY_EXTENSIONS
