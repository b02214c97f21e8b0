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

DEFAULT_DEVELOPER_TYPE = "expert programmer"

_EXTENSION_GROUPS: dict[str, tuple[str, ...]] = {
    "JavaScript": (".js", ".jsx", ".mjs", ".cjs", ".mjsx", ".cjsx"),
    "TypeScript": (".ts", ".tsx", ".mts", ".cts", ".mtsx", ".ctsx"),
    "Python": (".py", ".pyi"),
    "Java": (".java", ".jsp"),
    "Scala": (".scala", ".sc"),
    "Kotlin": (".kt", ".kts"),
    "Groovy": (".groovy", ".gvy", ".gy", ".gsh"),
    "Ruby": (".rb",),
    "PHP": (".php", ".phtml"),
    "R-Lang": (".r",),
    "C": (".c",),
    "C#": (".cs",),
    "C++": (".cpp", ".cc", ".cxx", ".h", ".hpp"),
    "Go": (".go",),
    "ASP.NET": (".aspx", ".ascx", ".cshtml"),
    "Shell or batch scripts": (".sh", ".bash", ".bat", ".ps1", ".cmd"),
    "Frontend": (
        ".html",
        ".htm",
        ".css",
        ".less",
        ".scss",
        ".sass",
        ".styl",
        ".stylus",
        ".vue",
        ".ejs",
    ),
    "Rust": (".rs",),
    "SQL": (".sql",),
}

EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ext: language for language, exts in _EXTENSION_GROUPS.items() for ext in exts
}


def developer_type(file_name: str) -> str:
    """Persona for the prompt, picked from the file extension (case insensitive)."""
    extension = PurePosixPath(file_name.replace("\\", "/")).suffix.lower()
    language = EXTENSION_TO_LANGUAGE.get(extension)
    if language is None:
        return DEFAULT_DEVELOPER_TYPE
    return f"expert {language} developer"
