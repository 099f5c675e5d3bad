# Standard library imports
from pathlib import PurePath
import re


def normalize_file_name(value: str | None) -> str | None:
    """
    Normalise an uploaded file name for use inside a storage key.

    Drops any directory part, lowercases, and replaces whitespace and
    characters outside ``[a-z0-9._-]`` with underscores.
    """
    if value is None:
        return None

    name = PurePath(value.replace("\\", "/")).name.lower()
    name = re.sub(r"\s+", "_", name)
    return re.sub(r"[^a-z0-9._-]", "_", name) or None
