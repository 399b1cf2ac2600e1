from typing import Optional

from pe_stage.internal.constants import VERSION_PLACEHOLDER


def versioned_path(pattern: str, version: Optional[str]) -> str:
    """
    Substitutes ``version`` for every ``:version`` token in ``pattern``.

    Without a version the pattern is returned unexpanded, which is what the
    catalog and error messages show.
    """
    if version is None:
        return pattern
    return pattern.replace(VERSION_PLACEHOLDER, version)
