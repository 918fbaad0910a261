"""
Edit-region detection between two buffer states.

Only one contiguous changed region is detected (common prefix + common
suffix). That matches single-cursor typing, pasting and deleting. Edits at
several disjoint points at once (e.g. a bulk find/replace applied
programmatically) are reported as one large region spanning all of them, so
spans inside that region collapse to its start.
"""

from __future__ import annotations

import logging

from .domain import EditRegion

LOGGER = logging.getLogger(__name__)


def compute_edit_region(old_text: str, new_text: str) -> EditRegion:
    old_n = len(old_text)
    new_n = len(new_text)
    shorter = min(old_n, new_n)

    prefix = 0
    while prefix < shorter and old_text[prefix] == new_text[prefix]:
        prefix += 1

    # The suffix scan must not re-use characters counted in the prefix.
    suffix = 0
    limit = shorter - prefix
    while (
        suffix < limit and old_text[old_n - 1 - suffix] == new_text[new_n - 1 - suffix]
    ):
        suffix += 1

    region = EditRegion(
        prefix_len=prefix,
        old_len=old_n - prefix - suffix,
        new_len=new_n - prefix - suffix,
    )
    LOGGER.debug(
        "editor.diff prefix=%d old_len=%d new_len=%d delta=%d",
        region.prefix_len,
        region.old_len,
        region.new_len,
        region.delta,
    )
    return region
