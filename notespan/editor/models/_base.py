from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode for persisted payloads from the environment.

    NOTESPAN_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> ignore
    """
    raw = (os.getenv("NOTESPAN_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "ignore"

    return default


_EXTRA = _env_extra_mode()


class WireModel(BaseModel):
    """
    Base for the persisted document payload.

    Unknown keys are ignored by default so blobs written by newer versions
    still load; set NOTESPAN_EXTRA=forbid before import to be strict.
    """

    model_config = ConfigDict(extra=_EXTRA)


__all__ = ["WireModel", "_env_extra_mode"]
