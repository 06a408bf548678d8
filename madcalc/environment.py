"""Settings for the madcalc shell and CLI, read from environment variables.

    MADCALC_PROMPT  Prompt shown before each shell line (default "> ").
    MADCALC_PLAIN   "1", "true" or "yes" drops the emoji from answers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    """Presentation settings shared by the shell and the CLI."""

    prompt: str = "> "
    emoji: bool = True


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``env`` (defaults to os.environ)."""
    env = os.environ if env is None else env
    plain = env.get("MADCALC_PLAIN", "").strip().lower() in _TRUTHY
    return Settings(
        prompt=env.get("MADCALC_PROMPT", "> "),
        emoji=not plain,
    )
