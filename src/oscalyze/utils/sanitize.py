"""Error message cleanup before terminal output."""

from __future__ import annotations

import os

MAX_MESSAGE_LENGTH = 500


def sanitize_error(message: str) -> str:
    """Redact the user's home directory and cap overly long parser messages."""
    if not message:
        return message

    sanitized = message
    home = os.environ.get("USERPROFILE") or os.environ.get("HOME") or ""
    if home and home != os.sep:
        sanitized = sanitized.replace(home, "[USER_HOME]")

    if len(sanitized) > MAX_MESSAGE_LENGTH:
        sanitized = sanitized[:MAX_MESSAGE_LENGTH] + "..."

    return sanitized
