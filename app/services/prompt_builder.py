from __future__ import annotations

from datetime import date

INTEGRITY_CLAUSE = (
    "Answer the user's questions helpfully and accurately. If you don't have "
    "access to real-time information or are uncertain about something, say so "
    "clearly. Never fabricate specific facts, statistics, URLs, or citations."
)

LIVE_SOCIAL_DISCLAIMER = (
    "IMPORTANT: You are being accessed via the xAI API, which does NOT have live "
    "access to X (Twitter) posts or trends. You cannot see real-time X data. If "
    "asked about current X trends, tweets, or posts, you must clearly state that "
    "you don't have live X access via the API and cannot provide real-time "
    "information."
)


def format_today(today: date | None = None) -> str:
    """Human-readable date, e.g. ``Monday, January 1, 2024``."""
    d = today or date.today()
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def build_system_prompt(
    model_name: str,
    *,
    disclaim_live_social: bool = False,
    today: date | None = None,
) -> str:
    parts = [f"You are {model_name}. Today's date is {format_today(today)}."]
    if disclaim_live_social:
        parts.append(LIVE_SOCIAL_DISCLAIMER)
    parts.append(INTEGRITY_CLAUSE)
    return " ".join(parts)
