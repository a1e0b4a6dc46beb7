"""Text formatting for commit rows."""

from datetime import datetime


def format_date(date: datetime, now: datetime | None = None) -> str:
    """
    Format a commit date relative to now.

    Same day shows the time, then "Yesterday", then "N days ago" for the
    last week, then an absolute date like "Mar 5, 2024".
    """
    if now is None:
        now = datetime.now(date.tzinfo)
    elif (now.tzinfo is None) != (date.tzinfo is None):
        # Mixed naive/aware datetimes cannot be subtracted; compare wall-clock times
        date = date.replace(tzinfo=None) if date.tzinfo else date
        now = now.replace(tzinfo=None) if now.tzinfo else now

    diff_days = (now - date).days

    if diff_days <= 0:
        return date.strftime("%H:%M")
    if diff_days == 1:
        return "Yesterday"
    if diff_days < 7:
        return f"{diff_days} days ago"
    return f"{date.strftime('%b')} {date.day}, {date.year}"


def elide(text: str, max_chars: int) -> str:
    """Shorten text to max_chars, ending with an ellipsis if cut."""
    if len(text) <= max_chars:
        return text
    if max_chars <= 1:
        return text[:max_chars]
    return text[: max_chars - 1] + "…"
