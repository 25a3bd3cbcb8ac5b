from datetime import datetime, timezone


def time_ago(created_at: datetime, now: datetime | None = None) -> str:
    """Describe how long ago a timestamp was, in whole days/weeks/months."""
    if now is None:
        now = datetime.now(timezone.utc)
    # Compare naive and aware timestamps as UTC
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_in_days = int((now - created_at).total_seconds() // 86400)

    if diff_in_days == 0:
        return "Today"
    if diff_in_days == 1:
        return "Yesterday"
    if diff_in_days < 7:
        return f"{diff_in_days} days ago"
    if diff_in_days < 30:
        return f"{diff_in_days // 7} weeks ago"
    return f"{diff_in_days // 30} months ago"


def initials(name: str | None) -> str:
    """Return up to two initials for an avatar fallback."""
    if not name or not name.strip():
        return "U"
    parts = name.split()
    return "".join(p[0] for p in parts[:2]).upper()


def star_bar(rating: int) -> str:
    return "★" * rating + "☆" * (5 - rating)
