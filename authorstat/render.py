"""Render an author report as tab-separated lines."""

import datetime
from typing import Optional

from authorstat.authordef import AuthorStats, Report


def plural(count: int, unit: str) -> str:
    return f'{count} {unit}' if count == 1 else f'{count} {unit}s'


def whole_months(start: datetime.datetime, end: datetime.datetime) -> int:
    """Number of complete calendar months from start to end, never negative.

    Both times must be in the same time zone.
    """
    months = (end.year - start.year) * 12 + end.month - start.month
    if (end.day, end.time()) < (start.day, start.time()):
        # The last month isn't complete yet
        months -= 1
    return max(months, 0)


def describe_span(first_seen: datetime.datetime, now: datetime.datetime) -> str:
    """Describe how long an author has been contributing.

    For example: "from February 2025 to present (1 year 8 months)"
    now must be timezone aware; first_seen is shown in the time zone of now.
    """
    start = first_seen.astimezone(now.tzinfo)
    years, months = divmod(whole_months(start, now), 12)
    parts = []
    if years:
        parts.append(plural(years, 'year'))
    if months:
        parts.append(plural(months, 'month'))
    duration = ' '.join(parts) if parts else 'less than a month'
    return f'from {start:%B %Y} to present ({duration})'


def clean_field(text: str) -> str:
    """Keep separator characters out of a text field."""
    return text.replace('\t', ' ').replace('\r', ' ').replace('\n', ' ')


def render_row(stats: AuthorStats, now: datetime.datetime, module: Optional[str] = None) -> str:
    fields = [clean_field(stats.display_name),
              clean_field(stats.email),
              str(stats.commit_count),
              str(stats.total_added),
              str(stats.total_removed),
              describe_span(stats.first_seen, now)]
    if module:
        fields.insert(0, clean_field(module))
    return '\t'.join(fields)


def render_report(report: Report, now: datetime.datetime,
                  module: Optional[str] = None) -> list[str]:
    """Return one line per author in report order; no header line."""
    return [render_row(stats, now, module) for stats in report]
