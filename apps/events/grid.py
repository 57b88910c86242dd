# apps/events/grid.py
"""
Month grid for the public calendar.

Weeks start on Sunday. A grid holds the blank cells before day 1 followed by
one cell per day of the month; events are matched to days by ISO date.
"""
import calendar
import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# Published HSGA circular HSGA/TG/025/2026
FALLBACK_EVENTS = [
    {'date': '2026-01-12', 'title': 'National Youth Day',
     'description': 'Programs on youth empowerment, leadership workshops, and rallies'},
    {'date': '2026-01-26', 'title': 'Republic Day',
     'description': 'Flag hoisting, march past & parade at schools and colleges'},
    {'date': '2026-02-22', 'title': 'World Scout Day',
     'description': 'Baden Powell Birthday celebration – scouting programs'},
    {'date': '2026-02-28', 'title': 'National Science Day',
     'description': 'Science exhibitions, workshops, and innovation challenges'},
    {'date': '2026-03-04', 'title': 'National Safety Day',
     'description': 'Awareness programs on industrial safety & disaster management'},
    {'date': '2026-03-08', 'title': 'World Women’s Day',
     'description': 'Women’s Day programs conducted by Guides (Girls)'},
    {'date': '2026-04-07', 'title': 'World Health Day',
     'description': 'Health awareness campaigns, blood donation & medical camps'},
    {'date': '2026-05-11', 'title': 'Mother’s Day',
     'description': 'Motivational classes on parental relations, essay writing, debates'},
    {'date': '2026-05-31', 'title': 'Anti-Tobacco Day',
     'description': 'Rallies and awareness campaigns on usage & ban of tobacco'},
    {'date': '2026-06-05', 'title': 'World Environment Day',
     'description': 'Plantation, Clean & Green, Swachh Bharat programs'},
    {'date': '2026-06-21', 'title': 'World Yoga Day',
     'description': 'Yoga events highlighting the necessity of yoga'},
    {'date': '2026-06-26', 'title': 'Intl Day Against Drug Abuse',
     'description': 'Anti-drug awareness campaigns, rallies, and workshops'},
    {'date': '2026-08-15', 'title': 'Indian Independence Day',
     'description': 'Flag hoisting, parades, pyramids & independence-related events'},
    {'date': '2026-09-05', 'title': 'Teachers’ Day',
     'description': 'Teachers’ Day celebrations'},
    {'date': '2026-09-16', 'title': 'World Ozone Day',
     'description': 'Awareness programs on “Save the Earth”'},
    {'date': '2026-10-02', 'title': 'Gandhi Jayanti',
     'description': 'Campaigns & competitions on Gandhiji’s role in freedom struggle'},
    {'date': '2026-10-21', 'title': 'Police Commemoration Day',
     'description': 'Prayers for police officers who sacrificed their lives'},
    {'date': '2026-11-14', 'title': 'Children’s Day',
     'description': 'Children’s Day programs, games, sports & events'},
    {'date': '2026-11-26', 'title': 'HSGA Formation Day',
     'description': 'Scouts & Guides programs, events, pyramids & HSGA scout flag hoisting'},
    {'date': '2026-12-01', 'title': 'World AIDS Day',
     'description': 'Health & medical camps, hospital service & HIV/AIDS awareness'},
    {'date': '2026-12-10', 'title': 'Human Rights Day',
     'description': 'Rallies and motivational classes on human rights'},
]


@dataclass
class CalendarCell:
    day: Optional[int] = None
    iso_date: Optional[str] = None
    events: List[Dict[str, Any]] = field(default_factory=list)
    is_today: bool = False

    @property
    def is_blank(self):
        return self.day is None


def leading_blanks(year, month):
    """Weekday of day 1 with Sunday as 0"""
    monday_based, _ = calendar.monthrange(year, month)
    return (monday_based + 1) % 7


def _event_date(event):
    value = event.get('date') if isinstance(event, dict) else getattr(event, 'date', None)
    if isinstance(value, datetime.date):
        return value.isoformat()
    return value


def layout(year: int, month: int, events: Iterable = (), today: Optional[datetime.date] = None) -> List[CalendarCell]:
    """
    Cells for one month: blanks for the days before the 1st, then one cell
    per day carrying every event dated that day.
    """
    events = list(events)
    cells = [CalendarCell() for _ in range(leading_blanks(year, month))]
    today_key = (today.year, today.month, today.day) if today else None

    for day in range(1, calendar.monthrange(year, month)[1] + 1):
        # years outside datetime.date range still get a cell
        iso_date = f"{year:04d}-{month:02d}-{day:02d}"
        cells.append(CalendarCell(
            day=day,
            iso_date=iso_date,
            events=[event for event in events if _event_date(event) == iso_date],
            is_today=(year, month, day) == today_key,
        ))
    return cells


def weeks(cells: List[CalendarCell]) -> List[List[CalendarCell]]:
    """Rows of seven; the last row is padded with blanks"""
    padded = cells + [CalendarCell() for _ in range(-len(cells) % 7)]
    return [padded[i:i + 7] for i in range(0, len(padded), 7)]


def merge_events(stored: Iterable) -> List[Dict[str, Any]]:
    """Fallback circular first, then stored events. Duplicates are kept."""
    return list(FALLBACK_EVENTS) + list(stored)


class MonthCursor:
    """
    The month on display. Only ``next``/``previous`` move it and neither is
    bounded.
    """

    def __init__(self, year: int, month: int):
        if not 1 <= month <= 12:
            raise ValueError(f"month must be in 1..12, got {month}")
        self.year = year
        self.month = month

    @classmethod
    def for_date(cls, value: datetime.date):
        return cls(value.year, value.month)

    def next(self):
        if self.month == 12:
            self.year, self.month = self.year + 1, 1
        else:
            self.month += 1
        return self

    def previous(self):
        if self.month == 1:
            self.year, self.month = self.year - 1, 12
        else:
            self.month -= 1
        return self

    @property
    def label(self):
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    def following(self):
        return MonthCursor(self.year, self.month).next()

    def preceding(self):
        return MonthCursor(self.year, self.month).previous()

    def __eq__(self, other):
        return isinstance(other, MonthCursor) and (self.year, self.month) == (other.year, other.month)

    def __repr__(self):
        return f"MonthCursor({self.year}, {self.month})"
