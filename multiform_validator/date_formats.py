import calendar
import datetime
import re
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

# Longest tokens first so "MMMM" is not read as "MM" + "MM".
TOKEN_RE = re.compile(r"yyyy|yy|MMMM|MMM|MM|dd|HH|mm|ss|'[^']*'|.")

MONTHS_SHORT: Dict[str, int] = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}
MONTHS_FULL: Dict[str, int] = {
    "January": 1,
    "February": 2,
    "March": 3,
    "April": 4,
    "May": 5,
    "June": 6,
    "July": 7,
    "August": 8,
    "September": 9,
    "October": 10,
    "November": 11,
    "December": 12,
}

TWO_DIGIT_YEAR_BASE = 2000

_TOKEN_GROUPS = {
    "yyyy": r"(?P<year>[0-9]{4})",
    "yy": r"(?P<year2>[0-9]{2})",
    "MMMM": "(?P<month_full>" + "|".join(MONTHS_FULL) + ")",
    "MMM": "(?P<month_short>" + "|".join(MONTHS_SHORT) + ")",
    "MM": r"(?P<month>[0-9]{2})",
    "dd": r"(?P<day>[0-9]{2})",
    "HH": r"(?P<hour>[0-9]{2})",
    "mm": r"(?P<minute>[0-9]{2})",
    "ss": r"(?P<second>[0-9]{2})",
}


def compile_layout(layout: str) -> re.Pattern:
    """Turn a token layout such as ``dd-MMM-yyyy HH:mm:ss`` into a full-match pattern."""
    parts = []
    for token in TOKEN_RE.findall(layout):
        if token in _TOKEN_GROUPS:
            parts.append(_TOKEN_GROUPS[token])
        elif token.startswith("'") and len(token) > 1:
            parts.append(re.escape(token[1:-1]))
        else:
            parts.append(re.escape(token))
    return re.compile("".join(parts))


class DateFormat(BaseModel):
    """A named date layout, optionally with a time component."""

    model_config = ConfigDict(frozen=True)

    name: str
    layout: str
    has_time: bool
    pattern: re.Pattern

    def parse(self, text: str) -> datetime.date | datetime.datetime | None:
        match = self.pattern.fullmatch(text)
        if match is None:
            return None
        fields = match.groupdict()

        if fields.get("year") is not None:
            year = int(fields["year"])
        else:
            year = TWO_DIGIT_YEAR_BASE + int(fields["year2"])

        if fields.get("month") is not None:
            month = int(fields["month"])
        elif fields.get("month_short") is not None:
            month = MONTHS_SHORT[fields["month_short"]]
        else:
            month = MONTHS_FULL[fields["month_full"]]

        day = int(fields["day"])
        try:
            # Days 29-31 past the end of the month resolve to its last day.
            if 1 <= month <= 12 and 1 <= day <= 31:
                day = min(day, calendar.monthrange(year, month)[1])
            if not self.has_time:
                return datetime.date(year, month, day)
            return datetime.datetime(
                year,
                month,
                day,
                int(fields["hour"]),
                int(fields["minute"]),
                int(fields["second"]),
            )
        except ValueError:
            return None


def date_format(name: str, layout: str, has_time: bool = False) -> DateFormat:
    return DateFormat(name=name, layout=layout, has_time=has_time, pattern=compile_layout(layout))


DATE_FORMATS: Tuple[DateFormat, ...] = (
    date_format("iso", "yyyy-MM-dd"),
    date_format("us", "MM/dd/yyyy"),
    date_format("eu_dash", "dd-MM-yyyy"),
    date_format("iso_slash", "yyyy/MM/dd"),
    date_format("eu_dot", "dd.MM.yyyy"),
    date_format("iso_dot", "yyyy.MM.dd"),
    date_format("month_short", "dd-MMM-yyyy"),
    date_format("month_full", "dd-MMMM-yyyy"),
    date_format("month_short_yy", "dd-MMM-yy"),
    date_format("month_full_yy", "dd-MMMM-yy"),
)

DATE_TIME_FORMATS: Tuple[DateFormat, ...] = (
    date_format("iso_t", "yyyy-MM-dd'T'HH:mm:ss", has_time=True),
    date_format("iso_space", "yyyy-MM-dd HH:mm:ss", has_time=True),
    date_format("iso_slash", "yyyy/MM/dd HH:mm:ss", has_time=True),
    date_format("eu_dash", "dd-MM-yyyy HH:mm:ss", has_time=True),
    date_format("eu_dot", "dd.MM.yyyy HH:mm:ss", has_time=True),
    date_format("iso_dot", "yyyy.MM.dd HH:mm:ss", has_time=True),
    date_format("month_short", "dd-MMM-yyyy HH:mm:ss", has_time=True),
    date_format("month_full", "dd-MMMM-yyyy HH:mm:ss", has_time=True),
    date_format("month_short_yy", "dd-MMM-yy HH:mm:ss", has_time=True),
    date_format("month_full_yy", "dd-MMMM-yy HH:mm:ss", has_time=True),
)
