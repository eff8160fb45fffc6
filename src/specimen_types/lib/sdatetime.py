# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

import re
from collections.abc import Iterable, Mapping, MutableMapping
from datetime import date as Date, datetime
from typing import Any, ClassVar

from ..config.app import logger, settings
from ..types import DatetimeSpec, as_spec
from .codecs import ArrowDateFormatter
from .protocols import DateFormatterP


class SDatetime:
    """
    Accessor over a datetime spec and its data.

    The data always holds three consistent views of the same instant:
    ``iso`` (UTC, eg. ``2011-10-05T14:48:00.000Z``), ``value`` (the instant
    formatted with the spec format) and ``format`` (the spec format).
    """

    MONTHS: ClassVar[list[str]] = [
        "january",
        "february",
        "march",
        "april",
        "may",
        "june",
        "july",
        "august",
        "september",
        "october",
        "november",
        "december",
    ]

    # indexed by datetime.weekday(), monday first
    DAYS: ClassVar[list[str]] = [
        "monday",
        "tuesday",
        "wednesday",
        "thursday",
        "friday",
        "saturday",
        "sunday",
    ]

    # misspelling accepted by older disabled lists
    DAY_ALIASES: ClassVar[dict[str, str]] = {"thuesday": "tuesday"}

    DATE_TOKENS = re.compile(r"(d{1,4}|D{1,2}|M{1,4}|Y{2,4})")
    TIME_TOKENS = re.compile(r"(h{1,2}|H{1,2}|m{1,2}|s{1,2}|S{1,3})")

    formatter: DateFormatterP = ArrowDateFormatter()

    @classmethod
    def parse(cls, date_string: str, format: str) -> datetime:
        return cls.formatter.parse(date_string, format)

    @classmethod
    def is_date_needed(cls, format: str) -> bool:
        return cls.DATE_TOKENS.search(format) is not None

    @classmethod
    def is_time_needed(cls, format: str) -> bool:
        return cls.TIME_TOKENS.search(format) is not None

    @classmethod
    def is_date_disabled(
        cls,
        date: datetime,
        disabled: Iterable[Any],
        formatter: DateFormatterP | None = None,
    ) -> bool:
        """
        Check date against a disabled list.

        :param date: the date to check
        :param disabled: entries matching an exact instant (ISO string or
            datetime), a calendar day (date), a year (int or 4-digit string),
            a month or weekday name, "week" (monday to friday) or "weekend"
        :param formatter: formatter used for ISO strings, the class one if None
        :return: True on the first matching entry
        """
        formatter = formatter or cls.formatter
        iso = formatter.to_iso(date)
        month = cls.MONTHS[date.month - 1]
        weekday = date.weekday()
        day = cls.DAYS[weekday]

        for item in disabled:

            if isinstance(item, datetime):
                if formatter.to_iso(item) == iso:
                    return True
                continue

            if isinstance(item, Date):
                if item == date.date():
                    return True
                continue

            if isinstance(item, bool):
                continue

            if isinstance(item, int):
                if item == date.year:
                    return True
                continue

            if not isinstance(item, str):
                continue

            if item == iso:
                return True

            key = item.strip().lower()
            if len(key) == 4 and key.isdigit() and int(key) == date.year:
                return True
            if key == month:
                return True
            if cls.DAY_ALIASES.get(key, key) == day:
                return True
            if key == "week" and weekday < 5:
                return True
            if key == "weekend" and weekday >= 5:
                return True

        return False

    def __init__(
        self,
        spec: DatetimeSpec | dict[str, Any],
        data: MutableMapping[str, Any],
        formatter: DateFormatterP | None = None,
    ):
        self._spec = as_spec(spec, DatetimeSpec)
        self._data = data
        if formatter is not None:
            self.formatter = formatter
        self._date: datetime
        # set the date to be used
        self.set(data)

    def set(self, data: Mapping[str, Any]) -> None:
        """
        Set the date from data and rewrite iso, format and value.

        The date comes from ``value`` + ``format`` when both are given, else
        from ``iso``, else it is now. ``format`` is always reset to the spec
        format, so a value given in another format is re-formatted.
        """
        if data.get("value") and data.get("format"):
            logger.debug("SDatetime: parsing %r as %r", data["value"], data["format"])
            self._date = self.formatter.parse(data["value"], data["format"])
        elif data.get("iso"):
            self._date = self.formatter.from_iso(data["iso"])
        else:
            logger.debug("SDatetime: no value nor iso, using now")
            self._date = self.formatter.now()

        self._data["iso"] = self.formatter.to_iso(self._date)
        self._data["format"] = self.spec_format
        self._data["value"] = self.format(self.spec_format)

    @property
    def spec_format(self) -> str:
        return self._spec.format or settings.DATETIME_FORMAT

    @property
    def date(self) -> datetime:
        return self._date

    @property
    def data(self) -> MutableMapping[str, Any]:
        return self._data

    # instance counterparts of is_date_needed() / is_time_needed()

    @property
    def date_needed(self) -> bool:
        return self.is_date_needed(self.spec_format)

    @property
    def time_needed(self) -> bool:
        return self.is_time_needed(self.spec_format)

    def is_disabled(self) -> bool:
        if not self._spec.disabled:
            return False
        return self.is_date_disabled(
            self._date, self._spec.disabled, formatter=self.formatter
        )

    def format(self, format: str) -> str:
        return self.formatter.format(self._date, format)

    def to_string(self) -> str:
        return self.format(self.spec_format)

    def __str__(self) -> str:
        return self.to_string()


# EOF
