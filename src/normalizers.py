from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional


_DATE_TOKEN_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)
_TIME_TOKEN_PATTERN = re.compile(r"^(\d{2}):(\d{2})$", re.ASCII)


def parse_date(raw: Optional[str]) -> Optional[date]:
    """
    YYYY-MM-DD 문자열을 date로 해석
    실제 달력에 없는 날짜(13월, 2월 30일 등)는 None 반환
    """
    if raw is None:
        return None

    s = str(raw).strip()
    m = _DATE_TOKEN_PATTERN.match(s)
    if not m:
        return None

    y, mo, d = int(m.group(1)), int(m.group(2)), int(m.group(3))
    try:
        return date(y, mo, d)
    except ValueError:
        return None


def parse_time(raw: Optional[str]) -> Optional[time]:
    """
    HH:MM 문자열을 time으로 해석
    허용 범위: 00-23시, 00-59분 (24:00은 허용하지 않음)
    """
    if raw is None:
        return None

    s = str(raw).strip()
    m = _TIME_TOKEN_PATTERN.match(s)
    if not m:
        return None

    hh, mm = int(m.group(1)), int(m.group(2))
    if 0 <= hh <= 23 and 0 <= mm <= 59:
        return time(hh, mm)
    return None


def combine_date_time(raw_date: Optional[str], raw_time: Optional[str]) -> Optional[datetime]:
    # 날짜 + 시간 -> 비교 가능한 datetime (둘 중 하나라도 실패하면 None)
    d = parse_date(raw_date)
    t = parse_time(raw_time)
    if d is None or t is None:
        return None
    return datetime.combine(d, t)
