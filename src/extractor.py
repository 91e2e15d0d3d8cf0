from __future__ import annotations

import re
from typing import List, Tuple

from .config import FailureReason
from .error_handler import ExtractError
from .patterns import (
    DELIVERY_DATE_PATTERN,
    DELIVERY_TIME_PATTERN,
    EXPECTED_DATE_PATTERN,
    WINDOW_START_PATTERN,
    WINDOW_END_PATTERN,
    find_field,
)
from .schema import RawFields


# (필드명, 패턴, 그룹명, 실패 사유) - 이 순서대로 독립적으로 검색
_FIELD_RULES: List[Tuple[str, re.Pattern, str, str]] = [
    ("delivery_date", DELIVERY_DATE_PATTERN, "date", FailureReason.NO_DELIVERY_DATE),
    ("delivery_time", DELIVERY_TIME_PATTERN, "time", FailureReason.NO_DELIVERY_TIME),
    ("expected_date", EXPECTED_DATE_PATTERN, "date", FailureReason.NO_EXPECTED_DATE),
    ("window_start_time", WINDOW_START_PATTERN, "time", FailureReason.NO_WINDOW_START),
    ("window_end_time", WINDOW_END_PATTERN, "time", FailureReason.NO_WINDOW_END),
]


def extract_raw_fields(line: str) -> RawFields:
    """
    로그 라인 1개에서 날짜/시간 문자열 5개를 추출

    예: "2020-12-05T13:32 2020-12-05 13:30-14:00"
      -> delivery_date="2020-12-05", delivery_time="13:32",
         expected_date="2020-12-05", window_start_time="13:30", window_end_time="14:00"

    각 필드는 같은 라인에 대해 별도로 검색하며, 첫 실패에서 ExtractError를 던진다.
    """
    values = {}
    for name, pattern, group, reason in _FIELD_RULES:
        value = find_field(pattern, line, group)
        if value is None:
            raise ExtractError(reason, line)
        values[name] = value

    return RawFields(**values)
