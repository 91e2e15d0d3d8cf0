from __future__ import annotations

from typing import List, Tuple

from .config import FailureReason
from .error_handler import LineValidationError
from .normalizers import combine_date_time
from .schema import RawFields, ParsedDelivery


# 필수 필드 검사 순서
_REQUIRED_FIELDS: List[Tuple[str, str]] = [
    ("delivery_date", FailureReason.MISSING_DELIVERY_DATE),
    ("delivery_time", FailureReason.MISSING_DELIVERY_TIME),
    ("expected_date", FailureReason.MISSING_EXPECTED_DATE),
    ("window_start_time", FailureReason.MISSING_WINDOW_START),
    ("window_end_time", FailureReason.MISSING_WINDOW_END),
]


def parse_delivery(raw: RawFields) -> ParsedDelivery:
    """
    추출된 문자열을 검증하고 비교 가능한 일시로 변환

    검증 규칙 (순서대로, 첫 실패에서 중단):
    1. 필수 필드 5개 존재 여부
    2. 실제 배송 일시 해석 가능 여부
    3. 예상 구간 시작/종료 일시 해석 가능 여부
    4. 구간 시작 <= 구간 종료

    실패 시 LineValidationError(reason)을 던진다.
    """
    # 1. 필수 필드 검증
    for name, reason in _REQUIRED_FIELDS:
        if not getattr(raw, name):
            raise LineValidationError(reason)

    # 2. 실제 배송 일시
    delivered_at = combine_date_time(raw.delivery_date, raw.delivery_time)
    if delivered_at is None:
        raise LineValidationError(FailureReason.INVALID_DELIVERED_AT)

    # 3. 예상 구간 (날짜는 공통, 시간만 다름)
    window_start = combine_date_time(raw.expected_date, raw.window_start_time)
    if window_start is None:
        raise LineValidationError(FailureReason.INVALID_WINDOW_START)

    window_end = combine_date_time(raw.expected_date, raw.window_end_time)
    if window_end is None:
        raise LineValidationError(FailureReason.INVALID_WINDOW_END)

    # 4. 구간 관계 검증
    if window_start > window_end:
        raise LineValidationError(FailureReason.INVERTED_WINDOW)

    return ParsedDelivery(
        delivered_at=delivered_at,
        expected_date=raw.expected_date,
        window_start=window_start,
        window_end=window_end,
    )
