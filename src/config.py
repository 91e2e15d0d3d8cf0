"""
배송 로그 평가 설정 및 정책 상수
"""
from __future__ import annotations

from typing import Tuple

# ============================================================================
# 배송 상태 라벨 (Classifier)
# ============================================================================

class DeliveryStatus:
    """배송 적시성 분류 라벨"""

    EARLY = "early"                  # 예상 구간 시작 전
    EARLY_ON_TIME = "early_on_time"  # 구간 전반부
    LATE_ON_TIME = "late_on_time"    # 구간 후반부
    LATE = "late"                    # 구간 종료 시각 이후

    # 출력/집계 순서
    ALL: Tuple[str, ...] = (EARLY, EARLY_ON_TIME, LATE_ON_TIME, LATE)

    @classmethod
    def is_valid(cls, status: str) -> bool:
        return status in cls.ALL


# ============================================================================
# 라인 실패 사유 코드 (Extractor / Validator)
# ============================================================================

class FailureReason:
    """라인 단위 추출/검증 실패 사유"""

    # 추출 단계
    NO_DELIVERY_DATE = "no_delivery_date"
    NO_DELIVERY_TIME = "no_delivery_time"
    NO_EXPECTED_DATE = "no_expected_date"
    NO_WINDOW_START = "no_window_start_time"
    NO_WINDOW_END = "no_window_end_time"

    # 검증 단계 (필수 필드)
    MISSING_DELIVERY_DATE = "missing_required_field:delivery_date"
    MISSING_DELIVERY_TIME = "missing_required_field:delivery_time"
    MISSING_EXPECTED_DATE = "missing_required_field:expected_date"
    MISSING_WINDOW_START = "missing_required_field:window_start_time"
    MISSING_WINDOW_END = "missing_required_field:window_end_time"

    # 검증 단계 (날짜/시간 해석)
    INVALID_DELIVERED_AT = "unparsable_datetime:delivered_at"
    INVALID_WINDOW_START = "unparsable_datetime:window_start"
    INVALID_WINDOW_END = "unparsable_datetime:window_end"

    # 검증 단계 (구간 관계)
    INVERTED_WINDOW = "invalid_window_relation:start_after_end"


# ============================================================================
# 기타 상수
# ============================================================================

class Constants:
    """기타 파이프라인 상수"""

    # 날짜/시간 형식
    DATE_FORMAT = "%Y-%m-%d"
    TIME_FORMAT = "%H:%M"

    # 파일 입출력
    DEFAULT_ENCODING = "utf-8"
    DECODE_ERRORS = "replace"
    JSON_INDENT = 2
