"""
config.py / patterns.py 모듈 단위 테스트
- DeliveryStatus: 상태 라벨
- FailureReason: 실패 사유 코드
- 필드 정규식 패턴
"""
import pytest
from src.config import DeliveryStatus, FailureReason, Constants
from src.patterns import (
    DELIVERY_DATE_PATTERN,
    DELIVERY_TIME_PATTERN,
    EXPECTED_DATE_PATTERN,
    WINDOW_START_PATTERN,
    WINDOW_END_PATTERN,
    find_field,
)

LINE = "2020-12-05T13:32 2020-12-05 13:30-14:00"


class TestDeliveryStatus:

    def test_labels(self):
        assert DeliveryStatus.EARLY == "early"
        assert DeliveryStatus.EARLY_ON_TIME == "early_on_time"
        assert DeliveryStatus.LATE_ON_TIME == "late_on_time"
        assert DeliveryStatus.LATE == "late"

    def test_all_unique(self):
        assert len(set(DeliveryStatus.ALL)) == 4

    def test_is_valid(self):
        assert DeliveryStatus.is_valid("late")
        assert not DeliveryStatus.is_valid("total")


class TestFailureReason:

    def test_reasons_unique(self):
        values = [v for k, v in vars(FailureReason).items() if k.isupper()]
        assert len(values) == len(set(values))


class TestConstants:

    def test_file_constants(self):
        assert Constants.DEFAULT_ENCODING == "utf-8"
        assert Constants.DECODE_ERRORS == "replace"
        assert Constants.JSON_INDENT == 2


# 정규식 패턴 테스트
class TestPatterns:

    @pytest.mark.parametrize("pattern, group, expected", [
        (DELIVERY_DATE_PATTERN, "date", "2020-12-05"),
        (DELIVERY_TIME_PATTERN, "time", "13:32"),
        (EXPECTED_DATE_PATTERN, "date", "2020-12-05"),
        (WINDOW_START_PATTERN, "time", "13:30"),
        (WINDOW_END_PATTERN, "time", "14:00"),
    ])
    def test_standard_line(self, pattern, group, expected):
        assert find_field(pattern, LINE, group) == expected

    def test_expected_date_needs_surrounding_spaces(self):
        """줄 맨 앞의 실제 배송 일자는 예상 일자로 잡히지 않음"""
        assert find_field(EXPECTED_DATE_PATTERN, "2020-12-05T13:32", "date") is None

    def test_expected_date_found_anywhere(self):
        assert find_field(EXPECTED_DATE_PATTERN, "x 2020-12-07 y", "date") == "2020-12-07"

    def test_window_start_is_first_spaced_time(self):
        assert find_field(WINDOW_START_PATTERN, "a 09:00-10:00 11:00", "time") == "09:00"

    def test_no_match(self):
        assert find_field(WINDOW_END_PATTERN, "13:30 14:00", "time") is None
