"""
schema.py 모델 테스트
- DeliveryCount: 상태별 집계 및 total 일관성
- EvaluationResult: 일자 키 지연 생성, 외부 키 이름
"""
import pytest
from pydantic import ValidationError
from src.config import DeliveryStatus
from src.schema import DeliveryCount, EvaluationResult


class TestDeliveryCount:

    def test_defaults_zero(self):
        counts = DeliveryCount()

        assert counts.early == 0
        assert counts.early_on_time == 0
        assert counts.late_on_time == 0
        assert counts.late == 0
        assert counts.total == 0

    def test_record_increments_status_and_total(self):
        """상태 1개 + total 동시 증가"""
        counts = DeliveryCount()
        counts.record(DeliveryStatus.LATE)
        counts.record(DeliveryStatus.LATE)
        counts.record(DeliveryStatus.EARLY_ON_TIME)

        assert counts.late == 2
        assert counts.early_on_time == 1
        assert counts.early == 0
        assert counts.total == 3

    def test_record_unknown_status(self):
        counts = DeliveryCount()
        with pytest.raises(ValueError):
            counts.record("on_time")
        assert counts.total == 0

    def test_inconsistent_total_rejected(self):
        """total != 상태 합이면 생성 실패"""
        with pytest.raises(ValidationError):
            DeliveryCount(early=1, total=2)

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            DeliveryCount(early=-1, late=1, total=0)


class TestEvaluationResult:

    def test_metrics_for_creates_lazily(self):
        """첫 접근 시에만 일자 키 생성"""
        result = EvaluationResult()
        assert result.delivery_metrics == {}

        first = result.metrics_for("2020-12-05")
        first.record(DeliveryStatus.EARLY)

        assert result.metrics_for("2020-12-05") is first
        assert list(result.delivery_metrics) == ["2020-12-05"]

    def test_valid_lines_count(self):
        result = EvaluationResult()
        result.metrics_for("2020-12-05").record(DeliveryStatus.EARLY)
        result.metrics_for("2020-12-06").record(DeliveryStatus.LATE)

        assert result.valid_lines_count == 2

    def test_dump_by_alias(self):
        """외부 키 이름: deliveryMetrics / invalidLinesCount"""
        result = EvaluationResult(invalid_lines_count=3)
        result.metrics_for("2020-12-05").record(DeliveryStatus.LATE_ON_TIME)

        dumped = result.model_dump(by_alias=True)

        assert dumped["invalidLinesCount"] == 3
        assert dumped["deliveryMetrics"]["2020-12-05"] == {
            "early_on_time": 0,
            "late_on_time": 1,
            "early": 0,
            "late": 0,
            "total": 1,
        }

    def test_construct_by_alias(self):
        result = EvaluationResult(deliveryMetrics={}, invalidLinesCount=2)

        assert result.invalid_lines_count == 2
