from dataclasses import dataclass
from datetime import datetime
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import DeliveryStatus


@dataclass
class RawFields:
    """
    Extractor의 출력 모델
    - 라인 하나에서 정규식으로 잘라낸 문자열 5개 (해석 전 상태 그대로)
    - 하나라도 비어 있으면 Validator 단계에서 라인 전체가 무효 처리된다.
    """
    delivery_date: str
    delivery_time: str
    expected_date: str
    window_start_time: str
    window_end_time: str


@dataclass
class ParsedDelivery:
    """
    Validator의 출력 모델
    - delivered_at: 실제 배송 일시
    - expected_date: 예상 배송 일자 문자열(YYYY-MM-DD), 집계 키
    - window_start / window_end: 예상 배송 구간 (window_start <= window_end 보장)
    """
    delivered_at: datetime
    expected_date: str
    window_start: datetime
    window_end: datetime


class DeliveryCount(BaseModel):
    """
    예상 배송 일자 하나에 대한 상태별 집계
    - total은 항상 네 상태 카운터의 합과 같아야 한다.
    """

    early_on_time: int = Field(0, ge=0, description="구간 전반부 도착 건수")
    late_on_time: int = Field(0, ge=0, description="구간 후반부 도착 건수")
    early: int = Field(0, ge=0, description="구간 시작 전 도착 건수")
    late: int = Field(0, ge=0, description="구간 종료 이후 도착 건수")
    total: int = Field(0, ge=0, description="전체 배송 건수")

    @model_validator(mode="after")
    def check_total(self) -> "DeliveryCount":
        expected = self.early + self.early_on_time + self.late_on_time + self.late
        if self.total != expected:
            raise ValueError(f"total({self.total}) != sum of statuses({expected})")
        return self

    def record(self, status: str) -> None:
        # 상태 카운터와 total을 항상 함께 증가
        if not DeliveryStatus.is_valid(status):
            raise ValueError(f"unknown delivery status: {status}")
        setattr(self, status, getattr(self, status) + 1)
        self.total += 1


class EvaluationResult(BaseModel):
    """
    배송 로그 파일 1개에 대한 최종 평가 결과
    - 유효 라인은 delivery_metrics에, 무효 라인은 invalid_lines_count에만 반영
    """

    model_config = ConfigDict(populate_by_name=True)

    delivery_metrics: Dict[str, DeliveryCount] = Field(
        default_factory=dict,
        alias="deliveryMetrics",
        description="예상 배송 일자(YYYY-MM-DD) -> 상태별 집계",
    )
    invalid_lines_count: int = Field(
        0,
        ge=0,
        alias="invalidLinesCount",
        description="형식이 맞지 않아 건너뛴 라인 수",
    )

    def metrics_for(self, expected_date: str) -> DeliveryCount:
        # 첫 유효 라인에서 키 생성
        if expected_date not in self.delivery_metrics:
            self.delivery_metrics[expected_date] = DeliveryCount()
        return self.delivery_metrics[expected_date]

    @property
    def valid_lines_count(self) -> int:
        return sum(c.total for c in self.delivery_metrics.values())
