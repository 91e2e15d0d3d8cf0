from __future__ import annotations

from typing import Dict, TypedDict

# 일자별 집계 출력 스키마
class DeliveryCountSchema(TypedDict):
    early_on_time: int
    late_on_time: int
    early: int
    late: int
    total: int


# 평가 결과 출력 파일 스키마 (키 이름은 외부 계약 그대로)
EvaluationOutputSchema = TypedDict(
    "EvaluationOutputSchema",
    {
        "source": str,
        "deliveryMetrics": Dict[str, DeliveryCountSchema],
        "invalidLinesCount": int,
    },
)


# CSV 출력 스키마
class CSVRowSchema(TypedDict):
    filename: str
    expected_date: str
    early: str
    early_on_time: str
    late_on_time: str
    late: str
    total: str
    invalid_lines_count: str



# 스키마 검증 함수
def validate_evaluation_output(data: dict) -> bool:
    """평가 결과 출력 스키마 검증"""
    if not all(k in data for k in ("source", "deliveryMetrics", "invalidLinesCount")):
        return False

    # 일자별 집계 검증: 필수 키 + total 일관성
    required = set(DeliveryCountSchema.__annotations__)
    for counts in data["deliveryMetrics"].values():
        if not required.issubset(counts):
            return False
        status_sum = counts["early"] + counts["early_on_time"] + counts["late_on_time"] + counts["late"]
        if counts["total"] != status_sum:
            return False

    return True


# 스키마 템플릿 (빈 데이터)
def get_empty_evaluation_output(source: str) -> EvaluationOutputSchema:
    """빈 평가 결과 템플릿"""
    return {
        "source": source,
        "deliveryMetrics": {},
        "invalidLinesCount": 0,
    }
