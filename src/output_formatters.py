from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, List

from .config import Constants, DeliveryStatus
from .error_handler import OutputError
from .schema import EvaluationResult
from .schemas import EvaluationOutputSchema, CSVRowSchema


# 파일명 규칙
class FileNamingConvention:
    """파일명 규칙"""

    @staticmethod
    def evaluation_result(stem: str) -> str:
        """평가 결과 파일명"""
        return f"{stem}_evaluation.json"

    @staticmethod
    def error_report(stem: str) -> str:
        """무효 라인 리포트 파일명"""
        return f"{stem}_error_report.txt"

    @staticmethod
    def summary_csv() -> str:
        """전체 요약 CSV 파일명"""
        return "summary.csv"


# 포맷터 함수
def format_evaluation_output(
    source: str,
    result: EvaluationResult
) -> EvaluationOutputSchema:
    """평가 결과 포맷 (일자 오름차순)"""
    dumped = result.model_dump(by_alias=True)
    metrics = dumped["deliveryMetrics"]
    return {
        "source": source,
        "deliveryMetrics": {d: metrics[d] for d in sorted(metrics)},
        "invalidLinesCount": dumped["invalidLinesCount"],
    }


# CSV 변환
def format_csv_rows(
    filename: str,
    result: EvaluationResult
) -> List[CSVRowSchema]:
    """평가 결과를 일자별 CSV 행으로 변환"""
    rows: List[CSVRowSchema] = []
    for expected_date in sorted(result.delivery_metrics):
        counts = result.delivery_metrics[expected_date]
        rows.append({
            "filename": filename,
            "expected_date": expected_date,
            "early": str(counts.early),
            "early_on_time": str(counts.early_on_time),
            "late_on_time": str(counts.late_on_time),
            "late": str(counts.late),
            "total": str(counts.total),
            "invalid_lines_count": str(result.invalid_lines_count),
        })
    return rows


CSV_FIELDNAMES = [
    "filename",
    "expected_date",
    *DeliveryStatus.ALL,
    "total",
    "invalid_lines_count",
]


def write_summary_csv(
    output_path: Path,
    rows: List[CSVRowSchema]
) -> None:
    if not rows:
        return

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", newline="", encoding=Constants.DEFAULT_ENCODING) as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDNAMES)
            writer.writeheader()
            writer.writerows(rows)
    except OSError as e:
        raise OutputError(f"CSV 저장 실패: {output_path}") from e


def write_json(path: Path, data: Any) -> None:
    """JSON 파일 쓰기"""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(data, ensure_ascii=False, indent=Constants.JSON_INDENT),
            encoding=Constants.DEFAULT_ENCODING
        )
    except OSError as e:
        raise OutputError(f"JSON 저장 실패: {path}") from e
