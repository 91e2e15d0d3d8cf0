from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .error_handler import ErrorHandler, LogFileNotFoundError, OutputError
from .logger import setup_logger, get_logger, log_step
from .output_formatters import (
    FileNamingConvention,
    format_evaluation_output,
    format_csv_rows,
    write_json,
    write_summary_csv,
)
from .pipeline import evaluate_log_file
from .schemas import CSVRowSchema
from .utils import build_evaluation_summary, format_console_output, format_metrics_table

ROOT = Path(__file__).resolve().parents[1]
RAW_DIR = ROOT / "data" / "raw"
PROCESSED_DIR = ROOT / "data" / "processed"
LOG_DIR = ROOT / "logs"

# 인자가 없을 때 처리할 기본 파일
DEFAULT_FILES = [RAW_DIR / "orders.txt"]

# 글로벌 로거
logger = None


# ============================================================================
# 단일 파일 처리 함수
# ============================================================================

def process_single_file(
    input_path: Path,
    output_dir: Optional[Path] = None
) -> Tuple[str, str, Dict[str, Any], List[CSVRowSchema]]:
    """
    단일 로그 파일 평가 및 산출물 저장

    Returns:
        (status, console_output, evaluation_output, csv_rows)
        status: "SUCCESS" | "MISSING"
    """
    output_dir = output_dir or PROCESSED_DIR
    error_handler = ErrorHandler(logger)

    try:
        with log_step(logger or get_logger(), f"{input_path.name} 평가"):
            result = evaluate_log_file(input_path, error_handler=error_handler)
    except LogFileNotFoundError:
        if logger:
            logger.warning(f"파일 없음: {input_path}")
        return "MISSING", "", {}, []

    stem = input_path.stem
    output = format_evaluation_output(input_path.name, result)
    write_json(output_dir / FileNamingConvention.evaluation_result(stem), output)

    # 무효 라인 사유 리포트
    if error_handler.errors:
        report_path = output_dir / FileNamingConvention.error_report(stem)
        try:
            report_path.write_text(error_handler.generate_error_report(input_path.name), encoding="utf-8")
        except OSError as e:
            raise OutputError(f"에러 리포트 저장 실패: {report_path}") from e

    summary = build_evaluation_summary(result)
    console_output = format_console_output(input_path.name, summary)

    return "SUCCESS", console_output, output, format_csv_rows(input_path.name, result)


# ============================================================================
# 메인 함수
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """메인 실행 함수, 반환값은 종료 코드 (파일 누락이 있으면 1)"""
    global logger

    args = sys.argv[1:] if argv is None else argv
    targets = [Path(a) for a in args] or DEFAULT_FILES

    logger = setup_logger(
        name="delivery_log",
        log_dir=LOG_DIR,
        console_level=logging.INFO
    )

    print(f"\n{'='*60}\n{'배송 로그 평가':^60}\n{'='*60}")
    logger.info(f"처리 대상: {len(targets)}개 파일")
    logger.info(f"출력 경로: {PROCESSED_DIR}")

    results: List[Tuple[str, str]] = []
    csv_rows: List[CSVRowSchema] = []

    for i, input_path in enumerate(targets, 1):
        status, console_output, output, rows = process_single_file(input_path, PROCESSED_DIR)

        if status == "SUCCESS":
            print(f"\n[{i}/{len(targets)}] ✓ {input_path.name}: 무효 라인 {output['invalidLinesCount']}개")
            print(format_metrics_table(output["deliveryMetrics"]))
            logger.debug(console_output)
            csv_rows.extend(rows)
        else:
            print(f"\n[{i}/{len(targets)}] ! {input_path.name}: 파일 없음")

        results.append((status, input_path.name))

    if csv_rows:
        csv_path = PROCESSED_DIR / FileNamingConvention.summary_csv()
        write_summary_csv(csv_path, csv_rows)
        logger.info(f"CSV 파일 생성: {csv_path}")

    success_count = sum(1 for r in results if r[0] == "SUCCESS")
    missing_count = len(results) - success_count

    print("\n결과 요약:")
    print(f"  전체:      {len(results)}개")
    print(f"  성공:      {success_count}개")
    print(f"  파일 없음: {missing_count}개")

    logger.info(f"처리 완료: 전체 {len(results)}개, 성공 {success_count}개")
    return 1 if missing_count else 0


if __name__ == "__main__":
    sys.exit(main())
