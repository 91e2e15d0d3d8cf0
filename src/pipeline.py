from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from .classifier import classify_delivery
from .error_handler import ErrorHandler, LineParseError
from .extractor import extract_raw_fields
from .loader import open_log_lines
from .logger import get_logger
from .schema import EvaluationResult
from .validators import parse_delivery

logger = get_logger(__name__)


def evaluate_line(line: str) -> Tuple[str, str]:
    # Extractor -> Validator -> Classifier 실행, (예상 배송 일자, 상태) 반환
    raw = extract_raw_fields(line)
    parsed = parse_delivery(raw)
    return parsed.expected_date, classify_delivery(parsed)


def evaluate_log_file(
    path: Union[str, Path],
    error_handler: Optional[ErrorHandler] = None,
) -> EvaluationResult:
    """
    배송 로그 파일 전체 평가: Loader -> (라인마다) Extractor -> Validator -> Classifier -> 집계

    - 파일이 없으면 LogFileNotFoundError, 부분 결과 없음
    - 형식이 맞지 않는 라인은 invalid_lines_count만 증가시키고 다음 라인으로 진행
    - 완전히 빈 라인(파일 끝 빈 줄 포함)만 세지 않음, 공백뿐인 라인은 무효
    - error_handler가 주어지면 라인별 실패 사유를 복구 가능한 에러로 기록
    """
    result = EvaluationResult()

    with open_log_lines(path) as lines:
        logger.info(f"로그 평가 시작: {path}")

        for line_no, line in enumerate(lines, 1):
            if not line:
                continue

            try:
                expected_date, status = evaluate_line(line)
            except LineParseError as e:
                result.invalid_lines_count += 1
                logger.debug(f"무효 라인 {line_no}: {e.reason} | {line!r}")
                if error_handler:
                    error_handler.handle_error(
                        error=e,
                        context=f"line {line_no}",
                        recoverable=True,
                        recovery_action="skip line",
                    )
                continue

            result.metrics_for(expected_date).record(status)

    logger.info(
        f"로그 평가 완료: 유효 {result.valid_lines_count}건, "
        f"무효 {result.invalid_lines_count}건, 일자 {len(result.delivery_metrics)}개"
    )
    return result
