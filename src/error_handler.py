from __future__ import annotations

import traceback
from typing import Optional, Dict, Any, List
from dataclasses import dataclass


# 커스텀 예외 클래스
class PipelineError(Exception):
    """파이프라인 기본 예외"""
    pass


class LogFileNotFoundError(PipelineError, FileNotFoundError):
    """로그 파일이 없거나 읽을 수 없음 (호출 전체 중단)"""

    def __init__(self, path: str):
        super().__init__(f"file not found: {path}")
        self.path = path


class LineParseError(PipelineError):
    """라인 단위 실패 (해당 라인만 건너뜀)"""

    def __init__(self, reason: str, line: str = ""):
        super().__init__(reason)
        self.reason = reason
        self.line = line


class ExtractError(LineParseError):
    """추출 단계 실패"""
    pass


class LineValidationError(LineParseError):
    """검증 실패"""
    pass


class OutputError(PipelineError):
    """출력 생성 실패"""
    pass


# 에러 정보 데이터 클래스
@dataclass
class ErrorInfo:
    error_type: str
    error_message: str
    context: str
    reason: Optional[str] = None
    traceback_str: Optional[str] = None
    recoverable: bool = False
    recovery_action: Optional[str] = None


# 에러 핸들러
class ErrorHandler:

    def __init__(self, logger=None):
        self.logger = logger
        self.errors: List[ErrorInfo] = []

    def handle_error(
        self,
        error: Exception,
        context: str = "",
        recoverable: bool = False,
        recovery_action: Optional[str] = None
    ) -> ErrorInfo:

        error_info = ErrorInfo(
            error_type=type(error).__name__,
            error_message=str(error),
            context=context,
            reason=getattr(error, "reason", None),
            traceback_str=None if recoverable else traceback.format_exc(),
            recoverable=recoverable,
            recovery_action=recovery_action
        )

        self.errors.append(error_info)

        if self.logger:
            if recoverable:
                self.logger.debug(f"복구 가능한 에러 [{context}]: {error_info.error_type} - {error_info.error_message}")
                if recovery_action:
                    self.logger.debug(f"  복구 액션: {recovery_action}")
            else:
                self.logger.error(f"치명적 에러 [{context}]: {error_info.error_type} - {error_info.error_message}")
                self.logger.debug(f"스택 트레이스:\n{error_info.traceback_str}")

        return error_info

    def get_error_summary(self) -> Dict[str, Any]:
        """에러 요약 정보 반환"""
        total_errors = len(self.errors)
        recoverable_count = sum(1 for e in self.errors if e.recoverable)
        critical_count = total_errors - recoverable_count

        error_types: Dict[str, int] = {}
        reasons: Dict[str, int] = {}
        for error in self.errors:
            error_types[error.error_type] = error_types.get(error.error_type, 0) + 1
            if error.reason:
                reasons[error.reason] = reasons.get(error.reason, 0) + 1

        return {
            "total": total_errors,
            "recoverable": recoverable_count,
            "critical": critical_count,
            "by_type": error_types,
            "by_reason": reasons,
        }

    def has_critical_errors(self) -> bool:
        """치명적 에러가 있는지 확인"""
        return any(not e.recoverable for e in self.errors)

    def clear_errors(self) -> None:
        """에러 목록 초기화"""
        self.errors.clear()

    def generate_error_report(self, source: str = "") -> str:
        """
        무효 라인 리포트 생성
        - 사유별 건수 요약 후, 라인 번호(context)와 사유를 한 줄씩 나열
        """
        if not self.errors:
            return "에러 없음"

        summary = self.get_error_summary()
        title = f"무효 라인 리포트: {source}" if source else "무효 라인 리포트"

        lines = [title, "=" * 60]
        lines.append(f"총 {summary['total']}건 (건너뜀 {summary['recoverable']}건, 치명적 {summary['critical']}건)")

        if summary["by_reason"]:
            lines.append("")
            lines.append("사유별:")
            width = max(len(r) for r in summary["by_reason"])
            for reason, count in sorted(summary["by_reason"].items(), key=lambda kv: (-kv[1], kv[0])):
                lines.append(f"  {reason.ljust(width)}  {count}건")

        lines.append("")
        lines.append("상세:")
        for error in self.errors:
            detail = error.reason or f"{error.error_type}: {error.error_message}"
            lines.append(f"  [{error.context or '-'}] {detail}")
            if not error.recoverable and error.traceback_str:
                # 치명적 에러만 마지막 스택 한 줄
                lines.append(f"      {error.traceback_str.strip().splitlines()[-1]}")

        return "\n".join(lines)
