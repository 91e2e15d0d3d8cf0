from __future__ import annotations

from typing import Any, Dict

from .config import DeliveryStatus
from .schema import EvaluationResult


def format_share(count: int, total: int) -> str:
    """
    건수를 비율 문자열로 포맷
    예시:
        - format_share(3, 12) => '3 (25.0%)'
        - format_share(0, 0) => '0 (-)'
    """
    if total <= 0:
        return f"{count} (-)"
    return f"{count} ({100 * count / total:.1f}%)"


# 전체 일자 합산 요약 생성
def build_evaluation_summary(result: EvaluationResult) -> Dict[str, Any]:

    totals = {status: 0 for status in DeliveryStatus.ALL}
    for counts in result.delivery_metrics.values():
        for status in DeliveryStatus.ALL:
            totals[status] += getattr(counts, status)

    valid = sum(totals.values())
    invalid = result.invalid_lines_count

    return {
        "dates": sorted(result.delivery_metrics),
        "valid_lines": valid,
        "invalid_lines": invalid,
        "processed_lines": valid + invalid,
        "by_status": totals,
        "on_time": totals[DeliveryStatus.EARLY_ON_TIME] + totals[DeliveryStatus.LATE_ON_TIME],
    }


# 요약 정보를 콘솔 출력 형식으로 포맷팅
def format_console_output(
    filename: str,
    summary: Dict[str, Any] # build_evaluation_summary()의 결과
) -> str:

    lines = []
    valid = summary["valid_lines"]

    lines.append(f"\n{'='*60}")
    lines.append(f"파일: {filename}")
    lines.append(f"{'='*60}")

    lines.append(f"  - 처리 라인: {summary['processed_lines']}개 (유효 {valid}개, 무효 {summary['invalid_lines']}개)")
    lines.append(f"  - 예상 배송 일자: {len(summary['dates'])}개")
    if summary["dates"]:
        lines.append(f"    · {summary['dates'][0]} ~ {summary['dates'][-1]}")

    lines.append(f"  - 상태별:")
    for status in DeliveryStatus.ALL:
        lines.append(f"    · {status:15s}: {format_share(summary['by_status'][status], valid)}")
    lines.append(f"  - 구간 내 도착: {format_share(summary['on_time'], valid)}")

    return "\n".join(lines)


# 일자별 집계 표 (format_evaluation_output()의 deliveryMetrics 기준)
def format_metrics_table(delivery_metrics: Dict[str, Dict[str, int]]) -> str:

    if not delivery_metrics:
        return "  (유효 배송 없음)"

    headers = ["expected_date", *DeliveryStatus.ALL, "total"]
    rows = [
        [expected_date] + [str(counts[h]) for h in headers[1:]]
        for expected_date, counts in delivery_metrics.items()
    ]
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]

    def _line(cells) -> str:
        return "  " + " | ".join(c.ljust(w) for c, w in zip(cells, widths))

    lines = [_line(headers), "  " + "-+-".join("-" * w for w in widths)]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines)
