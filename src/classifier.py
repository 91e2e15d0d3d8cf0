from __future__ import annotations

from datetime import datetime

from .config import DeliveryStatus
from .schema import ParsedDelivery


def window_midpoint(parsed: ParsedDelivery) -> datetime:
    # 예상 구간의 중간 시점
    return parsed.window_start + (parsed.window_end - parsed.window_start) / 2


def classify_delivery(parsed: ParsedDelivery) -> str:
    """
    실제 배송 일시를 예상 구간과 비교해 상태 라벨 1개를 반환

    - delivered_at <  window_start       -> early
    - delivered_at >= window_end         -> late
    - delivered_at <  구간 중간 시점     -> early_on_time
    - 그 외                              -> late_on_time

    구간 폭이 0이면 late 검사가 먼저 걸리므로 on-time 라벨은 나오지 않는다.
    """
    if parsed.delivered_at < parsed.window_start:
        return DeliveryStatus.EARLY
    if parsed.delivered_at >= parsed.window_end:
        return DeliveryStatus.LATE

    if parsed.delivered_at < window_midpoint(parsed):
        return DeliveryStatus.EARLY_ON_TIME
    return DeliveryStatus.LATE_ON_TIME
