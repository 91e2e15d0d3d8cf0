from __future__ import annotations

import re

# 모든 패턴은 re.ASCII: \d는 0-9만 매칭 (아라비아-인도 숫자 등 제외)

# 실제 배송 일자
# 예시: 2020-12-05T13:32 -> "2020-12-05" (뒤의 T는 제외)
DELIVERY_DATE_PATTERN = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})T", re.ASCII
)

# 실제 배송 시간
# 예시: 2020-12-05T13:32 -> "13:32"
DELIVERY_TIME_PATTERN = re.compile(
    r"T(?P<time>\d{2}:\d{2})", re.ASCII
)

# 예상 배송 일자
# 공백으로 둘러싸인 날짜 토큰. 위치와 무관하게 라인 어디서든 매칭
EXPECTED_DATE_PATTERN = re.compile(
    r" (?P<date>\d{4}-\d{2}-\d{2}) ", re.ASCII
)

# 예상 배송 구간 시작 시간 (공백 뒤 첫 HH:MM)
WINDOW_START_PATTERN = re.compile(
    r" (?P<time>\d{2}:\d{2})", re.ASCII
)

# 예상 배송 구간 종료 시간 (시작-종료 구분자 '-' 뒤의 HH:MM)
WINDOW_END_PATTERN = re.compile(
    r"-(?P<time>\d{2}:\d{2})", re.ASCII
)


def find_field(pattern: re.Pattern, line: str, group: str):
    # 첫 매칭의 그룹 값 반환, 매칭 없으면 None
    m = pattern.search(line)
    if m is None:
        return None
    return m.group(group)
