import pytest
from pathlib import Path
from typing import Callable, List

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def data_dir() -> Path:
    # 고정 샘플 로그 파일 위치
    return DATA_DIR


@pytest.fixture
def write_log(tmp_path) -> Callable[[List[str]], Path]:
    # 라인 목록으로 임시 로그 파일 생성
    def _write(lines: List[str], name: str = "deliveries.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_line() -> str:
    return "2020-12-05T13:32 2020-12-05 13:30-14:00"


@pytest.fixture
def sample_lines() -> List[str]:
    # early / early_on_time / late_on_time / late 각 1건 + 무효 1건
    return [
        "2020-12-05T13:10 2020-12-05 13:30-14:00",
        "2020-12-05T13:32 2020-12-05 13:30-14:00",
        "2020-12-05T13:50 2020-12-05 13:30-14:00",
        "2020-12-05T14:10 2020-12-05 13:30-14:00",
        "not a delivery record",
    ]
