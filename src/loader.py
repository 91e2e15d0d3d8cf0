from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Union

from .config import Constants
from .error_handler import LogFileNotFoundError


def _iter_lines(f: IO[str]) -> Iterator[str]:
    # 줄바꿈 문자만 제거, 나머지 공백은 그대로 보존
    for line in f:
        yield line.rstrip("\r\n")


@contextmanager
def open_log_lines(path: Union[str, Path]) -> Iterator[Iterator[str]]:
    """
    배송 로그 파일을 열고 라인 이터레이터를 넘겨준다.
    - 파일이 없거나 읽을 수 없으면 라인을 하나도 읽기 전에 LogFileNotFoundError
    - UTF-8로 디코딩할 수 없는 바이트는 U+FFFD로 치환 (해당 라인만 추출 단계에서 무효)
    - with 블록을 벗어나면(예외 포함) 파일은 항상 닫힌다.
    """
    p = Path(path)
    if not p.is_file():
        raise LogFileNotFoundError(str(p))

    try:
        f = p.open(
            "r",
            encoding=Constants.DEFAULT_ENCODING,
            errors=Constants.DECODE_ERRORS,
            newline="",
        )
    except OSError as e:
        raise LogFileNotFoundError(str(p)) from e

    with f:
        yield _iter_lines(f)
