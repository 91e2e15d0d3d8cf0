from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Optional
from datetime import datetime
from time import perf_counter

class ColoredFormatter(logging.Formatter):
    """컬러 로그 포맷터"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m',
    }

    def format(self, record: logging.LogRecord) -> str:
        # 다른 핸들러가 같은 레코드를 쓰므로 원래 levelname 복원
        original = record.levelname
        if original in self.COLORS:
            record.levelname = f"{self.COLORS[original]}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original

def setup_logger(
    name: str = "delivery_log",
    log_dir: Optional[Path] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    enable_color: bool = True
) -> logging.Logger:

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    # 1) 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)

    if enable_color:
        console_format = "%(levelname)s | %(message)s"
        console_formatter = ColoredFormatter(console_format)
    else:
        console_format = "%(levelname)-8s | %(message)s"
        console_formatter = logging.Formatter(console_format)

    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # 2) 파일 핸들러
    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)

        # 파일명: evaluation_YYYYMMDD_HHMMSS.log
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"evaluation_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)

        file_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S")

        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        logger.info(f"로그 파일: {log_file}")

    return logger

def get_logger(name: str = "delivery_log") -> logging.Logger:
    # 모듈 로거(src.xxx)도 "delivery_log" 하위로 묶어 setup_logger 설정을 공유
    if name != "delivery_log" and not name.startswith("delivery_log."):
        name = f"delivery_log.{name}"
    return logging.getLogger(name)

@contextmanager
def log_step(logger: logging.Logger, message: str, level: int = logging.INFO):
    # 단계 시작/완료를 소요 시간과 함께 기록, 예외는 그대로 전파
    started = perf_counter()
    logger.log(level, f"▶ {message}")
    try:
        yield
    except Exception as e:
        logger.error(f"✗ {message} 실패 ({perf_counter() - started:.2f}초): {e}")
        raise
    logger.log(level, f"✓ {message} 완료 ({perf_counter() - started:.2f}초)")
