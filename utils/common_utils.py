import logging
import re
import time
from datetime import datetime
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_price(text: str) -> float:
    """'$29.99' -> 29.99"""
    return float(text.replace("$", "").strip())


def format_currency(amount: float) -> str:
    return f"${amount:.2f}"


# ================= 排序判断 =================
def is_sorted_ascending(values: list) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def is_sorted_descending(values: list) -> bool:
    return all(a >= b for a, b in zip(values, values[1:]))


def is_sorted_alphabetically(names: list[str]) -> bool:
    """A-Z，忽略大小写"""
    return is_sorted_ascending([n.lower() for n in names])


def is_sorted_reverse_alphabetically(names: list[str]) -> bool:
    """Z-A，忽略大小写"""
    return is_sorted_descending([n.lower() for n in names])


# ================= 重试 =================
def retry(fn: Callable[[], T], max_attempts: int = 3, delay: int = 1000) -> T:
    """最多执行 max_attempts 次，每次失败后固定等待 delay 毫秒；全部失败抛出最后一次的异常"""
    if max_attempts < 1:
        raise ValueError(f"max_attempts 必须 >= 1：{max_attempts}")

    for attempt in range(1, max_attempts + 1):
        try:
            return fn()
        except Exception as e:
            if attempt == max_attempts:
                raise
            logger.warning("第 %s/%s 次执行失败：%s，%sms 后重试", attempt, max_attempts, e, delay)
            time.sleep(delay / 1000)


def get_timestamp() -> str:
    """2026-01-01T10-00-00-123456，可直接用作文件名"""
    return re.sub(r"[:.]", "-", datetime.now().isoformat())
