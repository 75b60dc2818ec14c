"""运行配置：从环境变量（可选 .env 文件）读取，带默认值

    BASE_URL=https://www.saucedemo.com HEADLESS=false BROWSER=firefox pytest
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from config.constants import TIMEOUTS
from utils.exceptions import ConfigError

load_dotenv()

BROWSERS = ("chromium", "firefox", "webkit")


def env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


def env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"环境变量 {name} 必须是整数：{value!r}") from None


def env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"环境变量 {name} 必须是布尔值：{value!r}")


@dataclass(frozen=True)
class Settings:
    base_url: str
    standard_user: str
    performance_user: str
    problem_user: str
    locked_user: str
    default_password: str

    headless: bool
    browser: str
    slow_mo: int
    retries: int
    screenshot_on_failure: bool
    video_on_failure: bool

    # 毫秒
    default_timeout: int
    navigation_timeout: int
    action_timeout: int
    sort_settle_ms: int
    cart_removal_settle_ms: int


def load_settings() -> Settings:
    browser = env_str("BROWSER", "chromium").lower()
    if browser not in BROWSERS:
        raise ConfigError(f"不支持的浏览器：{browser}，可选 {BROWSERS}")

    return Settings(
        base_url=env_str("BASE_URL", "https://www.saucedemo.com").rstrip("/"),
        standard_user=env_str("STANDARD_USER", "standard_user"),
        performance_user=env_str("PERFORMANCE_USER", "performance_glitch_user"),
        problem_user=env_str("PROBLEM_USER", "problem_user"),
        locked_user=env_str("LOCKED_USER", "locked_out_user"),
        default_password=env_str("DEFAULT_PASSWORD", "secret_sauce"),
        headless=env_bool("HEADLESS", True),
        browser=browser,
        slow_mo=env_int("SLOW_MO", 0),
        retries=env_int("RETRIES", 0),
        screenshot_on_failure=env_bool("SCREENSHOT_ON_FAILURE", True),
        video_on_failure=env_bool("VIDEO_ON_FAILURE", True),
        default_timeout=env_int("DEFAULT_TIMEOUT", TIMEOUTS["default"]),
        navigation_timeout=env_int("NAVIGATION_TIMEOUT", TIMEOUTS["navigation"]),
        action_timeout=env_int("ACTION_TIMEOUT", TIMEOUTS["action"]),
        sort_settle_ms=env_int("SORT_SETTLE_MS", 500),
        cart_removal_settle_ms=env_int("CART_REMOVAL_SETTLE_MS", 300),
    )


SETTINGS = load_settings()
