import logging
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import expect, sync_playwright

from config.settings import SETTINGS
from data.users import SAVE_LOGIN_STATE_FILE
from reporting.artifacts import (SESSION_DIRS, TRACING_DIR, VIDEOS_DIR, artifact_dir, attempt_dir_name,
                                 collect_artifact_flags, find_attempt, new_attempt_record,
                                 write_failure_evidence)
from reporting.attempt_summary import attach_attempt_summary
from scripts.save_login_state import save_login_state

logger = logging.getLogger(__name__)

MARKERS = {
    "ui": "浏览器 UI 用例",
    "e2e": "跨页面的端到端流程",
    "unit": "不启动浏览器的单元测试",
    "need_login": "复用 storage/login.json 登录态，跳过登录页",
}


def pytest_configure(config):
    for name, desc in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {desc}")

    # RETRIES 只在命令行没有指定 --reruns 时生效
    if SETTINGS.retries and not getattr(config.option, "reruns", None):
        config.option.reruns = SETTINGS.retries

    expect.set_options(timeout=SETTINGS.default_timeout)


def max_attempts(config) -> int:
    return (getattr(config.option, "reruns", None) or 0) + 1


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次，类型由 BROWSER 决定"""
    browser_type = getattr(playwright_instance, SETTINGS.browser)
    browser = browser_type.launch(headless=SETTINGS.headless, slow_mo=SETTINGS.slow_mo)
    logger.info("%s launched (headless=%s)", SETTINGS.browser, SETTINGS.headless)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空artifacts、videos、tracing、storage"""
    for p in SESSION_DIRS:
        if p.exists():
            shutil.rmtree(p)
        p.mkdir()


@pytest.fixture(scope="session")
def login_state(browser) -> Path:
    """
     确保 login.json 存在且有效，只有 need_login 用例会用到
    """
    login_file = Path(SAVE_LOGIN_STATE_FILE)
    if not login_file.exists() or login_file.stat().st_size == 0:
        logger.info("login.json不存在或无效，重新生成")
        save_login_state(browser)
    return login_file


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个测试方法一个全新 context
    - need_login 用例基于 login.json 直接进入登录态
    - 视频 + tracing 每个 attempt 单独目录，只有失败的 attempt 保留
    """
    item = request.node
    attempt = getattr(item, "execution_count", 1)
    item._failed = False

    attempt_dir = attempt_dir_name(attempt)
    record_video_dir = VIDEOS_DIR / attempt_dir
    record_tracing_dir = TRACING_DIR / attempt_dir
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    storage_state = None
    if item.get_closest_marker("need_login") is not None:
        storage_state = str(request.getfixturevalue("login_state"))

    video_options = {}
    if SETTINGS.video_on_failure:
        record_video_dir.mkdir(parents=True, exist_ok=True)
        # video文件只有在context.close()后才会真正落盘
        video_options = {"record_video_dir": str(record_video_dir),
                         "record_video_size": {"width": 1280, "height": 720}}

    context = browser.new_context(storage_state=storage_state, no_viewport=True, **video_options)
    context.set_default_timeout(SETTINGS.action_timeout)
    context.set_default_navigation_timeout(SETTINGS.navigation_timeout)
    context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    #  ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)  # trace.zip 在这里真正生成
    finally:
        context.close()  # 先close：释放video文件句柄、video真正写入磁盘

    attempts = getattr(item, "_attempts", [])
    current = find_attempt(attempts, attempt)

    if not item._failed:
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        # 失败后重试通过：同样给出 Attempt Summary
        if current is not None and len(attempts) > 1:
            attach_attempt_summary(attempts)
        return

    # ======== 失败用例：video、trace 移到 artifacts ========
    # makereport hook 早于 context teardown，hook 阶段 video/trace 尚未生成，所以放在这里
    target_dir = artifact_dir(item, attempt)
    target_dir.mkdir(parents=True, exist_ok=True)
    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")

    if current is not None:
        collect_artifact_flags(current, target_dir)

    for video in target_dir.glob("*.webm"):
        allure.attach.file(video, name="📎 Video", attachment_type=allure.attachment_type.WEBM)
    trace = target_dir / "trace.zip"
    if trace.exists():
        allure.attach.file(trace, name="📎 Playwright-Trace.zip")

    logger.info("failure artifacts saved -> %s", target_dir)

    # 只在最后一次 attempt attach Attempt Summary
    if attempt == max_attempts(item.config):
        attach_attempt_summary(attempts)


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page，收集 console.error"""
    page = context.new_page()
    console_errors = []

    # page.on("console") 不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location),
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors  # 挂到page上，方便hook里取
    yield page
    page.close()


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    call 阶段记录每次 attempt；失败时自动保存：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call":
        return

    page = item.funcargs.get("page")
    if not page:
        return

    attempt = getattr(item, "execution_count", 1)
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append(new_attempt_record(attempt, rep.passed, rep.duration,
                                             str(rep.longrepr) if rep.failed else ""))

    if not rep.failed:
        return

    # 跨fixture通信：告诉 context 这是一次失败执行
    item._failed = True

    base_dir = artifact_dir(item, attempt)
    write_failure_evidence(base_dir, page.url, getattr(page, "_console_errors", []))

    if SETTINGS.screenshot_on_failure:
        screenshot = base_dir / "failure.png"
        try:
            page.screenshot(path=screenshot, full_page=True)
        except PlaywrightError as e:
            logger.warning("failure screenshot skipped: %s", e)
            return
        allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
