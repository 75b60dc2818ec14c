import logging
from pathlib import Path

from playwright.sync_api import Browser, sync_playwright

from config.settings import SETTINGS
from data.users import DEFAULT_USER, SAVE_LOGIN_STATE_FILE
from pages.inventory_page import InventoryPage
from pages.login_page import LoginPage

logger = logging.getLogger(__name__)


def _login_and_save(browser: Browser, state_file: Path):
    context = browser.new_context()
    try:
        page = context.new_page()
        # 使用 Page Object 登录
        login_page = LoginPage(page)
        login_page.navigate_to_login_page()
        login_page.login(DEFAULT_USER.username, DEFAULT_USER.password)
        InventoryPage(page).verify_on_inventory_page()

        state_file.parent.mkdir(parents=True, exist_ok=True)
        context.storage_state(path=state_file)  # 保存登录态到login.json
    finally:
        context.close()


def save_login_state(browser: Browser | None = None, state_file: str = SAVE_LOGIN_STATE_FILE) -> Path:
    """生成登录态
        - 传入 browser：复用已启动的浏览器（pytest session 内）
        - 不传：自行启动 SETTINGS.browser，单独执行：python -m scripts.save_login_state
    """
    path = Path(state_file)
    if browser is not None:
        _login_and_save(browser, path)
    else:
        with sync_playwright() as p:
            own_browser = getattr(p, SETTINGS.browser).launch(headless=SETTINGS.headless)
            try:
                _login_and_save(own_browser, path)
            finally:
                own_browser.close()

    # 再次校验文件
    if not path.exists() or path.stat().st_size == 0:
        raise RuntimeError(f"‼️ {path} 生成失败，请检查浏览器或账号")
    logger.info("login state saved -> %s", path)
    return path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    save_login_state()
