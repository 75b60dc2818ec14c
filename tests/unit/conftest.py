from unittest.mock import MagicMock

import pytest

from pages import base_page as base_page_module


class _LocatorRegistry(dict):
    def __missing__(self, selector):
        return self.setdefault(selector, MagicMock(name=selector))


@pytest.fixture
def locators() -> dict:
    """selector -> MagicMock，同一个 selector 总是拿到同一个 mock"""
    return _LocatorRegistry()


@pytest.fixture
def mock_page(locators):
    page = MagicMock(name="page")
    page.locator.side_effect = lambda selector: locators.setdefault(selector, MagicMock(name=selector))
    return page


def _make_row(texts: dict[str, str]) -> MagicMock:
    """商品行：row.locator(selector).text_content() 按 selector 返回不同文字"""
    row = MagicMock(name="row")
    children = {}

    def child(selector):
        if selector not in children:
            children[selector] = MagicMock(name=selector)
            children[selector].text_content.return_value = texts.get(selector, "")
        return children[selector]

    row.locator.side_effect = child
    return row


@pytest.fixture
def make_row():
    return _make_row


@pytest.fixture
def mock_expect(monkeypatch):
    """替换 BasePage 用到的 playwright expect：MagicMock 的 locator 过不了它的类型检查"""
    fake = MagicMock(name="expect")
    monkeypatch.setattr(base_page_module, "expect", fake)
    return fake
