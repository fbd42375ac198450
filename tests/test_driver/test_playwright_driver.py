"""
PlaywrightDriver テスト — Playwright Page を DriverHandle として扱うアダプタ

Playwright Page / ElementHandle はモックを使用する。
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from bpt.core.driver import ActionSequence, DriverHandle
from bpt.core.errors import NoSuchElementError
from bpt.core.locator import IdLocator, SelectorLocator, XPathLocator
from bpt.driver.playwright_driver import (
    PlaywrightActionSequence,
    PlaywrightDriver,
    to_playwright_selector,
)


# ---------------------------------------------------------------------------
# ヘルパー: モック生成
# ---------------------------------------------------------------------------

def _make_mock_page(element=None) -> MagicMock:
    """Playwright Page のモックを生成する。"""
    page = MagicMock()
    page.query_selector = AsyncMock(return_value=element)
    page.evaluate = AsyncMock(return_value="value")
    page.mouse = MagicMock()
    page.mouse.click = AsyncMock()
    return page


def _make_mock_element(box=None) -> MagicMock:
    element = MagicMock()
    element.bounding_box = AsyncMock(return_value=box)
    return element


# ===========================================================================
# テスト: セレクタ変換
# ===========================================================================

class TestToPlaywrightSelector:
    """to_playwright_selector のテスト。"""

    @pytest.mark.parametrize(
        ("locator", "expected"),
        [
            (IdLocator(value="submit"), "id=submit"),
            (XPathLocator(value="//a[@href]"), "xpath=//a[@href]"),
            (SelectorLocator(value="#nav > li"), "css=#nav > li"),
        ],
    )
    def test_engines(self, locator, expected) -> None:
        assert to_playwright_selector(locator) == expected


# ===========================================================================
# テスト: PlaywrightDriver
# ===========================================================================

class TestPlaywrightDriver:
    """PlaywrightDriver のテスト。"""

    def test_satisfies_protocols(self) -> None:
        driver = PlaywrightDriver(_make_mock_page())
        assert isinstance(driver, DriverHandle)
        assert isinstance(driver.actions(), ActionSequence)

    async def test_find_element_returns_handle(self) -> None:
        element = _make_mock_element()
        page = _make_mock_page(element)
        driver = PlaywrightDriver(page)

        result = await driver.find_element(XPathLocator(value="//button"))

        assert result is element
        page.query_selector.assert_awaited_once_with("xpath=//button")

    async def test_find_element_missing_raises(self) -> None:
        driver = PlaywrightDriver(_make_mock_page(None))

        with pytest.raises(NoSuchElementError, match="submit"):
            await driver.find_element(IdLocator(value="submit"))

    async def test_execute_script_wraps_function_body(self) -> None:
        """スクリプトが関数本体として評価されること。"""
        page = _make_mock_page()
        driver = PlaywrightDriver(page)

        result = await driver.execute_script("return 1 + 1")

        assert result == "value"
        source = page.evaluate.await_args.args[0]
        assert source.startswith("() => {")
        assert "return 1 + 1" in source
        assert source.rstrip().endswith("}")

    def test_actions_returns_new_sequence(self) -> None:
        driver = PlaywrightDriver(_make_mock_page())
        assert isinstance(driver.actions(), PlaywrightActionSequence)
        assert driver.actions() is not driver.actions()


# ===========================================================================
# テスト: PlaywrightActionSequence
# ===========================================================================

class TestPlaywrightActionSequence:
    """PlaywrightActionSequence のテスト。"""

    async def test_click_element_center_and_track_cursor(self) -> None:
        """要素の中心をクリックし、カーソル位置を更新すること。"""
        page = _make_mock_page()
        driver = PlaywrightDriver(page)
        element = _make_mock_element({"x": 10, "y": 20, "width": 100, "height": 40})

        await driver.actions().click(element).perform()

        page.mouse.click.assert_awaited_once_with(60, 40)
        assert driver.cursor == (60, 40)

    async def test_click_at_cursor_uses_tracked_position(self) -> None:
        page = _make_mock_page()
        driver = PlaywrightDriver(page)
        driver.cursor = (5.0, 7.0)

        await driver.actions().click().perform()

        page.mouse.click.assert_awaited_once_with(5.0, 7.0)

    async def test_queue_cleared_after_perform(self) -> None:
        """perform 後はキューが空になり、再実行で二重にクリックしないこと。"""
        page = _make_mock_page()
        sequence = PlaywrightDriver(page).actions()

        sequence.click()
        await sequence.perform()
        await sequence.perform()

        assert page.mouse.click.await_count == 1

    async def test_click_queued_in_order(self) -> None:
        page = _make_mock_page()
        driver = PlaywrightDriver(page)
        element = _make_mock_element({"x": 0, "y": 0, "width": 2, "height": 2})

        await driver.actions().click(element).click().perform()

        assert [c.args for c in page.mouse.click.await_args_list] == [(1, 1), (1, 1)]

    async def test_hidden_element_raises(self) -> None:
        """矩形が取得できない要素のクリックは失敗すること。"""
        page = _make_mock_page()
        driver = PlaywrightDriver(page)

        with pytest.raises(RuntimeError):
            await driver.actions().click(_make_mock_element(None)).perform()

        page.mouse.click.assert_not_awaited()
