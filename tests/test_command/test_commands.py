"""
Commands テスト — コマンド群の生成

Playwright Page はモックを使用する。
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from bpt.command import Commands, SingleClick, Wait, create_commands
from bpt.config import CommandConfig
from bpt.core.errors import WaitTimeoutError
from bpt.driver.page_complete import ScriptPageCompleteCheck
from bpt.driver.playwright_driver import PlaywrightDriver


class TestCommands:
    """Commands のテスト。"""

    def test_builds_wait_and_click(self, present_driver, page_complete_check) -> None:
        commands = Commands(present_driver, page_complete_check)

        assert isinstance(commands.wait, Wait)
        assert isinstance(commands.click, SingleClick)
        assert commands.config == CommandConfig()

    async def test_shares_page_complete_check(self, present_driver, page_complete_check) -> None:
        """wait と click が同じページ完了チェックを使うこと。"""
        commands = Commands(present_driver, page_complete_check)

        await commands.wait.by_page_to_complete()
        await commands.click.at_cursor({"wait": True})

        assert page_complete_check.await_count == 2

    async def test_configured_default_timeout(self, make_driver, page_complete_check) -> None:
        """設定の wait_timeout_ms がタイムアウト省略時に使われること。"""
        config = CommandConfig(wait_timeout_ms=80, poll_interval_ms=20)
        commands = Commands(make_driver(), page_complete_check, config)

        with pytest.raises(WaitTimeoutError) as exc_info:
            await commands.wait.by_selector(".never")

        assert exc_info.value.timeout_ms == 80


class TestCreateCommands:
    """create_commands のテスト。"""

    def _make_mock_page(self) -> MagicMock:
        page = MagicMock()
        page.evaluate = AsyncMock(return_value=True)
        page.query_selector = AsyncMock(return_value=None)
        page.mouse = MagicMock()
        page.mouse.click = AsyncMock()
        return page

    async def test_wires_playwright_driver_and_check(self) -> None:
        """PlaywrightDriver と ScriptPageCompleteCheck が組み立てられること。"""
        page = self._make_mock_page()
        config = CommandConfig(page_complete_check="return window.done", page_complete_timeout_ms=1000)

        commands = create_commands(page, config)
        result = await commands.wait.by_page_to_complete()

        assert result is True
        assert isinstance(commands.wait._driver, PlaywrightDriver)
        assert isinstance(commands.wait._page_complete_check, ScriptPageCompleteCheck)
        script = page.evaluate.await_args.args[0]
        assert "return window.done" in script

    async def test_click_with_wait_on_page(self) -> None:
        """カーソル位置クリック後にページ完了スクリプトが評価されること。"""
        page = self._make_mock_page()

        commands = create_commands(page)
        await commands.click.at_cursor({"wait": True})

        page.mouse.click.assert_awaited_once_with(0.0, 0.0)
        page.evaluate.assert_awaited()
