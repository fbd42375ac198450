"""
Commands — 計測スクリプトに渡すコマンド群

1 つのドライバハンドルと完了チェックから待機コマンドとクリックコマンドを生成し、
両者が同じ参照を共有するようにまとめる。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..config import CommandConfig
from .mouse.single_click import SingleClick
from .wait import Wait

if TYPE_CHECKING:
    from playwright.async_api import Page

    from ..core.driver import CompletionPredicate, DriverHandle

logger = logging.getLogger(__name__)


class Commands:
    """待機・クリックコマンドの集約。

    Attributes:
        wait: 待機コマンド
        click: シングルクリックコマンド
    """

    def __init__(
        self,
        driver: DriverHandle,
        page_complete_check: CompletionPredicate,
        config: Optional[CommandConfig] = None,
    ) -> None:
        config = config or CommandConfig()
        self.config = config
        self.wait = Wait(
            driver,
            page_complete_check,
            default_timeout_ms=config.wait_timeout_ms,
            poll_interval_ms=config.poll_interval_ms,
        )
        self.click = SingleClick(driver, page_complete_check)


def create_commands(page: Page, config: Optional[CommandConfig] = None) -> Commands:
    """Playwright Page から Commands を生成する。

    PlaywrightDriver と、設定のスクリプト・タイムアウトを使う
    ScriptPageCompleteCheck を組み立てる。

    Args:
        page: 操作対象の Playwright Page
        config: コマンド設定。None の場合はデフォルト値

    Returns:
        生成された Commands
    """
    from ..driver.page_complete import ScriptPageCompleteCheck
    from ..driver.playwright_driver import PlaywrightDriver

    config = config or CommandConfig()
    driver = PlaywrightDriver(page)
    check = ScriptPageCompleteCheck(
        driver,
        script=config.page_complete_check,
        timeout_ms=config.page_complete_timeout_ms,
        poll_interval_ms=config.poll_interval_ms,
    )
    logger.debug("Commands を生成しました: %s", config)
    return Commands(driver, check, config)
