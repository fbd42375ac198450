"""
シングルクリック — ポインタ操作と操作後のページ完了待機

要素をロケータで検索してクリックする、またはカーソル位置でクリックする。
options.wait が True の場合、クリック完了後にページ完了チェックを待機する。

  - 操作シーケンスは初期化時に 1 度だけ取得し、インスタンス内で使い回す
  - 同一インスタンスへの並行呼び出しはロックで直列化する
  - 操作自体にはタイムアウトを課さない
  - 失敗時は ERROR ログと DEBUG ログ（元の例外）を出力し、ActionFailureError を送出する
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

from ...core.errors import ActionFailureError, ErrorKind
from ...core.locator import SelectorLocator, XPathLocator
from ..options import OptionsLike, parse_options

if TYPE_CHECKING:
    from ...core.driver import CompletionPredicate, DriverHandle, ElementHandle
    from ...core.locator import Locator

logger = logging.getLogger(__name__)


class SingleClick:
    """マウスのシングルクリック操作。

    使用例::

        click = SingleClick(driver, page_complete_check)
        await click.by_selector("#login", {"wait": True})
    """

    def __init__(self, driver: DriverHandle, page_complete_check: CompletionPredicate) -> None:
        """SingleClick を初期化する。

        Args:
            driver: 要素検索と操作シーケンス生成に使うドライバハンドル
            page_complete_check: options.wait 指定時に待機する完了チェック
        """
        self._driver = driver
        self._actions = driver.actions()
        self._page_complete_check = page_complete_check
        self._lock = asyncio.Lock()

    async def by_xpath(self, xpath: str, options: OptionsLike = None) -> Any:
        """XPath に一致する要素をクリックする。

        Args:
            xpath: クリック対象の XPath
            options: {"wait": True} でクリック後にページ完了を待機

        Returns:
            ページ完了を待機した場合はその結果、それ以外は None

        Raises:
            ActionFailureError: 要素が見つからない、またはクリックに失敗した場合
        """
        return await self._click_element(XPathLocator(value=xpath), options)

    async def by_selector(self, selector: str, options: OptionsLike = None) -> Any:
        """CSS セレクタに一致する要素をクリックする。

        Raises:
            ActionFailureError: 要素が見つからない、またはクリックに失敗した場合
        """
        return await self._click_element(SelectorLocator(value=selector), options)

    async def at_cursor(self, options: OptionsLike = None) -> Any:
        """現在のカーソル位置でクリックする。

        Raises:
            ActionFailureError: クリックに失敗した場合
        """
        settle = parse_options(options).wait
        async with self._lock:
            try:
                return await self._perform(None, settle)
            except Exception as exc:
                logger.error("シングルクリックを実行できませんでした")
                logger.debug("%r", exc)
                raise ActionFailureError("click") from None

    # -------------------------------------------------------------------
    # 内部処理
    # -------------------------------------------------------------------

    async def _click_element(self, locator: Locator, options: OptionsLike) -> Any:
        settle = parse_options(options).wait
        async with self._lock:
            try:
                element = await self._driver.find_element(locator)
            except Exception as exc:
                self._log_failure(locator, exc)
                raise ActionFailureError(
                    "click", locator.kind, locator.value, kind=ErrorKind.NOT_FOUND,
                ) from None

            try:
                return await self._perform(element, settle)
            except Exception as exc:
                self._log_failure(locator, exc)
                raise ActionFailureError("click", locator.kind, locator.value) from None

    async def _perform(self, element: Optional[ElementHandle], settle: bool) -> Any:
        await self._actions.click(element).perform()
        if settle:
            return await self._page_complete_check()
        return None

    @staticmethod
    def _log_failure(locator: Locator, exc: BaseException) -> None:
        logger.error("%s %s の要素をシングルクリックできませんでした", locator.kind, locator.value)
        logger.debug("%r", exc)
