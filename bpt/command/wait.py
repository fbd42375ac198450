"""
待機コマンド — ドライバ操作を有界・型付きの待機に変換する

要素の出現、一定時間、ページ完了、任意の条件式を対象に、
呼び出し元が指定したタイムアウト内で待機する。

全ての待機は同じ方針に従う:
  - タイムアウト省略時（None または 0）はデフォルト値（6000ms）を使う
  - タイムアウト時は ERROR ログ（対象とタイムアウト）と DEBUG ログ（元の例外）を
    出力した上で、新しい WaitTimeoutError を送出する（元の例外は連結しない）
  - 自動リトライは行わない
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

from ..config import DEFAULT_WAIT_TIMEOUT_MS
from ..core.errors import WaitTimeoutError
from ..core.locator import IdLocator, SelectorLocator, XPathLocator
from ..core.polling import DEFAULT_POLL_INTERVAL_MS, PollTimeout, poll_until

if TYPE_CHECKING:
    from ..core.driver import CompletionPredicate, DriverHandle
    from ..core.locator import Locator

logger = logging.getLogger(__name__)


class Wait:
    """有界な待機コマンド群。

    使用例::

        wait = Wait(driver, page_complete_check)
        await wait.by_id("submit", 500)
        await wait.by_condition("document.readyState === 'complete'")
    """

    def __init__(
        self,
        driver: DriverHandle,
        page_complete_check: CompletionPredicate,
        *,
        default_timeout_ms: float = DEFAULT_WAIT_TIMEOUT_MS,
        poll_interval_ms: float = DEFAULT_POLL_INTERVAL_MS,
    ) -> None:
        """Wait を初期化する。

        Args:
            driver: 要素検索・スクリプト実行に使うドライバハンドル
            page_complete_check: by_page_to_complete で待機する完了チェック
            default_timeout_ms: タイムアウト省略時の値（ミリ秒）
            poll_interval_ms: ポーリング間隔（ミリ秒）
        """
        self._driver = driver
        self._page_complete_check = page_complete_check
        self._default_timeout_ms = default_timeout_ms
        self._poll_interval_ms = poll_interval_ms

    # -------------------------------------------------------------------
    # 要素の出現待機
    # -------------------------------------------------------------------

    async def by_id(self, element_id: str, max_time_ms: Optional[float] = None) -> None:
        """id の要素が見つかるまで待機する。

        Args:
            element_id: 待機対象の id
            max_time_ms: タイムアウト（ミリ秒）。省略時は 6000

        Raises:
            WaitTimeoutError: タイムアウトまでに要素が見つからなかった場合
        """
        await self._wait_for_element(IdLocator(value=element_id), max_time_ms)

    async def by_xpath(self, xpath: str, max_time_ms: Optional[float] = None) -> None:
        """XPath に一致する要素が見つかるまで待機する。

        Raises:
            WaitTimeoutError: タイムアウトまでに要素が見つからなかった場合
        """
        await self._wait_for_element(XPathLocator(value=xpath), max_time_ms)

    async def by_selector(self, selector: str, max_time_ms: Optional[float] = None) -> None:
        """CSS セレクタに一致する要素が見つかるまで待機する。

        Raises:
            WaitTimeoutError: タイムアウトまでに要素が見つからなかった場合
        """
        await self._wait_for_element(SelectorLocator(value=selector), max_time_ms)

    # -------------------------------------------------------------------
    # 時間・ページ完了・条件式
    # -------------------------------------------------------------------

    async def by_time(self, ms: float) -> None:
        """ms ミリ秒待機する。値は検証しない。"""
        await asyncio.sleep(ms / 1000)

    async def by_page_to_complete(self) -> Any:
        """ページ完了チェックが完了するまで待機する。

        タイムアウトは完了チェック側の責務であり、ここでは課さない。

        Returns:
            完了チェックの結果
        """
        return await self._page_complete_check()

    async def by_condition(self, expression: str, max_time_ms: Optional[float] = None) -> Any:
        """JavaScript の条件式が真値を返すまで待機する。

        式はページ内で `return <expression>` として評価する。
        偽値が続いた場合も、評価が例外を投げ続けた場合も同じタイムアウトエラーになる。

        Args:
            expression: 条件式
            max_time_ms: タイムアウト（ミリ秒）。省略時は 6000

        Returns:
            条件式が返した真値

        Raises:
            WaitTimeoutError: タイムアウトまでに真値が得られなかった場合
        """
        timeout_ms = self._resolve_timeout(max_time_ms)
        script = f"return {expression}"
        try:
            return await poll_until(
                lambda: self._driver.execute_script(script),
                timeout_ms,
                self._poll_interval_ms,
            )
        except PollTimeout as exc:
            logger.error("条件 %s が %s ms 以内に満たされませんでした", expression, timeout_ms)
            logger.debug("%r", exc.last_error or exc)
            raise WaitTimeoutError("condition", expression, timeout_ms) from None

    # -------------------------------------------------------------------
    # 内部処理
    # -------------------------------------------------------------------

    def _resolve_timeout(self, max_time_ms: Optional[float]) -> float:
        # 0 もデフォルト扱い
        return max_time_ms or self._default_timeout_ms

    async def _wait_for_element(self, locator: Locator, max_time_ms: Optional[float]) -> None:
        timeout_ms = self._resolve_timeout(max_time_ms)

        async def _located() -> bool:
            await self._driver.find_element(locator)
            return True

        try:
            await poll_until(_located, timeout_ms, self._poll_interval_ms)
        except PollTimeout as exc:
            logger.error(
                "%s %s の要素が %s ms 以内に見つかりませんでした",
                locator.kind, locator.value, timeout_ms,
            )
            logger.debug("%r", exc.last_error or exc)
            raise WaitTimeoutError(locator.kind, locator.value, timeout_ms) from None
