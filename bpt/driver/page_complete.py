"""
ページ完了チェック — スクリプトによる「ページが落ち着いた」判定

待機コマンドの by_page_to_complete やクリック後の待機に渡す
CompletionPredicate の標準実装。ページ完了スクリプトをドライバ経由で
繰り返し実行し、真値を返した時点で完了とする。

タイムアウトはこのチェック自身が持つ（待機コマンド側では課さない）。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..core.errors import WaitTimeoutError
from ..core.polling import DEFAULT_POLL_INTERVAL_MS, PollTimeout, poll_until

if TYPE_CHECKING:
    from ..core.driver import DriverHandle

logger = logging.getLogger(__name__)

DEFAULT_PAGE_COMPLETE_TIMEOUT_MS = 300_000

# loadEventEnd の 2 秒後に完了とみなす
DEFAULT_PAGE_COMPLETE_CHECK = """
return (function() {
  try {
    var timing = window.performance.timing;
    var end = timing.loadEventEnd;
    var start = timing.navigationStart;
    return end > 0 && window.performance.now() > (end - start) + 2000;
  } catch (e) {
    return true;
  }
})();
""".strip()


class ScriptPageCompleteCheck:
    """ページ完了スクリプトをポーリングする CompletionPredicate。

    使用例::

        check = ScriptPageCompleteCheck(driver)
        wait = Wait(driver, check)
        await wait.by_page_to_complete()
    """

    def __init__(
        self,
        driver: DriverHandle,
        script: str = DEFAULT_PAGE_COMPLETE_CHECK,
        timeout_ms: float = DEFAULT_PAGE_COMPLETE_TIMEOUT_MS,
        poll_interval_ms: float = DEFAULT_POLL_INTERVAL_MS,
    ) -> None:
        """ScriptPageCompleteCheck を初期化する。

        Args:
            driver: スクリプトを実行するドライバハンドル
            script: ページ完了チェックのスクリプト（関数本体、return を含む）
            timeout_ms: チェック全体のタイムアウト（ミリ秒）
            poll_interval_ms: ポーリング間隔（ミリ秒）
        """
        self._driver = driver
        self._script = script
        self._timeout_ms = timeout_ms
        self._poll_interval_ms = poll_interval_ms

    async def __call__(self) -> Any:
        """ページ完了スクリプトが真値を返すまで待機する。

        Returns:
            スクリプトが返した真値

        Raises:
            WaitTimeoutError: タイムアウトまでに真値が得られなかった場合
        """
        try:
            return await poll_until(
                lambda: self._driver.execute_script(self._script),
                self._timeout_ms,
                self._poll_interval_ms,
            )
        except PollTimeout as exc:
            logger.error("ページ完了チェックが %s ms 以内に完了しませんでした", self._timeout_ms)
            logger.debug("最後のエラー: %r", exc.last_error)
            raise WaitTimeoutError("pageComplete", self._script, self._timeout_ms) from None
