"""
PlaywrightDriver — Playwright Page を DriverHandle として扱うアダプタ

コマンド層が要求する能力（要素検索・スクリプト実行・ポインタ操作シーケンス）を
Playwright の async API で実装する。

主な機能:
  - ロケータ種別に応じたセレクタエンジン（id= / xpath= / css=）での要素検索
  - WebDriver 互換のスクリプト実行（関数本体として評価し、return の値を返す）
  - キューに積んだクリックを page.mouse で一括実行する操作シーケンス

Playwright はマウスカーソルの現在位置を公開しないため、
ドライバ側で最後に移動した座標を追跡する（初期値は 0, 0）。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from ..core.errors import NoSuchElementError
from ..core.locator import describe_locator

if TYPE_CHECKING:
    from playwright.async_api import ElementHandle, Page

    from ..core.locator import Locator

logger = logging.getLogger(__name__)

# ロケータ種別 → Playwright セレクタエンジン
_SELECTOR_ENGINES = {
    "id": "id",
    "xpath": "xpath",
    "selector": "css",
}


def to_playwright_selector(locator: Locator) -> str:
    """ロケータを Playwright のセレクタ文字列に変換する。

    Args:
        locator: 変換対象のロケータ

    Returns:
        "id=foo" / "xpath=//a" / "css=.bar" 形式のセレクタ

    Raises:
        ValueError: 未知のロケータ種別の場合
    """
    engine = _SELECTOR_ENGINES.get(locator.kind)
    if engine is None:
        raise ValueError(f"未知のロケータ種別です: {locator.kind}")
    return f"{engine}={locator.value}"


class PlaywrightActionSequence:
    """page.mouse でクリックを実行する操作シーケンス。

    click() で操作をキューに積み、perform() でまとめて実行する。
    perform() 後はキューを空にする。
    """

    def __init__(self, driver: PlaywrightDriver) -> None:
        self._driver = driver
        self._queue: list[Optional[ElementHandle]] = []

    def click(self, element: Optional[ElementHandle] = None) -> PlaywrightActionSequence:
        self._queue.append(element)
        return self

    async def perform(self) -> None:
        queued, self._queue = self._queue, []
        for element in queued:
            if element is None:
                x, y = self._driver.cursor
            else:
                x, y = await _element_center(element)
            await self._driver.page.mouse.click(x, y)
            self._driver.cursor = (x, y)
            logger.debug("click: (%.1f, %.1f)", x, y)


class PlaywrightDriver:
    """Playwright Page をラップした DriverHandle 実装。

    使用例::

        driver = PlaywrightDriver(page)
        element = await driver.find_element(IdLocator(value="submit"))
    """

    def __init__(self, page: Page) -> None:
        """PlaywrightDriver を初期化する。

        Args:
            page: 操作対象の Playwright Page
        """
        self.page = page
        self.cursor: tuple[float, float] = (0.0, 0.0)

    async def find_element(self, locator: Locator) -> ElementHandle:
        """ロケータに一致する最初の要素を返す。

        Raises:
            NoSuchElementError: 一致する要素が無い場合
        """
        element = await self.page.query_selector(to_playwright_selector(locator))
        if element is None:
            raise NoSuchElementError(
                f"要素が見つかりません: {describe_locator(locator)}"
            )
        return element

    async def execute_script(self, script: str) -> Any:
        """スクリプトを関数本体として評価し、戻り値を返す。"""
        return await self.page.evaluate(f"() => {{\n{script}\n}}")

    def actions(self) -> PlaywrightActionSequence:
        return PlaywrightActionSequence(self)


async def _element_center(element: ElementHandle) -> tuple[float, float]:
    """要素の中心座標を返す。矩形が取得できない場合は RuntimeError。"""
    box = await element.bounding_box()
    if box is None:
        raise RuntimeError("要素が表示されていないためクリック位置を決定できません")
    return box["x"] + box["width"] / 2, box["y"] + box["height"] / 2
