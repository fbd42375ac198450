"""
ドライバハンドル — コマンド層が依存するブラウザドライバの最小インターフェース

待機・操作コマンドはドライバ全体ではなく、この Protocol が定める
能力（要素検索・スクリプト実行・ポインタ操作シーケンス）のみに依存する。
テストでは AsyncMock 等のテストダブルで置き換えられる。

主な構成:
  - ElementHandle: 検索済み要素への参照
  - ActionSequence: キューに積んで一括実行するポインタ操作シーケンス
  - DriverHandle: 要素検索・スクリプト実行・操作シーケンス生成
  - CompletionPredicate: ページの落ち着きを判定する非同期チェック
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .locator import Locator


@runtime_checkable
class ElementHandle(Protocol):
    """検索済み要素への参照。

    コマンド層は要素を直接操作せず、ActionSequence に渡すだけである。
    """

    async def bounding_box(self) -> Optional[dict]:
        """要素の矩形（x, y, width, height）を返す。非表示の場合は None。"""
        ...


@runtime_checkable
class ActionSequence(Protocol):
    """キューに積んだポインタ操作をまとめて実行するシーケンス。"""

    def click(self, element: Optional[ElementHandle] = None) -> "ActionSequence":
        """クリックをキューに積む。element が None の場合は現在のカーソル位置。

        Returns:
            メソッドチェーン用に自身を返す
        """
        ...

    async def perform(self) -> None:
        """キューに積まれた操作を実行する。"""
        ...


@runtime_checkable
class DriverHandle(Protocol):
    """ブラウザドライバの能力インターフェース。"""

    async def find_element(self, locator: Locator) -> ElementHandle:
        """ロケータに一致する要素を 1 件返す。

        Raises:
            NoSuchElementError: 一致する要素が無い場合
        """
        ...

    async def execute_script(self, script: str) -> Any:
        """ページ内でスクリプト（関数本体）を実行し、戻り値を返す。"""
        ...

    def actions(self) -> ActionSequence:
        """新しいポインタ操作シーケンスを生成する。"""
        ...


# ページ完了チェック: 引数なしで呼び出すと、ページが落ち着いた時点で完了する awaitable を返す
CompletionPredicate = Callable[[], Awaitable[Any]]
