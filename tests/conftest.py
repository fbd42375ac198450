"""
テスト共通フィクスチャ定義

全テストモジュールで共有するドライバのテストダブルを提供する。
実際のブラウザは起動しない。
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from bpt.core.errors import NoSuchElementError


# ---------------------------------------------------------------------------
# ドライバのテストダブル
# ---------------------------------------------------------------------------

class FakeDriver:
    """時間経過で要素が出現するページを模したドライバ。

    Args:
        appear_after_ms: 要素が見つかるようになるまでの時間（None で出現しない）
        script_results: execute_script が順に返す値（最後の値を繰り返す）
        script_error: execute_script が送出する例外
        call_delay_ms: find_element / execute_script の 1 回あたりの所要時間
    """

    def __init__(
        self,
        appear_after_ms: Optional[float] = None,
        script_results: Optional[list[Any]] = None,
        script_error: Optional[BaseException] = None,
        call_delay_ms: float = 0,
    ) -> None:
        self._start = time.perf_counter()
        self._appear_after_ms = appear_after_ms
        self._script_results = list(script_results or [True])
        self._script_error = script_error
        self._call_delay_sec = call_delay_ms / 1000
        self.find_calls: list[Any] = []
        self.scripts: list[str] = []
        self.sequence = MagicMock(name="action-sequence")
        self.sequence.click.return_value = self.sequence
        self.sequence.perform = AsyncMock()
        self.element = MagicMock(name="element")

    async def find_element(self, locator):
        self.find_calls.append(locator)
        if self._call_delay_sec:
            await asyncio.sleep(self._call_delay_sec)
        elapsed_ms = (time.perf_counter() - self._start) * 1000
        if self._appear_after_ms is None or elapsed_ms < self._appear_after_ms:
            raise NoSuchElementError(f"not found: {locator.value}")
        return self.element

    async def execute_script(self, script: str) -> Any:
        self.scripts.append(script)
        if self._call_delay_sec:
            await asyncio.sleep(self._call_delay_sec)
        if self._script_error is not None:
            raise self._script_error
        if len(self._script_results) > 1:
            return self._script_results.pop(0)
        return self._script_results[0]

    def actions(self):
        return self.sequence


@pytest.fixture
def make_driver() -> Callable[..., FakeDriver]:
    """引数を指定して FakeDriver を生成するファクトリ。"""
    return FakeDriver


@pytest.fixture
def present_driver(make_driver) -> FakeDriver:
    """要素が最初から存在するドライバ。"""
    return make_driver(appear_after_ms=0)


@pytest.fixture
def missing_driver(make_driver) -> FakeDriver:
    """要素が出現しないドライバ。"""
    return make_driver(appear_after_ms=None)


@pytest.fixture
def page_complete_check() -> AsyncMock:
    """呼び出されると "complete" を返すページ完了チェック。"""
    return AsyncMock(return_value="complete")
