"""
ポーリング — 条件が真になるまでの有界な繰り返し評価

ドライバ組み込みの "wait until" に頼らず、明示的なポーリングループで
タイムアウト付きの待機を実現する。待機コマンドとページ完了チェックの
共通基盤として使用する。

  - 最低 1 回は評価を行う
  - 各評価は残り時間で asyncio.wait_for により打ち切る
  - 評価中の例外は PollTimeout.last_error に保持してポーリングを継続する（ログは出さない）
  - 期限を過ぎた後に新たな評価は行わない
  - ポーリング間隔は最大 250ms
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Awaitable, Callable, Optional

DEFAULT_POLL_INTERVAL_MS = 100
MAX_POLL_INTERVAL_MS = 250

# 初回の評価に与える最小時間（秒）
_MIN_ATTEMPT_SEC = 0.05


class PollTimeout(Exception):
    """ポーリングがタイムアウトした場合の内部エラー。

    Attributes:
        last_error: 最後の評価で発生した例外（最後の評価が偽を返した場合は None）
        attempts: 評価回数
    """

    def __init__(self, last_error: Optional[BaseException], attempts: int) -> None:
        super().__init__(f"{attempts} 回評価しましたが条件を満たしませんでした")
        self.last_error = last_error
        self.attempts = attempts


def clamp_interval(interval_ms: float) -> float:
    """ポーリング間隔を 1〜250ms の範囲に丸める。"""
    return min(max(interval_ms, 1), MAX_POLL_INTERVAL_MS)


async def poll_until(
    attempt: Callable[[], Awaitable[Any]],
    timeout_ms: float,
    interval_ms: float = DEFAULT_POLL_INTERVAL_MS,
) -> Any:
    """attempt() が真値を返すまで繰り返し評価する。

    Args:
        attempt: 評価関数（コルーチン関数）
        timeout_ms: タイムアウト（ミリ秒）。負値も検証せずそのまま使う
        interval_ms: ポーリング間隔（ミリ秒）

    Returns:
        attempt() が最初に返した真値

    Raises:
        PollTimeout: タイムアウトまでに真値が得られなかった場合
    """
    start = time.perf_counter()
    deadline_sec = timeout_ms / 1000.0
    interval_sec = clamp_interval(interval_ms) / 1000.0
    last_error: Optional[BaseException] = None
    attempts = 0

    while True:
        remaining = deadline_sec - (time.perf_counter() - start)
        # 2 回目以降は残り時間を超えて評価しない
        budget = max(remaining, _MIN_ATTEMPT_SEC) if attempts == 0 else remaining
        attempts += 1
        try:
            value = await asyncio.wait_for(attempt(), timeout=budget)
        except Exception as exc:
            last_error = exc
        else:
            if value:
                return value
            last_error = None

        remaining = deadline_sec - (time.perf_counter() - start)
        if remaining <= 0:
            raise PollTimeout(last_error, attempts)

        await asyncio.sleep(min(interval_sec, remaining))

        if time.perf_counter() - start >= deadline_sec:
            raise PollTimeout(last_error, attempts)
