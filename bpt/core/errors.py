"""
エラー定義 — 待機・操作コマンドの型付きエラー

ドライバ層の例外をそのまま呼び出し元に渡さず、対象（ロケータ種別と値、
または条件式）とタイムアウト値を保持するドメインエラーに変換して送出する。

主な構成:
  - ErrorKind: エラー種別の判別子（timeout / not_found / action_failed）
  - CommandError: 全コマンドエラーの基底クラス
  - WaitTimeoutError: 待機がタイムアウトした場合のエラー
  - ActionFailureError: ポインタ操作が完了できなかった場合のエラー
  - NoSuchElementError: ドライバアダプタが要素を見つけられなかった場合のエラー
"""

from __future__ import annotations

import enum
from typing import Optional


class ErrorKind(str, enum.Enum):
    """コマンドエラーの判別子。

    呼び出し元はメッセージ文字列ではなくこの値で分岐する。
    """

    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    ACTION_FAILED = "action_failed"


class CommandError(Exception):
    """待機・操作コマンドの基底エラー。

    Attributes:
        kind: エラー種別
    """

    kind: ErrorKind = ErrorKind.ACTION_FAILED

    def __init__(self, message: str, *, kind: Optional[ErrorKind] = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class WaitTimeoutError(CommandError):
    """待機対象がタイムアウト時間内に条件を満たさなかった場合のエラー。

    条件式の評価自体が例外を投げた場合もこのエラーになる。

    Attributes:
        target_kind: 待機対象の種別（"id", "xpath", "selector", "condition", "pageComplete"）
        target: ロケータの値または条件式
        timeout_ms: 使用したタイムアウト（ミリ秒）
    """

    kind = ErrorKind.TIMEOUT

    def __init__(self, target_kind: str, target: str, timeout_ms: float) -> None:
        self.target_kind = target_kind
        self.target = target
        self.timeout_ms = timeout_ms
        super().__init__(_format_wait_message(target_kind, target, timeout_ms))


class ActionFailureError(CommandError):
    """ポインタ操作を完了できなかった場合のエラー。

    Attributes:
        action: 操作種別（"click" 等）
        target_kind: ロケータ種別。カーソル位置での操作の場合は None
        target: ロケータの値。カーソル位置での操作の場合は None
    """

    def __init__(
        self,
        action: str,
        target_kind: Optional[str] = None,
        target: Optional[str] = None,
        *,
        kind: ErrorKind = ErrorKind.ACTION_FAILED,
    ) -> None:
        self.action = action
        self.target_kind = target_kind
        self.target = target
        if target_kind is None:
            message = f"{action} を実行できませんでした"
        else:
            message = f"{target_kind} {target} の要素に対して {action} を実行できませんでした"
        super().__init__(message, kind=kind)


class NoSuchElementError(LookupError):
    """ドライバがロケータに一致する要素を見つけられなかった場合のエラー。"""


def _format_wait_message(target_kind: str, target: str, timeout_ms: float) -> str:
    if target_kind == "condition":
        return f"条件 {target} が {timeout_ms} ms 以内に満たされませんでした"
    if target_kind == "pageComplete":
        return f"ページ完了チェックが {timeout_ms} ms 以内に完了しませんでした"
    return f"{target_kind} {target} の要素が {timeout_ms} ms 以内に見つかりませんでした"
