"""
操作オプション — クリック等の操作コマンドに渡す設定

認識するキーは wait のみ。未知のキーは検証も拒否もせずに無視する。
wait は厳密に True の場合のみ有効とし、"true" や 1 は有効にしない。
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field


class InteractionOptions(BaseModel):
    """操作コマンドのオプション。

    Attributes:
        wait: True の場合、操作完了後にページ完了チェックを待機する
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    wait: bool = Field(default=False, description="操作後にページ完了を待機するか")


OptionsLike = Union[InteractionOptions, Mapping[str, Any], None]


def parse_options(options: OptionsLike) -> InteractionOptions:
    """None / 辞書 / InteractionOptions を InteractionOptions に正規化する。

    Args:
        options: 呼び出し元が渡したオプション

    Returns:
        正規化されたオプション
    """
    if options is None:
        return InteractionOptions()
    if isinstance(options, InteractionOptions):
        return options
    return InteractionOptions(wait=options.get("wait") is True)
