"""
Chrome トレースログのデフォルトカテゴリ

"-*" で全カテゴリを無効化した上で、計測に必要なカテゴリのみを有効化する。
"""

from __future__ import annotations

TRACE_CATEGORIES: tuple[str, ...] = (
    "-*",
    "disabled-by-default-lighthouse",
    "v8",
    "v8.execute",
    "blink.user_timing",
    "devtools.timeline",
    "disabled-by-default-devtools.timeline",
    "disabled-by-default-devtools.timeline.stack",
)


def parse_trace_categories(value: str) -> list[str]:
    """カンマ区切りのカテゴリ文字列をリストに変換する。

    空要素と前後の空白は除去する。

    Args:
        value: "v8,devtools.timeline" 形式の文字列

    Returns:
        カテゴリ名のリスト
    """
    return [c.strip() for c in value.split(",") if c.strip()]
