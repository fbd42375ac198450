"""
コマンドモジュール

計測スクリプトがページを決定的に操作するための待機・操作コマンドを提供する。

主要エクスポート:
  - Wait: 要素・時間・ページ完了・条件式の待機
  - SingleClick: シングルクリックと操作後のページ完了待機
  - InteractionOptions: 操作コマンドのオプション
  - Commands / create_commands: コマンド群の生成
"""

from .commands import Commands, create_commands
from .mouse import SingleClick
from .options import InteractionOptions, parse_options
from .wait import Wait

__all__ = [
    "Commands",
    "InteractionOptions",
    "SingleClick",
    "Wait",
    "create_commands",
    "parse_options",
]
