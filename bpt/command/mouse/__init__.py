# マウス操作コマンド

from .single_click import SingleClick

__all__ = [
    "SingleClick",
]
