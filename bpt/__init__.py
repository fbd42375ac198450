"""
bpt — ブラウザ性能計測ツールのコマンド層

ブラウザ自動操作ドライバの上で、計測前・計測中にページを決定的に操作するための
待機コマンドと操作コマンドを提供する。
"""

__version__ = "0.1.0"
