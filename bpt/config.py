"""
コマンド設定 — 環境変数からの設定読み込み

待機コマンドのデフォルトタイムアウトやポーリング間隔、ページ完了チェックを
環境変数で制御する。設定されていない項目はデフォルト値を使用する。

環境変数一覧:
  BPT_WAIT_TIMEOUT          : 待機コマンドのデフォルトタイムアウト（ミリ秒, デフォルト: 6000）
  BPT_POLL_INTERVAL         : ポーリング間隔（ミリ秒, デフォルト: 100, 最大: 250）
  BPT_PAGE_COMPLETE_TIMEOUT : ページ完了チェックのタイムアウト（ミリ秒, デフォルト: 300000）
  BPT_PAGE_COMPLETE_CHECK   : ページ完了チェックのスクリプト（デフォルト: loadEventEnd + 2 秒）
  BPT_TRACE_CATEGORIES      : Chrome トレースカテゴリ（カンマ区切り）
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .chrome.trace_categories import TRACE_CATEGORIES, parse_trace_categories
from .core.polling import DEFAULT_POLL_INTERVAL_MS, clamp_interval
from .driver.page_complete import DEFAULT_PAGE_COMPLETE_CHECK, DEFAULT_PAGE_COMPLETE_TIMEOUT_MS

logger = logging.getLogger(__name__)

DEFAULT_WAIT_TIMEOUT_MS = 6000

# ---------------------------------------------------------------------------
# 環境変数キー定数
# ---------------------------------------------------------------------------

_ENV_WAIT_TIMEOUT = "BPT_WAIT_TIMEOUT"
_ENV_POLL_INTERVAL = "BPT_POLL_INTERVAL"
_ENV_PAGE_COMPLETE_TIMEOUT = "BPT_PAGE_COMPLETE_TIMEOUT"
_ENV_PAGE_COMPLETE_CHECK = "BPT_PAGE_COMPLETE_CHECK"
_ENV_TRACE_CATEGORIES = "BPT_TRACE_CATEGORIES"


# ---------------------------------------------------------------------------
# 設定データクラス
# ---------------------------------------------------------------------------

@dataclass
class CommandConfig:
    """コマンド層の実行時設定。

    Attributes:
        wait_timeout_ms: 待機コマンドでタイムアウト省略時に使う値
        poll_interval_ms: 待機コマンドのポーリング間隔
        page_complete_timeout_ms: ページ完了チェックのタイムアウト
        page_complete_check: ページ完了チェックのスクリプト（関数本体）
        trace_categories: Chrome トレースログのカテゴリ
    """

    wait_timeout_ms: int = DEFAULT_WAIT_TIMEOUT_MS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    page_complete_timeout_ms: int = DEFAULT_PAGE_COMPLETE_TIMEOUT_MS
    page_complete_check: str = DEFAULT_PAGE_COMPLETE_CHECK
    trace_categories: list[str] = field(default_factory=lambda: list(TRACE_CATEGORIES))


# ---------------------------------------------------------------------------
# 環境変数からの読み込み
# ---------------------------------------------------------------------------

def _read_int(key: str, default: int) -> int:
    """環境変数を int として読み込む。不正値の場合は警告を出してデフォルトを返す。"""
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s の値が不正です: %s", key, raw)
        return default


def load_config_from_env() -> CommandConfig:
    """環境変数から CommandConfig を生成する。

    設定されていない環境変数はデフォルト値を使用する。

    Returns:
        環境変数から読み込んだ設定
    """
    config = CommandConfig()

    config.wait_timeout_ms = _read_int(_ENV_WAIT_TIMEOUT, config.wait_timeout_ms)
    config.page_complete_timeout_ms = _read_int(
        _ENV_PAGE_COMPLETE_TIMEOUT, config.page_complete_timeout_ms
    )

    interval = _read_int(_ENV_POLL_INTERVAL, config.poll_interval_ms)
    config.poll_interval_ms = int(clamp_interval(interval))
    if config.poll_interval_ms != interval:
        logger.warning(
            "%s を %dms に丸めました（指定値: %d）",
            _ENV_POLL_INTERVAL, config.poll_interval_ms, interval,
        )

    if os.environ.get(_ENV_PAGE_COMPLETE_CHECK):
        config.page_complete_check = os.environ[_ENV_PAGE_COMPLETE_CHECK]

    if _ENV_TRACE_CATEGORIES in os.environ:
        categories = parse_trace_categories(os.environ[_ENV_TRACE_CATEGORIES])
        if categories:
            config.trace_categories = categories
        else:
            logger.warning("%s が空のためデフォルトを使用します", _ENV_TRACE_CATEGORIES)

    logger.info("設定を読み込みました: %s", config)
    return config
