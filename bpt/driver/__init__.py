# ドライバアダプタ
# Playwright による DriverHandle 実装とページ完了チェックを提供

from .page_complete import (
    DEFAULT_PAGE_COMPLETE_CHECK,
    DEFAULT_PAGE_COMPLETE_TIMEOUT_MS,
    ScriptPageCompleteCheck,
)
from .playwright_driver import PlaywrightActionSequence, PlaywrightDriver, to_playwright_selector

__all__ = [
    "DEFAULT_PAGE_COMPLETE_CHECK",
    "DEFAULT_PAGE_COMPLETE_TIMEOUT_MS",
    "PlaywrightActionSequence",
    "PlaywrightDriver",
    "ScriptPageCompleteCheck",
    "to_playwright_selector",
]
