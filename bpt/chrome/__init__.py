# Chrome 固有の設定データ

from .trace_categories import TRACE_CATEGORIES, parse_trace_categories

__all__ = [
    "TRACE_CATEGORIES",
    "parse_trace_categories",
]
