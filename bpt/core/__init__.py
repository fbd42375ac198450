# コアモジュール
# ロケータ、エラー定義、ドライバハンドルの Protocol、ポーリングを提供

from .driver import ActionSequence, CompletionPredicate, DriverHandle, ElementHandle
from .errors import (
    ActionFailureError,
    CommandError,
    ErrorKind,
    NoSuchElementError,
    WaitTimeoutError,
)
from .locator import (
    IdLocator,
    Locator,
    SelectorLocator,
    XPathLocator,
    describe_locator,
)
from .polling import PollTimeout, poll_until

__all__ = [
    "ActionFailureError",
    "ActionSequence",
    "CommandError",
    "CompletionPredicate",
    "DriverHandle",
    "ElementHandle",
    "ErrorKind",
    "IdLocator",
    "Locator",
    "NoSuchElementError",
    "PollTimeout",
    "SelectorLocator",
    "WaitTimeoutError",
    "XPathLocator",
    "describe_locator",
    "poll_until",
]
