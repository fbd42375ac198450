"""
ロケータ定義 — 要素の探し方を表す値オブジェクト

要素そのものではなく、ドライバが要素を探すための検索キーのみを保持する。
1 回の呼び出しにつき 1 種別のみを使用する。

  - IdLocator: id 属性による検索
  - XPathLocator: XPath による検索
  - SelectorLocator: CSS セレクタによる検索
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class IdLocator(BaseModel):
    """id 属性による要素検索。"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["id"] = "id"
    value: str = Field(..., description="id 属性の値")


class XPathLocator(BaseModel):
    """XPath による要素検索。"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["xpath"] = "xpath"
    value: str = Field(..., description="XPath 式")


class SelectorLocator(BaseModel):
    """CSS セレクタによる要素検索。"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["selector"] = "selector"
    value: str = Field(..., description="CSS セレクタ文字列")


Locator = Annotated[
    Union[IdLocator, XPathLocator, SelectorLocator],
    Field(discriminator="kind"),
]


def describe_locator(locator: Union[IdLocator, XPathLocator, SelectorLocator]) -> str:
    """ログ・エラーメッセージ用のロケータ説明文字列を返す。"""
    return f"{locator.kind}='{locator.value}'"
