#!/usr/bin/env python3
"""氏名のキーワードフレーズ検索.

find コマンドで使用する述語を提供します。
氏名を空白で単語に分割し、キーワード列が連続する単語列の先頭に
大文字小文字を無視して前方一致するかを判定します。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from casetrack.person import Person


def tokenize(name: str) -> list[str]:
    """氏名を空白区切りの単語列に分割.

    連続する空白（タブ・改行を含む）は一つの区切りとして扱い、
    前後の空白から空の単語は生成しない。

    Args:
        name: 氏名

    Returns:
        単語のリスト（空文字列の場合は空リスト）
    """
    return name.split()


def _is_prefix(token: str, keyword: str) -> bool:
    return token.lower().startswith(keyword.lower())


def matches(tokens: Sequence[str], keywords: Sequence[str]) -> bool:
    """キーワード列が単語列の連続区間にフレーズとして一致するか判定.

    開始位置を左から順に試し、区間内の各単語がそれぞれ対応する
    キーワードで始まっていれば一致とする。最初に一致した時点で終了する。

    Args:
        tokens: 氏名の単語列
        keywords: 検索キーワード列（順序に意味がある）

    Returns:
        一致する区間があれば True。キーワードが空の場合は常に False
    """
    if not keywords:
        return False

    k = len(keywords)
    for i in range(len(tokens) - k + 1):
        if all(_is_prefix(tokens[i + j], keyword) for j, keyword in enumerate(keywords)):
            return True
    return False


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """氏名がキーワードをフレーズとして含むかを判定する述語.

    等価性とハッシュはキーワード列（順序を含む）のみで決まる。
    """

    keywords: tuple[str, ...]

    def __init__(self, keywords: Sequence[str]) -> None:
        # 呼び出し元のリストを後から変更されても影響を受けないようにする
        object.__setattr__(self, "keywords", tuple(keywords))

    def test(self, person: Person) -> bool:
        """レコードの氏名がキーワードに一致するか判定.

        Args:
            person: 判定対象のレコード

        Returns:
            一致すれば True
        """
        return matches(tokenize(person.name.full_name), self.keywords)

    def __call__(self, person: Person) -> bool:
        return self.test(person)

    def __str__(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}{{keywords=[{', '.join(self.keywords)}]}}"
