#!/usr/bin/env python3
"""find コマンド.

引数文字列を検索キーワード列に変換し、氏名が一致するレコードを抽出します。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import casetrack.const
from casetrack.exceptions import ParseError
from casetrack.person import Person
from casetrack.search import NameContainsKeywordsPredicate
from casetrack.store import AddressBook


@dataclass(frozen=True)
class FindResult:
    """find コマンドの実行結果."""

    persons: list[Person]
    message: str


def parse_arguments(args: str) -> NameContainsKeywordsPredicate:
    """引数文字列から検索述語を生成.

    キーワードは空白で分割し、順序と重複はそのまま保持する。

    Args:
        args: コマンドワードを除いた引数文字列

    Returns:
        検索述語

    Raises:
        ParseError: 引数が空（空白のみを含む）の場合
    """
    trimmed = args.strip()
    if not trimmed:
        raise ParseError(
            casetrack.const.MESSAGE_INVALID_COMMAND_FORMAT.format(usage=casetrack.const.FIND_USAGE),
            usage=casetrack.const.FIND_USAGE,
        )
    return NameContainsKeywordsPredicate(trimmed.split())


def execute(book: AddressBook, predicate: NameContainsKeywordsPredicate) -> FindResult:
    """述語に一致するレコードを抽出.

    Args:
        book: 検索対象のレコード一覧
        predicate: 検索述語

    Returns:
        一致したレコードとメッセージ
    """
    logging.debug("Filtering with %s", predicate)
    persons = book.filter(predicate)
    logging.info("Found %d of %d persons", len(persons), len(book))
    return FindResult(
        persons=persons,
        message=casetrack.const.MESSAGE_PERSONS_LISTED_OVERVIEW.format(count=len(persons)),
    )
