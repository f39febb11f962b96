#!/usr/bin/env python3
"""検索結果の表示フォーマット用モジュール."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from casetrack.find import FindResult
    from casetrack.person import Person


def format_person(index: int, person: Person) -> str:
    """レコード 1 件分の表示行を生成.

    Args:
        index: 1 始まりの表示番号
        person: レコード

    Returns:
        "1. 氏名 [tag1][tag2]" 形式の文字列（タグは名前順）
    """
    tags = "".join(str(tag) for tag in sorted(person.tags, key=lambda t: t.tag_name))
    if tags:
        return f"{index}. {person.name} {tags}"
    return f"{index}. {person.name}"


def format_result(result: FindResult) -> list[str]:
    """検索結果全体の表示行を生成."""
    lines = [format_person(i, person) for i, person in enumerate(result.persons, start=1)]
    lines.append(result.message)
    return lines
