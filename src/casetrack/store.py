#!/usr/bin/env python3
"""JSON レコードストア（読み込み専用）.

{"persons": [...]} 形式の JSON ファイルからレコードを読み込みます。
"""

from __future__ import annotations

import json
import logging
import pathlib
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

import jsonschema

import casetrack.const
from casetrack.exceptions import StoreError, ValidationError
from casetrack.person import Person


@dataclass(frozen=True)
class AddressBook:
    """レコード一覧."""

    persons: tuple[Person, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.persons)

    def filter(self, predicate: Callable[[Person], bool]) -> list[Person]:
        """述語に一致するレコードを元の順序のまま返す."""
        return [person for person in self.persons if predicate(person)]


def load(path: pathlib.Path) -> AddressBook:
    """JSON ファイルから AddressBook を読み込む.

    ファイルが存在しない場合は空の AddressBook を返す。

    Args:
        path: JSON ファイルパス

    Returns:
        読み込んだ AddressBook

    Raises:
        StoreError: JSON の解析失敗、またはレコードの検証失敗
    """
    if not path.exists():
        logging.info("Address book not found: %s (starting with an empty book)", path)
        return AddressBook()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise StoreError(f"Failed to parse address book: {path}") from e

    schema = json.loads(casetrack.const.SCHEMA_ADDRESS_BOOK.read_text(encoding="utf-8"))
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path)
        raise StoreError(f"Address book does not match schema at /{location}: {e.message}") from e

    persons: list[Person] = []
    for index, entry in enumerate(data["persons"]):
        try:
            persons.append(Person.parse(entry))
        except ValidationError as e:
            raise StoreError(f"Invalid person entry at index {index}: {e}") from e

    logging.debug("Loaded %d persons from %s", len(persons), path)
    return AddressBook(persons=tuple(persons))
