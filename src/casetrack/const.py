#!/usr/bin/env python3
"""定数定義."""

from __future__ import annotations

import pathlib

# パス
DATA_PATH = pathlib.Path(__file__).parent.parent.parent / "data"
ADDRESS_BOOK_FILE = "addressbook.json"

# スキーマファイル
_SCHEMA_DIR = pathlib.Path(__file__).parent.parent.parent / "schema"
SCHEMA_CONFIG = _SCHEMA_DIR / "config.schema"
SCHEMA_ADDRESS_BOOK = _SCHEMA_DIR / "addressbook.schema"

# find コマンド
FIND_COMMAND_WORD = "find"
FIND_USAGE = (
    f"{FIND_COMMAND_WORD}: Finds all persons whose names contain the keywords as a phrase "
    "(case-insensitive, each keyword matches the start of a word).\n"
    f"Parameters: KEYWORD [MORE_KEYWORDS]...\n"
    f"Example: {FIND_COMMAND_WORD} alice bob"
)
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{count} persons listed!"
