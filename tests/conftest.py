#!/usr/bin/env python3
# ruff: noqa: S101
"""
共通テストフィクスチャ

テスト全体で使用する共通のフィクスチャとヘルパーを定義します。
"""

import json
import pathlib
import unittest.mock

import pytest

from casetrack.person import Person


# === 環境モック ===
@pytest.fixture(scope="session", autouse=True)
def env_mock():
    """テスト環境用の環境変数モック"""
    with unittest.mock.patch.dict(
        "os.environ",
        {
            "TEST": "true",
            "NO_COLORED_LOGS": "true",
        },
    ) as fixture:
        yield fixture


# === テストデータフィクスチャ ===
@pytest.fixture
def person_factory():
    """氏名以外を既定値で埋めた Person を生成する関数を返す"""

    def _create(name: str, **kwargs: object) -> Person:
        data = {
            "name": name,
            "phone": "85355255",
            "email": "amy@gmail.com",
            "address": "123, Jurong West Ave 6, #08-111",
        }
        data.update(kwargs)
        return Person.parse(data)

    return _create


@pytest.fixture
def sample_persons() -> list[dict]:
    """複数のサンプルレコードデータ"""
    return [
        {
            "name": "Alice Pauline",
            "phone": "94351253",
            "email": "alice@example.com",
            "address": "123, Jurong West Ave 6, #08-111",
            "tags": ["friends"],
        },
        {
            "name": "Benson Meier",
            "phone": "98765432",
            "email": "johnd@example.com",
            "address": "311, Clementi Ave 2, #02-25",
            "tags": ["owesMoney", "friends"],
        },
        {
            "name": "Carl Kurz",
            "phone": "95352563",
            "email": "heinz@example.com",
            "address": "wall street",
        },
        {
            "name": "Daniel Meier",
            "phone": "87652533",
            "email": "cornelia@example.com",
            "address": "10th street",
            "tags": ["friends"],
            "note": "Prefers email",
        },
    ]


@pytest.fixture
def address_book_file(tmp_path: pathlib.Path, sample_persons: list[dict]) -> pathlib.Path:
    """サンプルレコードを書き込んだ JSON ファイル"""
    path = tmp_path / "addressbook.json"
    path.write_text(json.dumps({"persons": sample_persons}), encoding="utf-8")
    return path
