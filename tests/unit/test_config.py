#!/usr/bin/env python3
# ruff: noqa: S101
"""
config モジュールのユニットテスト

設定ファイル構造を検証します。
"""

from __future__ import annotations

import pathlib
from unittest.mock import patch

import pytest

import casetrack.const
from casetrack.config import AppConfig, DataConfig, load
from casetrack.exceptions import ConfigError


class TestDataConfig:
    """DataConfig のテスト"""

    def test_parse_with_path(self) -> None:
        """パス指定"""
        result = DataConfig.parse({"address_book": "/tmp/book.json"})  # noqa: S108
        assert result.address_book == pathlib.Path("/tmp/book.json")  # noqa: S108

    def test_parse_with_defaults(self) -> None:
        """デフォルト値を使用"""
        result = DataConfig.parse({})
        assert result.address_book == casetrack.const.DATA_PATH / casetrack.const.ADDRESS_BOOK_FILE


class TestAppConfig:
    """AppConfig のテスト"""

    def test_parse(self) -> None:
        """data セクションを解析"""
        result = AppConfig.parse({"data": {"address_book": "book.json"}})
        assert result.data.address_book == pathlib.Path("book.json")

    def test_parse_empty(self) -> None:
        """空の設定"""
        result = AppConfig.parse({})
        assert isinstance(result.data, DataConfig)


class TestLoad:
    """load 関数のテスト"""

    def test_load(self, tmp_path: pathlib.Path) -> None:
        """my_lib.config.load の結果を AppConfig に変換"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("data:\n  address_book: book.json\n")

        with patch("my_lib.config.load", return_value={"data": {"address_book": "book.json"}}) as mock_load:
            result = load(config_file)

        mock_load.assert_called_once_with(str(config_file), casetrack.const.SCHEMA_CONFIG)
        assert result.data.address_book == pathlib.Path("book.json")

    def test_missing_file(self, tmp_path: pathlib.Path) -> None:
        """設定ファイルが存在しない場合はエラー"""
        with pytest.raises(ConfigError):
            load(tmp_path / "missing.yaml")
