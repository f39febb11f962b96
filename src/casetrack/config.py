#!/usr/bin/env python3
"""
設定ファイルの構造を定義する dataclass

config.yaml に基づいて型付けされた設定クラスを提供します。
"""

from __future__ import annotations

import pathlib
from dataclasses import dataclass
from typing import Any

import my_lib.config

import casetrack.const
from casetrack.exceptions import ConfigError

CONFIG_FILE_PATH = pathlib.Path("config.yaml")


@dataclass(frozen=True)
class DataConfig:
    """データ保存設定"""

    address_book: pathlib.Path

    @classmethod
    def parse(cls, data: dict[str, Any]) -> DataConfig:
        """dict から DataConfig を生成"""
        default_path = casetrack.const.DATA_PATH / casetrack.const.ADDRESS_BOOK_FILE
        return cls(address_book=pathlib.Path(data.get("address_book", str(default_path))))


@dataclass(frozen=True)
class AppConfig:
    """アプリケーション設定"""

    data: DataConfig

    @classmethod
    def parse(cls, data: dict[str, Any]) -> AppConfig:
        """dict から AppConfig を生成"""
        return cls(data=DataConfig.parse(data.get("data", {})))


def load(config_file: pathlib.Path | None = None) -> AppConfig:
    """設定ファイルを読み込んで AppConfig を返す.

    Args:
        config_file: 設定ファイルパス。省略時は CONFIG_FILE_PATH を使用。

    Raises:
        ConfigError: 設定ファイルが存在しない場合
    """
    if config_file is None:
        config_file = CONFIG_FILE_PATH
    if not config_file.exists():
        raise ConfigError(f"Config file not found: {config_file}")
    raw = my_lib.config.load(str(config_file), casetrack.const.SCHEMA_CONFIG)
    return AppConfig.parse(raw)
