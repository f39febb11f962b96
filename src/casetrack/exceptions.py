#!/usr/bin/env python3
"""CaseTrack 例外階層.

アプリケーション固有の例外クラスを定義します。
検索述語 (casetrack.search) 自体は例外を送出しません。
"""

from __future__ import annotations


class CaseTrackError(Exception):
    """CaseTrack 基底例外.

    アプリケーション固有の全ての例外の基底クラス。
    """


class ConfigError(CaseTrackError):
    """設定エラー.

    設定ファイルの読み込みやバリデーションに失敗した場合。
    """


class ValidationError(CaseTrackError):
    """レコード検証エラー.

    氏名や電話番号などのフィールド値が制約を満たさない場合。
    """


class ParseError(CaseTrackError):
    """コマンド引数の解析エラー."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.usage = usage


class StoreError(CaseTrackError):
    """レコードストアエラー.

    JSON ファイルの読み込みや内容の解釈に失敗した場合。
    """
