#!/usr/bin/env python3
"""レコード（人物）データモデル.

型安全な dataclass でレコードを表現します。
各フィールドは生成時に検証され、制約違反は ValidationError になります。
検索述語に渡る時点で氏名は検証済み（前後の空白除去済み・非空）です。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from casetrack.exceptions import ValidationError

_PHONE_PATTERN = re.compile(r"\d{3,}")
_EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*@[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*(?:\.[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*)*\.[A-Za-z0-9]{2,}"
)


def _require_str(field_name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"Person's {field_name} should be a string: {value!r}")


@dataclass(frozen=True)
class Name:
    """氏名."""

    full_name: str

    def __post_init__(self) -> None:
        _require_str("name", self.full_name)
        value = self.full_name.strip()
        if not value:
            raise ValidationError("Names should not be blank")
        if not value[0].isalnum():
            raise ValidationError(f"Names should start with an alphanumeric character: {value!r}")
        object.__setattr__(self, "full_name", value)

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Phone:
    """電話番号（3桁以上の数字）."""

    value: str

    def __post_init__(self) -> None:
        _require_str("phone", self.value)
        if not _PHONE_PATTERN.fullmatch(self.value):
            raise ValidationError(f"Phone numbers should only contain digits, at least 3 long: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """メールアドレス."""

    value: str

    def __post_init__(self) -> None:
        _require_str("email", self.value)
        if not _EMAIL_PATTERN.fullmatch(self.value):
            raise ValidationError(f"Emails should be of the format local-part@domain: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """住所."""

    value: str

    def __post_init__(self) -> None:
        _require_str("address", self.value)
        if not self.value.strip():
            raise ValidationError("Addresses should not be blank")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """タグ（英数字のみ）."""

    tag_name: str

    def __post_init__(self) -> None:
        _require_str("tag", self.tag_name)
        if not self.tag_name.isalnum():
            raise ValidationError(f"Tag names should be alphanumeric: {self.tag_name!r}")

    def __str__(self) -> str:
        return f"[{self.tag_name}]"


@dataclass(frozen=True)
class Person:
    """レコード.

    検索で参照されるのは氏名のみで、電話番号・メール・住所は対象外。
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = field(default_factory=frozenset)
    note: str = ""

    def __post_init__(self) -> None:
        _require_str("note", self.note)
        if not isinstance(self.tags, (set, frozenset)) or not all(isinstance(t, Tag) for t in self.tags):
            raise ValidationError(f"Person's tags should be a set of Tag: {self.tags!r}")
        object.__setattr__(self, "tags", frozenset(self.tags))

    @classmethod
    def parse(cls, data: dict[str, Any]) -> Person:
        """dict から Person を生成.

        Args:
            data: JSON から読み込んだレコード

        Returns:
            検証済みの Person

        Raises:
            ValidationError: 必須フィールドの欠落や制約違反
        """
        for key in ("name", "phone", "email", "address"):
            if key not in data:
                raise ValidationError(f"Person's {key} field is missing")

        tags = data.get("tags", [])
        if not isinstance(tags, list):
            raise ValidationError(f"Person's tags should be a list: {tags!r}")

        return cls(
            name=Name(data["name"]),
            phone=Phone(data["phone"]),
            email=Email(data["email"]),
            address=Address(data["address"]),
            tags=frozenset(Tag(t) for t in tags),
            note=data.get("note", ""),
        )
