"""공통 와이어 모델(Common wire model base and shared types)."""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Union

from pydantic import BaseModel, ConfigDict, model_serializer

JobId = str
ProjectId = str
UserId = str

WirePayload = Union[Dict[str, Any], str, bytes, bytearray]


class WireEnum(str, Enum):
    """문자열 와이어 열거형(String-valued wire enum).

    Displays as its wire value and exposes its declaration order as `ordinal`.
    """

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)


class Status(WireEnum):
    """작업/패키지 처리 상태(Job or package processing status)."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    FAILED = "failed"


class WireModel(BaseModel):
    """와이어 모델 기본 클래스(Base class for every wire type).

    Attribute names are snake_case and wire names come from field aliases.
    Decoding accepts either. Encoding always emits the canonical alias and
    drops the fields named in `omit_when_absent` when they are `None`.
    """

    model_config = ConfigDict(populate_by_name=True)

    omit_when_absent: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def drop_absent_fields(self, handler):
        data = handler(self)
        if not isinstance(data, dict):
            return data
        fields = type(self).model_fields
        for name in self.omit_when_absent:
            if getattr(self, name) is not None:
                continue
            field = fields[name]
            for key in (name, field.alias, field.serialization_alias):
                if key:
                    data.pop(key, None)
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Encode to a JSON-compatible dict using canonical wire names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_wire(cls, payload: WirePayload):
        """Decode from a dict or a JSON document.

        Raises:
            pydantic.ValidationError: required fields are missing or mistyped
        """
        if isinstance(payload, (str, bytes, bytearray)):
            return cls.model_validate_json(payload)
        return cls.model_validate(payload)
