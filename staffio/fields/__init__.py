from staffio.fields.base import Field, IterableField
from staffio.fields.typed import (
    FloatField,
    IntField,
    ListField,
    ListModelField,
    StrField,
)

__all__ = (
    "Field",
    "IterableField",
    "IntField",
    "StrField",
    "FloatField",
    "ListField",
    "ListModelField",
)
