"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

IssueKind: TypeAlias = Literal[
    "missing-field",
    "malformed-metadata",
    "name-policy-violation",
    "description-policy-violation",
    "duplicate-name",
]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
