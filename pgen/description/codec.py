"""Tagged encoding of target dependencies.

Each dependency encodes as a single-key mapping from its type name to its
payload, with camelCase field names:

    {"sdk": {"name": "ARKit", "type": "framework", "status": "required"}}
    {"xctest": {}}

Optional fields that are unset are left out. Decoding validates every
field and reports the first problem as a ``DecodeError``.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from pgen.core.result import Err, Ok, Result
from pgen.core.structured import StrDict, as_str_dict, as_str_list

from .platform_condition import PlatformCondition, PlatformFilter
from .target_dependency import (
    VARIANTS,
    CocoaPod,
    External,
    Framework,
    FrameworkStatus,
    Library,
    Package,
    PackagePlugin,
    PackageType,
    ProjectRef,
    SDKStatus,
    SDKType,
    Sdk,
    TargetDependency,
    TargetRef,
    XCFramework,
    XCTest,
)

__all__ = [
    "DecodeError",
    "decode",
    "decode_condition",
    "encode",
    "encode_condition",
    "from_json",
    "to_json",
]


@dataclass(frozen=True, slots=True)
class DecodeError:
    """An encoded dependency could not be decoded.

    Attributes:
        key: Dotted path of the offending key, e.g. ``sdk.status``.
        message: What was wrong with it.
    """

    key: str
    message: str

    def __str__(self) -> str:
        return f"{self.key}: {self.message}"


_MISSING = object()


@dataclass(frozen=True, slots=True)
class _Field:
    attr: str
    key: str
    kind: Any  # "str", "path", "condition" or a StrEnum subclass
    optional: bool = False


_CONDITION = _Field("condition", "condition", "condition", optional=True)

_SCHEMA: dict[type[TargetDependency], tuple[_Field, ...]] = {
    TargetRef: (_Field("name", "name", "str"), _CONDITION),
    ProjectRef: (
        _Field("target", "target", "str"),
        _Field("path", "path", "path"),
        _CONDITION,
    ),
    Framework: (
        _Field("path", "path", "path"),
        _Field("status", "status", FrameworkStatus),
        _CONDITION,
    ),
    Library: (
        _Field("path", "path", "path"),
        _Field("public_headers", "publicHeaders", "path"),
        _Field("swift_module_map", "swiftModuleMap", "path", optional=True),
        _CONDITION,
    ),
    Package: (
        _Field("product", "product", "str"),
        _Field("type", "type", PackageType),
        _CONDITION,
    ),
    PackagePlugin: (_Field("product", "product", "str"), _CONDITION),
    Sdk: (
        _Field("name", "name", "str"),
        _Field("type", "type", SDKType),
        _Field("status", "status", SDKStatus),
        _CONDITION,
    ),
    XCFramework: (
        _Field("path", "path", "path"),
        _Field("status", "status", FrameworkStatus),
        _CONDITION,
    ),
    XCTest: (),
    External: (_Field("name", "name", "str"), _CONDITION),
    CocoaPod: (
        _Field("type", "type", SDKType),
        _Field("content", "content", "str"),
    ),
}

_BY_TAG: dict[str, type[TargetDependency]] = {v.type_name: v for v in VARIANTS}


def encode_condition(condition: PlatformCondition) -> StrDict:
    return {"platformFilters": condition.sorted_names()}


def decode_condition(data: object, key: str = "condition") -> Result[PlatformCondition, DecodeError]:
    table = as_str_dict(data)
    if table is None:
        return Err(DecodeError(key, "expected a mapping"))
    names = as_str_list(table.get("platformFilters"))
    if names is None:
        return Err(DecodeError(f"{key}.platformFilters", "expected a list of strings"))
    filters: list[PlatformFilter] = []
    for name in names:
        try:
            filters.append(PlatformFilter(name))
        except ValueError:
            return Err(DecodeError(f"{key}.platformFilters", f"unknown platform filter '{name}'"))
    condition = PlatformCondition.when(filters)
    if condition is None:
        return Err(DecodeError(f"{key}.platformFilters", "must not be empty"))
    return Ok(condition)


def _encode_value(field: _Field, value: object) -> object:
    if field.kind == "path":
        assert isinstance(value, Path)
        return value.as_posix()
    if field.kind == "condition":
        assert isinstance(value, PlatformCondition)
        return encode_condition(value)
    if isinstance(value, StrEnum):
        return value.value
    return value


def encode(dependency: TargetDependency) -> StrDict:
    """Encode a dependency as ``{type_name: payload}``."""
    payload: StrDict = {}
    for field in _SCHEMA[type(dependency)]:
        value = getattr(dependency, field.attr)
        if value is None:
            continue
        payload[field.key] = _encode_value(field, value)
    return {dependency.type_name: payload}


def _decode_value(field: _Field, raw: object, key: str) -> Result[object, DecodeError]:
    if field.kind == "condition":
        return decode_condition(raw, key)
    if not isinstance(raw, str):
        return Err(DecodeError(key, "expected a string"))
    if field.kind == "str":
        return Ok(raw)
    if field.kind == "path":
        if not raw:
            return Err(DecodeError(key, "expected a non-empty path"))
        return Ok(Path(raw))
    enum_type: Callable[[str], StrEnum] = field.kind
    try:
        return Ok(enum_type(raw))
    except ValueError:
        return Err(DecodeError(key, f"unknown value '{raw}'"))


def decode(data: Mapping[str, object]) -> Result[TargetDependency, DecodeError]:
    """Decode a mapping produced by :func:`encode`."""
    if len(data) != 1:
        return Err(DecodeError("<root>", "expected exactly one dependency type key"))

    tag, raw_payload = next(iter(data.items()))
    variant = _BY_TAG.get(tag)
    if variant is None:
        return Err(DecodeError(tag, "unknown dependency type"))

    payload = as_str_dict(raw_payload)
    if payload is None:
        return Err(DecodeError(tag, "expected a mapping"))

    kwargs: dict[str, object] = {}
    for field in _SCHEMA[variant]:
        key = f"{tag}.{field.key}"
        raw = payload.get(field.key, _MISSING)
        if raw is _MISSING or raw is None:
            if field.optional:
                continue
            return Err(DecodeError(key, "missing required field"))
        match _decode_value(field, raw, key):
            case Ok(value):
                kwargs[field.attr] = value
            case Err() as err:
                return err

    return Ok(variant(**kwargs))


def to_json(dependency: TargetDependency) -> str:
    return json.dumps(encode(dependency), sort_keys=True)


def from_json(text: str) -> Result[TargetDependency, DecodeError]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(DecodeError("<root>", f"invalid JSON: {e.msg}"))
    table = as_str_dict(data)
    if table is None:
        return Err(DecodeError("<root>", "expected a JSON object"))
    return decode(table)
