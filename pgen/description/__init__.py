"""Manifest description schema: target dependencies and platform conditions."""

from .codec import DecodeError, decode, encode, from_json, to_json
from .platform_condition import PlatformCondition, PlatformFilter
from .target_dependency import (
    TYPE_NAMES,
    XCTEST,
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
    sdk,
    target,
    type_name,
)

__all__ = [
    # codec
    "DecodeError",
    "decode",
    "encode",
    "from_json",
    "to_json",
    # conditions
    "PlatformCondition",
    "PlatformFilter",
    # dependencies
    "TYPE_NAMES",
    "XCTEST",
    "CocoaPod",
    "External",
    "Framework",
    "FrameworkStatus",
    "Library",
    "Package",
    "PackagePlugin",
    "PackageType",
    "ProjectRef",
    "SDKStatus",
    "SDKType",
    "Sdk",
    "TargetDependency",
    "TargetRef",
    "XCFramework",
    "XCTest",
    "sdk",
    "target",
    "type_name",
]
