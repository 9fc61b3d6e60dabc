"""Target dependency declarations.

A ``TargetDependency`` is exactly one of the variant classes below. Values
are immutable and compare structurally; the graph builder consumes them as
they are.

    deps: list[TargetDependency] = [
        target("Core"),
        ProjectRef(target="Networking", path=Path("../Networking")),
        sdk("ARKit", SDKType.FRAMEWORK, condition=PlatformCondition.when([PlatformFilter.IOS])),
        XCTEST,
    ]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import ClassVar, Protocol

from .platform_condition import PlatformCondition

__all__ = [
    "TYPE_NAMES",
    "XCTEST",
    "CocoaPod",
    "External",
    "Framework",
    "FrameworkStatus",
    "Library",
    "Named",
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


class FrameworkStatus(StrEnum):
    """Linkage of ``framework`` and ``xcframework`` dependencies."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    """Weakly linked."""


class SDKStatus(StrEnum):
    """Linkage of ``sdk`` dependencies."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    """Weakly linked."""


class SDKType(StrEnum):
    LIBRARY = "library"
    FRAMEWORK = "framework"


class PackageType(StrEnum):
    """How a package product is integrated."""

    RUNTIME = "runtime"
    """Sources linked and imported by dependent targets."""

    PLUGIN = "plugin"
    """Loaded by the build system to extend compilation."""

    MACRO = "macro"
    """Provides a compiler macro."""


@dataclass(frozen=True, slots=True)
class TargetRef:
    """Another target within the same project."""

    type_name: ClassVar[str] = "target"

    name: str
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class ProjectRef:
    """A target within another project.

    Attributes:
        target: Name of the target to depend on.
        path: Path to the other project directory, relative to the manifest.
    """

    type_name: ClassVar[str] = "project"

    target: str
    path: Path
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class Framework:
    """A prebuilt framework."""

    type_name: ClassVar[str] = "framework"

    path: Path
    status: FrameworkStatus = FrameworkStatus.REQUIRED
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class Library:
    """A prebuilt static or dynamic library.

    Attributes:
        path: Path to the library binary.
        public_headers: Directory holding the library's public headers.
        swift_module_map: Module map file, if the library exposes one.
    """

    type_name: ClassVar[str] = "library"

    path: Path
    public_headers: Path
    swift_module_map: Path | None = None
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class Package:
    """A product of a natively integrated package.

    Attributes:
        product: Name of the output product, e.g. ``RxSwift``.
        type: How the product is integrated.
    """

    type_name: ClassVar[str] = "package"

    product: str
    type: PackageType = PackageType.RUNTIME
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class PackagePlugin:
    """A build plugin product of a natively integrated package."""

    type_name: ClassVar[str] = "packagePlugin"

    product: str
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class Sdk:
    """A system library or framework.

    Attributes:
        name: Name without extension, e.g. ``ARKit`` or ``c++``.
    """

    type_name: ClassVar[str] = "sdk"

    name: str
    type: SDKType
    status: SDKStatus
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class XCFramework:
    type_name: ClassVar[str] = "xcframework"

    path: Path
    status: FrameworkStatus = FrameworkStatus.REQUIRED
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class XCTest:
    """The platform's test framework. Carries no payload."""

    type_name: ClassVar[str] = "xctest"


@dataclass(frozen=True, slots=True)
class External:
    """A dependency resolved through the lockfile-based dependency mechanism."""

    type_name: ClassVar[str] = "external"

    name: str
    condition: PlatformCondition | None = None


@dataclass(frozen=True, slots=True)
class CocoaPod:
    type_name: ClassVar[str] = "cocoapod"

    type: SDKType
    content: str


TargetDependency = (
    TargetRef
    | ProjectRef
    | Framework
    | Library
    | Package
    | PackagePlugin
    | Sdk
    | XCFramework
    | XCTest
    | External
    | CocoaPod
)

XCTEST = XCTest()

VARIANTS: tuple[type[TargetDependency], ...] = (
    TargetRef,
    ProjectRef,
    Framework,
    Library,
    Package,
    PackagePlugin,
    Sdk,
    XCFramework,
    XCTest,
    External,
    CocoaPod,
)

TYPE_NAMES: tuple[str, ...] = tuple(v.type_name for v in VARIANTS)


def type_name(dependency: TargetDependency) -> str:
    """Return the stable tag of the populated variant."""
    return dependency.type_name


class Named(Protocol):
    """Anything with a ``name``, e.g. a target description."""

    @property
    def name(self) -> str: ...


def sdk(
    name: str,
    type: SDKType,
    status: SDKStatus = SDKStatus.REQUIRED,
    condition: PlatformCondition | None = None,
) -> Sdk:
    """System library or framework dependency, required unless stated."""
    return Sdk(name=name, type=type, status=status, condition=condition)


def target(target: str | Named, condition: PlatformCondition | None = None) -> TargetRef:
    """Dependency on a sibling target, given its name or the target itself."""
    name = target if isinstance(target, str) else target.name
    return TargetRef(name=name, condition=condition)
