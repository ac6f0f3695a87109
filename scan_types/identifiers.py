"""패키지 식별자 모델(Package identifier model).

Package coordinates come in three forms that must convert into each other
without silently changing the ecosystem:

- `PackageDescriptor`: name, version and a typed `PackageType`
- `PackageSpecifier`: name, version and a free-text registry string
- a package-URL (purl) string such as ``pkg:npm/left-pad@1.0.0``
"""
from __future__ import annotations

from functools import total_ordering
from typing import ClassVar, Dict, FrozenSet, Optional, Tuple, Union

from packageurl import PackageURL
from pydantic import AliasChoices, ConfigDict, Field

from common_lib.logger import get_logger

from .common import WireEnum, WireModel
from .errors import InvalidPackageUrl, UnknownEcosystem, UnsupportedPackageType

logger = get_logger(__name__)


class PackageType(WireEnum):
    """패키지 생태계(Package ecosystem)."""

    NPM = "npm"
    PYPI = "pypi"
    MAVEN = "maven"
    RUBYGEMS = "rubygems"
    NUGET = "nuget"
    CARGO = "cargo"
    GOLANG = "golang"

    @property
    def language(self) -> str:
        return _LANGUAGES[self]


_LANGUAGES: Dict[PackageType, str] = {
    PackageType.NPM: "Javascript",
    PackageType.PYPI: "Python",
    PackageType.MAVEN: "Java",
    PackageType.RUBYGEMS: "Ruby",
    PackageType.NUGET: ".NET",
    PackageType.CARGO: "Rust",
    PackageType.GOLANG: "Golang",
}


class PurlType(WireEnum):
    """Package-URL 타입 어휘(Package-URL type vocabulary)."""

    ALPM = "alpm"
    APK = "apk"
    BITBUCKET = "bitbucket"
    BITNAMI = "bitnami"
    CARGO = "cargo"
    COCOAPODS = "cocoapods"
    COMPOSER = "composer"
    CONAN = "conan"
    CONDA = "conda"
    CPAN = "cpan"
    CRAN = "cran"
    DEB = "deb"
    DOCKER = "docker"
    GEM = "gem"
    GENERIC = "generic"
    GITHUB = "github"
    GOLANG = "golang"
    HACKAGE = "hackage"
    HEX = "hex"
    HUGGINGFACE = "huggingface"
    LUAROCKS = "luarocks"
    MAVEN = "maven"
    MLFLOW = "mlflow"
    NPM = "npm"
    NUGET = "nuget"
    OCI = "oci"
    PUB = "pub"
    PYPI = "pypi"
    QPKG = "qpkg"
    RPM = "rpm"
    SWID = "swid"
    SWIFT = "swift"


# Historical registry names accepted from clients, keyed by lower-cased input.
PACKAGE_TYPE_ALIASES: Dict[str, PackageType] = {
    "npm": PackageType.NPM,
    "python": PackageType.PYPI,
    "pypi": PackageType.PYPI,
    "maven": PackageType.MAVEN,
    "maven-central": PackageType.MAVEN,
    "ruby": PackageType.RUBYGEMS,
    "rubygems": PackageType.RUBYGEMS,
    "gem": PackageType.RUBYGEMS,
    "nuget": PackageType.NUGET,
    "dotnet": PackageType.NUGET,
    "cargo": PackageType.CARGO,
    "golang": PackageType.GOLANG,
}

_TO_PURL: Dict[PackageType, PurlType] = {
    PackageType.NPM: PurlType.NPM,
    PackageType.PYPI: PurlType.PYPI,
    PackageType.MAVEN: PurlType.MAVEN,
    PackageType.RUBYGEMS: PurlType.GEM,
    PackageType.NUGET: PurlType.NUGET,
    PackageType.CARGO: PurlType.CARGO,
    PackageType.GOLANG: PurlType.GOLANG,
}

_FROM_PURL: Dict[PurlType, PackageType] = {purl: pkg for pkg, purl in _TO_PURL.items()}

# Separator between purl namespace and name as it appears in a package name.
_NAMESPACE_SEPARATORS: Dict[PackageType, str] = {
    PackageType.MAVEN: ":",
    PackageType.NPM: "/",
    PackageType.GOLANG: "/",
}


def parse_package_type(value: str) -> PackageType:
    """
    Parse a free-text registry/ecosystem name, case-insensitively.

    Args:
        value: Registry string such as "PyPI", "python" or "maven-central"

    Returns:
        The matching PackageType

    Raises:
        UnknownEcosystem: value matches no known alias
    """
    try:
        return PACKAGE_TYPE_ALIASES[value.lower()]
    except KeyError:
        raise UnknownEcosystem(value) from None


def to_purl_type(package_type: PackageType) -> PurlType:
    return _TO_PURL[package_type]


def from_purl_type(purl_type: Union[PurlType, str]) -> PackageType:
    """
    Map a purl type back to a PackageType.

    Raises:
        UnsupportedPackageType: the purl type has no PackageType equivalent,
            or the string is not a purl type at all
    """
    try:
        return _FROM_PURL[PurlType(purl_type)]
    except (KeyError, ValueError):
        raise UnsupportedPackageType(str(purl_type)) from None


@total_ordering
class PackageDescriptor(WireModel):
    """패키지 설명자(Structured package identity)."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    package_type: PackageType = Field(
        alias="type",
        validation_alias=AliasChoices("type", "registry"),
    )

    def sort_key(self) -> Tuple:
        return (self.name, self.version, self.package_type.ordinal)

    def __lt__(self, other: "PackageDescriptor") -> bool:
        if not isinstance(other, PackageDescriptor):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def to_specifier(self) -> "PackageSpecifier":
        return specifier_from_descriptor(self)

    def to_purl(self) -> str:
        return descriptor_to_purl(self)

    @classmethod
    def from_purl(cls, purl: str) -> "PackageDescriptor":
        return descriptor_from_purl(purl)


@total_ordering
class PackageSpecifier(WireModel):
    """문자열 레지스트리 패키지 지정자(Package identity with a free-text registry)."""

    model_config = ConfigDict(frozen=True)

    registry: str = Field(validation_alias=AliasChoices("registry", "type"))
    name: str
    version: str

    def sort_key(self) -> Tuple:
        return (self.registry, self.name, self.version)

    def __lt__(self, other: "PackageSpecifier") -> bool:
        if not isinstance(other, PackageSpecifier):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def to_descriptor(self) -> PackageDescriptor:
        return descriptor_from_specifier(self)


def descriptor_from_specifier(specifier: PackageSpecifier) -> PackageDescriptor:
    """
    Validate a specifier's registry and build the typed descriptor.

    Raises:
        UnknownEcosystem: the registry string is not a known ecosystem alias;
            the message quotes the registry verbatim
    """
    try:
        package_type = parse_package_type(specifier.registry)
    except UnknownEcosystem:
        raise UnknownEcosystem(
            specifier.registry,
            f"Failed to convert registry {specifier.registry} to package type",
        ) from None
    return PackageDescriptor(
        name=specifier.name,
        version=specifier.version,
        package_type=package_type,
    )


def specifier_from_descriptor(descriptor: PackageDescriptor) -> PackageSpecifier:
    return PackageSpecifier(
        registry=str(descriptor.package_type),
        name=descriptor.name,
        version=descriptor.version,
    )


def descriptor_to_purl(descriptor: PackageDescriptor) -> str:
    """Render a descriptor as a package-URL string.

    Namespaced names are split back into purl namespace and name: maven
    ``group:artifact``, scoped npm ``@scope/name`` and golang module paths.
    """
    namespace: Optional[str] = None
    name = descriptor.name
    separator = _NAMESPACE_SEPARATORS.get(descriptor.package_type)
    if separator and separator in name:
        if descriptor.package_type is not PackageType.NPM or name.startswith("@"):
            namespace, name = name.rsplit(separator, 1)

    purl = PackageURL(
        type=str(to_purl_type(descriptor.package_type)),
        namespace=namespace,
        name=name,
        version=descriptor.version,
    )
    return purl.to_string()


def descriptor_from_purl(purl: str) -> PackageDescriptor:
    """
    Parse a package-URL string into a descriptor.

    Raises:
        InvalidPackageUrl: the string is not a purl, or it carries no version
        UnsupportedPackageType: the purl type has no PackageType equivalent
    """
    try:
        parsed = PackageURL.from_string(purl)
    except ValueError as exc:
        raise InvalidPackageUrl(purl, str(exc)) from exc

    package_type = from_purl_type(parsed.type)
    if not parsed.version:
        raise InvalidPackageUrl(purl, "a package version is required")

    name = parsed.name
    if parsed.namespace:
        separator = _NAMESPACE_SEPARATORS.get(package_type, "/")
        name = f"{parsed.namespace}{separator}{name}"

    logger.debug("Parsed purl %s as %s %s@%s", purl, package_type, name, parsed.version)
    return PackageDescriptor(name=name, version=parsed.version, package_type=package_type)


class PackageDescriptorAndLockfile(PackageDescriptor):
    """`PackageDescriptor` fields flattened with an optional lockfile path."""

    omit_when_absent: ClassVar[FrozenSet[str]] = frozenset({"lockfile"})

    lockfile: Optional[str] = None

    @property
    def package_descriptor(self) -> PackageDescriptor:
        return PackageDescriptor(
            name=self.name,
            version=self.version,
            package_type=self.package_type,
        )

    def sort_key(self) -> Tuple:
        return super().sort_key() + (self.lockfile is not None, self.lockfile or "")

    @classmethod
    def from_descriptor(
        cls, descriptor: PackageDescriptor, lockfile: Optional[str] = None
    ) -> "PackageDescriptorAndLockfile":
        return cls(
            name=descriptor.name,
            version=descriptor.version,
            package_type=descriptor.package_type,
            lockfile=lockfile,
        )


class PackageSpecifierAndLockfile(WireModel):
    """A `PackageSpecifier` and the optional path to its lockfile."""

    model_config = ConfigDict(frozen=True)
    omit_when_absent: ClassVar[FrozenSet[str]] = frozenset({"lockfile"})

    package_specifier: PackageSpecifier
    lockfile: Optional[str] = None

    @classmethod
    def from_specifier(
        cls, specifier: PackageSpecifier, lockfile: Optional[str] = None
    ) -> "PackageSpecifierAndLockfile":
        return cls(package_specifier=specifier, lockfile=lockfile)


class PackageUrlAndLockfile(WireModel):
    """A package-URL string and the optional path to its lockfile."""

    model_config = ConfigDict(frozen=True)
    omit_when_absent: ClassVar[FrozenSet[str]] = frozenset({"lockfile"})

    purl: str
    lockfile: Optional[str] = None

    @classmethod
    def from_purl(cls, purl: str, lockfile: Optional[str] = None) -> "PackageUrlAndLockfile":
        return cls(purl=purl, lockfile=lockfile)

    @classmethod
    def from_descriptor(
        cls, descriptor: PackageDescriptor, lockfile: Optional[str] = None
    ) -> "PackageUrlAndLockfile":
        return cls(purl=descriptor_to_purl(descriptor), lockfile=lockfile)

    def to_descriptor_and_lockfile(self) -> PackageDescriptorAndLockfile:
        return PackageDescriptorAndLockfile.from_descriptor(
            descriptor_from_purl(self.purl), lockfile=self.lockfile
        )
