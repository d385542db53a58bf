"""Candidate and version data types.

All types are immutable. Methods that "update" a value return a copy.
"""

from dataclasses import dataclass, replace
from typing import Union


@dataclass(frozen=True)
class JavaVersion:
    """One row of the tabular Java version listing."""

    vendor: str
    usage: str
    version: str
    distribution: str
    status: str
    identifier: str

    def render(self) -> str:
        return (
            f" {self.vendor:<12} {self.usage:>5} {self.version:<15} "
            f"{self.distribution:<10} {self.status:<12} {self.identifier:<20}"
        )


@dataclass(frozen=True)
class OtherVersion:
    """A plain version token from the generic version grid."""

    value: str

    @property
    def identifier(self) -> str:
        return self.value

    def render(self) -> str:
        return f"{self.value:>16}"


Version = Union[JavaVersion, OtherVersion]


def parse_version(line: str) -> Version:
    """Parse a single version line or token.

    Lines containing " | " are rows of the Java table; missing trailing
    columns become empty strings. Anything else is a plain version.
    """
    if " | " in line:
        parts = [part.strip() for part in line.split("|")]
        parts += [""] * (6 - len(parts))
        return JavaVersion(
            vendor=parts[0],
            usage=parts[1],
            version=parts[2],
            distribution=parts[3],
            status=parts[4],
            identifier=parts[5],
        )
    return OtherVersion(value=line.strip())


@dataclass(frozen=True)
class CandidateVersion:
    """A version together with its local installation state."""

    version: Version
    installed: bool = False
    current: bool = False

    @classmethod
    def remote(cls, version: Version) -> "CandidateVersion":
        return cls(version=version)

    @classmethod
    def local(cls, version: Version, installed: bool, current: bool) -> "CandidateVersion":
        return cls(version=version, installed=installed, current=current)

    @property
    def identifier(self) -> str:
        return self.version.identifier

    def render(self) -> str:
        """Render the version with installed/current markers.

        Java rows put ">>>" in the usage column and "installed" in the
        status column. Plain versions are prefixed with ">" and "*".
        """
        if isinstance(self.version, JavaVersion):
            return replace(
                self.version,
                usage=">>>" if self.current else "",
                status="installed" if self.installed else "",
            ).render()
        current_marker = ">" if self.current else ""
        installed_marker = "*" if self.installed else ""
        return f" {current_marker} {installed_marker} {self.version.value} "


@dataclass(frozen=True)
class LocalCandidate:
    """A candidate directory found under the SDKMAN candidates directory."""

    binary_name: str
    versions: tuple[CandidateVersion, ...] = ()

    def version_names(self) -> list[str]:
        return [v.identifier for v in self.versions]

    @property
    def current_version(self) -> str | None:
        for v in self.versions:
            if v.current:
                return v.identifier
        return None


@dataclass(frozen=True)
class RemoteCandidate:
    """A record of the candidate catalog."""

    name: str
    binary_name: str
    description: str
    homepage: str
    default_version: str
    versions: tuple[CandidateVersion, ...] = ()
    installed_versions: tuple[str, ...] = ()
    current_version: str | None = None

    @property
    def install_command(self) -> str:
        return f"$ sdk install {self.binary_name}"

    @property
    def is_installed(self) -> bool:
        return bool(self.installed_versions)

    def with_versions(self, versions: list[CandidateVersion]) -> "RemoteCandidate":
        return replace(self, versions=tuple(versions))

    def with_local(self, local: LocalCandidate) -> "RemoteCandidate":
        return replace(
            self,
            installed_versions=tuple(local.version_names()),
            current_version=local.current_version,
        )
