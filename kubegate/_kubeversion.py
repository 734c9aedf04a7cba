# SPDX-FileCopyrightText: Copyright (c) 2024, Kubegate Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""Parsing and ordering of Kubernetes server versions."""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

import semver

from ._exceptions import VersionParseError

_COMPACT_STAGE_PATTERN = re.compile(r"(alpha|beta|rc)(\d+)")


def _identifiers(prerelease: str) -> list[str]:
    """Split a pre-release tag into identifiers, expanding ``rc1`` into ``rc``, ``1``."""
    identifiers = []
    for identifier in prerelease.split("."):
        match = _COMPACT_STAGE_PATTERN.fullmatch(identifier)
        if match is None:
            identifiers.append(identifier)
        else:
            identifiers.extend(match.groups())
    return identifiers


def _identifier_key(identifier: str) -> tuple:
    if identifier.isdigit():
        return (0, int(identifier), "")
    return (1, 0, identifier)


def _prerelease_key(prerelease: str) -> tuple:
    """Build a sort key for a pre-release tag.

    Identifiers follow SemVer precedence: numeric ones compare numerically and sort
    before alphanumeric ones, alphanumeric ones compare lexically, and a tag that is a
    prefix of another sorts first. The stage names order ``alpha < beta < rc`` and
    sequences compare as numbers, so ``rc.10`` sorts after ``rc.2`` and
    ``beta.0.12`` after ``alpha.4``. Vendor tags such as ``gke.2100`` slot in by the
    same rules.
    """
    return tuple(_identifier_key(i) for i in _identifiers(prerelease))


@total_ordering
@dataclass(frozen=True, eq=False)
class KubeVersion:
    """A Kubernetes version such as ``v1.24.0-rc.1+k3s1``.

    Build metadata is kept for display but is ignored when comparing and hashing,
    so ``v1.24.0+k3s1`` and ``v1.24.0`` are equal.

    Examples:
        >>> KubeVersion.parse("v1.24.0-alpha.3") < KubeVersion.parse("1.24.0-alpha.4")
        True

        >>> str(KubeVersion.parse("v1.24.0+k3s1"))
        '1.24.0+k3s1'
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    @classmethod
    def parse(cls, version: str) -> KubeVersion:
        """Parse a ``[v]MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` string.

        Args:
            version: The version string, usually the ``gitVersion`` reported by
                the API server.

        Returns:
            The parsed version.

        Raises:
            VersionParseError: If ``version`` is not a valid version string.
        """
        if not isinstance(version, str):
            raise VersionParseError(version)
        text = version[1:] if version.startswith("v") else version
        try:
            info = semver.Version.parse(text)
        except (TypeError, ValueError) as e:
            raise VersionParseError(version) from e
        return cls(info.major, info.minor, info.patch, info.prerelease, info.build)

    @property
    def _key(self) -> tuple:
        if self.prerelease is None:
            return (self.major, self.minor, self.patch, 1, ())
        return (self.major, self.minor, self.patch, 0, _prerelease_key(self.prerelease))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KubeVersion):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: KubeVersion) -> bool:
        if not isinstance(other, KubeVersion):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version
