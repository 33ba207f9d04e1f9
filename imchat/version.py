"""Build version information."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass, field
from typing import Any

GIT_MAJOR = ""
GIT_MINOR = ""
GIT_VERSION = "latest"
GIT_COMMIT = ""
GIT_TREE_STATE = ""
BUILD_DATE = "1970-01-01T00:00:00Z"


@dataclass
class Info:
    """Versioning information for the running code."""

    major: str = ""
    minor: str = ""
    git_version: str = ""
    git_commit: str = ""
    build_date: str = ""
    runtime_version: str = ""
    compiler: str = ""
    platform: str = ""

    def __str__(self) -> str:
        return self.git_version

    def to_dict(self) -> dict[str, str]:
        """Return the serialised form, leaving out empty optional fields."""
        data: dict[str, str] = {}
        if self.major:
            data["major"] = self.major
        if self.minor:
            data["minor"] = self.minor
        data["gitVersion"] = self.git_version
        if self.git_commit:
            data["gitCommit"] = self.git_commit
        data["buildDate"] = self.build_date
        data["runtimeVersion"] = self.runtime_version
        data["compiler"] = self.compiler
        data["platform"] = self.platform
        return data


@dataclass
class ServerVersion:
    """Version of the messaging server and its client core."""

    server_version: str = ""
    client_version: str = ""

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {}
        if self.server_version:
            data["serverVersion"] = self.server_version
        if self.client_version:
            data["clientVersion"] = self.client_version
        return data


@dataclass
class Output:
    """Combined version report of this service and the server it talks to."""

    chat_version: Info = field(default_factory=Info)
    server_version: ServerVersion | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"OpenIMChatVersion": self.chat_version.to_dict()}
        if self.server_version is not None:
            data["OpenIMServerVersion"] = self.server_version.to_dict()
        return data


def get() -> Info:
    """Return the version of this code base and the runtime it runs on."""
    return Info(
        major=GIT_MAJOR,
        minor=GIT_MINOR,
        git_version=GIT_VERSION,
        git_commit=GIT_COMMIT,
        build_date=BUILD_DATE,
        runtime_version=platform.python_version(),
        compiler=platform.python_implementation(),
        platform=f"{sys.platform}/{platform.machine().lower()}",
    )


def get_single_version() -> str:
    """Return the version string alone."""
    return GIT_VERSION