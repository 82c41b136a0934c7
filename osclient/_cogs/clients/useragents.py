"""
Self-identification of the client programs to the API servers.

The servers log the user agents for diagnostics, so the string identifies
the calling program, its version, its platform, and the client's build commit:
e.g. ``"deployer/3.1.0 (linux/amd64) openshift/1a2b3c4"``.
"""
import dataclasses
import os.path
import platform
import sys
from typing import Optional

from osclient._cogs.helpers import versions

# Platform names as the API servers' ecosystem knows them (Go-style).
ARCH_ALIASES = {
    'x86_64': 'amd64',
    'amd64': 'amd64',
    'i386': '386',
    'i686': '386',
    'aarch64': 'arm64',
    'arm64': 'arm64',
    'armv7l': 'arm',
    'ppc64le': 'ppc64le',
    's390x': 's390x',
}

UNKNOWN_COMMIT = 'unknown'


@dataclasses.dataclass(frozen=True)
class RuntimeEnvironment:
    """
    The read-only process context, as used in the user agents.
    """
    executable: str
    os: str
    arch: str

    @classmethod
    def detect(cls) -> "RuntimeEnvironment":
        machine = platform.machine().lower()
        return cls(
            executable=sys.argv[0] if sys.argv and sys.argv[0] else sys.executable,
            os=platform.system().lower() or sys.platform,
            arch=ARCH_ALIASES.get(machine, machine or 'unknown'),
        )


def default_openshift_user_agent(
        environment: Optional[RuntimeEnvironment] = None,
        info: Optional[versions.VersionInfo] = None,
) -> str:
    """
    The default user agent that the clients can use.

    The version is cut at the first hyphen (pre-release suffixes are dropped),
    and the commit is shortened to 7 characters.
    """
    environment = environment if environment is not None else RuntimeEnvironment.detect()
    info = info if info is not None else versions.get()

    commit = info.git_commit[:7] or UNKNOWN_COMMIT
    version = info.git_version.split('-', 1)[0]
    executable = os.path.basename(environment.executable)
    return f"{executable}/{version} ({environment.os}/{environment.arch}) openshift/{commit}"
