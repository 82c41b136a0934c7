"""
Detecting the client's own version and build commit.

The codebase does not contain the version directly, as it would require
code changes on every release. The releases depend on tagging rather
than in-code version bumps: the version is derived by ``setuptools_scm``
at packaging time and read here from the installed distribution's metadata.

For untagged builds, ``setuptools_scm`` appends the commit as a local version
segment, e.g. ``0.3.1.dev4+g1a2b3c4d.d20240101``; the commit is parsed from it.

The version is determined only once at startup when the code is loaded.
"""
import dataclasses
import re
from typing import Optional

# The local segment of a PEP-440 version, as rendered by setuptools_scm: "+g<hash>[.d<date>]".
SCM_COMMIT_PATTERN = re.compile(r'\+g(?P<commit>[0-9a-f]+)')

version: Optional[str] = None

try:
    import importlib.metadata
except ImportError:
    pass
else:
    try:
        name, *_ = __name__.split('.')  # usually "osclient", unless renamed/forked.
        version = importlib.metadata.version(name)
    except Exception:
        pass  # not installed, or installed as an egg, from git, etc.


@dataclasses.dataclass(frozen=True)
class VersionInfo:
    """
    The build metadata of the client: as shown in the user agents and CLI.

    Both fields are empty strings if unknown. The version has no local segment:
    the commit of an untagged build is reported in its own field.
    """
    git_version: str = ''
    git_commit: str = ''


def parse_commit(value: Optional[str]) -> str:
    match = SCM_COMMIT_PATTERN.search(value or '')
    return match.group('commit') if match else ''


def get() -> VersionInfo:
    public_version, *_ = (version or '').split('+', 1)
    return VersionInfo(git_version=public_version, git_commit=parse_commit(version))
