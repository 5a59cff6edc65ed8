"""
reads the project version from the package version file, refreshing it from
`git describe` when building from a git checkout

"""
from __future__ import annotations

import os
import re
import subprocess

VERSION_RE = re.compile(r"""^__version__\s*=\s*["']([^"']+)["']""", re.MULTILINE)
RELEASE_MATCHER = re.compile(r"^\d+\.\d+\.\d+$")


def pep440ify(git_describe_version: str) -> str:
    """Turn `1.2.3-4-gabcdef` into `1.2.3+gabcdef`, leave plain releases alone"""
    if not git_describe_version or RELEASE_MATCHER.match(git_describe_version):
        return git_describe_version
    parts = git_describe_version.split("-")
    if len(parts) == 3:
        return f"{parts[0]}+{parts[2]}"
    return f"0.0.0+{git_describe_version}"


def _read_version_file(version_file: str) -> str | None:
    try:
        with open(version_file, encoding="utf-8") as fp:
            match = VERSION_RE.search(fp.read())
    except OSError:
        return None
    return match.group(1) if match else None


def _git_version() -> str | None:
    try:
        result = subprocess.run(
            ["git", "describe", "--tags"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError:
        return None
    if result.returncode != 0 or not result.stdout:
        return None
    return pep440ify(result.stdout.splitlines()[0].strip().decode("utf-8"))


def get_project_version(version_file: str) -> str:
    version_file = os.path.join(os.path.dirname(os.path.realpath(__file__)), version_file)
    file_ver = _read_version_file(version_file)
    git_ver = _git_version()
    if git_ver and git_ver != file_ver:
        with open(version_file, "w", encoding="utf-8") as fp:
            fp.write(f'__version__ = "{git_ver}"\n')
        return git_ver

    if not file_ver:
        raise Exception("version not available from git or from file %r" % version_file)

    return file_ver


if __name__ == "__main__":
    import sys

    print(get_project_version(sys.argv[1]))
