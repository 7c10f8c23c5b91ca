"""
Version banner for command line programs.

Builds a multi-line text block naming the running program, its version and
last modification time, the Python runtime and host it runs on, and the
copyright/license details supplied by the caller::

    from versionbanner import version

    print(version({"version": "1.0.6", "cr_year": "2022"}))

Host details come from a metadata provider so the banner can be produced for
any environment; ``SystemMetadata`` reads the current process.
"""

import asyncio
import os
import platform
import stat
import sys
from dataclasses import dataclass
from email.utils import formatdate
from typing import Any, Mapping, Optional, Union
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

import psutil
from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    BANNER_TEMPLATE,
    DEFAULT_COPYRIGHT_NAME,
    DEFAULT_CR_YEAR,
    DEFAULT_LICENSE_URL,
    DEFAULT_VERSION,
    REFERENCE_URL,
    REMOTE_SCHEMES,
    RUNTIME_NAME,
)
from .exceptions import (
    EmptyPathError,
    LookupFailedError,
    ModTimeError,
    NoModTimeError,
    RemotePathError,
)
from .utils import logger


class VersionOptions(BaseModel):
    """Caller supplied fields shown in the banner.

    Values are not validated: any string is displayed as given.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = Field(default=DEFAULT_VERSION)
    copyright_name: str = Field(default=DEFAULT_COPYRIGHT_NAME, alias="copyrightName")
    license_url: str = Field(default=DEFAULT_LICENSE_URL, alias="licenseUrl")
    cr_year: str = Field(default=DEFAULT_CR_YEAR, alias="crYear")

    @classmethod
    def from_overrides(
        cls, overrides: Union["VersionOptions", Mapping[str, Any], None] = None
    ) -> "VersionOptions":
        """Merge ``overrides`` over the defaults.

        Missing keys and keys set to ``None`` keep their default; any other
        value, including an empty string, replaces it. Non-string values are
        displayed as ``str(value)``.
        """
        if overrides is None:
            return cls()
        if isinstance(overrides, cls):
            return overrides

        supplied = {key: str(value) for key, value in overrides.items() if value is not None}
        return cls(**supplied)


@dataclass(frozen=True)
class ModTimeResult:
    """Outcome of a modification time lookup."""
    ok: bool
    value: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[ModTimeError] = None

    @classmethod
    def success(cls, value: str) -> "ModTimeResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ModTimeError) -> "ModTimeResult":
        return cls(ok=False, reason=error.reason, error=error)

    @property
    def text(self) -> str:
        """Timestamp on success, fallback reason otherwise."""
        return self.value if self.ok else self.reason


class SystemMetadata:
    """Host metadata for the running Python process."""

    runtime_name = RUNTIME_NAME

    def module_path(self) -> str:
        """Path of the program's entry point module."""
        main = sys.modules.get("__main__")
        path = getattr(main, "__file__", None)
        if path:
            return str(path)
        if sys.argv and sys.argv[0] not in ("", "-c", "-m"):
            return sys.argv[0]
        return ""

    def runtime_version(self) -> str:
        return platform.python_version()

    def os_name(self) -> str:
        return sys.platform

    def arch(self) -> str:
        return platform.machine()

    def cpu_count(self) -> int:
        return psutil.cpu_count(logical=True) or os.cpu_count() or 1


def is_string(value: Any) -> bool:
    """Return True if ``value`` is a ``str``."""
    return isinstance(value, str)


def to_title_case_first(text):
    """Upper-case the first character of ``text``.

    Non-string and empty values are returned unchanged.
    """
    if not is_string(text) or len(text) == 0:
        return text
    return text[0].upper() + text[1:]


def display_name(path: str) -> str:
    """Final path segment of a filesystem path or URL."""
    if "://" in path or path.lower().startswith("file:"):
        path = unquote(urlparse(path).path)
    return os.path.basename(path.rstrip("/\\")) if path else ""


def _is_remote(path: str) -> bool:
    return path.lower().startswith(REMOTE_SCHEMES)


def _from_file_url(url: str) -> str:
    parsed = urlparse(url)
    path = parsed.path
    if parsed.netloc and parsed.netloc != "localhost":
        path = f"//{parsed.netloc}{path}"
    return url2pathname(path)


def get_mod_time(path: str) -> str:
    """Return the last modification time of ``path`` as an RFC 1123 UTC string.

    ``path`` may be a plain path or a ``file:`` URL.

    Raises:
        EmptyPathError: ``path`` is empty.
        RemotePathError: ``path`` uses a remote URL scheme.
        NoModTimeError: the file reports no modification time.
        LookupFailedError: the file cannot be stat'ed or is not a regular file.
    """
    if not path:
        raise EmptyPathError()

    if _is_remote(path):
        raise RemotePathError(path)

    if path.lower().startswith("file:"):
        path = _from_file_url(path)

    logger.debug(f"Final path for modification time lookup: {path}")

    try:
        file_stat = os.lstat(path)
    except OSError as e:
        raise LookupFailedError(path, e.strerror) from e

    if not stat.S_ISREG(file_stat.st_mode):
        raise LookupFailedError(path, "not a regular file")

    mtime = getattr(file_stat, "st_mtime", None)
    if mtime is None:
        raise NoModTimeError(path)

    return formatdate(mtime, usegmt=True)


def resolve_mod_time(path: str) -> ModTimeResult:
    """Look up the modification time of ``path`` without raising."""
    try:
        return ModTimeResult.success(get_mod_time(path))
    except ModTimeError as e:
        logger.debug(f"Modification time unavailable: {e.reason}")
        return ModTimeResult.failure(e)


async def get_mod_time_async(path: str) -> str:
    """Awaitable ``get_mod_time``; the stat call runs in the default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, get_mod_time, path)


def _render(options: VersionOptions, metadata, module_path: str, modified: ModTimeResult) -> str:
    return BANNER_TEMPLATE.format(
        filename=display_name(module_path),
        version=options.version,
        modified=modified.text,
        runtime=metadata.runtime_name,
        runtime_version=metadata.runtime_version(),
        os_name=to_title_case_first(metadata.os_name()),
        arch=metadata.arch(),
        cpu_count=metadata.cpu_count(),
        cr_year=options.cr_year,
        copyright_name=options.copyright_name,
        license_url=options.license_url,
        reference_url=REFERENCE_URL,
    )


def version(
    options: Union[VersionOptions, Mapping[str, Any], None] = None,
    metadata=None,
) -> str:
    """Build the version banner for the running program.

    Args:
        options: ``VersionOptions`` or a mapping of any of its fields; missing
            fields use the ``[DEFAULT]`` placeholders.
        metadata: Host metadata provider, ``SystemMetadata()`` if omitted.

    Returns:
        The banner text. Modification time problems appear as fallback text
        in the banner; errors from the metadata provider propagate.
    """
    opts = VersionOptions.from_overrides(options)
    metadata = metadata or SystemMetadata()
    module_path = metadata.module_path()

    return _render(opts, metadata, module_path, resolve_mod_time(module_path))


async def version_async(
    options: Union[VersionOptions, Mapping[str, Any], None] = None,
    metadata=None,
) -> str:
    """Awaitable ``version``; the stat call runs in the default executor."""
    opts = VersionOptions.from_overrides(options)
    metadata = metadata or SystemMetadata()
    module_path = metadata.module_path()

    loop = asyncio.get_running_loop()
    modified = await loop.run_in_executor(None, resolve_mod_time, module_path)

    return _render(opts, metadata, module_path, modified)
