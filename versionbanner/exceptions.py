"""
Exceptions raised by versionbanner.
"""

from typing import Optional


class VersionBannerError(Exception):
    """Base class for versionbanner errors."""


class ModTimeError(VersionBannerError):
    """A modification time could not be resolved.

    ``reason`` is the human-readable text substituted into the banner.
    """

    def __init__(self, reason: str, path: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.path = path


class EmptyPathError(ModTimeError):
    """No file path was available."""

    def __init__(self):
        super().__init__("no file path available to resolve the modification time", "")


class RemotePathError(ModTimeError):
    """The path points at a remote location that cannot be stat'ed."""

    def __init__(self, path: str):
        super().__init__(f"cannot resolve remote modification time for '{path}'", path)


class NoModTimeError(ModTimeError):
    """The file exists but reports no modification time."""

    def __init__(self, path: str):
        super().__init__(f"no modification time available for '{path}'", path)


class LookupFailedError(ModTimeError):
    """The file status lookup itself failed."""

    def __init__(self, path: str, cause: Optional[str] = None):
        reason = f"lookup failed for '{path}'"
        if cause:
            reason = f"{reason} ({cause})"
        super().__init__(reason, path)
