"""
versionbanner: version information for command line programs.

Produces a banner naming the running program, its version and modification
time, the Python runtime and host, and copyright/license details.
"""

__version__ = "1.0.0"
__author__ = "Guntram Bechtold"
__license__ = "MIT"

from .banner import (
    ModTimeResult,
    SystemMetadata,
    VersionOptions,
    get_mod_time,
    get_mod_time_async,
    is_string,
    resolve_mod_time,
    to_title_case_first,
    version,
    version_async,
)
from .cli import main

__all__ = [
    "ModTimeResult",
    "SystemMetadata",
    "VersionOptions",
    "get_mod_time",
    "get_mod_time_async",
    "is_string",
    "resolve_mod_time",
    "to_title_case_first",
    "version",
    "version_async",
    "main",
]
