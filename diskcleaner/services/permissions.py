# Platform permission checks.
#
# Each platform gets one PathPermissions implementation, chosen once at import
# time as PLATFORM_PERMISSIONS.  Callers take a PathPermissions argument and
# never branch on the platform themselves.
#
#   POSIX    owner-write bit (0o200) of the path's own lstat.  Groups and ACLs
#            are not resolved.
#   Windows  FILE_ATTRIBUTE_READONLY in st_file_attributes.
#   Other    the path (or, for files, its parent) exists.

from __future__ import annotations

import logging
import os
import stat as statmod
import sys
from typing import Protocol

logger = logging.getLogger(__name__)

FILE_ATTRIBUTE_READONLY = 0x1


class PathPermissions(Protocol):
    def can_delete(self, path: str) -> bool: ...

    def clear_readonly(self, path: str) -> bool:
        """Best-effort removal of a read-only flag; True if one was cleared."""
        ...


class PosixPermissions:
    def can_delete(self, path: str) -> bool:
        if not os.path.lexists(path):
            return False
        try:
            mode = os.lstat(path).st_mode
        except OSError:
            return False
        return bool(mode & statmod.S_IWUSR)

    def clear_readonly(self, path: str) -> bool:
        try:
            st = os.lstat(path)
            if statmod.S_ISLNK(st.st_mode) or st.st_mode & statmod.S_IWUSR:
                return False
            os.chmod(path, statmod.S_IMODE(st.st_mode) | statmod.S_IWUSR)
        except OSError as exc:
            logger.debug("Cannot make %s writable: %s", path, exc)
            return False
        return True


class WindowsPermissions:
    @staticmethod
    def _is_readonly(st: os.stat_result) -> bool:
        return bool(getattr(st, "st_file_attributes", 0) & FILE_ATTRIBUTE_READONLY)

    def can_delete(self, path: str) -> bool:
        if not os.path.lexists(path):
            return False
        try:
            st = os.lstat(path)
        except OSError:
            return False
        return not self._is_readonly(st)

    def clear_readonly(self, path: str) -> bool:
        try:
            st = os.lstat(path)
            if not self._is_readonly(st):
                return False
            # On Windows, granting S_IWRITE is what drops the read-only attribute.
            os.chmod(path, statmod.S_IMODE(st.st_mode) | statmod.S_IWRITE)
        except OSError as exc:
            logger.debug("Cannot clear read-only attribute on %s: %s", path, exc)
            return False
        return True


class FallbackPermissions:
    def can_delete(self, path: str) -> bool:
        if os.path.isfile(path):
            parent = os.path.dirname(os.path.abspath(path))
            return os.path.exists(parent)
        return os.path.lexists(path)

    def clear_readonly(self, path: str) -> bool:
        return False


def _platform_permissions() -> PathPermissions:
    if sys.platform == "win32":
        return WindowsPermissions()
    if os.name == "posix":
        return PosixPermissions()
    return FallbackPermissions()


PLATFORM_PERMISSIONS: PathPermissions = _platform_permissions()


def can_delete(path: str | os.PathLike[str]) -> bool:
    return PLATFORM_PERMISSIONS.can_delete(os.fspath(path))
