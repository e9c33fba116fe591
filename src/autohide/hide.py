"""Platform hide primitive.

Windows has a native hidden attribute; everywhere else an entry is hidden
by giving it a dot-prefixed name. Exactly one ``hide_path`` exists per
platform.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from autohide import HideError


if sys.platform == "win32":
    import ctypes
    import stat

    def hide_path(path: Path) -> Path:
        """Set the hidden attribute on *path*, leaving other bits untouched.

        Returns:
            Path: *path*, which does not move.

        Raises:
            HideError: If attributes cannot be read or written.
        """
        try:
            attributes = os.stat(path, follow_symlinks=False).st_file_attributes
        except OSError as exc:
            raise HideError(
                f"Failed to get file attributes for path {path}: {exc}"
            ) from exc

        if attributes & stat.FILE_ATTRIBUTE_HIDDEN:
            return path

        set_attributes = ctypes.windll.kernel32.SetFileAttributesW
        if not set_attributes(str(path), attributes | stat.FILE_ATTRIBUTE_HIDDEN):
            raise HideError(f"Failed to hide path {path}: {ctypes.WinError()}")
        return path

else:

    def hide_path(path: Path) -> Path:
        """Rename *path* in place to a dot-prefixed name.

        Returns:
            Path: Where the entry lives afterwards.

        Raises:
            HideError: If the rename fails or would replace another entry.
        """
        name = path.name
        if not name:
            raise HideError(f"Failed to get file name from path {path}")
        if name.startswith("."):
            return path

        target = path.with_name(f".{name}")
        # rename(2) silently replaces an existing file
        if os.path.lexists(target):
            raise HideError(f"Failed to rename path {path}: {target} already exists")
        try:
            os.rename(path, target)
        except OSError as exc:
            raise HideError(f"Failed to rename path {path}: {exc}") from exc
        return target
