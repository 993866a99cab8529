import os
from pathlib import PurePath
from typing import Optional

from pathmaker.errors import PathMakerError
from pathmaker.types import ErrorVal, PathStatus


class BasicFS:
    """Directory queries and creation on the real filesystem.

    Directory names in Path_maker are case-insensitive, so every lookup
    falls back to a case-insensitive match of each component when the exact
    spelling does not exist.
    """

    def _match_case(self, directory: str, name: str) -> Optional[str]:
        try:
            entries = sorted(os.listdir(directory))
        except OSError:
            return None
        lowered = name.lower()
        for entry in entries:
            if entry.lower() == lowered:
                return entry
        return None

    def locate(self, path: str) -> Optional[str]:
        """Return the on-disk spelling of `path`, or None if it does not exist."""
        parts = PurePath(path).parts
        if not parts:
            return None
        current = parts[0]
        for name in parts[1:]:
            candidate = os.path.join(current, name)
            if os.path.exists(candidate):
                current = candidate
                continue
            match = self._match_case(current, name)
            if match is None:
                return None
            current = os.path.join(current, match)
        return current

    def stat(self, path: str) -> PathStatus:
        real = self.locate(path)
        if real is None:
            return PathStatus.ABSENT
        if os.path.isdir(real):
            return PathStatus.DIRECTORY
        return PathStatus.NOT_A_DIRECTORY

    def create_all(self, path: str) -> str:
        """Create `path` and any missing parents, reusing existing directories.

        Returns the path that was created.
        """
        parts = PurePath(path).parts
        current = parts[0]
        remaining = list(parts[1:])
        while remaining:
            name = remaining[0]
            candidate = os.path.join(current, name)
            if not os.path.exists(candidate):
                match = self._match_case(current, name)
                if match is None:
                    break
                candidate = os.path.join(current, match)
            current = candidate
            remaining.pop(0)
        target = os.path.join(current, *remaining) if remaining else current
        try:
            os.makedirs(target, exist_ok=True)
        except OSError as e:
            raise PathMakerError(ErrorVal('IoError', f"Path: '{path}' could not be created: {e.strerror}"))
        return target
