from __future__ import annotations

from typing import Callable, Optional

"""Virtual path utilities that keep every path inside the jail root.

Virtual paths always start with '/', never contain '.' or empty components and
never keep a '..' component: '..' above the root is clamped (dropped). Callers
that want to tell the user about clamping check the raw input with
escapes_root() before resolving it.
"""

SEPARATOR = "/"
ROOT = "/"


def normalize(path: str) -> str:
    components: list[str] = []
    for component in (path or "").split(SEPARATOR):
        if not component or component == ".":
            continue
        if component == "..":
            if components:
                components.pop()
            continue
        components.append(component)
    return ROOT + SEPARATOR.join(components)


def resolve(path: str, current: str) -> str:
    """Resolve `path` against the virtual directory `current`."""
    if not path:
        return current
    if path.startswith(SEPARATOR):
        return normalize(path)
    base = current if current == ROOT else current + SEPARATOR
    return normalize(base + path)


def to_real_path(virtual_path: str, real_root: str) -> str:
    """Map a virtual path to the backend path under `real_root` (which ends with '/')."""
    return real_root + normalize(virtual_path)[1:]


def is_safe(path: str) -> bool:
    return normalize(path).startswith(ROOT)


def escapes_root(path: str, current: str) -> bool:
    """Return True if the raw `path` climbs above the jail root before normalization.

    Relative paths start at the depth of `current`; absolute ones at the root.
    """
    if not path:
        return False
    if path.startswith(SEPARATOR):
        depth = 0
    else:
        depth = normalize(current).count(SEPARATOR) if current != ROOT else 0
    for component in path.split(SEPARATOR):
        if not component or component == ".":
            continue
        if component == "..":
            if depth == 0:
                return True
            depth -= 1
        else:
            depth += 1
    return False


def change_directory(
    requested: str,
    current: str,
    is_directory: Callable[[str], bool],
) -> Optional[str]:
    """Return the new virtual directory, or None if the target is missing or not a directory.

    `is_directory` receives the resolved virtual path.
    """
    target = resolve(requested, current)
    if not is_safe(target):
        return None
    if not is_directory(target):
        return None
    return target
