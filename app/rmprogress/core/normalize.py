"""Lexical path normalization.

Resolves ``.`` and ``..`` components using only the text of a path. The
filesystem is never consulted and symbolic links are never followed, so
``a/b/../c`` always becomes ``a/c`` even when ``b`` is a symlink whose real
parent is elsewhere. Callers that need the physical location should use
``Path.resolve()`` instead.
"""

from pathlib import PurePath, PurePosixPath


class NormalizeError(ValueError):
    """Raised when a ``..`` component would escape above the path's root.

    Attributes:
        path: The path that could not be normalized.
    """

    def __init__(self, path: PurePath) -> None:
        self.path = path
        super().__init__(f"Cannot normalize {str(path)!r}: '..' escapes above its root")


def normalize_lexically(path: str | PurePath) -> PurePath:
    """Normalize a path by collapsing ``.`` and ``..`` without touching disk.

    The path's anchor (root, or drive plus root on flavours that have one)
    is kept as a single leading component and marks a boundary that ``..``
    may never cross. Relative paths have an empty boundary, so a relative
    path may not open with ``..`` either.

    Args:
        path: Path to normalize. Strings are parsed as POSIX paths; any
            ``PurePath`` keeps its own flavour.

    Returns:
        Normalized path of the same flavour. An empty input yields an
        empty path.

    Raises:
        NormalizeError: If a ``..`` component would ascend past the root.
    """
    pure = path if isinstance(path, PurePath) else PurePosixPath(path)
    flavour = type(pure)
    parts = pure.parts

    if not parts:
        return flavour()

    components: list[str] = []
    if pure.anchor:
        anchor = pure.anchor
        if isinstance(pure, PurePosixPath) and anchor == "//":
            # pathlib keeps a leading "//" as a distinct root
            anchor = "/"
        components.append(anchor)
        rest = parts[1:]
    else:
        if parts[0] == "..":
            raise NormalizeError(pure)
        rest = parts
    boundary = len(components)

    for part in rest:
        if flavour(part).anchor:
            # A second root or drive can only come from a malformed path
            raise NormalizeError(pure)
        if part == ".":
            continue
        if part == "..":
            if len(components) == boundary:
                raise NormalizeError(pure)
            components.pop()
            continue
        components.append(part)

    return flavour(*components)
