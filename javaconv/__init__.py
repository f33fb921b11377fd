"""javaconv: render Java syntax trees as Rust source. Public API."""

from __future__ import annotations

from .backend.comments import CommentPlacementError as CommentPlacementError
from .backend.rust import RustBackend as RustBackend, emit_rust as emit_rust
from .backend.util import EmitterError as EmitterError, RenderError as RenderError
from .serialize import SerializeError as SerializeError, from_dict, to_dict


def convert(data: object, print_comments: bool = True, indent_str: str = "    ") -> str:
    """Render a JSON-decoded syntax tree as Rust source."""
    return emit_rust(from_dict(data), print_comments, indent_str)


__all__ = [
    "CommentPlacementError",
    "EmitterError",
    "RenderError",
    "RustBackend",
    "SerializeError",
    "convert",
    "emit_rust",
    "from_dict",
    "to_dict",
]
