"""globtree - glob AST compiler with matcher-tree optimization."""

__version__ = "0.1.0"

from globtree.domain.exceptions import (
    CompilationError,
    GlobTreeError,
    NoAnchorFoundError,
    UnknownNodeKindError,
)
from globtree.presentation.api.glob import CompiledGlob, compile_glob

__all__ = [
    "CompilationError",
    "CompiledGlob",
    "GlobTreeError",
    "NoAnchorFoundError",
    "UnknownNodeKindError",
    "__version__",
    "compile_glob",
]
