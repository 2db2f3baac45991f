"""Public API."""

from globtree.presentation.api.glob import CompiledGlob, compile_glob, matches_all, matches_any

__all__ = ["CompiledGlob", "compile_glob", "matches_all", "matches_any"]
