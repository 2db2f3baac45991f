"""Compiler configuration value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Configuration for AST lowering.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        separators: Characters restricted wildcards (* and ?) must not match.
            Empty = unrestricted.
        optimize: Apply the peephole optimizer to every lowered matcher.
            False yields the straightforward translation.
    """

    separators: str = ""
    optimize: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.separators, str):
            raise TypeError(f"separators must be str, got {type(self.separators).__name__}")
