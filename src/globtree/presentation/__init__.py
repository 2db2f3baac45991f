"""globtree presentation layer."""
