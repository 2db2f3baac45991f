"""globtree application layer: compiler and reporters."""
