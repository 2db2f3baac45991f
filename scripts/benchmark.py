#!/usr/bin/env python3
"""Benchmark script for globtree performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from globtree.domain.nodes import Node


def sample_asts() -> tuple[Node, ...]:
    """Sample ASTs: foo*, *foo*, src/**/*.py, ????."""
    from globtree.domain.nodes import AnyNode, PatternNode, SingleNode, SuperNode, TextNode

    return (
        PatternNode((TextNode("foo"), AnyNode())),
        PatternNode((AnyNode(), TextNode("foo"), AnyNode())),
        PatternNode((TextNode("src/"), SuperNode(), TextNode("/"), AnyNode(), TextNode(".py"))),
        PatternNode((SingleNode(), SingleNode(), SingleNode(), SingleNode())),
    )


def benchmark_import_time() -> float:
    """Measure import time of globtree package."""
    start = time.perf_counter()
    import globtree  # noqa: F401

    return time.perf_counter() - start


def benchmark_compile() -> float:
    """Measure compilation time of sample ASTs."""
    from globtree.application.compiler import compile_ast
    from globtree.domain.config import CompileConfig

    config = CompileConfig(separators="/")
    asts = sample_asts()
    start = time.perf_counter()
    for _ in range(10000):
        for ast in asts:
            compile_ast(ast, config)
    return time.perf_counter() - start


def benchmark_match() -> float:
    """Measure matching time of compiled sample ASTs."""
    from globtree.presentation.api.glob import compile_glob

    globs = [compile_glob(ast, separators="/") for ast in sample_asts()]
    inputs = ("foobar", "barfoo", "src/pkg/mod/main.py", "abcd", "src/main.c")

    start = time.perf_counter()
    for _ in range(10000):
        for glob in globs:
            for text in inputs:
                glob.match(text)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run globtree benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {"name": "Compile (10k iterations)", "unit": "seconds", "value": benchmark_compile()},
        {"name": "Match (10k iterations)", "unit": "seconds", "value": benchmark_match()},
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
