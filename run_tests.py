#!/usr/bin/env python3
"""
Main test runner for arithparse.

Runs a quick smoke check of the lexer and parser, then the unittest suites
under tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

SMOKE_CASES = [
    ("1 + 2", "(1 + 2)"),
    ("-1 + 2 * 3", "((-1) + (2 * 3))"),
    ("1 - -2", "(1 - (-2))"),
    ("1 - -2 / 2 * 3 + 5", "((1 - (((-2) / 2) * 3)) + 5)"),
    ("1 + 2;3 + 4", "(1 + 2)"),
]


def run_smoke_checks() -> bool:
    """Parse the reference expressions and compare the rendered output."""

    print("arithparse Test Suite")
    print("=" * 60)

    try:
        from arithparse import parse, tokenize, to_display_string
    except ImportError as e:
        print(f"Failed to import arithparse: {e}")
        return False

    print("Testing lexer...")
    tokens = tokenize("-1 + 2 * 3")
    print(f"  Generated {len(tokens)} tokens: {' '.join(str(t) for t in tokens)}")

    print("Testing parser...")
    ok = True
    for source, expected in SMOKE_CASES:
        rendered = to_display_string(parse(source))
        status = "ok" if rendered == expected else "FAILED"
        if rendered != expected:
            ok = False
        print(f"  {source!r:28} -> {rendered:36} {status}")

    print()
    return ok


def run_unit_tests() -> bool:
    """Discover and run the unittest suites."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_checks()
    success = run_unit_tests() and success
    sys.exit(0 if success else 1)
