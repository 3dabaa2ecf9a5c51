#!/usr/bin/env python3
"""
Main test runner for the interp lexer tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run all interp lexer tests."""

    print("interp Lexer Test Suite")
    print("=" * 60)

    try:
        from interp.lexer.scanner import Scanner
        print("Lexer modules imported successfully")
        print()
    except ImportError as e:
        print(f"Failed to import lexer modules: {e}")
        return False

    # Smoke test a small program before the full suite
    code = """
    fun add(a, b) {
        return a + b;
    }

    print add(5, 10.5); // 15.5
    """
    scanner = Scanner(code, lambda line, message: None)
    tokens = scanner.scan_tokens()
    print(f"Smoke test: {len(tokens)} tokens, {len(scanner.errors)} errors")
    if scanner.has_errors():
        for diagnostic in scanner.errors:
            print(diagnostic)
        return False
    print()

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
