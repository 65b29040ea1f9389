#!/usr/bin/env python
"""
Simple Test Runner for BinTreeLib
=================================

Runs the test suite, optionally with coverage or just the
recursive-vs-iterative contract tests.

Usage:
    python run_tests.py               # Run all tests
    python run_tests.py --contracts   # Only the strategy contract tests
    python run_tests.py --coverage    # Run all tests with a coverage report
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(coverage=False, contracts_only=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "--tb=short",               # Short traceback format
        "--durations=10",            # Show 10 slowest tests
        "-v"                         # Verbose output
    ]

    if coverage:
        cmd.extend(["--cov=bintreelib", "--cov-report=term-missing"])

    if contracts_only:
        cmd.append("tests/_common")
        print("Running recursive vs iterative contract tests...")
    else:
        cmd.append("tests")
        print("Running all tests...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Test runner for BinTreeLib")
    parser.add_argument("--coverage", action="store_true", help="Report coverage (needs pytest-cov)")
    parser.add_argument("--contracts", action="store_true", help="Only run the strategy contract tests")

    args = parser.parse_args()

    return run_tests(coverage=args.coverage, contracts_only=args.contracts)


if __name__ == "__main__":
    sys.exit(main())
