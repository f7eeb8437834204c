"""
Root conftest.py - Sets up Python path for tests.

This conftest is loaded by pytest before any test collection begins.
"""
import sys
import os

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
TESTS_DIR = os.path.join(PROJECT_ROOT, "tests")

# Project root first so the local stylecolor package wins over an installed one;
# the tests directory makes the shared `samples` module importable from subfolders
for path in (TESTS_DIR, PROJECT_ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)
