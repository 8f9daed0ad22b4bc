#!/usr/bin/env python3
"""
Main test runner for the lexscan scanner.

Runs a few smoke scans, then the unittest suite under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_tests():
    """Scan a couple of Lua snippets and check the headline behaviour."""

    print("🚀 lexscan Test Suite")
    print("=" * 60)

    try:
        from lexscan import LUA_CONFIG, scan, scan_partial, UnexpectedEofError
        print("✅ lexscan imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import lexscan: {e}")
        return False

    print("Testing a complete function...")
    code = """
    function add(a, b)
        return a + b -- sum
    end
    """
    data = scan(code, LUA_CONFIG)
    print(f"     Generated {len(data)} tokens")
    data.dump(sys.stdout)
    if len(data) != 13:
        print("     ❌ Unexpected token count")
        return False
    print("     ✅ Complete scan OK")
    print()

    print("Testing an unterminated buffer...")
    data, error = scan_partial('local s = "still typing', LUA_CONFIG)
    if not isinstance(error, UnexpectedEofError) or len(data) != 4:
        print(f"     ❌ Expected UnexpectedEofError and 4 tokens, got {error!r} and {len(data)}")
        return False
    print(f"     ✅ Partial scan kept {len(data)} tokens, error at {error.location}")
    print()
    return True


def run_unit_tests():
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_tests() and run_unit_tests()
    if success:
        print("🎉 All tests PASSED!")
    sys.exit(0 if success else 1)
