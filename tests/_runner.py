# tests/_runner.py
"""
ENS Keys: Script Test Runner

Lets each test module run without pytest:
    python tests/test_records.py
"""

from __future__ import annotations

import traceback
from typing import Dict


def run_module_tests(title: str, namespace: Dict[str, object]) -> bool:
    """Run every test_* function in `namespace` and print a summary."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)

    results = {}

    for name, test in sorted(namespace.items()):
        if not name.startswith("test_") or not callable(test):
            continue
        try:
            test()
            results[name] = True
        except Exception:
            traceback.print_exc()
            results[name] = False

    # Summary
    print("\n" + "=" * 70)
    print("  SUMMARY")
    print("=" * 70)

    for name, passed in results.items():
        status = "✅" if passed else "❌"
        print(f"  {name}: {status}")

    print("=" * 70)

    all_pass = all(results.values())
    passed = sum(results.values())
    total = len(results)

    print(f"  Result: {passed}/{total} tests passed")

    if all_pass:
        print("  ALL TESTS PASSED")
    else:
        print("  SOME TESTS FAILED")

    print("=" * 70)

    return all_pass
