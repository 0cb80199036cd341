"""
Test script for settings persistence

Usage:
    python test_settings.py
"""

import sys
import tempfile
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from statespace.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file():
    """Test that a missing file yields the defaults."""
    print("\n" + "="*60)
    print("TEST: Missing Settings File")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        settings = load_settings(Path(tmp) / "config.json")

    print(f"  Loaded: {settings}")
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS

    print("  [PASS] Missing settings file")


def test_save_and_load():
    """Test that saved choices come back merged over the defaults."""
    print("\n" + "="*60)
    print("TEST: Save And Load")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        save_settings({"puzzle": "family", "search_order": "cost_guided"}, path)
        settings = load_settings(path)

    print(f"  Loaded: {settings}")
    assert settings["puzzle"] == "family"
    assert settings["search_order"] == "cost_guided"
    # keys absent from the file fall back to defaults
    assert settings["frogs"] == DEFAULT_SETTINGS["frogs"]
    assert settings["log_level"] == "INFO"

    print("  [PASS] Save and load")


def test_invalid_file():
    """Test that a corrupt file is ignored."""
    print("\n" + "="*60)
    print("TEST: Invalid Settings File")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        broken = Path(tmp) / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        assert load_settings(broken) == DEFAULT_SETTINGS

        listing = Path(tmp) / "list.json"
        listing.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings(listing) == DEFAULT_SETTINGS

    print("  [PASS] Invalid settings file")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SETTINGS TESTS")
    print("#"*60)

    tests = [
        ("Missing Settings File", test_missing_file),
        ("Save And Load", test_save_and_load),
        ("Invalid Settings File", test_invalid_file),
    ]

    all_passed = True
    for name, test in tests:
        try:
            test()
            print(f"  {name}: [PASS]")
        except AssertionError as e:
            print(f"  {name}: [FAIL] {e}")
            all_passed = False

    print()
    print("All tests PASSED!" if all_passed else "Some tests FAILED!")
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
