#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from litcal_app.config.loader import ConfigLoader
from litcal_app.config.validation import ConfigValidator, ValidationError


def validate_config_dir(config_dir: Path) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else project_root / "config"
    print(f"Validating litcal configuration in {config_dir}...")

    all_valid = True

    try:
        errors = validate_config_dir(config_dir)

        if errors:
            print(f"Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value!r})")
            all_valid = False
        else:
            print("calendar.yaml is valid")

    except Exception as e:
        print(f"Error loading {config_dir}: {e}")
        all_valid = False

    # Call-level overrides are merged on top of the file
    print("\nTesting call-level overrides...")
    test_overrides = {
        "time": {"timezone": "America/New_York"},
        "calendar": {"first_week_number": 0},
    }

    try:
        config = ConfigLoader.create(config_dir).merge_config(test_overrides)
        errors = ConfigValidator.validate_config(config)

        if errors:
            print("Override validation failed:")
            for error in errors:
                print(f"  - {error.field}: {error.message}")
            all_valid = False
        else:
            print("Override validation passed")

    except Exception as e:
        print(f"Error testing overrides: {e}")
        all_valid = False

    if all_valid:
        print("\nAll configuration validation passed!")
        sys.exit(0)
    else:
        print("\nConfiguration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
