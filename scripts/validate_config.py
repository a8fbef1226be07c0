#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

from datediff.config.loader import ConfigLoader
from datediff.config.validation import ConfigValidator


def main():
    """Validate the datediff.yaml in the given directory (default ./config)."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating {loader.config_file}...")
    if not loader.config_file.exists():
        print("No config file found, defaults apply")
        return 0

    errors = ConfigValidator.validate_config(loader.merge_config())
    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        return 1

    print("Configuration is valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
