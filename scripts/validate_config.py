#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from yap_app.config.loader import ConfigLoader
from yap_app.config.validation import ConfigValidator, ValidationError
from yap_app.errors import ConfigurationError


def validate_config_file(config_path: Optional[Path]) -> List[ValidationError]:
    """Validate the merged configuration for one file."""
    loader = ConfigLoader.create(config_path)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_path)

    print(f"🔍 Validating yap configuration: {loader.config_path}")
    if not loader.config_path.exists() and not loader.explicit:
        print("ℹ️  No configuration file, built-in defaults apply")

    try:
        errors = validate_config_file(config_path)
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value!r})")
        sys.exit(1)

    config = loader.load()
    print("✅ Configuration is valid")
    print(f"  work: {config.timer.work_minutes}m, "
          f"break: {config.timer.short_break_minutes}m, "
          f"long break: {config.timer.long_break_minutes}m "
          f"every {config.timer.long_break_every} cycles")
    print(f"  state file: {config.storage.path} (lock: {config.storage.lock})")
    sys.exit(0)


if __name__ == "__main__":
    main()
