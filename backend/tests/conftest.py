"""Root conftest — shared test configuration."""

import os

# Tests build their own apps; keep the module-level app on built-in defaults
os.environ.pop("RESOURCES_FILE", None)
os.environ.setdefault("ENABLED_ISSUES", "invalid_payload")
os.environ.setdefault("LOG_FORMAT", "text")
