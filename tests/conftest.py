"""Test configuration.

Settings are read from the environment when the DI container is built, so
test defaults are exported before any test module runs.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-with-enough-length-0123")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
