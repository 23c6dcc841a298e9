"""Root conftest — shared test configuration."""

import os

# dice_api.main builds its module-level app from the environment at import
os.environ.setdefault("NODE_ENV", "test")
