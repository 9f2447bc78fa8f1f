"""Global pytest configuration."""

import os

# Set the database URL for tests before any imports
os.environ.setdefault("TRIPSYNC_DATABASE_URL", "sqlite://")
