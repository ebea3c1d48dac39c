"""Package-level constants shared across modules."""
from __future__ import annotations

SERVICE_NAME = "networking"
