"""
Domain shared: ID generation (no external libraries)
"""
from __future__ import annotations

import uuid


def generate_build_id() -> str:
    """New build identifier. Used as the path segment for every object of one build."""
    return str(uuid.uuid4())
