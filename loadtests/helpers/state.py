"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across users.
"""

from dataclasses import dataclass


@dataclass
class VisitorState:
    """Tracks the language a simulated visitor has chosen."""

    locality: str | None = None
    switches: int = 0
