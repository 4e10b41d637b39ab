"""Aggregate reading counts."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Summary:
    total: int
    completed: int
    in_progress: int
