from dataclasses import dataclass


@dataclass(frozen=True)
class TaskStatsDTO:
    """Dashboard counters across all stored tasks."""
    total: int
    pending: int
    in_progress: int
    completed: int
    high_priority: int
