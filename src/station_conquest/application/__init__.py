"""Application layer - the check-in view use cases."""

from station_conquest.application.completion import compute_completion, visited_progress
from station_conquest.application.reconciliation_engine import ReconciliationEngine

__all__ = ["ReconciliationEngine", "compute_completion", "visited_progress"]
