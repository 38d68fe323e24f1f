"""Coverage metrics and risk diagnosis."""

from inspector.scoring.diagnosis import IssueList, diagnose
from inspector.scoring.metrics import (
    calculate_metrics,
    content_coverage,
    hidden_ratio,
    semantic_ratio,
)

__all__ = [
    "IssueList",
    "calculate_metrics",
    "content_coverage",
    "diagnose",
    "hidden_ratio",
    "semantic_ratio",
]
