"""Loot target scanning.

Usage:
    from lootbrain.scanning import CandidateScanner, ScanReport

    report = ScanReport()
    target = CandidateScanner(world, navigation, eligibility, claims).find_target(agent, report)
"""

from lootbrain.scanning.models import Candidate, Rejection, ScanReport
from lootbrain.scanning.scanner import CandidateScanner, find_target

__all__ = [
    "CandidateScanner",
    "find_target",
    "Candidate",
    "Rejection",
    "ScanReport",
]
