"""Commit-time formatting gate."""

from .commit_gate import CommitGate, ResolutionPrompt, run_gate

__all__ = [
    "CommitGate",
    "ResolutionPrompt",
    "run_gate",
]
