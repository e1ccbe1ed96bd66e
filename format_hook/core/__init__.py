"""Core modules: models, errors, git access, configuration and output."""

from .config import build_context, load_config
from .errors import FormatHookError
from .git import GitRepository, resolve_repo_root, run_command
from .models import (
    Answer,
    CommandResult,
    GateOutcome,
    HookConfig,
    HookContext,
    HookStatus,
)

__all__ = [
    # Context & config
    "build_context",
    "load_config",
    # Errors
    "FormatHookError",
    # Git
    "GitRepository",
    "resolve_repo_root",
    "run_command",
    # Models
    "Answer",
    "CommandResult",
    "GateOutcome",
    "HookConfig",
    "HookContext",
    "HookStatus",
]
