"""Git hook installation and management."""

from .install import (
    HookManager,
    check_hook_status,
    install_hook,
    uninstall_hook,
)

__all__ = [
    "HookManager",
    "check_hook_status",
    "install_hook",
    "uninstall_hook",
]
