"""
FORMAT HOOK - Git Hook Installer
Instala e remove o hook pre-commit como symlink relativo para esta ferramenta.
"""

import os
from pathlib import Path

from ..core.errors import (
    AlreadyInstalled,
    ForeignHookExists,
    NothingToUninstall,
    SymlinkCreationFailed,
)
from ..core.models import HookContext, HookStatus


# =============================================================================
# Hook Manager
# =============================================================================

class HookManager:
    """Gerencia o symlink `.git/hooks/pre-commit`."""

    def __init__(self, context: HookContext):
        """
        Args:
            context: Contexto da invocação (raiz do repo, caminho da ferramenta)
        """
        self.context = context
        self.hook_path = context.hook_path
        self.tool_path = context.tool_path

    def detect_status(self) -> HookStatus:
        """
        Verifica se o hook existe e se aponta para esta ferramenta.

        Um symlink quebrado conta como hook existente.
        """
        if not (self.hook_path.is_symlink() or self.hook_path.exists()):
            return HookStatus.ABSENT

        if self.hook_path.resolve() == self.tool_path.resolve():
            return HookStatus.INSTALLED

        return HookStatus.FOREIGN

    def install(self) -> Path:
        """
        Cria o symlink relativo hook -> ferramenta.

        A criação é tentada primeiro; o status só é consultado
        para classificar a falha.

        Returns:
            Caminho do hook instalado

        Raises:
            AlreadyInstalled, ForeignHookExists, SymlinkCreationFailed
        """
        hooks_dir = self.hook_path.parent
        target = self.tool_path

        # O git ignora hooks que não são executáveis (ex: `python -m format_hook`)
        if not self.tool_path.is_file() or not os.access(self.tool_path, os.X_OK):
            raise SymlinkCreationFailed(
                f"{self.tool_path} is not an executable file and can't be used as a hook",
                remedy=(
                    "Install the hook with the installed command instead:\n"
                    "    git-pre-commit-format install"
                ),
            )

        try:
            hooks_dir.mkdir(parents=True, exist_ok=True)
            target = os.path.relpath(self.tool_path.resolve(), hooks_dir.resolve())
            self.hook_path.symlink_to(target)
        except OSError as e:
            status = self.detect_status()

            if status == HookStatus.INSTALLED:
                raise AlreadyInstalled(
                    f"The pre-commit hook is already installed in {self.hook_path}"
                )
            if status == HookStatus.FOREIGN:
                raise ForeignHookExists(
                    f"A different pre-commit hook already exists in {self.hook_path}",
                    remedy=(
                        "Remove it (or merge it with this tool) and run "
                        "install again."
                    ),
                )
            raise SymlinkCreationFailed(
                f"Failed to create the symlink {self.hook_path} -> {target}",
                diagnostic=str(e),
            )

        return self.hook_path

    def uninstall(self) -> Path:
        """
        Remove o hook, somente se ele aponta para esta ferramenta.

        Raises:
            ForeignHookExists: O hook existente não é nosso (não removido)
            NothingToUninstall: Não há hook instalado
        """
        status = self.detect_status()

        if status == HookStatus.FOREIGN:
            raise ForeignHookExists(
                f"The pre-commit hook in {self.hook_path} was not installed "
                "by this tool; it was left untouched"
            )
        if status == HookStatus.ABSENT:
            raise NothingToUninstall(
                f"There is no pre-commit hook installed in {self.hook_path}"
            )

        self.hook_path.unlink()
        return self.hook_path


# =============================================================================
# Helper Functions
# =============================================================================

def install_hook(context: HookContext) -> Path:
    """Instala o hook pre-commit."""
    return HookManager(context).install()


def uninstall_hook(context: HookContext) -> Path:
    """Remove o hook pre-commit."""
    return HookManager(context).uninstall()


def check_hook_status(context: HookContext) -> HookStatus:
    """Estado atual do hook pre-commit."""
    return HookManager(context).detect_status()


__all__ = [
    "HookManager",
    "check_hook_status",
    "install_hook",
    "uninstall_hook",
]
