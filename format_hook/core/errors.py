"""
FORMAT HOOK - Error Taxonomy
Todas as falhas terminais de uma invocação.

Cada erro carrega:
- message: descrição para o usuário
- remedy: como resolver (comando exato quando existir)
- diagnostic: saída bruta do comando externo que falhou
"""

from typing import Optional


class FormatHookError(Exception):
    """Erro base. Toda falha termina a invocação com exit code 1."""

    exit_code = 1
    default_message = "Unexpected error"

    def __init__(
        self,
        message: Optional[str] = None,
        remedy: Optional[str] = None,
        diagnostic: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.remedy = remedy
        self.diagnostic = diagnostic
        super().__init__(self.message)


# =============================================================================
# Environment
# =============================================================================

class RepositoryError(FormatHookError):
    """Ambiente inválido (fora de um repositório, git ausente...)."""
    pass


class NotARepository(RepositoryError):
    default_message = "Not inside a git repository"


class GitCommandError(RepositoryError):
    default_message = "A git command failed"


# =============================================================================
# Setup (install / uninstall)
# =============================================================================

class SetupError(FormatHookError):
    """Falha ao instalar ou remover o hook."""
    pass


class AlreadyInstalled(SetupError):
    default_message = "The pre-commit hook is already installed"


class ForeignHookExists(SetupError):
    default_message = "A different pre-commit hook is already installed"


class SymlinkCreationFailed(SetupError):
    default_message = "Could not create the pre-commit hook symlink"


class NothingToUninstall(SetupError):
    default_message = "The pre-commit hook is not installed"


# =============================================================================
# Invocation
# =============================================================================

class InvocationError(FormatHookError):
    """Invocação incorreta ou colaborador externo indisponível."""
    pass


class InvalidArguments(InvocationError):
    default_message = "Invalid arguments"


class NotInvokedAsHook(InvocationError):
    default_message = (
        "It looks like you invoked this script directly, "
        "but it's supposed to be used as a pre-commit git hook"
    )


class FormatterMissing(InvocationError):
    default_message = "The formatter executable could not be found"


class FormatterExecutionFailed(InvocationError):
    default_message = "The formatter failed to run"


class TerminalUnavailable(InvocationError):
    default_message = "Could not read an answer from the terminal"


# =============================================================================
# Resolution (aplicação do patch)
# =============================================================================

class ResolutionError(FormatHookError):
    """O patch de formatação não pôde ser aplicado."""
    pass


class PatchApplyFailed(ResolutionError):
    default_message = (
        "The formatting patch could not be applied to the working tree; "
        "nothing was staged"
    )


class StagedApplyFailed(ResolutionError):
    default_message = (
        "The formatting patch was applied to the working tree but could not "
        "be applied to the index; your local files and the staged content "
        "are now different"
    )


# =============================================================================
# User-driven
# =============================================================================

class UserDecision(FormatHookError):
    """Commit interrompido por decisão do usuário ou da configuração."""
    pass


class CommitCancelledByUser(UserDecision):
    default_message = "Commit aborted"


class FormattingRejectedNonInteractive(UserDecision):
    default_message = "The staged content is not formatted correctly"


__all__ = [
    "FormatHookError",
    "RepositoryError",
    "NotARepository",
    "GitCommandError",
    "SetupError",
    "AlreadyInstalled",
    "ForeignHookExists",
    "SymlinkCreationFailed",
    "NothingToUninstall",
    "InvocationError",
    "InvalidArguments",
    "NotInvokedAsHook",
    "FormatterMissing",
    "FormatterExecutionFailed",
    "TerminalUnavailable",
    "ResolutionError",
    "PatchApplyFailed",
    "StagedApplyFailed",
    "UserDecision",
    "CommitCancelledByUser",
    "FormattingRejectedNonInteractive",
]
