"""
FORMAT HOOK - Commit Gate
Roda no momento do commit: calcula o patch de formatação e, se ele não
estiver vazio, pergunta ao usuário o que fazer (apply / force / cancel).
"""

import signal
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from ..core.errors import (
    CommitCancelledByUser,
    FormattingRejectedNonInteractive,
    NotInvokedAsHook,
    PatchApplyFailed,
    StagedApplyFailed,
    TerminalUnavailable,
)
from ..core.git import GitRepository, run_command
from ..core.models import Answer, GateOutcome, HookContext
from ..core.output import (
    FORCE_PAUSE_TEXT,
    PROMPT_HELP,
    PROMPT_TEXT,
    console,
    install_guidance,
    non_interactive_guidance,
    print_patch,
    print_success,
    print_warning,
)
from ..scanners.format_diff import FormatDiffScanner, count_patch_lines, pending_patch


# Os paths no patch do formatter não têm prefixo a/ b/
PATCH_STRIP = 0

DEFAULT_PROG = "git-pre-commit-format"


@contextmanager
def exit_on_signals() -> Iterator[None]:
    """Converte SIGTERM/SIGHUP em SystemExit para que os `finally` rodem."""

    def handler(signum, _frame):
        raise SystemExit(1)

    signums = [signal.SIGTERM]
    if hasattr(signal, "SIGHUP"):
        signums.append(signal.SIGHUP)

    previous = {signum: signal.signal(signum, handler) for signum in signums}
    try:
        yield
    finally:
        for signum, old in previous.items():
            signal.signal(signum, old)


# =============================================================================
# Resolution Prompt
# =============================================================================

class ResolutionPrompt:
    """
    Pergunta ao usuário como resolver o patch pendente.
    Lê respostas do terminal de controle (ou do arquivo em FORMAT_HOOK_TTY).
    """

    def __init__(self, tty: TextIO):
        self.tty = tty

    def _readline(self) -> str:
        line = self.tty.readline()
        if not line:
            raise TerminalUnavailable(
                "No answer was given (end of input on the terminal)",
                remedy="Commit aborted; nothing was changed.",
            )
        return line

    def ask(self) -> Answer:
        """
        Repete a pergunta até receber a, f ou c.

        `?` mostra a ajuda e pergunta de novo; qualquer outra
        resposta é inválida.
        """
        while True:
            console.print(PROMPT_TEXT, end="")
            answer = Answer.parse(self._readline())

            if answer is None:
                console.print("Invalid answer", style="yellow")
                continue

            if answer == Answer.HELP:
                console.print(PROMPT_HELP)
                continue

            return answer

    def pause(self):
        """Espera uma tecla qualquer (fim da entrada também serve)."""
        console.print(FORCE_PAUSE_TEXT, end="")
        self.tty.readline()
        console.print()


# =============================================================================
# Commit Gate
# =============================================================================

class CommitGate:
    """
    Gate de formatação do pre-commit.

    Responsabilidades:
    - Garantir que foi chamado pelo git como hook
    - Calcular o patch de formatação do conteúdo staged
    - Aprovar, rejeitar ou resolver interativamente
    """

    def __init__(self, context: HookContext, prog: str = DEFAULT_PROG):
        """
        Args:
            context: Contexto da invocação
            prog: Nome da ferramenta, usado nas mensagens de ajuda
        """
        self.context = context
        self.config = context.config
        self.prog = prog
        self.scanner = FormatDiffScanner(context.config, context.work_tree)

    def run(self) -> GateOutcome:
        """
        Executa o gate.

        Returns:
            GateOutcome.CLEAN, APPLIED ou FORCED (commit pode seguir)

        Raises:
            FormatHookError: Qualquer caminho que deve bloquear o commit
        """
        if not self.context.invoked_as_hook:
            raise NotInvokedAsHook(remedy=install_guidance(self.prog))

        self.scanner.check_formatter()

        with exit_on_signals(), pending_patch() as patch_file:
            patch = self.scanner.compute_patch(patch_file)

            if count_patch_lines(patch) == 0:
                print_success("The staged content is formatted correctly.")
                return GateOutcome.CLEAN

            console.print("The staged content is not formatted correctly.", style="bold")
            console.print("The fix shown below can be applied automatically.", style="italic")
            console.print()
            print_patch(patch, self.scanner.colorize(patch))
            console.print()

            if not self.config.interactive:
                raise FormattingRejectedNonInteractive(
                    remedy=non_interactive_guidance(self.config)
                )

            return self._resolve(patch_file)

    def _resolve(self, patch_file: Path) -> GateOutcome:
        tty_path = self.context.tty_path
        try:
            tty = open(tty_path)
        except OSError as e:
            raise TerminalUnavailable(
                f"Can't open the terminal {tty_path} to ask what to do",
                remedy=non_interactive_guidance(self.config),
                diagnostic=str(e),
            )

        with tty:
            prompt = ResolutionPrompt(tty)
            answer = prompt.ask()

            if answer == Answer.APPLY:
                self._apply(patch_file)
                print_success("The fix was applied to the working tree and the staged content.")
                return GateOutcome.APPLIED

            if answer == Answer.FORCE:
                print_warning("Committing without fixing the formatting.")
                prompt.pause()
                return GateOutcome.FORCED

            raise CommitCancelledByUser(remedy="Nothing was changed.")

    def _apply(self, patch_file: Path):
        """
        Aplica o patch no working tree e depois no index.

        Raises:
            PatchApplyFailed: Falhou no working tree (nada foi alterado no index)
            StagedApplyFailed: Working tree alterado, index não
        """
        work_tree = self.context.work_tree

        result = run_command(
            ["patch", f"-p{PATCH_STRIP}", "-s", "-f", "-i", str(patch_file)],
            cwd=work_tree,
        )
        if not result.ok:
            raise PatchApplyFailed(diagnostic=result.diagnostic)

        result = GitRepository(work_tree).apply_cached(patch_file, strip=PATCH_STRIP)
        if not result.ok:
            raise StagedApplyFailed(
                remedy="Check the working tree and the index with `git diff` and `git diff --cached`.",
                diagnostic=result.diagnostic,
            )


def run_gate(context: HookContext, prog: str = DEFAULT_PROG) -> GateOutcome:
    """Helper para executar o gate com um contexto pronto."""
    return CommitGate(context, prog).run()


__all__ = [
    "CommitGate",
    "ResolutionPrompt",
    "exit_on_signals",
    "run_gate",
]
