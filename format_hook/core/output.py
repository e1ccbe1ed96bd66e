"""
FORMAT HOOK - Console Output
Consoles rich e textos exibidos ao usuário.

Estilos (negrito/itálico) só aparecem quando a saída é um terminal;
o rich decide isso sozinho e nada aqui afeta o fluxo de controle.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .errors import FormatHookError
from .models import INTERACTIVE_KEY, HookConfig


console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


# =============================================================================
# Messages
# =============================================================================

def install_guidance(prog: str) -> str:
    """Como instalar o hook / pedir ajuda."""
    return (
        f"To install the hook run:\n"
        f"    {prog} install\n"
        f"For more information run:\n"
        f"    {prog} --help"
    )


def non_interactive_guidance(config: HookConfig) -> str:
    """Instruções exibidas quando o modo interativo está desligado."""
    return (
        "You can apply these changes with:\n"
        f"    {config.apply_command()}\n"
        "(may need to be called from the root directory of your repository)\n"
        "Then stage the result with `git add` and commit again.\n"
        "\n"
        "To be asked interactively what to do instead, run:\n"
        f"    git config {INTERACTIVE_KEY} true"
    )


PROMPT_TEXT = "Apply the fix, force the commit or cancel it? (a/f/c, ? for help): "

PROMPT_HELP = """\
a: apply the fix to the working tree and to the staged content, then commit
f: force the commit without fixing the formatting
c: cancel the commit
?: show this help"""

FORCE_PAUSE_TEXT = (
    "Committing without fixing the formatting. "
    "Press Enter to continue..."
)


# =============================================================================
# Printers
# =============================================================================

def print_success(message: str):
    console.print(f"✅ {escape(message)}", style="green")


def print_warning(message: str):
    err_console.print(f"⚠️  {escape(message)}", style="yellow")


def print_patch(patch: str, colored: Optional[str] = None):
    """
    Mostra o patch de formatação.

    Args:
        patch: Diff em texto puro
        colored: Saída do colorizer (ANSI), se disponível
    """
    if colored:
        console.print(Text.from_ansi(colored.rstrip("\n")))
    else:
        console.print(Text(patch.rstrip("\n")))


def print_error(error: FormatHookError):
    """Imprime um erro com remédio e diagnóstico (stderr)."""
    err_console.print(f"❌ {escape(error.message)}", style="bold red")

    if error.remedy:
        err_console.print(escape(error.remedy))

    if error.diagnostic:
        err_console.print()
        err_console.print(escape(error.diagnostic), style="italic")


__all__ = [
    "FORCE_PAUSE_TEXT",
    "PROMPT_HELP",
    "PROMPT_TEXT",
    "console",
    "err_console",
    "install_guidance",
    "non_interactive_guidance",
    "print_error",
    "print_patch",
    "print_success",
    "print_warning",
]
