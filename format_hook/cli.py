"""
FORMAT HOOK - Command Line Interface
Entry point: `git-pre-commit-format [install|uninstall|-h|--help|-?]`.

Sem argumentos, roda como hook pre-commit.
"""

import sys
from typing import List, Optional

import typer

from format_hook.core.config import build_context
from format_hook.core.errors import FormatHookError, InvalidArguments
from format_hook.core.models import COLORIZER_KEY, FORMATTER_KEY, INTERACTIVE_KEY, STYLE_KEY
from format_hook.core.output import console, print_error, print_success
from format_hook.gate.commit_gate import DEFAULT_PROG, run_gate
from format_hook.hooks.install import install_hook, uninstall_hook


# typer pode embutir sua própria cópia do click: usa as classes que ele levanta
UsageError = next(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError")
Abort = typer.Abort


# =============================================================================
# Typer App Setup
# =============================================================================

HELP = f"""
Git pre-commit hook that checks that staged changes are formatted correctly.

Run without arguments from git as the pre-commit hook. If the staged content
is not formatted correctly you can apply the fix, force the commit or cancel it.

\b
Configuration (git config):
  {STYLE_KEY}        formatting style (default: file)
  {INTERACTIVE_KEY}  ask what to do (default: true)
  {FORMATTER_KEY}    formatter executable (default: apply-format)
  {COLORIZER_KEY}    diff colorizer (default: colordiff)
"""

app = typer.Typer(
    name=DEFAULT_PROG,
    rich_markup_mode="rich",
    add_completion=False,
    invoke_without_command=True,
    no_args_is_help=False,
    context_settings={"help_option_names": ["-h", "--help", "-?"]},
)


def _fail(error: FormatHookError):
    print_error(error)
    raise typer.Exit(error.exit_code)


# =============================================================================
# Hook Invocation (sem subcomando)
# =============================================================================

@app.callback(invoke_without_command=True, help=HELP)
def main_callback(ctx: typer.Context):
    """Sem subcomando: roda o gate de formatação (chamado pelo git)."""
    if ctx.invoked_subcommand is not None:
        return

    try:
        context = build_context()
        run_gate(context, prog=ctx.info_name or DEFAULT_PROG)
    except FormatHookError as e:
        _fail(e)


# =============================================================================
# Command: install
# =============================================================================

@app.command()
def install():
    """
    Install the pre-commit hook in the current repository.
    """
    try:
        context = build_context()
        hook_path = install_hook(context)
    except FormatHookError as e:
        _fail(e)

    print_success(f"Pre-commit hook installed in {hook_path}")


# =============================================================================
# Command: uninstall
# =============================================================================

@app.command()
def uninstall():
    """
    Remove the pre-commit hook installed by this tool.
    """
    try:
        context = build_context()
        hook_path = uninstall_hook(context)
    except FormatHookError as e:
        _fail(e)

    print_success(f"Pre-commit hook removed from {hook_path}")


# =============================================================================
# Main Entry Point
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point principal.

    Erros de uso do click viram InvalidArguments (exit 1).

    Args:
        argv: Argumentos (default: sys.argv[1:])

    Returns:
        Exit code
    """
    command = typer.main.get_command(app)

    try:
        rv = command.main(
            args=sys.argv[1:] if argv is None else argv,
            prog_name=DEFAULT_PROG,
            standalone_mode=False,
        )
    except UsageError as e:
        print_error(InvalidArguments(
            f"Invalid arguments: {e.format_message()}",
            remedy=f"Usage: {DEFAULT_PROG} [install|uninstall|-h|--help|-?]",
        ))
        return 1
    except Abort:
        console.print()
        return 1

    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())
