"""
FORMAT HOOK - Git Wrapper
Executa comandos externos e encapsula o plumbing do git usado pelo hook.
"""

import subprocess
from pathlib import Path
from typing import List, Optional

from .errors import GitCommandError, NotARepository
from .models import CommandResult


# =============================================================================
# Process Runner
# =============================================================================

def run_command(
    args: List[str],
    cwd: Optional[Path] = None,
    input: Optional[str] = None,
) -> CommandResult:
    """
    Executa um comando externo uma única vez, sem levantar exceção.

    Args:
        args: Comando e argumentos
        cwd: Diretório de execução
        input: Texto enviado ao stdin

    Returns:
        CommandResult com exit code e saída capturada.
        Executável ausente vira exit code 127.
    """
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            input=input,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        return CommandResult(args, 127, stderr=f"{args[0]}: command not found")
    except OSError as e:
        return CommandResult(args, 126, stderr=f"{args[0]}: {e}")

    return CommandResult(args, result.returncode, result.stdout, result.stderr)


# =============================================================================
# Git Repository
# =============================================================================

class GitRepository:
    """
    Acesso ao git a partir de um diretório.

    Responsabilidades:
    - Descobrir o top-level do work tree
    - Ler chaves do git config
    - Aplicar patches no index
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Args:
            path: Diretório de trabalho (default: diretório atual)
        """
        self.path = Path(path) if path else Path.cwd()

    def run(self, *args: str, input: Optional[str] = None) -> CommandResult:
        """Executa `git <args>` no diretório do repositório."""
        return run_command(["git", *args], cwd=self.path, input=input)

    def toplevel(self) -> Path:
        """
        Top-level do work tree que contém `self.path`.

        Raises:
            NotARepository: Se o git não reporta um top-level
        """
        result = self.run("rev-parse", "--show-toplevel")
        top = result.stdout.strip()
        if not result.ok or not top:
            raise NotARepository(
                f"Not inside a git repository: {self.path}",
                remedy="Run this command from inside a git work tree.",
                diagnostic=result.diagnostic,
            )
        return Path(top)

    def get_config(self, key: str) -> Optional[str]:
        """
        Lê uma chave do git config.

        Returns:
            Valor da chave, ou None se ela não existe
        """
        result = self.run("config", "--get", key)
        # exit 1 = chave ausente
        if result.returncode == 1:
            return None
        if not result.ok:
            raise GitCommandError(
                f"Could not read git config key {key}",
                diagnostic=result.diagnostic,
            )
        return result.stdout.rstrip("\n")

    def apply_cached(self, patch_file: Path, strip: int = 0) -> CommandResult:
        """Aplica um patch apenas no index (staged)."""
        return self.run("apply", f"-p{strip}", "--cached", str(patch_file))


def resolve_repo_root(start: Optional[Path] = None) -> Path:
    """
    Encontra a raiz do repositório cujo `.git` é um diretório.

    Um `.git` que é arquivo (submódulo) faz a busca continuar a partir
    do diretório pai do work tree.

    Args:
        start: Diretório inicial (default: diretório atual)

    Raises:
        NotARepository: Se algum passo não está dentro de um repositório
    """
    current = Path(start) if start else Path.cwd()

    while True:
        top = GitRepository(current).toplevel()
        if (top / ".git").is_dir():
            return top
        current = top.parent


__all__ = [
    "GitRepository",
    "resolve_repo_root",
    "run_command",
]
