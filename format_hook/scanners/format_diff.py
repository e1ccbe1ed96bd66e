"""
FORMAT HOOK - Format Diff Scanner
Executa o formatter sobre o conteúdo staged e captura o patch de formatação.
"""

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..core.errors import FormatterExecutionFailed, FormatterMissing
from ..core.git import run_command
from ..core.models import FORMATTER_KEY, HookConfig


# =============================================================================
# Pending Patch
# =============================================================================

@contextmanager
def pending_patch() -> Iterator[Path]:
    """
    Arquivo temporário que guarda o patch enquanto o gate roda.

    Removido em qualquer caminho de saída (retorno, exceção, SystemExit).
    """
    fd, name = tempfile.mkstemp(prefix="format-hook-", suffix=".patch")
    os.close(fd)
    path = Path(name)
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)


# =============================================================================
# Format Diff Scanner
# =============================================================================

class FormatDiffScanner:
    """
    Scanner de diferenças de formatação.

    Responsabilidades:
    - Validar que o formatter existe e é executável
    - Rodar o formatter limitado ao conteúdo staged
    - Colorir o patch para exibição (opcional)
    """

    def __init__(self, config: HookConfig, work_tree: Path):
        """
        Args:
            config: Configuração do hook (style, formatter, colorizer)
            work_tree: Diretório onde o formatter roda
        """
        self.config = config
        self.work_tree = work_tree

    @property
    def formatter(self) -> Optional[Path]:
        return self.config.formatter

    def check_formatter(self) -> Path:
        """
        Raises:
            FormatterMissing: Se o formatter não existe ou não é executável
        """
        formatter = self.formatter
        if formatter is None or not formatter.is_file() or not os.access(formatter, os.X_OK):
            raise FormatterMissing(
                f"Can't find an executable formatter at {formatter}",
                remedy=(
                    "Install it, or point the hook at it with:\n"
                    f"    git config {FORMATTER_KEY} /path/to/formatter"
                ),
            )
        return formatter

    def compute_patch(self, patch_file: Path) -> str:
        """
        Roda o formatter no conteúdo staged e grava o patch.

        Args:
            patch_file: Arquivo onde o diff é gravado

        Returns:
            Texto do patch (vazio se tudo está formatado)

        Raises:
            FormatterExecutionFailed: Se o formatter sai com erro
        """
        formatter = self.check_formatter()
        result = run_command(
            [str(formatter), f"--style={self.config.style}", "--staged"],
            cwd=self.work_tree,
        )

        if not result.ok:
            raise FormatterExecutionFailed(
                f"The formatter failed to run (exit code {result.returncode})",
                diagnostic=result.diagnostic,
            )

        patch_file.write_text(result.stdout)
        return result.stdout

    def colorize(self, patch: str) -> Optional[str]:
        """
        Passa o patch pelo colorizer.

        Returns:
            Texto com cores ANSI, ou None se o colorizer não está disponível
        """
        if not self.config.colorizer:
            return None

        result = run_command([self.config.colorizer], input=patch)
        if not result.ok or not result.stdout:
            return None
        return result.stdout


def count_patch_lines(patch: str) -> int:
    """Número de linhas do patch (0 = nada a formatar)."""
    return len(patch.splitlines())


__all__ = [
    "FormatDiffScanner",
    "count_patch_lines",
    "pending_patch",
]
