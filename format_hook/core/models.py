"""
FORMAT HOOK - Core Data Models
Estruturas imutáveis compartilhadas pelo instalador e pelo gate de commit.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


# =============================================================================
# Enums
# =============================================================================

class HookStatus(str, Enum):
    """Estado de instalação do hook pre-commit."""
    ABSENT = "absent"
    INSTALLED = "installed"
    FOREIGN = "foreign"


class Answer(str, Enum):
    """Respostas aceitas no prompt interativo."""
    APPLY = "a"
    FORCE = "f"
    CANCEL = "c"
    HELP = "?"

    @classmethod
    def parse(cls, raw: str) -> Optional["Answer"]:
        """Converte a linha lida do terminal (case-insensitive)."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class GateOutcome(str, Enum):
    """Estados finais bem-sucedidos do gate."""
    CLEAN = "clean"
    APPLIED = "applied"
    FORCED = "forced"


# =============================================================================
# Defaults
# =============================================================================

HOOK_NAME = "pre-commit"
DEFAULT_STYLE = "file"
DEFAULT_FORMATTER = "apply-format"
DEFAULT_COLORIZER = "colordiff"
DEFAULT_TTY = "/dev/tty"

TTY_ENV_VAR = "FORMAT_HOOK_TTY"
HOOK_ENV_MARKERS = ("GIT_INDEX_FILE", "GIT_DIR")

STYLE_KEY = "hooks.clangFormatDiffStyle"
INTERACTIVE_KEY = "hooks.clangFormatDiffInteractive"
FORMATTER_KEY = "hooks.clangFormatDiffFormatter"
COLORIZER_KEY = "hooks.clangFormatDiffColorizer"


# =============================================================================
# External Command Result
# =============================================================================

@dataclass(frozen=True)
class CommandResult:
    """Resultado de um comando externo (git, formatter, patch...)."""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def diagnostic(self) -> str:
        """Saída bruta do comando, usada apenas como contexto de erro."""
        parts = [f"$ {' '.join(self.args)} (exit {self.returncode})"]
        if self.stderr.strip():
            parts.append(self.stderr.rstrip())
        elif self.stdout.strip():
            parts.append(self.stdout.rstrip())
        return "\n".join(parts)


# =============================================================================
# Configuration & Context
# =============================================================================

@dataclass(frozen=True)
class HookConfig:
    """Configuração lida do `git config` do repositório."""
    style: str = DEFAULT_STYLE
    interactive: bool = True
    formatter: Optional[Path] = None
    colorizer: Optional[str] = DEFAULT_COLORIZER

    def apply_command(self) -> str:
        """Comando que aplica a correção nos arquivos staged."""
        formatter = self.formatter or Path(DEFAULT_FORMATTER)
        return f"{formatter} --style={self.style} --staged -i"


@dataclass(frozen=True)
class HookContext:
    """
    Contexto de uma invocação, construído uma única vez no startup.

    Attributes:
        repo_root: Raiz do repositório (contém um diretório .git)
        work_tree: Work tree onde o commit acontece
        tool_path: Caminho absoluto desta ferramenta
        config: Configuração do hook
        tty_path: Dispositivo usado para ler as respostas do usuário
        environ: Snapshot das variáveis usadas para detectar execução via git
    """
    repo_root: Path
    work_tree: Path
    tool_path: Path
    config: HookConfig = field(default_factory=HookConfig)
    tty_path: Path = Path(DEFAULT_TTY)
    environ: Dict[str, str] = field(default_factory=dict)

    @property
    def hook_path(self) -> Path:
        return self.repo_root / ".git" / "hooks" / HOOK_NAME

    @property
    def invoked_as_hook(self) -> bool:
        return any(marker in self.environ for marker in HOOK_ENV_MARKERS)


__all__ = [
    "Answer",
    "CommandResult",
    "GateOutcome",
    "HookConfig",
    "HookContext",
    "HookStatus",
    "COLORIZER_KEY",
    "DEFAULT_COLORIZER",
    "DEFAULT_FORMATTER",
    "DEFAULT_STYLE",
    "DEFAULT_TTY",
    "FORMATTER_KEY",
    "HOOK_ENV_MARKERS",
    "HOOK_NAME",
    "INTERACTIVE_KEY",
    "STYLE_KEY",
    "TTY_ENV_VAR",
]
