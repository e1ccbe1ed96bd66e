"""
FORMAT HOOK - Configuration
Lê a configuração do hook (git config + ambiente) uma única vez.
"""

import os
import shutil
import sys
from pathlib import Path
from typing import Mapping, Optional

from .git import GitRepository, resolve_repo_root
from .models import (
    COLORIZER_KEY,
    DEFAULT_COLORIZER,
    DEFAULT_FORMATTER,
    DEFAULT_STYLE,
    DEFAULT_TTY,
    FORMATTER_KEY,
    HOOK_ENV_MARKERS,
    INTERACTIVE_KEY,
    STYLE_KEY,
    TTY_ENV_VAR,
    HookConfig,
    HookContext,
)


FALSE_VALUES = {"false", "no", "off", "0"}


def parse_bool(value: Optional[str], default: bool = True) -> bool:
    """
    Interpreta um booleano do git config.

    Qualquer valor diferente dos tokens "falsos" é verdadeiro.
    """
    if value is None:
        return default
    return value.strip().lower() not in FALSE_VALUES


def locate_tool(argv0: Optional[str] = None) -> Path:
    """
    Caminho absoluto do executável que o usuário invocou.

    Args:
        argv0: Nome/caminho usado na invocação (default: sys.argv[0])
    """
    argv0 = argv0 or sys.argv[0]
    if os.sep not in argv0:
        found = shutil.which(argv0)
        if found:
            argv0 = found
    return Path(os.path.abspath(argv0))


def resolve_formatter(
    value: Optional[str],
    tool_path: Path,
    work_tree: Path,
) -> Path:
    """
    Resolve o executável do formatter.

    Ordem:
    1. Valor configurado (nome no PATH ou caminho relativo ao work tree)
    2. `apply-format` ao lado desta ferramenta
    3. `apply-format` no PATH
    """
    if value:
        if os.sep not in value:
            found = shutil.which(value)
            return Path(found) if found else Path(value)
        path = Path(value).expanduser()
        return path if path.is_absolute() else work_tree / path

    sibling = tool_path.parent / DEFAULT_FORMATTER
    if sibling.exists():
        return sibling

    found = shutil.which(DEFAULT_FORMATTER)
    return Path(found) if found else Path(DEFAULT_FORMATTER)


def load_config(
    repo: GitRepository,
    tool_path: Path,
    work_tree: Optional[Path] = None,
) -> HookConfig:
    """
    Carrega a configuração do hook a partir do git config.

    Args:
        repo: Repositório onde as chaves são lidas
        tool_path: Caminho desta ferramenta (para achar o formatter)
        work_tree: Base para caminhos relativos do formatter

    Returns:
        HookConfig imutável
    """
    work_tree = work_tree or repo.path

    style = repo.get_config(STYLE_KEY) or DEFAULT_STYLE
    interactive = parse_bool(repo.get_config(INTERACTIVE_KEY), default=True)
    formatter = resolve_formatter(repo.get_config(FORMATTER_KEY), tool_path, work_tree)

    colorizer = repo.get_config(COLORIZER_KEY)
    if colorizer is None:
        colorizer = DEFAULT_COLORIZER
    elif not colorizer.strip():
        colorizer = None

    return HookConfig(
        style=style,
        interactive=interactive,
        formatter=formatter,
        colorizer=colorizer,
    )


def build_context(
    cwd: Optional[Path] = None,
    argv0: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> HookContext:
    """
    Constrói o HookContext da invocação atual.

    Args:
        cwd: Diretório de partida (default: diretório atual)
        argv0: Nome usado para invocar a ferramenta
        environ: Ambiente (default: os.environ)

    Raises:
        NotARepository: Fora de um repositório git
    """
    cwd = Path(cwd) if cwd else Path.cwd()
    environ = os.environ if environ is None else environ

    repo_root = resolve_repo_root(cwd)
    work_tree = GitRepository(cwd).toplevel()
    tool_path = locate_tool(argv0)
    config = load_config(GitRepository(work_tree), tool_path, work_tree)

    return HookContext(
        repo_root=repo_root,
        work_tree=work_tree,
        tool_path=tool_path,
        config=config,
        tty_path=Path(environ.get(TTY_ENV_VAR) or DEFAULT_TTY),
        environ={k: environ[k] for k in HOOK_ENV_MARKERS if k in environ},
    )


__all__ = [
    "build_context",
    "load_config",
    "locate_tool",
    "parse_bool",
    "resolve_formatter",
]
