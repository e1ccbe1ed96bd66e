"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest

from format_hook.core.models import HookConfig, HookContext


UNFORMATTED = "int x;\n  int y;\n"
FORMATTED = "int x;\nint y;\n"

FORMAT_PATCH = """\
--- main.c
+++ main.c
@@ -1,2 +1,2 @@
 int x;
-  int y;
+int y;
"""


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


@pytest.fixture
def temp_git_repo(tmp_path):
    """Cria repositório git temporário."""
    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    git(repo_dir, "init")
    git(repo_dir, "config", "user.email", "test@example.com")
    git(repo_dir, "config", "user.name", "Test User")

    return repo_dir


@pytest.fixture
def staged_repo(temp_git_repo):
    """Repositório com um arquivo mal indentado no index."""
    (temp_git_repo / "main.c").write_text(UNFORMATTED)
    git(temp_git_repo, "add", "main.c")
    return temp_git_repo


@pytest.fixture
def fake_tool(tmp_path):
    """Executável que faz o papel desta ferramenta instalada."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    tool = bin_dir / "git-pre-commit-format"
    tool.write_text("#!/bin/sh\nexit 0\n")
    tool.chmod(0o755)
    return tool


@pytest.fixture
def make_formatter(tmp_path):
    """
    Fábrica de formatters falsos.

    O script grava os argumentos recebidos em `args.txt`, imprime o patch
    fornecido e sai com o exit code pedido.
    """
    def factory(patch: str = "", exit_code: int = 0, stderr: str = "") -> Path:
        fmt_dir = tmp_path / "formatter"
        fmt_dir.mkdir(exist_ok=True)

        patch_file = fmt_dir / "output.patch"
        patch_file.write_text(patch)

        script = fmt_dir / "apply-format"
        script.write_text(
            "#!/bin/sh\n"
            f'echo "$@" > "{fmt_dir / "args.txt"}"\n'
            f'cat "{patch_file}"\n'
            + (f'echo "{stderr}" >&2\n' if stderr else "")
            + f"exit {exit_code}\n"
        )
        script.chmod(0o755)
        return script

    return factory


@pytest.fixture
def make_tty(tmp_path):
    """Arquivo que substitui o terminal, com as respostas do usuário."""
    def factory(*answers: str) -> Path:
        tty = tmp_path / "tty"
        tty.write_text("".join(f"{answer}\n" for answer in answers))
        return tty

    return factory


@pytest.fixture
def make_context(fake_tool, tmp_path):
    """Fábrica de HookContext sem passar pelo git config."""
    def factory(repo: Path, as_hook: bool = True, tty: Path = None, **config) -> HookContext:
        config.setdefault("colorizer", None)
        return HookContext(
            repo_root=repo,
            work_tree=repo,
            tool_path=fake_tool,
            config=HookConfig(**config),
            tty_path=tty or tmp_path / "no-tty",
            environ={"GIT_INDEX_FILE": str(repo / ".git" / "index")} if as_hook else {},
        )

    return factory
