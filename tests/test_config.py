"""Tests for repository discovery and hook configuration."""

import subprocess

import pytest

from format_hook.core.config import build_context, load_config, parse_bool
from format_hook.core.errors import NotARepository
from format_hook.core.git import GitRepository, resolve_repo_root

from conftest import git


def test_repo_root_from_subdirectory(temp_git_repo):
    subdir = temp_git_repo / "src" / "lib"
    subdir.mkdir(parents=True)

    assert resolve_repo_root(subdir) == temp_git_repo.resolve()


def test_repo_root_outside_repository(tmp_path):
    outside = tmp_path / "plain"
    outside.mkdir()

    with pytest.raises(NotARepository):
        resolve_repo_root(outside)


def test_repo_root_skips_submodule_git_file(temp_git_repo):
    inner = temp_git_repo / "inner"
    (temp_git_repo / ".git" / "modules").mkdir()
    subprocess.run(
        [
            "git", "init",
            f"--separate-git-dir={temp_git_repo / '.git' / 'modules' / 'inner'}",
            str(inner),
        ],
        check=True,
        capture_output=True,
    )
    assert (inner / ".git").is_file()

    assert resolve_repo_root(inner) == temp_git_repo.resolve()


@pytest.mark.parametrize("value, expected", [
    (None, True),
    ("true", True),
    ("yes", True),
    ("whatever", True),
    ("false", False),
    ("False", False),
    ("off", False),
    ("0", False),
])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_load_config_defaults(temp_git_repo, fake_tool):
    config = load_config(GitRepository(temp_git_repo), fake_tool)

    assert config.style == "file"
    assert config.interactive is True
    assert config.colorizer == "colordiff"
    assert config.formatter.name == "apply-format"


def test_load_config_from_git_config(temp_git_repo, fake_tool, make_formatter):
    formatter = make_formatter()
    git(temp_git_repo, "config", "hooks.clangFormatDiffStyle", "LLVM")
    git(temp_git_repo, "config", "hooks.clangFormatDiffInteractive", "false")
    git(temp_git_repo, "config", "hooks.clangFormatDiffFormatter", str(formatter))
    git(temp_git_repo, "config", "hooks.clangFormatDiffColorizer", "")

    config = load_config(GitRepository(temp_git_repo), fake_tool)

    assert config.style == "LLVM"
    assert config.interactive is False
    assert config.formatter == formatter
    assert config.colorizer is None
    assert config.apply_command() == f"{formatter} --style=LLVM --staged -i"


def test_formatter_next_to_tool_is_preferred(temp_git_repo, fake_tool):
    sibling = fake_tool.parent / "apply-format"
    sibling.write_text("#!/bin/sh\n")

    config = load_config(GitRepository(temp_git_repo), fake_tool)

    assert config.formatter == sibling


def test_relative_formatter_is_resolved_from_work_tree(temp_git_repo, fake_tool):
    git(temp_git_repo, "config", "hooks.clangFormatDiffFormatter", "tools/apply-format")

    config = load_config(GitRepository(temp_git_repo), fake_tool, temp_git_repo)

    assert config.formatter == temp_git_repo / "tools" / "apply-format"


def test_build_context(temp_git_repo, fake_tool, tmp_path):
    context = build_context(
        cwd=temp_git_repo,
        argv0=str(fake_tool),
        environ={"GIT_INDEX_FILE": ".git/index", "FORMAT_HOOK_TTY": str(tmp_path / "tty"), "HOME": "/x"},
    )

    assert context.repo_root == temp_git_repo.resolve()
    assert context.work_tree == temp_git_repo.resolve()
    assert context.tool_path == fake_tool
    assert context.tty_path == tmp_path / "tty"
    assert context.invoked_as_hook
    assert context.environ == {"GIT_INDEX_FILE": ".git/index"}
    assert context.hook_path == temp_git_repo.resolve() / ".git" / "hooks" / "pre-commit"


def test_build_context_without_hook_markers(temp_git_repo, fake_tool):
    context = build_context(cwd=temp_git_repo, argv0=str(fake_tool), environ={})

    assert not context.invoked_as_hook
    assert str(context.tty_path) == "/dev/tty"
