"""Tests for installing and removing the pre-commit hook."""

import os
import shutil
from dataclasses import replace

import pytest

from format_hook.core.errors import (
    AlreadyInstalled,
    ForeignHookExists,
    NothingToUninstall,
    SymlinkCreationFailed,
)
from format_hook.core.models import HookStatus
from format_hook.hooks import HookManager, check_hook_status, install_hook, uninstall_hook


@pytest.fixture
def manager(temp_git_repo, make_context):
    context = make_context(temp_git_repo)
    context.hook_path.parent.mkdir(exist_ok=True)
    return HookManager(context)


def test_status_absent_before_install(manager):
    assert manager.detect_status() == HookStatus.ABSENT


def test_install_creates_relative_symlink(manager, fake_tool):
    hook_path = manager.install()

    assert hook_path.is_symlink()
    assert not os.path.isabs(os.readlink(hook_path))
    assert hook_path.resolve() == fake_tool.resolve()
    assert manager.detect_status() == HookStatus.INSTALLED


def test_install_twice_fails(manager):
    manager.install()

    with pytest.raises(AlreadyInstalled):
        manager.install()

    assert manager.detect_status() == HookStatus.INSTALLED


def test_install_creates_missing_hooks_dir(manager):
    hooks_dir = manager.hook_path.parent
    shutil.rmtree(hooks_dir, ignore_errors=True)

    manager.install()

    assert manager.detect_status() == HookStatus.INSTALLED


def test_install_over_foreign_hook_fails(manager):
    manager.hook_path.write_text("#!/bin/sh\necho other\n")

    with pytest.raises(ForeignHookExists):
        manager.install()

    assert manager.hook_path.read_text() == "#!/bin/sh\necho other\n"


def test_install_symlink_failure_is_reported(manager):
    hooks_dir = manager.hook_path.parent
    shutil.rmtree(hooks_dir, ignore_errors=True)
    hooks_dir.write_text("not a directory")

    with pytest.raises(SymlinkCreationFailed) as exc_info:
        manager.install()

    assert exc_info.value.diagnostic


def test_uninstall_after_install(manager):
    manager.install()
    manager.uninstall()

    assert not manager.hook_path.is_symlink()
    assert manager.detect_status() == HookStatus.ABSENT


def test_uninstall_leaves_foreign_hook_untouched(manager):
    manager.hook_path.write_text("#!/bin/sh\necho other\n")

    with pytest.raises(ForeignHookExists):
        manager.uninstall()

    assert manager.hook_path.read_text() == "#!/bin/sh\necho other\n"


def test_uninstall_without_hook(manager):
    with pytest.raises(NothingToUninstall):
        manager.uninstall()


def test_dangling_symlink_is_foreign(manager, tmp_path):
    manager.hook_path.symlink_to(tmp_path / "missing-tool")

    assert manager.detect_status() == HookStatus.FOREIGN


def test_install_refuses_non_executable_tool(manager, fake_tool):
    fake_tool.chmod(0o644)

    with pytest.raises(SymlinkCreationFailed) as exc_info:
        manager.install()

    assert "git-pre-commit-format install" in exc_info.value.remedy
    assert manager.detect_status() == HookStatus.ABSENT


def test_install_refuses_module_entry_point(temp_git_repo, make_context, tmp_path):
    main_module = tmp_path / "format_hook" / "__main__.py"
    main_module.parent.mkdir()
    main_module.write_text("from .cli import main\n")
    manager = HookManager(replace(make_context(temp_git_repo), tool_path=main_module))

    with pytest.raises(SymlinkCreationFailed):
        manager.install()

    assert not manager.hook_path.is_symlink()


def test_helper_functions(temp_git_repo, make_context):
    context = make_context(temp_git_repo)

    assert check_hook_status(context) == HookStatus.ABSENT

    install_hook(context)
    assert check_hook_status(context) == HookStatus.INSTALLED

    uninstall_hook(context)
    assert check_hook_status(context) == HookStatus.ABSENT
