from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point in a separate process with a temporary HOME and
working directory. The selected script really replaces the process, so its
output and exit status are the ones observed here.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "sdcli" / "main.py"

pytestmark = pytest.mark.skipif(os.name == "nt", reason="relies on exec and /bin/sh")


def run_cli(args: List[str], home: Path, cwd: Path, **extra_env: str) -> subprocess.CompletedProcess[str]:
    """Execute the CLI in a child process with an isolated environment."""
    env = {
        "PATH": os.environ.get("PATH", "/usr/bin:/bin"),
        "HOME": str(home),
        "PYTHONPATH": str(SRC_DIR),
    }
    env.update(extra_env)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def sandbox(tmp_path: Path, make_script) -> Path:
    """
    Structure:
    /home/.sd
      show-env          (prints SD_ALIAS, DEBUG and its arguments)
      fail              (exits with status 3)
    /work/scripts/tools
      README
      add               (usage: add a b)
    /extra
      extra-cmd
    """
    home = tmp_path / "home"
    work = tmp_path / "work"
    make_script(
        home / ".sd" / "show-env",
        '# show-env: Print what the script receives\n'
        'echo "alias=$SD_ALIAS debug=${DEBUG:-unset} args=$*"\n',
    )
    make_script(home / ".sd" / "fail", "exit 3\n")
    make_script(
        work / "scripts" / "tools" / "add",
        "# add: Add two numbers\n# usage: add a b\necho $(($1 + $2))\n",
    )
    (work / "scripts" / "tools" / "README").write_text("Handy tools\n", encoding="utf-8")
    make_script(tmp_path / "extra" / "extra-cmd", "echo extra\n")
    return tmp_path


def test_script_replaces_process(sandbox: Path):
    result = run_cli(["show-env", "one", "two"], sandbox / "home", sandbox / "work")

    assert result.returncode == 0
    assert result.stdout.strip() == "alias=sd debug=unset args=one two"


def test_alias_and_debug_are_exported(sandbox: Path):
    result = run_cli(["-a", "quack", "--debug", "show-env"], sandbox / "home", sandbox / "work")

    assert result.returncode == 0
    assert result.stdout.strip() == "alias=quack debug=true args="
    assert "DEBUG | " in result.stderr


def test_exit_status_is_the_scripts(sandbox: Path):
    result = run_cli(["fail"], sandbox / "home", sandbox / "work")
    assert result.returncode == 3


def test_nested_command_with_usage(sandbox: Path):
    ok = run_cli(["tools", "add", "2", "3"], sandbox / "home", sandbox / "work")
    assert ok.returncode == 0
    assert ok.stdout.strip() == "5"

    bad = run_cli(["tools", "add", "2"], sandbox / "home", sandbox / "work")
    assert bad.returncode == 2
    assert "accepts 2 arg(s), received 1" in bad.stderr


def test_sd_path_roots(sandbox: Path):
    result = run_cli(
        ["extra-cmd"], sandbox / "home", sandbox / "work", SD_PATH=str(sandbox / "extra"),
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "extra"


def test_help_lists_commands(sandbox: Path):
    result = run_cli([], sandbox / "home", sandbox / "work")

    assert result.returncode == 0
    assert "show-env" in result.stdout
    assert "Print what the script receives" in result.stdout
    assert "Handy tools" in result.stdout


def test_version(sandbox: Path):
    result = run_cli(["--version"], sandbox / "home", sandbox / "work")
    assert result.returncode == 0
    assert result.stdout.startswith("sd ")
