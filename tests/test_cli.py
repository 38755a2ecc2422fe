from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "src"


def _run(stdin: str, *args: str, module: str = "hotseat.cli") -> subprocess.CompletedProcess[str]:
    env = {**os.environ, "PYTHONPATH": str(PACKAGE_ROOT)}
    return subprocess.run(
        [sys.executable, "-m", module, *args],
        input=stdin,
        capture_output=True,
        text=True,
        env=env,
        timeout=20,
    )


def _every_cell() -> list[str]:
    return [f"{col}{row}" for row in range(10) for col in "ABCDEFGHIJ"]


@pytest.mark.timeout(30)  # type: ignore[arg-type]
def test_full_game_over_stdin() -> None:
    """Both players sweep the board; someone must win and the fleets are revealed."""
    lines = []
    for cell in _every_cell():
        lines.extend([cell, cell])
    proc = _run("\n".join(lines) + "\n", "--seed", "5")

    assert proc.returncode == 0, proc.stderr
    out = proc.stdout
    assert out.startswith("\nPlayer 1's turn:")
    assert "   A B C D E F G H I J" in out
    assert ("Player 1 wins!" in out) != ("Player 2 wins!" in out)
    assert "Game Over!" in out
    assert "[Player 1]" in out and "[Player 2]" in out


@pytest.mark.timeout(30)  # type: ignore[arg-type]
def test_same_seed_same_transcript() -> None:
    stdin = "\n".join(["A0", "A0", "B1", "B1", "C2", "quit"]) + "\n"
    first = _run(stdin, "--seed", "11")
    second = _run(stdin, "--seed", "11")
    assert first.returncode == second.returncode == 0
    assert first.stdout == second.stdout


@pytest.mark.timeout(30)  # type: ignore[arg-type]
@pytest.mark.parametrize("stdin", ["", "QUIT\n", "K5\nA10\n"])
def test_quit_or_eof_exits_cleanly(stdin: str) -> None:
    proc = _run(stdin)
    assert proc.returncode == 0, proc.stderr
    assert "Game Over!" in proc.stdout
    assert "wins!" not in proc.stdout


@pytest.mark.timeout(30)  # type: ignore[arg-type]
def test_malformed_input_is_rejected() -> None:
    proc = _run("5A\nA\nquit\n")
    assert proc.returncode == 0
    assert proc.stdout.count("[!]") == 2


@pytest.mark.timeout(30)  # type: ignore[arg-type]
def test_package_entry_point_runs_the_game() -> None:
    proc = _run("A0\nquit\n", "--seed", "3", module="hotseat")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.startswith("\nPlayer 1's turn:")
    assert "Game Over!" in proc.stdout
