from __future__ import annotations

import csv
from pathlib import Path

import pytest

from difflife import cli
from difflife.bench import BenchmarkRunner
from difflife.verify import VerificationRunner


def test_verify_passes(capsys) -> None:
    assert cli.main(["verify", "-W", "10", "-H", "8", "-n", "15", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "✓ INCREMENTAL AND BRUTE-FORCE RESULTS IDENTICAL FOR 15 GENERATIONS" in out


def test_verification_runner_verbose(capsys) -> None:
    runner = VerificationRunner(6, 6, 3, seed=1, verbose=True)
    assert runner.run()
    assert runner.checked == 3
    assert capsys.readouterr().out.count("✓") >= 4


def test_run_without_display(capsys) -> None:
    code = cli.main(["run", "-W", "6", "-H", "4", "-n", "3", "--pause", "0", "--display", "none", "--seed", "1"])
    assert code == 0
    assert "Game of life program starting." in capsys.readouterr().out


def test_run_is_the_default_command(capsys) -> None:
    assert cli.main(["-W", "5", "-H", "5", "-n", "2", "--pause", "0", "--pattern", "blinker"]) == 0
    out = capsys.readouterr().out
    assert out.count("\033[48;2;127;0;255m") > 0


def test_prompts_for_missing_dimensions(monkeypatch, capsys) -> None:
    answers = iter(["7", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert cli.main(["-n", "1", "--pause", "0", "--display", "none"]) == 0
    assert "Enter width and height to use:" in capsys.readouterr().out


def test_bad_prompt_answer(monkeypatch, capsys) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "wide")
    assert cli.main(["-n", "1", "--display", "none"]) == 1
    assert "Error: width must be an integer" in capsys.readouterr().err


def test_invalid_dimensions_exit_with_error(capsys) -> None:
    assert cli.main(["run", "-W", "0", "-H", "5", "--display", "none"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_config_file_is_read(tmp_path: Path, capsys) -> None:
    config = tmp_path / "run.toml"
    config.write_text("[simulation]\nwidth = 4\nheight = 4\ngenerations = 2\n[display]\nmode = \"none\"\npause = 0\n")
    assert cli.main(["run", "--config", str(config)]) == 0


def test_log_file_receives_debug(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    assert cli.main([
        "run", "-W", "4", "-H", "4", "-n", "2", "--pause", "0", "--display", "none",
        "--log-file", str(log_file),
    ]) == 0
    from loguru import logger

    logger.remove()
    assert "Generation 2" in log_file.read_text()


def test_interrupt_returns_130(monkeypatch) -> None:
    def interrupted(self, *args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli.Simulation, "run", interrupted)
    assert cli.main(["run", "-W", "4", "-H", "4", "--display", "none"]) == 130


def test_interrupt_at_prompt_returns_130(monkeypatch) -> None:
    def interrupted(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    assert cli.main(["-n", "1", "--display", "none"]) == 130


@pytest.mark.parametrize("command", ["run", "verify", "bench"])
def test_negative_seed_is_a_config_error(command: str, capsys) -> None:
    argv = [command, "-W", "4", "-H", "4", "-n", "1", "--seed", "-1"]
    if command == "run":
        argv += ["--display", "none", "--pause", "0"]
    assert cli.main(argv) == 1
    assert "Error: Seed cannot be negative" in capsys.readouterr().err


def test_bench_writes_csv(tmp_path: Path, capsys) -> None:
    out_csv = tmp_path / "bench.csv"
    assert cli.main(["bench", "-W", "8", "-H", "8", "-n", "3", "--warmup", "1", "--csv", str(out_csv)]) == 0
    with open(out_csv, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0][1] == "implementation"
    assert {row[1] for row in rows[1:]} == {"Incremental", "Brute force"}
    assert "GENERATION STEPPING BENCHMARK" in capsys.readouterr().out


def test_benchmark_runner_fingerprints_agree() -> None:
    runner = BenchmarkRunner(12, 12, 5, seed=2, warmup=2)
    assert runner.run()
    assert len(set(runner.fingerprints.values())) == 1


@pytest.mark.parametrize("argv", [["--help"], ["--version"]])
def test_help_and_version_exit(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 0
