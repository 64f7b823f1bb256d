"""Tests for the lanerush command line."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from lanerush.config.loader import load_settings
from lanerush.core.doctor import run_doctor
from lanerush.ui.cli.main import build_parser, main


class TestParser:
    def test_simulate_args(self):
        args = build_parser().parse_args(["simulate", "--autopilot", "stay", "--runs", "2", "--lanes", "5"])
        assert args.autopilot == "stay"
        assert args.runs == 2
        assert args.lanes == 5

    def test_unknown_autopilot_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["simulate", "--autopilot", "kamikaze"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    def test_doctor(self, capsys):
        assert main(["doctor"]) == 0
        out = capsys.readouterr().out
        assert "[OK] settings" in out
        assert "checks passing" in out

    def test_doctor_bad_lanes(self, capsys):
        assert main(["doctor", "--lanes", "1"]) == 1
        assert "invalid settings" in capsys.readouterr().out

    def test_run_doctor_checks(self):
        names = [c.name for c in run_doctor(load_settings())]
        assert names == ["settings", "pygame", "numpy", "sim_workers"]

    def test_simulate(self, capsys):
        assert main(["simulate", "--autopilot", "stay", "--runs", "2", "--workers", "1", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "SIMULATION: stay autopilot, 4 lanes" in out
        assert "crash rate" in out

    @pytest.mark.parametrize("command, tag", [
        (["simulate", "--lanes", "1"], "[simulate]"),
        (["play", "--lanes", "1"], "[game]"),
    ])
    def test_bad_lanes_reported_without_traceback(self, capsys, command, tag):
        assert main(command) == 1
        assert f"{tag} invalid settings" in capsys.readouterr().out
