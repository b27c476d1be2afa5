from __future__ import annotations

import json
import runpy

import numpy as np
import pytest
import soundfile as sf
from typer.testing import CliRunner

from replay_gain import cli

runner = CliRunner()


def test_raw_command_prints_gain_and_peak(tmp_path, stereo_noise):
    path = tmp_path / "samples.f32"
    path.write_bytes(stereo_noise["samples"].astype("<f4").tobytes())

    result = runner.invoke(cli.app, ["raw", "--rate", "44100", "--input", str(path), "--endianness", "little"])

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0].startswith("track_gain = ")
    assert lines[0].endswith(" dB")
    assert lines[1] == f"track_peak = {float(np.max(np.abs(stereo_noise['samples']))):.6f}"


def test_raw_command_rejects_unsupported_rate(tmp_path):
    path = tmp_path / "samples.f32"
    path.write_bytes(np.zeros(16, dtype="=f4").tobytes())

    result = runner.invoke(cli.app, ["raw", "--rate", "44101", "--input", str(path)])

    assert result.exit_code == 2
    assert "Unsupported sample rate" in result.output


def test_files_command_with_album_json(tmp_path, stereo_sine):
    paths = []
    for name in ("quiet", "loud"):
        path = tmp_path / f"{name}.wav"
        sf.write(path, stereo_sine[name].reshape(-1, 2), samplerate=stereo_sine["sample_rate"], subtype="FLOAT")
        paths.append(str(path))

    result = runner.invoke(cli.app, ["files", *paths, "--album", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [row["status"] for row in payload["tracks"]] == ["succeeded", "succeeded"]
    assert payload["album"]["peak"] == pytest.approx(0.5, abs=1e-4)


def test_files_command_reports_failed_rows(tmp_path, stereo_sine):
    good = tmp_path / "good.wav"
    mono = tmp_path / "mono.wav"
    sf.write(good, stereo_sine["loud"].reshape(-1, 2), samplerate=stereo_sine["sample_rate"], subtype="FLOAT")
    sf.write(mono, np.zeros(100, dtype=np.float32), samplerate=44_100, subtype="FLOAT")

    result = runner.invoke(cli.app, ["files", str(good), str(mono)])

    assert result.exit_code == 1
    assert f"[OK] {good}" in result.output
    assert f"[FAILED] {mono}" in result.output


def test_files_command_rejects_invalid_config(tmp_path, stereo_sine):
    audio = tmp_path / "loud.wav"
    sf.write(audio, stereo_sine["loud"].reshape(-1, 2), samplerate=stereo_sine["sample_rate"], subtype="FLOAT")
    config = tmp_path / "scan.json"
    config.write_text('{"block_frames": 0}', encoding="utf-8")

    result = runner.invoke(cli.app, ["files", str(audio), "--config", str(config)])

    assert result.exit_code == 2
    assert "invalid config" in result.output


def test_files_command_rejects_missing_config(tmp_path, stereo_sine):
    audio = tmp_path / "loud.wav"
    sf.write(audio, stereo_sine["loud"].reshape(-1, 2), samplerate=stereo_sine["sample_rate"], subtype="FLOAT")

    result = runner.invoke(cli.app, ["files", str(audio), "--config", str(tmp_path / "missing.json")])

    assert result.exit_code == 2


def test_module_entrypoint_calls_cli_main(monkeypatch):
    called = {"value": False}

    def fake_main():
        called["value"] = True

    monkeypatch.setattr(cli, "main", fake_main)

    runpy.run_module("replay_gain.__main__", run_name="__main__")

    assert called["value"]
