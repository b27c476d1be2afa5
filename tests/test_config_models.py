import json

import pytest

from replay_gain.histogram import REFERENCE_LOUDNESS_DB
from replay_gain.utils.config import AnalysisSettings, ScanConfig, load_scan_config


def test_defaults_match_reference_analysis():
    config = ScanConfig()

    assert config.analysis.reference_loudness_db == REFERENCE_LOUDNESS_DB
    assert config.analysis.percentile == 0.95
    assert config.analysis.steps_per_db == 100
    assert config.analysis.max_loudness_db == 120.0
    assert config.endianness == "native"


@pytest.mark.parametrize("percentile", [0.0, 1.0, 1.2])
def test_percentile_is_validated(percentile):
    with pytest.raises(ValueError):
        AnalysisSettings(percentile=percentile)


def test_endianness_is_normalized_and_validated():
    assert ScanConfig.model_validate({"endianness": " Little "}).endianness == "little"
    with pytest.raises(ValueError):
        ScanConfig.model_validate({"endianness": "middle"})


def test_load_json_config(tmp_path):
    path = tmp_path / "scan.json"
    path.write_text(json.dumps({"analysis": {"reference_loudness_db": 89.0}, "block_frames": 1024}))

    config = load_scan_config(path)

    assert config.analysis.reference_loudness_db == 89.0
    assert config.analysis.percentile == 0.95
    assert config.block_frames == 1024


def test_load_yaml_config(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "scan.yaml"
    path.write_text("analysis:\n  percentile: 0.9\nendianness: big\n")

    config = load_scan_config(path)

    assert config.analysis.percentile == 0.9
    assert config.endianness == "big"


def test_invalid_block_size_is_rejected(tmp_path):
    path = tmp_path / "scan.json"
    path.write_text(json.dumps({"block_frames": 0}))

    with pytest.raises(ValueError):
        load_scan_config(path)
