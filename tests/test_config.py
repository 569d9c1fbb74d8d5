import json
from pathlib import Path

import pytest

from paper_bank.config import DEFAULT_CONFIG, TAMIL, load_parser_config

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def test_shipped_tamil_config_matches_defaults():
    assert load_parser_config(str(CONFIG_DIR / "parser_tamil.json")) == DEFAULT_CONFIG


def test_load_parser_config(tmp_path):
    path = tmp_path / "parser.json"
    path.write_text(json.dumps({
        "min_option_length": 1,
        "secondary": {
            "name": "tamil",
            "range_start": 2944,
            "range_end": "0x0BFF",
            "labels": ["அ", "ஆ", "இ", "ஈ"],
        },
    }), encoding="utf-8")

    config = load_parser_config(str(path))
    assert config.min_option_length == 1
    assert config.secondary == TAMIL
    assert config.labels == "ABCD"


def test_secondary_can_be_disabled(tmp_path):
    path = tmp_path / "parser.json"
    path.write_text(json.dumps({"secondary": None}), encoding="utf-8")
    assert load_parser_config(str(path)).secondary is None


def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / "parser.json"
    path.write_text(json.dumps({"min_lenght": 3}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_parser_config(str(path))


def test_secondary_script_contains():
    assert TAMIL.contains("அ")
    assert not TAMIL.contains("A")
