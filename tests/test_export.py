import json

import pytest
import yaml

from pycfgline import (
    CfgParser, IniParser, dumpJSON, dumpYAML, fromDict, loadJSON, loadYAML, toDict
)


def _sample_cfg() -> CfgParser:
    cfg = CfgParser()
    cfg.addSection("AppInfo")
    cfg["AppInfo"]["name"] = "Demo"
    cfg["AppInfo"]["version"] = 1.0
    cfg.addSection("Settings")
    cfg["Settings"]["debug_mode"] = True
    return cfg


def test_to_dict() -> None:
    ini = IniParser()
    ini["a"] = 1
    ini["b"] = "x"
    assert toDict(ini) == {"a": "1", "b": "x"}
    assert toDict(_sample_cfg()) == {
        "AppInfo": {"name": "Demo", "version": "1.000000"},
        "Settings": {"debug_mode": "true"},
    }


def test_from_dict_guesses_format() -> None:
    ini = fromDict({"a": 1, "b": None, "c": True})
    assert isinstance(ini, IniParser)
    assert list(ini) == ["a", "b", "c"]
    assert ini.get("b") == ""
    assert ini.get("c") == "true"

    cfg = fromDict({"s": {"k": 2.5}})
    assert isinstance(cfg, CfgParser)
    assert cfg["s"].get("k") == "2.500000"


def test_from_dict_rejects_non_sections() -> None:
    with pytest.raises(ValueError):
        fromDict({"s": {"k": 1}, "loose": 2}, "cfg")
    with pytest.raises(ValueError):
        fromDict(["not", "a", "mapping"])


def test_yaml_round_trip(tmp_path) -> None:
    path = tmp_path / "out.yaml"
    cfg = _sample_cfg()
    dumpYAML(cfg, str(path))
    with open(path, encoding="utf-8") as fp:
        assert yaml.safe_load(fp) == toDict(cfg)
    loaded = loadYAML(str(path))
    assert isinstance(loaded, CfgParser)
    assert toDict(loaded) == toDict(cfg)
    assert loaded.sections() == ["AppInfo", "Settings"]


def test_json_round_trip(tmp_path) -> None:
    path = tmp_path / "out.json"
    ini = IniParser()
    ini["name"] = "Grüße"
    ini["n"] = 3
    dumpJSON(ini, str(path))
    with open(path, encoding="utf-8") as fp:
        assert json.load(fp) == {"name": "Grüße", "n": "3"}
    loaded = loadJSON(str(path))
    assert toDict(loaded) == toDict(ini)


def test_exported_parser_can_be_saved(tmp_path) -> None:
    src = tmp_path / "in.yaml"
    src.write_text("s:\n  k: v\n  n: 4\n", encoding="utf-8")
    cfg = loadYAML(str(src))
    out = tmp_path / "out.cfg"
    cfg.save(str(out))
    assert out.read_text() == "[s]\nk = v\nn = 4\n\n"
