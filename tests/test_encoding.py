import pycfgline.abstract
from pycfgline import ConfigError, IniParser


def test_utf8_is_read_directly(tmp_path) -> None:
    path = tmp_path / "utf8.ini"
    path.write_text("title = Grüße ☃\n", encoding="utf-8")
    ini = IniParser(str(path))
    assert ini.get("title") == "Grüße ☃"
    assert ini.encoding == "utf-8"


def test_undecodable_file_is_sniffed(tmp_path, monkeypatch) -> None:
    path = tmp_path / "legacy.ini"
    path.write_bytes("name = café\n".encode("cp1252"))
    monkeypatch.setattr(
        pycfgline.abstract, "guess_codec",
        lambda raw: {"encoding": "cp1252", "confidence": 0.99, "language": ""},
    )
    ini = IniParser(str(path))
    assert ini.getError() is ConfigError.NO_ERROR
    assert ini.get("name") == "café"
    assert ini.encoding == "cp1252"

    ini["name"] = "crème"
    ini.save()
    assert path.read_bytes() == "name = crème\n".encode("cp1252")


def test_unsure_guess_is_a_read_error(tmp_path, monkeypatch) -> None:
    path = tmp_path / "garbage.ini"
    path.write_bytes(b"name = \xff\xfe\xfa\n")
    monkeypatch.setattr(
        pycfgline.abstract, "guess_codec",
        lambda raw: {"encoding": None, "confidence": 0.0, "language": None},
    )
    ini = IniParser(str(path))
    assert ini.getError() is ConfigError.FILE_READ_ERROR
    assert len(ini) == 0


def test_unencodable_value_is_a_write_error(tmp_path) -> None:
    path = tmp_path / "ascii.ini"
    path.write_text("a = 1\n", encoding="ascii")
    ini = IniParser(str(path), encoding="ascii")
    ini["a"] = "☃"
    ini.save()
    assert ini.getError() is ConfigError.FILE_WRITE_ERROR
    assert path.read_text(encoding="ascii") == "a = 1\n"
    assert ini.get("a") == "☃"


def test_sniffed_codec_cannot_encode_new_value(tmp_path, monkeypatch) -> None:
    path = tmp_path / "legacy.ini"
    original = "name = café\n".encode("cp1252")
    path.write_bytes(original)
    monkeypatch.setattr(
        pycfgline.abstract, "guess_codec",
        lambda raw: {"encoding": "cp1252", "confidence": 0.99, "language": ""},
    )
    ini = IniParser(str(path))
    ini["city"] = "東京"
    ini.save()
    assert ini.getError() is ConfigError.FILE_WRITE_ERROR
    assert path.read_bytes() == original


def test_load_forgets_sniffed_codec(tmp_path, monkeypatch) -> None:
    legacy = tmp_path / "legacy.ini"
    legacy.write_bytes("name = café\n".encode("cp1252"))
    modern = tmp_path / "modern.ini"
    modern.write_text("title = Grüße\n", encoding="utf-8")
    monkeypatch.setattr(
        pycfgline.abstract, "guess_codec",
        lambda raw: {"encoding": "cp1252", "confidence": 0.99, "language": ""},
    )
    ini = IniParser(str(legacy))
    assert ini.encoding == "cp1252"

    ini.reload()
    assert ini.encoding == "cp1252"
    assert ini.get("name") == "café"

    ini.load(str(modern))
    assert ini.encoding == "utf-8"
    assert ini.get("title") == "Grüße"
