import pytest

from americanise_cli.config import DEFAULT_DICTIONARY_PATH, AmericaniseConfig, load_config, validate_config

def test_defaults(monkeypatch):
    monkeypatch.delenv("AMERICANISE_DICTIONARY", raising=False)
    monkeypatch.delenv("AMERICANISE_ENCODING", raising=False)
    monkeypatch.delenv("AMERICANISE_ENCODING_ERRORS", raising=False)
    cfg = load_config()
    assert cfg == AmericaniseConfig()
    assert cfg.dictionary_path == DEFAULT_DICTIONARY_PATH

def test_env_and_overrides(monkeypatch):
    monkeypatch.setenv("AMERICANISE_DICTIONARY", "/env/dict.txt")
    monkeypatch.setenv("AMERICANISE_ENCODING", "latin-1")
    assert load_config().dictionary_path == "/env/dict.txt"
    assert load_config().encoding == "latin-1"
    cfg = load_config(dictionary_path="/cli/dict.txt", encoding="utf-8")
    assert cfg.dictionary_path == "/cli/dict.txt"
    assert cfg.encoding == "utf-8"

def test_validate_reports_all_problems():
    cfg = AmericaniseConfig(dictionary_path="", encoding="no-such-codec", errors="nope")
    with pytest.raises(RuntimeError) as exc:
        validate_config(cfg)
    msg = str(exc.value)
    assert "AMERICANISE_DICTIONARY" in msg
    assert "no-such-codec" in msg
    assert "nope" in msg

def test_bundled_dictionary_is_idempotent():
    from americanise.dictionary import load_dictionary
    mapping = load_dictionary(DEFAULT_DICTIONARY_PATH)
    assert mapping["colour"] == "color"
    assert not set(mapping.values()) & set(mapping)
