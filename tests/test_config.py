from pdf_directory_merger.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_PATH,
    default_config_path,
    file_extensions,
    load_config,
)


def test_missing_config_returns_defaults(tmp_path):
    assert load_config(tmp_path / "absent.yaml") == DEFAULT_CONFIG


def test_config_overrides_are_deep_merged(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("merge:\n  buffer: memory\nfile_extensions: [.PDF, .pdfa]\n", encoding="utf-8")

    config = load_config(config_path)
    assert config["merge"]["buffer"] == "memory"
    assert config["timestamp_format"] == DEFAULT_CONFIG["timestamp_format"]
    assert file_extensions(config) == (".pdf", ".pdfa")


def test_non_mapping_config_is_ignored(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(config_path) == DEFAULT_CONFIG


def test_default_config_path_from_environment(monkeypatch, tmp_path):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert default_config_path() == DEFAULT_CONFIG_PATH
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "merger.yaml"))
    assert default_config_path() == tmp_path / "merger.yaml"


def test_file_extensions_accepts_single_string():
    assert file_extensions({"file_extensions": ".PDF"}) == (".pdf",)
