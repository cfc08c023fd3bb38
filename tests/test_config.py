import pytest

from tree2fs.config import Settings, load_config
from tree2fs.errors import ConfigError


def test_defaults_without_config_file(tmp_path):
    settings = load_config(cwd=tmp_path)
    assert settings == Settings()
    assert settings.indent_modulus == 4
    assert settings.output_dir == "."


def test_explicit_config_file(tmp_path):
    cfg = tmp_path / "custom.yaml"
    cfg.write_text(
        "output_dir: build\nindent_modulus: 2\nsummary: true\nprompt: Paste it\n",
        encoding="utf-8",
    )

    settings = load_config(cfg)

    assert settings.output_dir == "build"
    assert settings.indent_modulus == 2
    assert settings.summary is True
    assert settings.prompt == "Paste it"


def test_discovers_config_in_cwd(tmp_path):
    (tmp_path / "tree2fs.yaml").write_text("output_dir: scaffold\n", encoding="utf-8")
    assert load_config(cwd=tmp_path).output_dir == "scaffold"


def test_empty_file_gives_defaults(tmp_path):
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("", encoding="utf-8")
    assert load_config(cfg) == Settings()


def test_unknown_keys_are_ignored(tmp_path):
    cfg = tmp_path / "extra.yaml"
    cfg.write_text("colour: blue\nsummary: false\n", encoding="utf-8")
    assert load_config(cfg) == Settings()


def test_null_prompt_disables_prompt(tmp_path):
    cfg = tmp_path / "quiet.yaml"
    cfg.write_text("prompt: null\n", encoding="utf-8")
    assert load_config(cfg).prompt == ""


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "content, message",
    [
        ("output_dir:\tx\n", "Tabs"),
        ("output_dir: [unclosed\n", "not valid YAML"),
        ("- a\n- b\n", "mapping"),
        ("indent_modulus: 0\n", "indent_modulus"),
        ("indent_modulus: true\n", "indent_modulus"),
        ("indent_modulus: four\n", "indent_modulus"),
        ("summary: maybe\n", "summary"),
        ("output_dir: 42\n", "output_dir"),
        ("prompt: [1, 2]\n", "prompt"),
    ],
)
def test_invalid_config(tmp_path, content, message):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(cfg)
