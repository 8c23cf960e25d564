import json
from pathlib import Path

import pytest

from ai_writing_fix.consts import DEFAULT_TEXTLINT_CONFIG
from ai_writing_fix.exceptions import ConfigError
from ai_writing_fix.models.config import DefaultConfig, LocalConfig
from ai_writing_fix.services.config_resolver import (
    activate_config,
    discover_config,
    load_descriptor,
)


def test_discover_without_local_config_uses_defaults(tmp_path: Path):
    source = discover_config(tmp_path)
    assert isinstance(source, DefaultConfig)
    assert source.payload == DEFAULT_TEXTLINT_CONFIG


def test_discover_prefers_textlintrc(tmp_path: Path):
    (tmp_path / ".textlintrc.json").write_text("{}", encoding="utf-8")
    (tmp_path / ".textlintrc").write_text("{}", encoding="utf-8")

    source = discover_config(tmp_path)

    assert isinstance(source, LocalConfig)
    assert source.path == (tmp_path / ".textlintrc").resolve()


def test_discover_finds_yaml_config(tmp_path: Path):
    (tmp_path / ".textlintrc.yml").write_text("rules: {}\n", encoding="utf-8")
    source = discover_config(tmp_path)
    assert isinstance(source, LocalConfig)
    assert source.path.name == ".textlintrc.yml"


def test_default_config_is_written_and_removed():
    with activate_config(DefaultConfig(payload=DEFAULT_TEXTLINT_CONFIG)) as config:
        path = config.descriptor_path
        assert config.is_default
        assert path.name.startswith("textlintrc-")
        assert path.suffix == ".json"
        assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_TEXTLINT_CONFIG
        assert config.descriptor.rules == DEFAULT_TEXTLINT_CONFIG["rules"]

    assert not path.exists()


def test_default_config_is_removed_on_error():
    path: Path | None = None
    with pytest.raises(RuntimeError):
        with activate_config(DefaultConfig(payload=DEFAULT_TEXTLINT_CONFIG)) as config:
            path = config.descriptor_path
            raise RuntimeError("boom")

    assert path is not None
    assert not path.exists()


def test_cleanup_failure_is_ignored(monkeypatch: pytest.MonkeyPatch):
    def fail_unlink(self: Path, missing_ok: bool = False) -> None:
        raise PermissionError("denied")

    with activate_config(DefaultConfig(payload=DEFAULT_TEXTLINT_CONFIG)) as config:
        path = config.descriptor_path
        monkeypatch.setattr(Path, "unlink", fail_unlink)

    monkeypatch.undo()
    assert path.exists()
    path.unlink()


def test_local_config_is_used_in_place(tmp_path: Path):
    rc = tmp_path / ".textlintrc"
    rc.write_text('{"rules": {"no-todo": true}}', encoding="utf-8")

    with activate_config(LocalConfig(path=rc)) as config:
        assert not config.is_default
        assert config.descriptor_path == rc
        assert config.descriptor.rules == {"no-todo": True}

    assert rc.exists()


def test_load_yaml_descriptor(tmp_path: Path):
    rc = tmp_path / ".textlintrc.yaml"
    rc.write_text(
        "rules:\n"
        "  '@textlint-ja/preset-ai-writing': true\n"
        "filters:\n"
        "  comments: true\n",
        encoding="utf-8",
    )
    descriptor = load_descriptor(rc)
    assert descriptor.rules == {"@textlint-ja/preset-ai-writing": True}
    assert descriptor.filters == {"comments": True}


def test_empty_descriptor(tmp_path: Path):
    rc = tmp_path / ".textlintrc"
    rc.write_text("", encoding="utf-8")
    assert load_descriptor(rc).rules == {}


@pytest.mark.parametrize(
    "content", ['{"rules": [', "- just\n- a list\n", '{"rules": 3}']
)
def test_malformed_descriptor_raises(tmp_path: Path, content: str):
    rc = tmp_path / ".textlintrc"
    rc.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_descriptor(rc)


def test_tab_indented_json_descriptor(tmp_path: Path):
    rc = tmp_path / ".textlintrc.json"
    rc.write_text(
        '{\n\t"rules": {\n\t\t"@textlint-ja/preset-ai-writing": true\n\t}\n}\n',
        encoding="utf-8",
    )
    descriptor = load_descriptor(rc)
    assert descriptor.rules == {"@textlint-ja/preset-ai-writing": True}


def test_commented_textlintrc(tmp_path: Path):
    rc = tmp_path / ".textlintrc"
    rc.write_text(
        "{\n"
        "  // AI writing preset\n"
        '  "rules": {\n'
        '    "@textlint-ja/preset-ai-writing": true,\n'
        "  },\n"
        "  /* no filters yet */\n"
        "}\n",
        encoding="utf-8",
    )
    descriptor = load_descriptor(rc)
    assert descriptor.rules == {"@textlint-ja/preset-ai-writing": True}


def test_extensionless_textlintrc_may_be_yaml(tmp_path: Path):
    rc = tmp_path / ".textlintrc"
    rc.write_text("rules:\n  no-todo: true\n", encoding="utf-8")
    assert load_descriptor(rc).rules == {"no-todo": True}


def test_json_config_is_not_read_as_yaml(tmp_path: Path):
    rc = tmp_path / ".textlintrc.json"
    rc.write_text("rules:\n  no-todo: true\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_descriptor(rc)
