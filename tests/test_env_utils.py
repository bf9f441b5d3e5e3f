from dataclasses import dataclass, field

from fast_rules import check
from fast_rules.utils.env_utils import configure_env


def test_configure_env_sets_tag_key(tmp_path, monkeypatch):
    env_file = tmp_path / ".env.test"
    env_file.write_text("FAST_RULES_TAG_KEY=rules\n")
    # registered so monkeypatch restores the variable afterwards
    monkeypatch.setenv("FAST_RULES_TAG_KEY", "validate")

    configure_env(str(env_file))

    @dataclass
    class Record:
        text: str = field(default="", metadata={"rules": "non-empty:3"})

    err = check(Record())
    assert err is not None
    assert len(err) == 1


def test_configure_env_missing_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENV", "test")

    configure_env()
