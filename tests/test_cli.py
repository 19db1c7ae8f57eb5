from __future__ import annotations

from pathlib import Path

import pytest

import marketai.client.cli as cli
from marketai.client.preferences import load_preferences
from marketai.common.schema import GenerationError


class _FakeContentClient:
    instances: list["_FakeContentClient"] = []

    def __init__(self, base_url: str, api_key: str | None = None) -> None:
        self.base_url = base_url
        self.api_key = api_key
        type(self).instances.append(self)

    def __enter__(self) -> "_FakeContentClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        return None

    def complete(self, prompt: str) -> str:
        return "Generated!"


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch) -> type[_FakeContentClient]:
    fake = type("FakeContentClient", (_FakeContentClient,), {"instances": []})
    monkeypatch.setattr(cli, "ContentClient", fake)
    return fake


def test_generate_prints_content(tmp_path: Path, capsys: pytest.CaptureFixture[str], fake_client) -> None:
    rc = cli.main(["--category", "email", "--description", "A mug", "--prefs", str(tmp_path / "p.yaml")])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "Generated!"
    (instance,) = fake_client.instances
    assert instance.api_key is None


def test_blank_description_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str], fake_client) -> None:
    rc = cli.main(["--description", "  ", "--prefs", str(tmp_path / "p.yaml")])
    assert rc == 1
    assert "Please provide a product description." in capsys.readouterr().err
    assert fake_client.instances == []


def test_set_key_then_generate_uses_override(tmp_path: Path, fake_client) -> None:
    prefs_path = str(tmp_path / "p.yaml")
    assert cli.main(["--set-key", "sk-user", "--prefs", prefs_path]) == 0
    assert load_preferences(prefs_path).api_key == "sk-user"

    assert cli.main(["--description", "A mug", "--prefs", prefs_path]) == 0
    assert fake_client.instances[-1].api_key == "sk-user"


def test_copy_uses_clipboard(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_client) -> None:
    copied: list[str] = []
    monkeypatch.setattr(cli, "system_clipboard", copied.append)
    rc = cli.main(["--description", "A mug", "--copy", "--prefs", str(tmp_path / "p.yaml")])
    assert rc == 0
    assert copied == ["Generated!"]


def test_theme_is_persisted(tmp_path: Path, capsys: pytest.CaptureFixture[str], fake_client) -> None:
    prefs_path = str(tmp_path / "p.yaml")
    assert cli.main(["--set-key", "sk-user", "--prefs", prefs_path]) == 0
    assert cli.main(["--theme", "light", "--prefs", prefs_path]) == 0
    prefs = load_preferences(prefs_path)
    assert prefs.theme == "light"
    assert prefs.api_key == "sk-user"
    assert "Theme set to light." in capsys.readouterr().out
    assert fake_client.instances == []


def test_unknown_theme_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        cli.main(["--theme", "sepia", "--prefs", str(tmp_path / "p.yaml")])


def test_generation_error_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch, fake_client) -> None:
    def fail(self, prompt: str) -> str:  # noqa: ANN001
        raise GenerationError("Failed to generate content: OpenAI API key not configured")

    monkeypatch.setattr(fake_client, "complete", fail)
    rc = cli.main(["--description", "A mug", "--prefs", str(tmp_path / "p.yaml")])
    assert rc == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "Error: Failed to generate content: OpenAI API key not configured"
