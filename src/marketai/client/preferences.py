"""Local key-value store for client preferences (YAML file)."""
from __future__ import annotations
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_PATH = Path.home() / ".marketai.yaml"
PLACEHOLDER_KEY = "your-openai-api-key-here"


@dataclass
class Preferences:
    theme: str = "dark"
    api_key: str | None = None

    @property
    def override_key(self) -> str | None:
        """User-supplied OpenAI key, or None when unset or left as the placeholder."""
        if self.api_key and self.api_key != PLACEHOLDER_KEY:
            return self.api_key
        return None


def load_preferences(path: str | Path = DEFAULT_PATH) -> Preferences:
    p = Path(path)
    if not p.exists():
        return Preferences()
    with open(p, "r", encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}
    return Preferences(
        theme=str(data.get("theme", "dark")),
        api_key=data.get("api_key"),
    )


def save_preferences(prefs: Preferences, path: str | Path = DEFAULT_PATH) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        yaml.safe_dump(asdict(prefs), f, default_flow_style=False)
    # The file may hold a credential.
    p.chmod(0o600)
