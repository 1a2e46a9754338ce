import json
from dataclasses import asdict, dataclass
from pathlib import Path

CONFIG_NAME = "gui_config.json"


def default_config_path() -> Path:
    return Path.home() / ".clara" / CONFIG_NAME


@dataclass
class ShellConfig:
    """Last values entered in the window, restored on the next start."""
    directory: str = ""
    extension: str = ""
    start_number: str = "1"

    @classmethod
    def load(cls, path: Path | None = None) -> "ShellConfig":
        path = path or default_config_path()
        try:
            if not path.exists():
                return cls()
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return cls()  # unreadable config, start from defaults
        if not isinstance(data, dict):
            return cls()
        return cls(
            directory=str(data.get("directory", "")),
            extension=str(data.get("extension", "")),
            start_number=str(data.get("start_number", "1")),
        )

    def save(self, path: Path | None = None) -> bool:
        path = path or default_config_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")
        except OSError:
            return False
        return True
