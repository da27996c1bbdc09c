"""
Load watcher config from config.yaml. The API key comes from the environment, once, at load time.
"""
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

DEFAULT_API_KEY = "DEMO_KEY"
DEFAULT_CONFIG_PATH = os.environ.get("NEOWATCH_CONFIG", "config.yaml")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str = DEFAULT_API_KEY
    base_url: str = "https://api.nasa.gov/neo/rest/v1"
    first_offset: int = -7
    offset: int = 1
    poll_interval: float = 3600
    max_polls: int | None = None
    store_path: str = "data/observed.json"
    orbiting_body: str = "Earth"
    pacing_max_seconds: float = 120
    debug: bool = False
    log_level: str = "INFO"

    @property
    def has_default_key(self) -> bool:
        return self.api_key == DEFAULT_API_KEY


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load config from path (default config.yaml) and resolve NASA_API_KEY from the environment."""
    data: dict = {}
    if os.path.exists(path):
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    data["api_key"] = os.environ.get("NASA_API_KEY") or DEFAULT_API_KEY
    store_path = os.environ.get("NEOWATCH_STORE_PATH")
    if store_path:
        data["store_path"] = store_path
    return Settings(**data)


if __name__ == "__main__":
    cfg = load_config()
    print("Loaded config:")
    for key, value in cfg.model_dump(exclude={"api_key"}).items():
        print(f"  {key}: {value}")
