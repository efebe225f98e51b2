import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

# Base paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "listup_law.yaml"

# e-Gov 法令データ一式の XML は UTF-8、法令一覧 CSV は Shift_JIS (cp932)
DEFAULT_XML_ENCODING = "utf-8"
DEFAULT_REGISTRY_ENCODING = "cp932"

# XML をパーサに流し込む単位
DEFAULT_READ_CHUNK_SIZE = 64 * 1024

ENV_PREFIX = "LISTUP_LAW_"

STRATEGIES = ("per_law", "per_file")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    xml_encoding: str = DEFAULT_XML_ENCODING
    registry_encoding: str = DEFAULT_REGISTRY_ENCODING
    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE
    strategy: str = "per_law"

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Invalid strategy: {self.strategy}. Must be one of {STRATEGIES}.")
        if self.read_chunk_size <= 0:
            raise ValueError(f"read_chunk_size must be positive: {self.read_chunk_size}")
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Must be one of {LOG_LEVELS}.")


def _coerce(name: str, value):
    if name == "read_chunk_size":
        return int(value)
    return value


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings: defaults < YAML file < environment (LISTUP_LAW_*).

    .env in the working directory is loaded first, as the API clients do.
    """
    load_dotenv()

    values = {}
    path = config_path or DEFAULT_CONFIG_PATH
    if config_path is not None and not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        values.update(data)

    known = {f.name for f in fields(Settings)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    for name in known:
        env_value = os.environ.get(ENV_PREFIX + name.upper())
        if env_value:
            values[name] = env_value

    return replace(Settings(), **{k: _coerce(k, v) for k, v in values.items()})
