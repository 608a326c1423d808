"""
lineread configuration

Optional TOML file with reader defaults for the command-line front end.
Lookup order: explicit path, $LINEREAD_CONFIG, then DEFAULT_CONFIG_PATHS.
A .env file in the working directory is loaded first so the variable can be
set there.
"""

from __future__ import annotations

import codecs
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from lineread.reader import DEFAULT_ENCODING, EofPolicy, PromptStyle

load_dotenv()

CONFIG_ENV_VAR = "LINEREAD_CONFIG"
DEFAULT_CONFIG_PATHS: List[str] = ["~/.config/lineread/config.toml"]

DEFAULT_CONFIG_TEMPLATE = """\
[reader]
encoding = "utf-8"
prompt_style = "inline"   # "inline" or "line"
policy = "fail"           # "fail" or "tolerate"
blank_is_eof = false

[ui]
rich = true
"""


class ConfigError(Exception):
    """Raised when the configuration file is missing, malformed or invalid."""


@dataclass
class ReaderConfig:
    encoding: str = DEFAULT_ENCODING
    prompt_style: str = PromptStyle.INLINE.value
    policy: str = EofPolicy.FAIL.value
    blank_is_eof: bool = False

    def read_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``lineread.reader.read_line``."""
        return {
            "encoding": self.encoding,
            "prompt_style": PromptStyle(self.prompt_style),
            "policy": EofPolicy(self.policy),
            "blank_is_eof": self.blank_is_eof,
        }


@dataclass
class UIConfig:
    rich: bool = True


@dataclass
class AppConfig:
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    path: Optional[Path] = None


def find_config_path(cli_path: Optional[str] = None) -> Optional[Path]:
    candidates: List[str] = []
    if cli_path:
        candidates.append(cli_path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(env_path)
    candidates.extend(DEFAULT_CONFIG_PATHS)

    for candidate in candidates:
        path = Path(candidate).expanduser()
        if path.is_file():
            return path.resolve()
    return None


def initialize_default_config(target: Optional[str] = None) -> Path:
    """Write the default config file and return its path."""
    path = Path(target or DEFAULT_CONFIG_PATHS[0]).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    return path


def _expect(value: Any, kind: type, key: str) -> Any:
    if not isinstance(value, kind):
        raise ConfigError(f"{key} must be a {kind.__name__}, got {value!r}")
    return value


def _load_reader(raw: Dict[str, Any]) -> ReaderConfig:
    defaults = ReaderConfig()
    encoding = _expect(raw.get("encoding", defaults.encoding), str, "reader.encoding")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {encoding}") from exc

    prompt_style = _expect(raw.get("prompt_style", defaults.prompt_style), str, "reader.prompt_style")
    if prompt_style not in {style.value for style in PromptStyle}:
        raise ConfigError(f"reader.prompt_style must be 'inline' or 'line', got {prompt_style!r}")

    policy = _expect(raw.get("policy", defaults.policy), str, "reader.policy")
    if policy not in {p.value for p in EofPolicy}:
        raise ConfigError(f"reader.policy must be 'fail' or 'tolerate', got {policy!r}")

    blank_is_eof = _expect(raw.get("blank_is_eof", defaults.blank_is_eof), bool, "reader.blank_is_eof")
    if blank_is_eof and policy != EofPolicy.TOLERATE.value:
        raise ConfigError("reader.blank_is_eof requires policy = 'tolerate'")

    return ReaderConfig(encoding=encoding, prompt_style=prompt_style, policy=policy, blank_is_eof=blank_is_eof)


def load_app_config(path: Optional[Path]) -> AppConfig:
    if path is None:
        return AppConfig()

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    reader_raw = raw.get("reader", {})
    ui_raw = raw.get("ui", {})
    if not isinstance(reader_raw, dict) or not isinstance(ui_raw, dict):
        raise ConfigError("[reader] and [ui] must be tables")

    ui = UIConfig(rich=_expect(ui_raw.get("rich", True), bool, "ui.rich"))
    return AppConfig(reader=_load_reader(reader_raw), ui=ui, path=Path(path).resolve())
