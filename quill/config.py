"""
Configuration — Centralized settings management

Config hierarchy (highest to lowest priority):
  1. Environment variables
  2. Project config (.quill/config.yaml)
  3. User config (~/.quill/config.yaml)
  4. Defaults

Settings only supply defaults for the CLI and for callers that want
them. The core transformations never read configuration themselves.
"""

import logging
import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from .core.accents import AccentTable, get_accent_table
from .core.limits import DEFAULT_WORD_LIMIT, DEFAULT_CHAR_LIMIT, DEFAULT_END_CHAR
from .core.matcher import DEFAULT_OPEN_TAG, DEFAULT_CLOSE_TAG
from .core.wrap import DEFAULT_WIDTH


logger = logging.getLogger(__name__)


def _parse_positive_int(value: Any) -> Optional[int]:
    """Return value as a positive int, or None."""
    if isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


@dataclass
class WrapConfig:
    """Word wrap preferences."""
    width: int = DEFAULT_WIDTH

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if _parse_positive_int(self.width) is None:
            return f"Invalid wrap width '{self.width}'. Must be a positive integer"
        return None


@dataclass
class LimitsConfig:
    """Truncation preferences."""
    words: int = DEFAULT_WORD_LIMIT
    characters: int = DEFAULT_CHAR_LIMIT
    end_char: str = DEFAULT_END_CHAR

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if _parse_positive_int(self.words) is None:
            return f"Invalid word limit '{self.words}'. Must be a positive integer"
        if _parse_positive_int(self.characters) is None:
            return f"Invalid character limit '{self.characters}'. Must be a positive integer"
        return None


@dataclass
class CensorConfig:
    """Censorship preferences."""
    replacement: str = ""  # Empty = mask with '#'
    words: List[str] = field(default_factory=list)


@dataclass
class HighlightConfig:
    """Highlight tag preferences."""
    open_tag: str = DEFAULT_OPEN_TAG
    close_tag: str = DEFAULT_CLOSE_TAG

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not self.open_tag or not self.close_tag:
            return "Highlight tags must not be empty"
        return None


@dataclass
class AccentsConfig:
    """Transliteration table location."""
    table: Optional[str] = None  # None = bundled table

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.table and not Path(self.table).expanduser().exists():
            return f"Accent table not found: {self.table}"
        return None

    def load_table(self) -> AccentTable:
        """Configured table, or the shared bundled one."""
        if self.table:
            return AccentTable.from_yaml(Path(self.table).expanduser())
        return get_accent_table()


@dataclass
class Config:
    """Application configuration."""
    wrap: WrapConfig = field(default_factory=WrapConfig)
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    censor: CensorConfig = field(default_factory=CensorConfig)
    highlight: HighlightConfig = field(default_factory=HighlightConfig)
    accents: AccentsConfig = field(default_factory=AccentsConfig)

    def validate(self) -> Optional[str]:
        """Validate every section. Returns the first error or None."""
        for section in (self.wrap, self.limits, self.highlight, self.accents):
            error = section.validate()
            if error:
                return error
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "wrap": {
                "width": self.wrap.width
            },
            "limits": {
                "words": self.limits.words,
                "characters": self.limits.characters,
                "end_char": self.limits.end_char
            },
            "censor": {
                "replacement": self.censor.replacement,
                "words": list(self.censor.words)
            },
            "highlight": {
                "open_tag": self.highlight.open_tag,
                "close_tag": self.highlight.close_tag
            },
            "accents": {
                "table": self.accents.table
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary. Unusable values fall back to defaults."""
        wrap_data = data.get("wrap") or {}
        limits_data = data.get("limits") or {}
        censor_data = data.get("censor") or {}
        highlight_data = data.get("highlight") or {}
        accents_data = data.get("accents") or {}

        words = censor_data.get("words") or []
        if not isinstance(words, list):
            words = []

        return cls(
            wrap=WrapConfig(
                width=_parse_positive_int(wrap_data.get("width")) or DEFAULT_WIDTH
            ),
            limits=LimitsConfig(
                words=_parse_positive_int(limits_data.get("words")) or DEFAULT_WORD_LIMIT,
                characters=_parse_positive_int(limits_data.get("characters")) or DEFAULT_CHAR_LIMIT,
                end_char=str(limits_data.get("end_char", DEFAULT_END_CHAR))
            ),
            censor=CensorConfig(
                replacement=str(censor_data.get("replacement") or ""),
                words=[str(w) for w in words if w]
            ),
            highlight=HighlightConfig(
                open_tag=highlight_data.get("open_tag") or DEFAULT_OPEN_TAG,
                close_tag=highlight_data.get("close_tag") or DEFAULT_CLOSE_TAG
            ),
            accents=AccentsConfig(
                table=accents_data.get("table")
            )
        )


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment (QUILL_WRAP_WIDTH, QUILL_END_CHAR, QUILL_ACCENT_TABLE)
      2. Project config (.quill/config.yaml)
      3. User config (~/.quill/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".quill"
    USER_CONFIG_FILE = USER_CONFIG_DIR / "config.yaml"
    PROJECT_CONFIG_DIR = ".quill"
    PROJECT_CONFIG_FILE = "config.yaml"

    # Environment variable -> (section, setting)
    ENV_OVERRIDES = {
        "QUILL_WRAP_WIDTH": ("wrap", "width"),
        "QUILL_END_CHAR": ("limits", "end_char"),
        "QUILL_ACCENT_TABLE": ("accents", "table"),
    }

    # Settable keys per section
    SETTINGS = {
        "wrap": ("width",),
        "limits": ("words", "characters", "end_char"),
        "censor": ("replacement", "words"),
        "highlight": ("open_tag", "close_tag"),
        "accents": ("table",),
    }

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.USER_CONFIG_FILE

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read one YAML layer. Malformed files are ignored."""
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring malformed config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: not a mapping", path)
            return {}
        return data

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        # Start with defaults
        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        for env_key, (section, setting) in self.ENV_OVERRIDES.items():
            if os.environ.get(env_key):
                config_data.setdefault(section, {})[setting] = os.environ[env_key]

        self._config = Config.from_dict(config_data)
        return self._config

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self.project_config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.project_config_path, 'w', encoding="utf-8") as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, allow_unicode=True)

        self._config = config

    def save_user(self, config: Config):
        """Save configuration to user config file."""
        self.user_config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.user_config_path, 'w', encoding="utf-8") as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, allow_unicode=True)

        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "wrap.width")
            value: Value to set (censor.words takes a comma-separated list)
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'wrap.width')"

        section, setting = parts

        if section not in self.SETTINGS:
            return f"Unknown section: {section}. Valid: {', '.join(self.SETTINGS)}"
        if setting not in self.SETTINGS[section]:
            valid = ", ".join(self.SETTINGS[section])
            return f"Unknown {section} setting: {setting}. Valid: {valid}"

        target = getattr(config, section)

        if (section, setting) in (("wrap", "width"), ("limits", "words"), ("limits", "characters")):
            number = _parse_positive_int(value)
            if number is None:
                return f"Invalid value '{value}' for {key}. Must be a positive integer"
            setattr(target, setting, number)
        elif (section, setting) == ("censor", "words"):
            target.words = [w.strip() for w in value.split(",") if w.strip()]
        elif (section, setting) == ("accents", "table"):
            target.table = value or None
        else:
            setattr(target, setting, value)

        error = config.validate()
        if error:
            self._config = None
            return error

        if scope == "project":
            self.save_project(config)
        else:
            self.save_user(config)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value as display text."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts
        if setting not in self.SETTINGS.get(section, ()):
            return None

        value = getattr(getattr(config, section), setting)
        if isinstance(value, list):
            return ", ".join(value)
        return None if value is None else str(value)

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()

        banned = ", ".join(config.censor.words) if config.censor.words else "(none)"
        lines = [
            "Configuration:",
            "",
            "Wrap:",
            f"  Width: {config.wrap.width}",
            "",
            "Limits:",
            f"  Words: {config.limits.words}",
            f"  Characters: {config.limits.characters}",
            f"  End char: {config.limits.end_char}",
            "",
            "Censor:",
            f"  Replacement: {config.censor.replacement or '(mask with #)'}",
            f"  Words: {banned}",
            "",
            "Highlight:",
            f"  Open tag: {config.highlight.open_tag}",
            f"  Close tag: {config.highlight.close_tag}",
            "",
            "Accents:",
            f"  Table: {config.accents.table or '(bundled)'}",
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ]

        return "\n".join(lines)


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
