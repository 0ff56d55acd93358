"""
Import Configuration Module

Loads import settings from environment variables (optionally from a .env
file) or from a YAML profile.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
try:
    env_path = Path.cwd() / '.env'
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
except (PermissionError, OSError):
    pass


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class ImportConfig:
    """Settings for one import pipeline.

    Attributes:
        enhance: Append Positive/Negative/Edge Case variants to each base record
        inherit_titles: Let untitled continuation rows join the preceding test case
        prerequisite_keywords: Override for prerequisite detection (None = defaults)
        log_level: Logging level name for the pipeline logger
        log_to_console: Emit JSON log lines to stdout
        area_path: Area path written by the CSV export
        assigned_to: Assignee written by the CSV export
        default_state: State written by the CSV export
    """
    enhance: bool = True
    inherit_titles: bool = False
    prerequisite_keywords: Optional[List[str]] = None
    log_level: str = "INFO"
    log_to_console: bool = True
    area_path: str = ""
    assigned_to: str = ""
    default_state: str = "Design"

    @classmethod
    def from_env(cls) -> 'ImportConfig':
        """Create config from environment variables."""
        return cls(
            enhance=_env_bool("IMPORT_ENHANCE", True),
            inherit_titles=_env_bool("IMPORT_INHERIT_TITLES", False),
            log_level=os.getenv("IMPORT_LOG_LEVEL", "INFO").upper(),
            log_to_console=_env_bool("IMPORT_LOG_CONSOLE", True),
            area_path=os.getenv("CSV_AREA_PATH", ""),
            assigned_to=os.getenv("CSV_ASSIGNED_TO", ""),
            default_state=os.getenv("CSV_DEFAULT_STATE", "Design")
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ImportConfig':
        """Create config from a dictionary, falling back to environment values.

        Args:
            data: Mapping with any of the ImportConfig attribute names. An
                optional nested ``export`` section may carry area_path,
                assigned_to and default_state.

        Returns:
            ImportConfig instance
        """
        base = cls.from_env()
        data = dict(data or {})
        export = data.pop('export', None) or {}

        keywords = data.get('prerequisite_keywords', base.prerequisite_keywords)
        if keywords is not None:
            if not isinstance(keywords, list):
                raise ValueError("prerequisite_keywords must be a list of strings")
            keywords = [str(k).lower() for k in keywords if str(k).strip()]

        return cls(
            enhance=bool(data.get('enhance', base.enhance)),
            inherit_titles=bool(data.get('inherit_titles', base.inherit_titles)),
            prerequisite_keywords=keywords,
            log_level=str(data.get('log_level', base.log_level)).upper(),
            log_to_console=bool(data.get('log_to_console', base.log_to_console)),
            area_path=export.get('area_path', data.get('area_path', base.area_path)),
            assigned_to=export.get('assigned_to', data.get('assigned_to', base.assigned_to)),
            default_state=export.get('default_state', data.get('default_state', base.default_state))
        )

    @classmethod
    def load_from_yaml(cls, yaml_path: str) -> 'ImportConfig':
        """Load configuration from a YAML profile."""
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Import profile must be a mapping: {yaml_path}")
        return cls.from_dict(data)
