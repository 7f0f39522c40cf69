"""
Configuration Loader - YAML Files to FormConfig.

A config file may have profile overlays stored next to it, named after
the file and the profile:

    forms.yaml           # shared settings
    forms.strict.yaml    # merged over forms.yaml for profile="strict"

Loaded configs are attached to Form classes with bind_config():

    @bind_config(load_config("forms.yaml", profile="strict"))
    class SignupForm(Form):
        ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypeVar, Union

import yaml

from formnest.config.models import FormConfig, deep_merge

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


class ConfigLoader:
    """Reads YAML config files and their profile overlays."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory relative config paths are resolved against
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> FormConfig:
        """
        Load a config file, with an optional profile overlay.

        Args:
            config_path: YAML file, absolute or relative to base_path
            profile: Overlay read from <stem>.<profile>.yaml beside the file

        Returns:
            Validated FormConfig object

        Raises:
            FileNotFoundError: If the file or the profile overlay is missing
            ValueError: If a file does not hold a mapping
            pydantic.ValidationError: If the merged settings are invalid
        """
        path = self._resolve_path(config_path)
        settings = self._read(path)

        if profile:
            overlay_path = self.profile_path(path, profile)
            if not overlay_path.is_file():
                raise FileNotFoundError(f"Profile not found: {profile} ({overlay_path})")
            settings = deep_merge(settings, self._read(overlay_path))

        logger.debug(f"Loaded config from {path} (profile={profile})")
        return self.load_from_dict(settings)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> FormConfig:
        """Validate an already parsed settings mapping."""
        return FormConfig.model_validate(config_dict)

    @staticmethod
    def profile_path(path: Path, profile: str) -> Path:
        """Overlay file for `profile`: forms.yaml -> forms.<profile>.yaml."""
        return path.with_name(f"{path.stem}.{profile}{path.suffix}")

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _read(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
        return data


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> FormConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated FormConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, profile)


def bind_config(config: FormConfig) -> Callable[[T], T]:
    """
    Class decorator setting `Form.config` on a Form subclass.

    Entries under `forms:` whose key is the class name are merged in, so
    one file can tune several form classes.
    """

    def decorator(form_class: T) -> T:
        form_class.config = config.for_form(form_class.__name__)  # type: ignore[attr-defined]
        logger.debug(f"Bound config to {form_class.__name__}")
        return form_class

    return decorator
