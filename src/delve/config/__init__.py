from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..errors import ConfigError
from ..fov.fov import FovAlgorithm

logger = logging.getLogger(__name__)

ENV_PREFIX = "DELVE_"


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey values ("1", "yes", "off", ...) into a bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off", ""}:
            return False
    raise ConfigError(f"Cannot interpret {value!r} as a boolean")


@dataclass
class MapSettings:
    width: int = 80
    height: int = 45
    max_rooms: int = 30
    room_min_size: int = 6
    room_max_size: int = 10
    # raise instead of warn when no room could be placed
    strict: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError("map width/height must be > 0")
        if self.max_rooms < 0:
            raise ConfigError("max_rooms must be >= 0")
        if not (1 <= self.room_min_size <= self.room_max_size):
            raise ConfigError("room sizes must satisfy 1 <= room_min_size <= room_max_size")


@dataclass
class FovSettings:
    radius: int = 10
    light_walls: bool = True
    algorithm: str = FovAlgorithm.LINE_OF_SIGHT.value

    def __post_init__(self) -> None:
        try:
            self.algorithm = FovAlgorithm(self.algorithm).value
        except ValueError:
            raise ConfigError(f"Unknown FOV algorithm: {self.algorithm!r}") from None


@dataclass
class DisplaySettings:
    tile_px: int = 16
    title: str = "Delve"

    def __post_init__(self) -> None:
        if self.tile_px <= 0:
            raise ConfigError("tile_px must be > 0")


@dataclass
class Settings:
    """Runtime settings for map generation, vision and display.

    Built from, in increasing precedence:
    - the packaged ``default_settings.yaml``
    - an optional user YAML file
    - environment variables (prefix ``DELVE_``)
    """

    seed: Optional[int] = None
    map: MapSettings = field(default_factory=MapSettings)
    fov: FovSettings = field(default_factory=FovSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as ex:
            raise ConfigError(f"Invalid YAML in {path}: {ex}") from ex
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @staticmethod
    def _section(cls_: type, data: Mapping[str, Any], name: str) -> Any:
        raw = dict(data.get(name) or {})
        known = {f.name for f in dataclasses.fields(cls_)}
        unknown = set(raw) - known
        if unknown:
            logger.warning("Ignoring unknown %s settings: %s", name, sorted(unknown))
        try:
            return cls_(**{k: v for k, v in raw.items() if k in known})
        except TypeError as ex:
            raise ConfigError(f"Invalid {name} settings: {ex}") from ex

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        seed = data.get("seed")
        if seed is not None:
            try:
                seed = int(seed)
            except (TypeError, ValueError):
                raise ConfigError(f"seed must be an integer, got {seed!r}") from None
        return cls(
            seed=seed,
            map=cls._section(MapSettings, data, "map"),
            fov=cls._section(FovSettings, data, "fov"),
            display=cls._section(DisplaySettings, data, "display"),
        )

    @staticmethod
    def env_overrides(environ: Optional[Mapping[str, str]] = None) -> dict:
        """Collect overrides from DELVE_* environment variables as a nested dict."""
        env = os.environ if environ is None else environ
        table = {
            "SEED": (None, "seed", int),
            "WIDTH": ("map", "width", int),
            "HEIGHT": ("map", "height", int),
            "MAX_ROOMS": ("map", "max_rooms", int),
            "TORCH_RADIUS": ("fov", "radius", int),
            "LIGHT_WALLS": ("fov", "light_walls", _as_bool),
            "FOV_ALGO": ("fov", "algorithm", str),
        }
        out: Dict[str, Any] = {}
        for suffix, (section, key, conv) in table.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw is None or raw == "":
                continue
            try:
                value = conv(raw)
            except ValueError as ex:
                raise ConfigError(f"Invalid value for {ENV_PREFIX}{suffix}: {raw!r}") from ex
            if section is None:
                out[key] = value
            else:
                out.setdefault(section, {})[key] = value
        return out

    @classmethod
    def load(cls, user_path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        try:
            with resources.files("delve.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if not user_path.exists():
                raise ConfigError(f"Settings file not found: {user_path}")
            user_data = cls._load_yaml(user_path)
            logger.info("Loaded user settings from %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        merged = cls._deep_merge(merged, cls.env_overrides(environ))
        settings = cls.from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


__all__ = ["DisplaySettings", "FovSettings", "MapSettings", "Settings"]
