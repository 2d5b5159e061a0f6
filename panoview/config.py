import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

import yaml

from panoview.constants import (
    COMPASS_BG_COLOR,
    COMPASS_MARGIN,
    COMPASS_RING_COLOR,
    COMPASS_SIZE,
    COMPASS_SLICE_COLOR,
    DEFAULT_START_ANGLE,
    PAN_SPEED,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ('1', 'true', 'yes', 'on')


def _as_bool(value, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _as_color(value, default):
    try:
        rgba = [float(c) for c in value]
    except (TypeError, ValueError):
        return default
    if len(rgba) == 3:
        rgba.append(1.0)
    if len(rgba) != 4:
        return default
    return tuple(max(0.0, min(1.0, c)) for c in rgba)


def _section(data: dict, name: str) -> dict:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("[config] %s settings ignored: expected a mapping, got %r", name, value)
        return {}
    return value


@dataclass
class CompassConfig:
    enabled: bool = True
    size: float = COMPASS_SIZE
    margin: float = COMPASS_MARGIN
    anchor: str = "top-right"
    slice_color: Tuple[float, float, float, float] = COMPASS_SLICE_COLOR
    ring_color: Tuple[float, float, float, float] = COMPASS_RING_COLOR
    bg_color: Tuple[float, float, float, float] = COMPASS_BG_COLOR


@dataclass
class ViewerConfig:
    image: Optional[str] = None
    start_angle: float = DEFAULT_START_ANGLE
    pan_speed: Tuple[float, float] = PAN_SPEED
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    title: str = WINDOW_TITLE
    fullscreen: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None
    compass: CompassConfig = field(default_factory=CompassConfig)


def config_from_dict(data: dict, base_dir: str = ".") -> ViewerConfig:
    cfg = ViewerConfig()
    data = data or {}

    image = data.get('image')
    if image:
        image = os.path.expanduser(str(image))
        cfg.image = image if os.path.isabs(image) else os.path.join(base_dir, image)

    view = _section(data, 'view')
    try:
        if 'start_angle' in view:
            cfg.start_angle = float(view['start_angle'])
        if 'pan_speed' in view:
            sx, sy = view['pan_speed']
            cfg.pan_speed = (float(sx), float(sy))
    except (TypeError, ValueError) as e:
        logger.warning("[config] view settings ignored: %s", e)

    window = _section(data, 'window')
    try:
        if 'width' in window:
            cfg.width = max(1, int(window['width']))
        if 'height' in window:
            cfg.height = max(1, int(window['height']))
    except (TypeError, ValueError) as e:
        logger.warning("[config] window size ignored: %s", e)
    if 'title' in window:
        cfg.title = str(window['title'])
    cfg.fullscreen = _as_bool(window.get('fullscreen'), cfg.fullscreen)

    log = data.get('logging')
    if isinstance(log, str):
        # shorthand: "logging: DEBUG"
        log = {'level': log}
    log = _section({'logging': log}, 'logging')
    if 'level' in log:
        cfg.log_level = str(log['level'])
    if log.get('file'):
        cfg.log_file = str(log['file'])

    cc = data.get('compass')
    if isinstance(cc, (bool, str)):
        cfg.compass.enabled = _as_bool(cc, True)
    elif isinstance(cc, dict):
        comp = cfg.compass
        comp.enabled = _as_bool(cc.get('enabled'), comp.enabled)
        try:
            if 'size' in cc:
                comp.size = max(8.0, float(cc['size']))
            if 'margin' in cc:
                comp.margin = max(0.0, float(cc['margin']))
        except (TypeError, ValueError) as e:
            logger.warning("[config] compass size ignored: %s", e)
        anchor = str(cc.get('anchor', comp.anchor))
        if anchor in ("top-left", "top-right", "bottom-left", "bottom-right"):
            comp.anchor = anchor
        else:
            logger.warning("[config] unknown compass anchor %r, using %s", anchor, comp.anchor)
        comp.slice_color = _as_color(cc.get('slice_color'), comp.slice_color)
        comp.ring_color = _as_color(cc.get('ring_color'), comp.ring_color)
        comp.bg_color = _as_color(cc.get('bg_color'), comp.bg_color)

    return cfg


def load_config(path: Optional[str]) -> ViewerConfig:
    """Read a viewer YAML file. No path means defaults; a missing file is an error."""
    if not path:
        return ViewerConfig()
    if not os.path.exists(path):
        raise RuntimeError(f"Config file {path} not found.")

    with open(path, 'r') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise RuntimeError(f"Config file {path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        logger.warning("[config] %s has no mapping at top level; using defaults", path)
        data = {}

    base_dir = os.path.dirname(os.path.abspath(path))
    return config_from_dict(data, base_dir=base_dir)
