# src/config.py
import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join('data', 'config.json')

DEFAULT_RULES = {
    "grid_width": 16,
    "grid_height": 16,
    "block_size": 16,
    "update_interval": 0.7,
    "initial_time": 20.0,
    "apple_spawn_chance": 20,   # one in N ticks
    "time_bonus": 8.0,
    "bonus_decay_every": 8,
    "initial_snake": [[6, 10], [5, 10], [4, 10]],
    "initial_direction": "right",
    "session_timeout": 30.0,    # seconds before an unused web session is dropped
}

DIRECTION_NAMES = ("up", "right", "down", "left")


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _positive_int(value):
    return _is_int(value) and value > 0


def _positive_number(value):
    return _is_number(value) and value > 0


def _snake(value):
    if not isinstance(value, list) or not value:
        return False
    return all(isinstance(p, (list, tuple)) and len(p) == 2 and all(_is_int(c) for c in p)
               for p in value)


def _direction(value):
    return isinstance(value, str) and value.strip().lower() in DIRECTION_NAMES


# Checks each rule must pass; a failing value is replaced by the default
VALIDATORS = {
    "grid_width": _positive_int,
    "grid_height": _positive_int,
    "block_size": _positive_int,
    "update_interval": _positive_number,
    "initial_time": _positive_number,
    "apple_spawn_chance": _positive_int,
    "time_bonus": _is_number,
    "bonus_decay_every": _positive_int,
    "initial_snake": _snake,
    "initial_direction": _direction,
    "session_timeout": _positive_number,
}


def default_config():
    """Return a fresh copy of the built-in rules."""
    return {key: (list(map(list, value)) if key == 'initial_snake' else value)
            for key, value in DEFAULT_RULES.items()}


def load_config(path=None):
    """
    Reads the rules block of a JSON config file and merges it over the defaults.
    The path defaults to $SNAKE_CONFIG, then data/config.json.
    Unknown keys and invalid values are logged and ignored.
    """
    path = path or os.getenv('SNAKE_CONFIG', DEFAULT_CONFIG_PATH)
    config = default_config()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Config file not found: {path}, using defaults")
        return config
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}, using defaults")
        return config

    rules = raw.get('rules', {}) if isinstance(raw, dict) else {}
    if not isinstance(rules, dict):
        logger.warning(f"'rules' in {path} is not an object, using defaults")
        return config

    for key, value in rules.items():
        if key not in config:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        if not VALIDATORS[key](value):
            logger.warning(f"Invalid value for {key}: {value!r}, keeping default {config[key]!r}")
            continue
        config[key] = value

    logger.info(f"Loaded config from {path}")
    return config
