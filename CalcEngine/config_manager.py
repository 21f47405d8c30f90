# config_manager.py
import sys
import json
from pathlib import Path

from . import error as E

# Resolve project root depending on run mode (Script or .exe)
if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent.parent

config_json = PROJECT_ROOT / "config.json"


DEFAULT_SETTINGS = {
    "decimal_places": 8,
    "zero_threshold": 1e-10,
    "signed_infinity": False,
    "history_size": 50,
    "after_paste_enter": True,
    "debug": False,
}

# key -> (accepted types, smallest allowed value or None)
SETTING_TYPES = {
    "decimal_places": ((int,), 0),
    "zero_threshold": ((int, float), 0),
    "signed_infinity": ((bool,), None),
    "history_size": ((int,), 1),
    "after_paste_enter": ((bool,), None),
    "debug": ((bool,), None),
}



def load_setting_value(key_value, path=None):
    """Return one setting, or the complete settings dict for "all".

    Missing or corrupt files fall back to DEFAULT_SETTINGS; a file that exists
    but cannot be read raises ConfigurationError.
    """
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(path or config_json, 'r', encoding='utf-8') as f:
            stored = json.load(f)
        if isinstance(stored, dict):
            settings_dict.update(stored)

    except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError):
        pass
    except OSError as e:
        raise E.ConfigurationError(f"Cannot read settings file: {e}", code="5001")


    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, DEFAULT_SETTINGS.get(key_value))


def validate_settings(settings_dict):
    for key, value in settings_dict.items():
        if key not in SETTING_TYPES:
            raise E.ConfigurationError(f"Unknown setting: {key}", code="5001")

        types, minimum = SETTING_TYPES[key]
        # bool is an int subclass; only accept it where a bool is wanted
        if isinstance(value, bool) and bool not in types:
            raise E.ConfigurationError(f"Invalid value for {key}: {value!r}", code="5001")
        if not isinstance(value, types):
            raise E.ConfigurationError(f"Invalid value for {key}: {value!r}", code="5001")
        if minimum is not None and value < minimum:
            raise E.ConfigurationError(f"{key} must be at least {minimum}", code="5001")
    return settings_dict


def parse_setting(assignment):
    """Turn a 'key=value' string into a (key, value) pair with the right type."""
    if "=" not in assignment:
        raise E.ConfigurationError(f"Expected key=value, got: {assignment}", code="5001")
    key, raw = (part.strip() for part in assignment.split("=", 1))

    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    validate_settings({key: value})
    return key, value


def save_setting(settings_dict, path=None):
    validate_settings(settings_dict)
    try:
        with open(path or config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
    except OSError as e:
        raise E.ConfigurationError(f"Not all Settings could be saved: {e}", code="5001")
    return settings_dict
