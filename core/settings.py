# -*- coding: utf-8 -*-
# core/settings.py
import json
import logging
import os

from core import config


def _settings_path():
    return config.SETTINGS_FILE


def _read_all():
    path = _settings_path()
    if not os.path.exists(path):
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logging.warning(f"Failed to read settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logging.warning(f"Ignoring settings file {path}: top level is not an object")
        return {}
    return data


def load_setting(key, default=None):
    """
    读取一个设置项。
    文件里没有时依次回落到调用方给的 default 和 DEFAULT_SETTINGS。
    """
    data = _read_all()
    if key in data:
        return data[key]
    if default is not None:
        return default
    return config.DEFAULT_SETTINGS.get(key)


def save_setting(key, value):
    data = _read_all()
    data[key] = value
    path = _settings_path()
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logging.debug(f"Saved setting {key!r} to {path}")
