# -*- coding: utf-8 -*-
"""User defaults for Select By Level, stored in the pyRevit config section."""

CONFIG_SECTION = "select_by_level_config"

TRUE_VALUES = [True, "True", "true", "1", 1, "yes", "Yes"]
FALSE_VALUES = [False, "False", "false", "0", 0, "no", "No"]


def _as_bool(value, default, logger=None):
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    if logger:
        logger.debug("Unreadable flag value {!r}; using {}".format(value, default))
    return default


class SelectByLevelSettings(object):
    DEFAULTS = {
        "select_by_level": True,
        "select_by_reference_level": False,
        "remember_last_level": False,
        "last_level_name": "",
    }

    BOOL_KEYS = ("select_by_level", "select_by_reference_level", "remember_last_level")

    def __init__(self, values=None, logger=None):
        values = values or {}
        self._values = {}
        for key, default in self.DEFAULTS.items():
            value = values.get(key, default)
            if key in self.BOOL_KEYS:
                value = _as_bool(value, default, logger)
            elif value is None:
                value = default
            self._values[key] = value

    def get(self, key):
        return self._values.get(key)

    def set(self, key, value):
        if key not in self.DEFAULTS:
            raise KeyError("Unknown setting: {}".format(key))
        if key in self.BOOL_KEYS:
            value = bool(value)
        self._values[key] = value

    def to_dict(self):
        return dict(self._values)

    @property
    def select_by_level(self):
        return self._values["select_by_level"]

    @property
    def select_by_reference_level(self):
        return self._values["select_by_reference_level"]

    @property
    def remember_last_level(self):
        return self._values["remember_last_level"]

    @property
    def last_level_name(self):
        return self._values["last_level_name"]

    # ------------- config section ------------
    @classmethod
    def from_config(cls, config, logger=None):
        """Read every key from a pyRevit config section (``get_option``)."""
        values = {}
        for key, default in cls.DEFAULTS.items():
            values[key] = config.get_option(key, default)
        return cls(values, logger=logger)

    def apply_to_config(self, config):
        for key, value in self._values.items():
            setattr(config, key, value)
        return config

    # ------------- helpers -------------------
    def remember(self, criteria):
        """Keep the flags of a successful run, and the level when asked to."""
        self.set("select_by_level", criteria.by_level)
        self.set("select_by_reference_level", criteria.by_reference_level)
        if self.remember_last_level:
            self.set("last_level_name", criteria.level_name)

    def initial_level_index(self, levels):
        """Index of the level the dialog should pre-select."""
        if not levels:
            return -1
        if self.remember_last_level and self.last_level_name:
            for index, level in enumerate(levels):
                if level.name == self.last_level_name:
                    return index
        return 0
