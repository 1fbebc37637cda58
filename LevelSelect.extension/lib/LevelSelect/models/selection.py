# -*- coding: utf-8 -*-
"""Data-only classes describing a select-by-level request and its outcome."""


class SelectionCriteriaError(Exception):
    """Raised when filtering is attempted without a level or a criterion."""


class LevelOption(object):
    """A host Level reduced to what the dialog and filters need."""

    def __init__(self, level_id, name, elevation=None, element=None):
        self.level_id = level_id
        self.name = name or ""
        self.elevation = elevation
        self.element = element

    @property
    def label(self):
        return self.name

    def __repr__(self):
        return "LevelOption({!r}, {!r})".format(self.level_id, self.name)


class ElementRecord(object):
    """Candidate element with its level and optional reference level ids."""

    def __init__(self, element_id, level_id=None, reference_level_id=None, host_id=None):
        self.element_id = element_id
        self.level_id = level_id
        self.reference_level_id = reference_level_id
        # ElementId handed back to Revit; tests leave it unset
        self.host_id = host_id

    def __repr__(self):
        return "ElementRecord({!r}, level={!r}, ref={!r})".format(
            self.element_id, self.level_id, self.reference_level_id
        )


class SelectionCriteria(object):
    """Level plus the two selection flags chosen for one invocation."""

    MISSING_LEVEL = "Please select a level."
    MISSING_OPTION = "Please select at least one option (Level or Reference Level)."

    def __init__(self, level=None, by_level=True, by_reference_level=False):
        self.level = level
        self.by_level = bool(by_level)
        self.by_reference_level = bool(by_reference_level)

    @property
    def level_id(self):
        if self.level is None:
            return None
        return self.level.level_id

    @property
    def level_name(self):
        if self.level is None:
            return ""
        return self.level.name

    def validation_error(self):
        """Return the message to show the user, or None when valid."""
        if self.level is None:
            return self.MISSING_LEVEL
        if not (self.by_level or self.by_reference_level):
            return self.MISSING_OPTION
        return None

    def is_valid(self):
        return self.validation_error() is None

    def ensure_valid(self):
        error = self.validation_error()
        if error:
            raise SelectionCriteriaError(error)
        return self


class SelectionResult(object):
    """Records matched for a set of criteria."""

    def __init__(self, criteria, records=None):
        self.criteria = criteria
        self.records = list(records or [])

    @property
    def count(self):
        return len(self.records)

    @property
    def element_ids(self):
        return [rec.element_id for rec in self.records]

    @property
    def host_ids(self):
        return [rec.host_id for rec in self.records if rec.host_id is not None]

    def summary(self):
        name = self.criteria.level_name
        if self.criteria.by_level and self.criteria.by_reference_level:
            return "Selected {} elements on level '{}' and reference level '{}'.".format(
                self.count, name, name
            )
        if self.criteria.by_level:
            return "Selected {} elements on level '{}'.".format(self.count, name)
        if self.criteria.by_reference_level:
            return "Selected {} elements on reference level '{}'.".format(self.count, name)
        return ""
