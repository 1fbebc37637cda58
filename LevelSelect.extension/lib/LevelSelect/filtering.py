# -*- coding: utf-8 -*-
"""Pure filters deciding which element records belong to a level."""

from LevelSelect.models.selection import SelectionResult


def filter_by_level(records, level_id):
    """Records placed on the given level."""
    if level_id is None:
        return []
    return [rec for rec in records if rec.level_id is not None and rec.level_id == level_id]


def filter_by_reference_level(records, level_id):
    """Records whose reference level is the given level."""
    if level_id is None:
        return []
    return [
        rec for rec in records
        if rec.reference_level_id is not None and rec.reference_level_id == level_id
    ]


def _unique(records):
    seen = set()
    unique = []
    for rec in records:
        if rec.element_id in seen:
            continue
        seen.add(rec.element_id)
        unique.append(rec)
    return unique


def collect_matching_records(records, criteria):
    """Union of the enabled filters, first occurrence wins."""
    criteria.ensure_valid()
    records = list(records)
    matched = []
    if criteria.by_level:
        matched.extend(filter_by_level(records, criteria.level_id))
    if criteria.by_reference_level:
        matched.extend(filter_by_reference_level(records, criteria.level_id))
    return _unique(matched)


def matching_element_ids(records, criteria):
    return [rec.element_id for rec in collect_matching_records(records, criteria)]


def build_result(records, criteria):
    return SelectionResult(criteria, collect_matching_records(records, criteria))
