# -*- coding: utf-8 -*-
from pyrevit import DB
from pyrevit.compat import get_elementid_value_func

from LevelSelect.models.selection import ElementRecord, LevelOption

get_id_value = get_elementid_value_func()


def _id_value(element_id):
    if element_id is None or element_id == DB.ElementId.InvalidElementId:
        return None
    return get_id_value(element_id)


class LevelProvider(object):
    """Reads the levels of a document as LevelOption objects."""

    def __init__(self, doc):
        self.doc = doc

    def levels(self):
        collector = DB.FilteredElementCollector(self.doc).OfClass(DB.Level)
        options = [
            LevelOption(
                level_id=get_id_value(level.Id),
                name=level.Name,
                elevation=level.Elevation,
                element=level,
            )
            for level in collector
        ]
        return sorted(options, key=lambda opt: (opt.elevation, opt.name))


class ElementRecordReader(object):
    """Collects candidate elements for a level from the document."""

    def __init__(self, doc, logger=None):
        self.doc = doc
        self.logger = logger

    def records_on_level(self, level):
        host_level_id = level.element.Id
        collector = DB.FilteredElementCollector(self.doc).WherePasses(
            DB.ElementLevelFilter(host_level_id)
        )
        records = []
        for element in collector:
            records.append(ElementRecord(
                element_id=get_id_value(element.Id),
                level_id=_id_value(element.LevelId),
                host_id=element.Id,
            ))
        if self.logger:
            self.logger.debug("{} elements placed on level '{}'".format(len(records), level.name))
        return records

    def records_with_reference_level(self):
        collector = DB.FilteredElementCollector(self.doc).OfClass(DB.MEPCurve)
        records = []
        for curve in collector:
            ref_level = curve.ReferenceLevel
            records.append(ElementRecord(
                element_id=get_id_value(curve.Id),
                level_id=_id_value(curve.LevelId),
                reference_level_id=_id_value(ref_level.Id) if ref_level else None,
                host_id=curve.Id,
            ))
        if self.logger:
            self.logger.debug("{} MEP curves in model".format(len(records)))
        return records

    def collect(self, criteria):
        """Candidate records for the enabled criteria, level matches first."""
        records = []
        if criteria.by_level:
            records.extend(self.records_on_level(criteria.level))
        if criteria.by_reference_level:
            records.extend(self.records_with_reference_level())
        return records
