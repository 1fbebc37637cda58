# -*- coding: utf-8 -*-
from System.Collections.Generic import List
from pyrevit import DB

from LevelSelect import filtering
from LevelSelect.services.revit_reader import ElementRecordReader


class SelectByLevelRunner(object):
    """Finds the elements for a level and makes them the active selection."""

    def __init__(self, doc, uidoc, logger=None):
        self.doc = doc
        self.uidoc = uidoc
        self.logger = logger
        self.reader = ElementRecordReader(doc, logger)

    def find(self, criteria):
        criteria.ensure_valid()
        candidates = self.reader.collect(criteria)
        return filtering.build_result(candidates, criteria)

    def apply_selection(self, result):
        ids = List[DB.ElementId](result.host_ids)
        self.uidoc.Selection.SetElementIds(ids)

    def run(self, criteria):
        result = self.find(criteria)
        self.apply_selection(result)
        if self.logger:
            self.logger.info(result.summary())
        return result
