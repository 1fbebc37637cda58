# -*- coding: utf-8 -*-
import os

from pyrevit import forms

from LevelSelect.models.selection import SelectionCriteria


class LevelSelectorWindow(forms.WPFWindow):
    """Modal dialog collecting a level and the two selection flags."""

    def __init__(self, levels, settings):
        xaml_path = os.path.join(os.path.dirname(__file__), 'level_selector.xaml')
        forms.WPFWindow.__init__(self, xaml_path)
        self.levels = list(levels)
        self.settings = settings
        self.criteria = None

        for level in self.levels:
            self.LevelCombo.Items.Add(level.label)
        self.LevelCombo.SelectedIndex = settings.initial_level_index(self.levels)
        self.ByLevelCheck.IsChecked = settings.select_by_level
        self.ByReferenceLevelCheck.IsChecked = settings.select_by_reference_level

        self.SelectButton.Click += self._on_select
        self.CancelButton.Click += self._on_cancel

    def _selected_level(self):
        index = self.LevelCombo.SelectedIndex
        if index is None or index < 0 or index >= len(self.levels):
            return None
        return self.levels[index]

    def _read_criteria(self):
        return SelectionCriteria(
            level=self._selected_level(),
            by_level=bool(self.ByLevelCheck.IsChecked),
            by_reference_level=bool(self.ByReferenceLevelCheck.IsChecked),
        )

    def _on_select(self, sender, args):
        criteria = self._read_criteria()
        error = criteria.validation_error()
        if error:
            forms.alert(error, title="Selection Error")
            return
        self.criteria = criteria
        self.DialogResult = True
        self.Close()

    def _on_cancel(self, sender, args):
        self.criteria = None
        self.Close()

    def show_dialog(self):
        """Block until closed; return the criteria or None when cancelled."""
        self.ShowDialog()
        return self.criteria
