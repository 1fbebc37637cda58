# -*- coding: utf-8 -*-
"""
Select By Level

Selects every element placed on a chosen level and/or every MEP curve
(duct, pipe, conduit, cable tray) whose Reference Level is that level.

Shift+Click to change the default options.
"""
from pyrevit import revit, forms, script

from LevelSelect.services import LevelProvider, SelectByLevelRunner
from LevelSelect.settings import CONFIG_SECTION, SelectByLevelSettings
from LevelSelect.ui.level_selector import LevelSelectorWindow

__title__ = "Select By\nLevel"

logger = script.get_logger()
config = script.get_config(CONFIG_SECTION)


def save_settings(settings):
    settings.apply_to_config(config)
    script.save_config()


def main():
    doc = revit.doc
    uidoc = revit.uidoc

    levels = LevelProvider(doc).levels()
    if not levels:
        forms.alert("No levels found in the project.", exitscript=True)

    settings = SelectByLevelSettings.from_config(config, logger=logger)
    criteria = LevelSelectorWindow(levels, settings).show_dialog()
    if criteria is None:
        script.exit()

    result = SelectByLevelRunner(doc, uidoc, logger).run(criteria)

    settings.remember(criteria)
    save_settings(settings)
    forms.alert(result.summary(), title="Success")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:
        logger.error("Select by level failed: {}".format(exc))
        forms.alert("Unable to select elements by level. Check the log for details.",
                    title="Select By Level")
