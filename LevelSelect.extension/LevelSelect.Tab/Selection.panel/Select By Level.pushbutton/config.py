# -*- coding: utf-8 -*-
from pyrevit import forms, script

from LevelSelect.settings import CONFIG_SECTION, SelectByLevelSettings

logger = script.get_logger()
config = script.get_config(CONFIG_SECTION)
settings = SelectByLevelSettings.from_config(config, logger=logger)

SWITCHES = [
    ('Select by Level', 'select_by_level'),
    ('Select by Reference Level', 'select_by_reference_level'),
    ('Remember Last Level', 'remember_last_level'),
]

switch_config = {}
for label, key in SWITCHES:
    switch_config[label] = {'state': settings.get(key)}

selected_option, switches = forms.CommandSwitchWindow.show(
    ['Save'],
    switches=[label for label, _ in SWITCHES],
    message='Default options for Select By Level:',
    config=switch_config
)

if not selected_option:
    script.exit()

for label, key in SWITCHES:
    settings.set(key, switches[label])
if not settings.remember_last_level:
    settings.set('last_level_name', "")

settings.apply_to_config(config)
script.save_config()
forms.alert("Select By Level defaults saved.")
