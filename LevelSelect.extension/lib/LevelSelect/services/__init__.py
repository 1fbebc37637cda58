from LevelSelect.services.revit_reader import ElementRecordReader, LevelProvider
from LevelSelect.services.selection_runner import SelectByLevelRunner

__all__ = [
    'ElementRecordReader',
    'LevelProvider',
    'SelectByLevelRunner',
]
