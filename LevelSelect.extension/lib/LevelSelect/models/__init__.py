from LevelSelect.models.selection import (
    ElementRecord,
    LevelOption,
    SelectionCriteria,
    SelectionCriteriaError,
    SelectionResult,
)

__all__ = [
    'ElementRecord',
    'LevelOption',
    'SelectionCriteria',
    'SelectionCriteriaError',
    'SelectionResult',
]
