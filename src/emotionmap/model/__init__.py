"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or of any rendering backend.
It deals with the dataset schema, the point collection, filtering and loading.
"""
from emotionmap.model.dataset import CategoryGroup, WordEntry, ValidationResult, validate
from emotionmap.model.points import Point, PointKey, PointStore, flatten
from emotionmap.model.filters import ALL, FilterSelection, FilterState
