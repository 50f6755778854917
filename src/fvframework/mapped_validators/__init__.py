"""
Contains validators which validate parts of objects found by attribute paths.
"""
from .path_map import PathMappedValidator
