"""Data layer utilities for loading the quiz dataset."""

from .dataset_validator import ensure_valid_dataset, validate_dataset
from .errors import DataError, DataLoadError, DataValidationError, InvalidDatasetError
from .paths import get_dataset_path, get_definitions_path, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "InvalidDatasetError",
    "ensure_valid_dataset",
    "get_dataset_path",
    "get_definitions_path",
    "get_repo_root",
    "validate_dataset",
]
