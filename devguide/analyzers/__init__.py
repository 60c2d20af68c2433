"""Project classification: rule tables, package managers and the classifier."""

from __future__ import annotations

from .classifier import Classifier
from .package_managers import detect_node_package_manager, detect_python_package_manager

__all__ = [
    "Classifier",
    "detect_node_package_manager",
    "detect_python_package_manager",
]
