"""Dependency Rule tooling: layer maps, import scanning and checking."""

from .layers import Layer, LayerMap, DEFAULT_LAYERS, SHARED_KERNEL_RANK, default_layer_map
from .scanner import ImportRecord, ImportScanner, SourceModule, iter_source_modules
from .checker import DependencyRuleChecker, Violation

__all__ = [
    "Layer",
    "LayerMap",
    "DEFAULT_LAYERS",
    "SHARED_KERNEL_RANK",
    "default_layer_map",
    "ImportRecord",
    "ImportScanner",
    "SourceModule",
    "iter_source_modules",
    "DependencyRuleChecker",
    "Violation",
]
