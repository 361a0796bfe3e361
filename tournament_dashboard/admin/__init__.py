"""
Admin workflow: pipeline triggers and the model registry.
"""

from .pipeline import PipelineConsole, PipelineAction, ActionInProgressError
from .registry import ModelRegistry, ModelRunRow, ModelActivationError, format_timestamp

__all__ = [
    "PipelineConsole",
    "PipelineAction",
    "ActionInProgressError",
    "ModelRegistry",
    "ModelRunRow",
    "ModelActivationError",
    "format_timestamp",
]
