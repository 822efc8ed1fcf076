"""
Core building blocks for recordhooks models.
"""

from .model import Model, ModelConfigurationError, ModelMeta, ModelOptions

__all__ = [
    "Model",
    "ModelConfigurationError",
    "ModelMeta",
    "ModelOptions",
]
