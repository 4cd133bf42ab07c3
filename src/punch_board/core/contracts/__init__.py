"""
Contract Validation Module

JSON Schema validation of the configuration file.
"""

from .validators import (
    ConfigValidator,
    ContractValidator,
    SchemaLoader,
    validate_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConfigValidator",
    # Functions
    "validate_config",
]
