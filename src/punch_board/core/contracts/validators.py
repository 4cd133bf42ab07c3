"""
JSON Schema Contract Validators

Validates data loaded from the YAML configuration file against the
formal JSON Schema shipped in contracts/schema/.

Schemas:
- config.json (configuration file)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema file loader.

    Finds schemas in the schema/ directory next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'config')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against a JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Iterate over all validation errors."""
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        All validation errors as "path: message" strings, sorted by path.

        Returns:
            Empty list if the data matches the schema
        """
        messages = []
        for error in self.iter_errors(data):
            path = ".".join(str(p) for p in error.absolute_path) or "<root>"
            messages.append(f"{path}: {error.message}")
        return sorted(messages)


class ConfigValidator(ContractValidator):
    """Validator for the configuration file."""

    def __init__(self):
        super().__init__("config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_config(data: Dict[str, Any]) -> List[str]:
    """
    Validate configuration file contents.

    Args:
        data: Parsed YAML mapping

    Returns:
        Error messages, one per violation (empty if valid)

    Examples:
        >>> validate_config({"logging": {"format": "xml"}})
        ["logging.format: 'xml' is not one of ['console', 'json']"]
    """
    return ConfigValidator().error_messages(data)
