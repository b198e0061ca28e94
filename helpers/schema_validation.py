#helpers/schema_validation.py

"""
JSON Schema export and validation for site configuration data.

The schema is generated from the pydantic model so that theme tooling and
editors can validate raw files without importing this package. Unlike the
loader, validation here collects every problem instead of stopping at the
first invalid document.
"""

import logging
from typing import Any, Dict, List, Optional

from jsonschema import Draft202012Validator

from site_config.schemas import SiteConfig

logger = logging.getLogger(__name__)

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_TITLE = "Site Configuration"


def site_config_schema() -> Dict[str, Any]:
    """Return the JSON Schema of the camelCase wire format."""
    schema = SiteConfig.model_json_schema(by_alias=True)
    schema["$schema"] = SCHEMA_DIALECT
    schema["title"] = SCHEMA_TITLE
    schema["description"] = (
        "Site metadata, navigation menu and author record consumed by the blog theme."
    )
    return schema


def _format_path(path) -> str:
    return ".".join(str(p) for p in path) or "<root>"


class SchemaValidator:
    """JSON Schema validator for raw site configuration data."""

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema or site_config_schema()
        Draft202012Validator.check_schema(self.schema)
        self._validator = Draft202012Validator(self.schema)
        logger.debug(f"Loaded schema: {self.schema.get('title', 'Unknown')}")

    def list_errors(self, data: Any) -> List[str]:
        """Return every validation error as "<dotted.path>: <message>", sorted by path."""
        errors = sorted(
            self._validator.iter_errors(data),
            key=lambda error: [str(p) for p in error.absolute_path],
        )
        return [f"{_format_path(error.absolute_path)}: {error.message}" for error in errors]

    def validate(self, data: Any) -> tuple[bool, List[str]]:
        """
        Validate data against the schema.

        Args:
            data: Decoded configuration data (camelCase keys)

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = self.list_errors(data)
        if errors:
            logger.debug(f"Schema validation found {len(errors)} error(s)")
        return not errors, errors

    def get_schema_info(self) -> Dict[str, Any]:
        """Get information about the loaded schema."""
        return {
            'title': self.schema.get('title', 'Unknown'),
            'description': self.schema.get('description', 'No description'),
            'definitions': sorted(self.schema.get('$defs', {})),
            'required': list(self.schema.get('required', [])),
        }


def generate_validation_report(
    data: Any,
    validator: Optional[SchemaValidator] = None,
) -> Dict[str, Any]:
    """Generate a validation report with a short summary of the data and hints."""
    validator = validator or SchemaValidator()
    is_valid, errors = validator.validate(data)

    report = {
        'validation_result': {
            'is_valid': is_valid,
            'error_count': len(errors),
            'errors': errors
        },
        'schema_info': validator.get_schema_info(),
        'data_summary': {
            'type': type(data).__name__,
            'size': len(data) if hasattr(data, '__len__') else 'unknown',
            'keys': list(data.keys()) if isinstance(data, dict) else 'not_dict'
        },
        'recommendations': _generate_validation_recommendations(is_valid, errors, data)
    }

    return report


def _generate_validation_recommendations(
    is_valid: bool,
    errors: List[str],
    data: Any
) -> List[str]:
    """Generate recommendations based on validation results."""
    recommendations = []

    if is_valid:
        recommendations.append("Data structure is valid and follows schema")
        return recommendations

    missing_fields = [e for e in errors if "is a required property" in e]
    unknown_fields = [e for e in errors if "Additional properties are not allowed" in e]
    type_errors = [e for e in errors if "is not of type" in e]
    range_errors = [e for e in errors if "is less than the minimum" in e]

    if missing_fields:
        recommendations.append(
            f"Missing required fields detected: {len(missing_fields)} errors. "
            "url, title and author.name must be present."
        )

    if unknown_fields:
        recommendations.append(
            f"Unknown keys detected: {len(unknown_fields)} errors. "
            "Check for typos; keys are camelCase (e.g. postsPerPage)."
        )

    if type_errors:
        recommendations.append(
            f"Type mismatch errors detected: {len(type_errors)} errors. "
            "Quoted numbers and booleans are not converted."
        )

    if range_errors:
        recommendations.append(
            f"Out-of-range values detected: {len(range_errors)} errors. "
            "postsPerPage must be at least 1."
        )

    if isinstance(data, dict):
        recommendations.append(
            f"Actual data keys: {sorted(data.keys())}. "
            "Compare with schema requirements to identify missing or extra fields."
        )

    return recommendations
