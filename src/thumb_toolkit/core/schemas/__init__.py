"""
Schemas Package

JSON schema for the thumbnail configuration document and the validation
helpers that apply it.
"""

from .validator import ValidationError, validate_config

__all__ = ["ValidationError", "validate_config"]
