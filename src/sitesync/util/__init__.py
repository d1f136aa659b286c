from .glob import expand_braces, is_match, validate_pattern
from .mime import DEFAULT_CONTENT_TYPE, guess_content_type

__all__ = [
    "is_match",
    "expand_braces",
    "validate_pattern",
    "DEFAULT_CONTENT_TYPE",
    "guess_content_type",
]
