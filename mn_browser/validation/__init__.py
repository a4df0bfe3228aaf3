from .errors import ValidationIssue, ValidationError
from .assembly_validation import validate_assembly_dict

__all__ = ["ValidationIssue", "ValidationError", "validate_assembly_dict"]
