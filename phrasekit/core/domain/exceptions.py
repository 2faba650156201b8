# phrasekit/core/domain/exceptions.py
from typing import Any, Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class InvalidArgumentError(DomainError, ValueError):
    """Raised when a required term is null, empty or only white space."""
    def __init__(self, param_name: str, kind: Optional[str] = None):
        self.param_name = param_name
        self.kind = kind or f"blank_{param_name}"
        super().__init__(
            f"Argument '{param_name}' cannot be null, empty or just white space."
        )

# --- Lookup Errors ---

class MissingMetadataError(DomainError, LookupError):
    """Raised when a concept has no term triple declared for it."""
    def __init__(self, concept: Any):
        self.concept = concept
        super().__init__(f"No term triple is declared for {concept!r}.")

# --- Capability Errors ---

class UnsupportedOperationError(DomainError, NotImplementedError):
    """Raised when a helper is asked to work outside its supported range."""
    def __init__(self, operation: str, reason: str):
        self.operation = operation
        super().__init__(f"'{operation}' is not supported: {reason}")
