class AlibiError(Exception):
    """Base exception for all alibigen related errors."""
    pass

class ConfigurationError(AlibiError):
    """Raised when a puzzle configuration or a scenario precondition is invalid."""
    pass

class CNFError(AlibiError):
    """Raised when clauses handed to the solver are malformed."""
    pass
