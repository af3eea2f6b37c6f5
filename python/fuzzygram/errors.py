"""Exception types raised by fuzzygram."""


class FuzzyGramError(Exception):
    """Base exception for all fuzzygram errors."""


class ValidationError(FuzzyGramError, ValueError):
    """Raised when a parameter is outside its valid range (e.g. q < 1)."""


class AlgorithmError(FuzzyGramError, ValueError):
    """Raised when an algorithm or modifier name is not recognized."""


__all__ = ["FuzzyGramError", "ValidationError", "AlgorithmError"]
