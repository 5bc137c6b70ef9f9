"""Custom exceptions for the places-extractor library."""


class PlacesExtractorError(Exception):
    """Base exception for all places-extractor errors."""
    pass


class ProviderError(PlacesExtractorError):
    """Raised when the places provider cannot be reached or answers badly."""
    pass


class ConfigurationError(PlacesExtractorError):
    """Raised when configuration is invalid or incomplete."""
    pass
