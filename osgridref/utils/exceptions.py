class InvalidCoordinateError(ValueError):
    """Raised when a latitude or longitude lies outside its valid degree range."""


class GridReferenceError(ValueError):
    """Raised when a grid reference string cannot be parsed."""
