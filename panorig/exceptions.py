"""Custom exceptions for panorama rig planning."""


class PanoramaError(ValueError):
    """Base panorama planning exception."""


class InvalidRowSpec(PanoramaError):
    """Raised when a row has a malformed exposure count or an out-of-range tilt."""


class EmptyConfig(PanoramaError):
    """Raised when no rows are supplied."""


class InvalidLensGeometry(PanoramaError):
    """Raised when sensor or focal-length values are not positive."""
