class ViewportError(ValueError):
    """Raised when a viewport or its config cannot be used for generation."""


class InvalidDimension(ViewportError):
    pass


class InvalidRatio(ViewportError):
    pass


class InvalidIterLimit(ViewportError):
    pass


class InvalidThreshold(ViewportError):
    pass


class ConfigError(ViewportError):
    pass


class InvalidCoordinate(ViewportError):
    pass
