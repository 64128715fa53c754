# routeline/core/errors.py


class RouteGeometryError(Exception):
    """
    Base class for errors raised while turning route data into geometry.
    """


class MalformedPolylineError(RouteGeometryError, ValueError):
    """
    Raised when an encoded polyline cannot be decoded into whole
    latitude/longitude pairs.
    """

    def __init__(self, message: str, index: int) -> None:
        super().__init__(f"malformed polyline at index {index}: {message}")
        self.index = index


class NoRouteError(RouteGeometryError):
    """
    Raised when a directions payload does not carry an overview polyline.
    """


class InvalidCoordinateError(RouteGeometryError, ValueError):
    """
    Raised when a coordinate to encode is NaN or infinite.
    """
