"""Failure taxonomy for upstream lookups and request handling."""


class WeatherError(Exception):
    """Base error. `message` is safe to show to a client."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(WeatherError):
    """Missing or malformed required parameter."""

    status_code = 400


class NotFound(WeatherError):
    """Provider has no data for the requested place or coordinate."""

    status_code = 404


class UpstreamError(WeatherError):
    """Transport failure, provider error, or malformed provider payload.

    The detail is kept for logs; clients only ever see `public_message`.
    """

    status_code = 500
    public_message = "Server error"
