"""
osview exceptions
"""


class OSViewError(Exception):
    """Base exception for all osview errors"""

    pass


class CredentialsError(OSViewError):
    """Raised when credentials cannot be written to disk"""

    pass


class OpenStackError(OSViewError):
    """Raised when a call to an OpenStack API fails"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(OpenStackError):
    """Raised when the request never produced an HTTP response"""

    pass


class DecodeError(OpenStackError):
    """Raised when the response body is not the expected JSON document"""

    pass


class UnexpectedStatusError(OpenStackError):
    """Raised when the response carries a status other than the expected one"""

    def __init__(self, status_code: int):
        super().__init__(f"Unexpected status: {status_code}", status_code=status_code)


class MissingTokenError(OpenStackError):
    """Raised when the identity response has no X-Subject-Token header"""

    def __init__(self):
        super().__init__("Missing X-Subject-Token header")
