"""Exceptions raised across the extension."""


class ExtensionError(Exception):
    """An extension call that cannot be answered with update actions.

    Surfaced to commercetools as an error response with ``status_code``.
    """

    def __init__(self, status_code: int, message: str, code: str = "InvalidInput") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code

    def to_response(self) -> dict:
        return {"errors": [{"code": self.code, "message": self.message}]}


class GatewayError(Exception):
    """The payment gateway rejected a request or could not be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
