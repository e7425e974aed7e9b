"""
Core error classes for the Banque REST API.
"""


class CORSRegistrationError(Exception):
    """Raised when a CORS policy is registered more than once on the same application."""

    def __init__(self, app_title: str) -> None:
        self.app_title = app_title
        super().__init__(f"A CORS policy is already registered on application '{app_title}'")
