from typing import Dict, Optional


class CatalogError(Exception):
    """Base for request-level failures; carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(CatalogError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized - Invalid or missing API key"):
        super().__init__(message)


class InvalidInput(CatalogError):
    status_code = 400

    def __init__(self, message: str, fields: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.fields = fields or {}


class NotFound(CatalogError):
    status_code = 404

    def __init__(self, message: str = "Product not found"):
        super().__init__(message)


class Conflict(CatalogError):
    status_code = 409

    def __init__(self, message: str = "Product with this slug already exists"):
        super().__init__(message)


class StoreUnavailable(CatalogError):
    """Persistence failure. The message is generic; the cause is only logged."""

    status_code = 500
