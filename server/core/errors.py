# server/core/errors.py


class StoreError(Exception):
    """
    Base class for errors that map onto a fixed HTTP response.
    The detail is the only text a client ever sees.
    """
    status_code = 500
    detail = "Internal error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class DuplicateUsername(StoreError):
    status_code = 409
    detail = "Username already exists"


class InvalidCredentials(StoreError):
    status_code = 401
    detail = "Not Authorized"


class NotAuthorized(StoreError):
    status_code = 401
    detail = "Not Authorized"


class StorageUnavailable(StoreError):
    status_code = 503
    detail = "Storage unavailable"


class AlreadyExists(StoreError):
    status_code = 409
    detail = "Already exists"


class FavoriteNotFound(StoreError):
    status_code = 404
    detail = "Favorite not found"


class ProductNotFound(StoreError):
    status_code = 404
    detail = "Product not found"
