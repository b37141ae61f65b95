"""Custom exceptions for the watch catalog application."""

class CatalogError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message="An internal error occurred", status_code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['status'] = 'error'
        return rv

class NotFoundError(CatalogError):
    """Exception raised when a resource is not found."""
    def __init__(self, message="Resource not found", payload=None):
        super().__init__(message, 404, payload)

class WatchNotFoundError(NotFoundError):
    """Raised when no watch matches the requested id."""
    def __init__(self, watch_id):
        self.watch_id = watch_id
        super().__init__(f"No watch found with ID {watch_id}", payload={'watch_id': watch_id})
