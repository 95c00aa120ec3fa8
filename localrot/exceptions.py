"""
Domain exceptions raised by the service layer and mapped to HTTP
responses in localrot.utils.error_handlers
"""


class LocalRotError(Exception):
    """Base class for expected, client-facing failures"""
    status_code = 400
    error = 'Bad Request'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LocalRotError):
    status_code = 404
    error = 'Not Found'


class ConflictError(LocalRotError):
    status_code = 409
    error = 'Conflict'


class InvalidCredentialsError(LocalRotError):
    status_code = 401
    error = 'Unauthorized'

    def __init__(self, message: str = 'Invalid credentials'):
        super().__init__(message)
