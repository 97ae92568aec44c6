# utils/exceptions.py
from rest_framework import status


class ServiceError(Exception):
    """Base class for expected failures raised by the service layer.

    Each subclass carries the HTTP status the views answer with.
    """
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
