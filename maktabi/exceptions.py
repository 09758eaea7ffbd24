# maktabi/exceptions.py
"""
Domain errors raised by the services layer.
main.py maps each one to an HTTP status; services never build HTTP responses.
"""

from fastapi import status


class MaktabiError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str = "Request could not be processed"):
        super().__init__(detail)
        self.detail = detail


class RecordNotFound(MaktabiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity} '{record_id}' not found")
        self.entity = entity
        self.record_id = record_id


class InvalidTransition(MaktabiError):
    status_code = status.HTTP_409_CONFLICT


class PermissionDenied(MaktabiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotAuthenticated(MaktabiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationFailed(MaktabiError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
