# services/exceptions.py
"""
Service-layer errors. Routers translate them into HTTP responses.
"""


class ServiceError(ValueError):
     """Base class for business-rule violations raised by services."""


class NotFoundError(ServiceError):
     """A record the operation needs does not exist (HTTP 404)."""


class ConflictError(ServiceError):
     """The operation would duplicate or contradict existing data (HTTP 409)."""
