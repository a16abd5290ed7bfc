"""Maps domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Anything that is not a
DomainError goes to DRF's default handler.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from booking.domain import ConflictError, DomainError, NotFoundError, ValidationError

STATUS_BY_KIND = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
)


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    for kind, http_status in STATUS_BY_KIND:
        if isinstance(exc, kind):
            break
    else:
        http_status = status.HTTP_400_BAD_REQUEST
    return Response({"code": exc.code.value, "message": exc.message}, status=http_status)
