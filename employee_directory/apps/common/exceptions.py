"""
Translation of directory errors into HTTP responses.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from employee_directory.apps.employees.domain.exceptions import EmployeeNotFound, StorageUnavailable

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """
    Maps EmployeeNotFound to 404 and StorageUnavailable to 503, everything
    else goes to the stock DRF handler.
    """
    if isinstance(exc, EmployeeNotFound):
        logger.warning(str(exc))
        return Response({'detail': str(exc)}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, StorageUnavailable):
        logger.error(f"Storage unavailable while handling {context['request'].method} "
                     f"{context['request'].path}: {exc}")
        return Response({'detail': 'Employee storage is unavailable.'},
                        status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return drf_exception_handler(exc, context)
