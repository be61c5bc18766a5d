import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from domain.shared.exceptions import DomainException, EntityNotFoundException

logger = logging.getLogger('presentation')


def custom_exception_handler(exc, context):
    """
    Map domain and database errors to API responses, then fall back to
    the default DRF handler.
    """
    if isinstance(exc, EntityNotFoundException):
        return Response(
            {'detail': exc.message, 'error': exc.code},
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, DomainException):
        logger.warning("Domain error in %s: %s", context.get('view').__class__.__name__, exc.message)
        return Response(
            {'detail': exc.message, 'error': exc.code},
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, IntegrityError):
        return Response(
            {
                'detail': 'Data integrity violation (related records may exist).',
                'error': 'integrity_error',
            },
            status=status.HTTP_409_CONFLICT,
        )

    return exception_handler(exc, context)
