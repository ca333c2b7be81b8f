"""Project-wide DRF exception handler producing {message, error} bodies."""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view'
        )
        return Response(
            {'message': 'Internal server error', 'error': str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        response.data = {'message': 'Invalid input', 'error': response.data}
    else:
        response.data = {
            'message': str(getattr(exc, 'detail', exc)),
            'error': getattr(exc, 'default_code', 'error'),
        }
    return response
