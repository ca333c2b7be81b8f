from django.db import connection
from django.http import JsonResponse
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@extend_schema(tags=['health'])
@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness probe that also touches the database."""
    with connection.cursor() as cursor:
        cursor.execute('SELECT 1')
    return Response({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'message': 'Not found',
        'error': 'not_found'
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'message': 'Internal server error',
        'error': 'server_error'
    }, status=500)
