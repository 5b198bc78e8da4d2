"""
Health check views.
"""
from django.db import DatabaseError, connection
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


@extend_schema(tags=['Health'])
class HealthCheckView(APIView):
    """Liveness endpoint."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(
            {'status': 'ok', 'message': 'Coffee Shop API is running'},
            status=status.HTTP_200_OK,
        )


@extend_schema(tags=['Health'])
class ReadinessCheckView(APIView):
    """Readiness probe - checks the database connection."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        database = self._check_database()
        status_code = status.HTTP_200_OK if database['healthy'] else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(
            {
                'status': 'ready' if database['healthy'] else 'not_ready',
                'checks': {'database': database},
            },
            status=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except DatabaseError:
            return {'healthy': False, 'error': 'database unavailable'}
