"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

from shared.interfaces.health_views import HealthCheckView, ReadinessCheckView

urlpatterns = [
    path('django-admin/', admin.site.urls),
    path('health', HealthCheckView.as_view(), name='health'),
    path('health/ready', ReadinessCheckView.as_view(), name='health-ready'),
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    path('', include('modules.orders.urls')),
]
