from django.contrib import admin
from django.urls import path, include
from django.views.decorators.cache import cache_page
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

from employee_directory.apps.common.views import health

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health", health, name="health"),

    # API Documentation
    path('docs', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
    path('redoc', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API Schema (cached to avoid heavy regen on each request):
    path('api/schema/', cache_page(60 * 60)(SpectacularAPIView.as_view()), name='schema'),

    # API Endpoints:
    path("", include("employee_directory.apps.employees.api.urls")),
]
