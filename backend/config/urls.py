"""
URL configuration for the device catalog project.
"""

from django.contrib import admin
from django.urls import path, include
from django.views.generic.base import RedirectView
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    # Redirect root to docs
    path('', RedirectView.as_view(url='/api/docs', permanent=False), name='index'),

    # Admin
    path('admin/', admin.site.urls),
    
    # Authentication
    path('api/authenticate', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/authenticate/refresh', TokenRefreshView.as_view(), name='token_refresh'),
    
    # API Documentation
    path('api/schema', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
    
    # API
    path('api/', include('presentation.api.urls')),
]
