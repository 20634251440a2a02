"""
Development settings for the device catalog project.
"""

import copy

from .base import *

# =============================================================================
# DEBUG
# =============================================================================
DEBUG = True

# =============================================================================
# ALLOWED HOSTS
# =============================================================================
ALLOWED_HOSTS = ['*']

# =============================================================================
# CORS - Development (Allow all)
# =============================================================================
CORS_ALLOW_ALL_ORIGINS = True

# =============================================================================
# DATABASE - Development Override
# =============================================================================
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': config('DB_NAME', default='catalogo'),
        'USER': config('DB_USER', default='catalogo'),
        'PASSWORD': config('DB_PASSWORD', default='catalogo'),
        'HOST': config('DB_HOST', default='127.0.0.1'),
        'PORT': config('DB_PORT', default='5432'),
    }
}

# =============================================================================
# REST FRAMEWORK - Development (browsable API)
# =============================================================================
REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ),
}

# =============================================================================
# LOGGING - Development
# =============================================================================
LOGGING = copy.deepcopy(LOGGING)
LOGGING['root']['level'] = 'DEBUG'
for _name in ('catalog_client', 'presentation', 'application', 'infrastructure'):
    LOGGING['loggers'][_name]['level'] = 'DEBUG'

# =============================================================================
# CACHE - Development
# =============================================================================
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'catalogo-dev-cache',
    }
}
