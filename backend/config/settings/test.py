"""
Test settings for the device catalog project.
"""

import copy

from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

CLIENT_APP_NAME = 'catalogoApp'

# Console only; no log files from test runs
LOGGING = copy.deepcopy(LOGGING)
LOGGING['handlers'].pop('file')
for _logger in LOGGING['loggers'].values():
    _logger['handlers'] = ['console']
    _logger['level'] = 'WARNING'
