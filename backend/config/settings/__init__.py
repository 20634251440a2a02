"""
Settings package for the device catalog.

``DJANGO_ENV`` picks the module: ``prod``, ``test`` or ``dev`` (default).
pytest bypasses this and points at ``config.settings.test`` directly.
"""

import os

DJANGO_ENV = os.environ.get('DJANGO_ENV', 'dev')

if DJANGO_ENV == 'prod':
    from .prod import *
elif DJANGO_ENV == 'test':
    from .test import *
else:
    from .dev import *
