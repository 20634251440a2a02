"""
Alert Headers.

Builds the ``X-{app}-alert`` / ``X-{app}-error`` / ``X-{app}-params``
headers the client turns into notifications.
"""

from urllib.parse import quote

from django.conf import settings


def _app_name() -> str:
    return settings.CLIENT_APP_NAME


def create_alert(message: str, param: str) -> dict:
    app = _app_name()
    return {
        f'X-{app}-alert': message,
        f'X-{app}-params': quote(str(param)),
    }


def create_entity_creation_alert(entity_name: str, param) -> dict:
    return create_alert(f'{_app_name()}.{entity_name}.created', param)


def create_entity_update_alert(entity_name: str, param) -> dict:
    return create_alert(f'{_app_name()}.{entity_name}.updated', param)


def create_entity_deletion_alert(entity_name: str, param) -> dict:
    return create_alert(f'{_app_name()}.{entity_name}.deleted', param)


def create_failure_alert(entity_name: str, error_key: str) -> dict:
    app = _app_name()
    headers = {f'X-{app}-error': f'error.{error_key}'}
    if entity_name:
        headers[f'X-{app}-params'] = entity_name
    return headers
