"""
Delete confirmation dialog.

Mirrors the UI contract: confirming deletes the entity and closes the
dialog with ``'deleted'``; cancelling dismisses it without any API call.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DELETED = 'deleted'


class DeleteDialog:
    
    def __init__(self, resource, on_close: Optional[Callable] = None,
                 on_dismiss: Optional[Callable] = None):
        self.resource = resource
        self.on_close = on_close
        self.on_dismiss = on_dismiss
        self.result = None
        self.dismissed = False
    
    @property
    def is_open(self) -> bool:
        return self.result is None and not self.dismissed
    
    def confirm_delete(self, entity_id: int) -> None:
        """Delete the entity; the dialog stays open if the call fails."""
        self.resource.delete(entity_id)
        logger.info("Deleted %s %s", self.resource.resource, entity_id)
        self.close(DELETED)
    
    def cancel(self) -> None:
        self.dismiss()
    
    def close(self, result) -> None:
        self.result = result
        if self.on_close is not None:
            self.on_close(result)
    
    def dismiss(self) -> None:
        self.dismissed = True
        if self.on_dismiss is not None:
            self.on_dismiss()
