"""
Sales Domain - Repository Interfaces (Ports).
"""

from typing import Any

from domain.shared.repositories import Repository


class VentaRepository(Repository[Any]):
    """Repository interface for Venta."""
