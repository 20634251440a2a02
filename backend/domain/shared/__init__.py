"""
Shared Domain - exceptions, pagination and repository ports used by every domain.
"""
