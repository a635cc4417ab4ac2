from .resource_repository import ResourceRepository

__all__ = [
    'ResourceRepository'
]
