# This file makes the models directory a Python package
from .bible import SearchMatch

__all__ = [
    'SearchMatch',
]
