"""
Presentation Layer Helpers
"""

from .logging_setup import configure_logging
from .post_display import PostDisplay

__all__ = [
    'configure_logging',
    'PostDisplay',
]
