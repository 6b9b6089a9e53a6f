"""
Presentation Commands Module
All CLI command implementations
"""

from .post_commands import (
    create_command,
    list_command,
    show_command,
    like_command,
    liked_command,
    by_tag_command,
    export_command,
)
from .config_command import config_command

__all__ = [
    'create_command',
    'list_command',
    'show_command',
    'like_command',
    'liked_command',
    'by_tag_command',
    'export_command',
    'config_command',
]
