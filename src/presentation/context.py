"""
CLI application context shared by all commands
"""

import logging
import os
from functools import wraps
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from src.domain.exceptions import ConfigurationError, PostboardError
from src.domain.services.social_service import SocialNetworkService
from src.infrastructure.config.settings import Settings
from src.infrastructure.factory import Repositories, build_repositories


USER_ENV_VAR = 'POSTBOARD_USER'

logger = logging.getLogger(__name__)


class AppContext:
    """Settings plus lazily built storage, so commands that don't touch the store never open it"""

    def __init__(
        self,
        settings: Settings,
        user: Optional[str] = None,
        console: Optional[Console] = None,
        config_path: Optional[Path] = None,
    ):
        self.settings = settings
        self.config_path = config_path
        self._user = user
        self.console = console or Console()
        self._repositories: Optional[Repositories] = None
        self._service: Optional[SocialNetworkService] = None

    @property
    def repositories(self) -> Repositories:
        if self._repositories is None:
            self._repositories = build_repositories(self.settings)
        return self._repositories

    @property
    def service(self) -> SocialNetworkService:
        if self._service is None:
            repos = self.repositories
            self._service = SocialNetworkService(repos.posts, repos.tags, repos.likes)
        return self._service

    def current_caller_identity(self) -> str:
        """--user, then $POSTBOARD_USER, then default_user from settings"""
        user = self._user or os.environ.get(USER_ENV_VAR) or self.settings.default_user
        if not user:
            raise ConfigurationError(
                f"No caller identity: pass --user, set {USER_ENV_VAR} or set default_user in the config"
            )
        return str(user)


def reports_errors(func):
    """Turn PostboardError into a red message and exit status 1"""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PostboardError as e:
            logger.debug("Command failed: %s", e, exc_info=True)
            Console().print(f"[red]❌ {escape(str(e))}[/red]")
            click.get_current_context().exit(1)

    return wrapper
