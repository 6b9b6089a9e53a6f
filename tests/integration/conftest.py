import pytest

from src.domain.services.social_service import SocialNetworkService
from src.infrastructure.config.settings import Settings
from src.infrastructure.factory import build_repositories


@pytest.fixture(params=['memory', 'sqlite'])
def repositories(request, tmp_path):
    settings = Settings(backend=request.param, database=str(tmp_path / 'postboard.db'))
    return build_repositories(settings)


@pytest.fixture
def service(repositories):
    return SocialNetworkService(repositories.posts, repositories.tags, repositories.likes)


@pytest.fixture
def seeded_service(service):
    """Three posts by alice.near sharing some tags"""
    service.create_post("alice.near", "Test", "Test Description", "tag1,tag2,tag3", "post")
    service.create_post("alice.near", "Test2", "Test Description2", "tag4,tag5,tag6", "video")
    service.create_post("alice.near", "Test3", "Test Description3", "tag1,tag5,tag7", "pic")
    return service
