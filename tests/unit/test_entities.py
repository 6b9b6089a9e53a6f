"""
Unit Tests for Domain Entities
Following AAA pattern (Arrange, Act, Assert)
"""

import pytest

from src.domain.entities.post import Post, PostId, split_tags
from src.domain.exceptions import InvalidPostIdError


def make_post(**overrides):
    fields = dict(
        id=0,
        title="Test",
        description="Test Description",
        tags=["tag1", "tag2", "tag3"],
        media="post.png",
        owner_id="alice.near",
    )
    fields.update(overrides)
    return Post(**fields)


class TestPostId:
    """Test PostId value object"""

    def test_valid_post_id_creation(self):
        # Arrange & Act
        post_id = PostId(7)

        # Assert
        assert post_id.value == 7
        assert str(post_id) == "7"

    def test_negative_post_id_rejected(self):
        with pytest.raises(InvalidPostIdError, match="non-negative"):
            PostId(-1)

    def test_non_integer_post_id_rejected(self):
        with pytest.raises(InvalidPostIdError):
            PostId("3")
        with pytest.raises(InvalidPostIdError):
            PostId(True)

    def test_parse_from_text(self):
        assert PostId.parse("12").value == 12

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "-2"])
    def test_parse_rejects_bad_input(self, raw):
        with pytest.raises(InvalidPostIdError):
            PostId.parse(raw)

    def test_invalid_post_id_is_a_value_error(self):
        with pytest.raises(ValueError):
            PostId.parse("nope")


class TestSplitTags:
    """Tags are split verbatim on commas"""

    def test_simple_split(self):
        assert split_tags("a,b,c") == ["a", "b", "c"]

    def test_no_trimming(self):
        assert split_tags(" a, b ") == [" a", " b "]

    def test_trailing_comma_keeps_empty_tag(self):
        assert split_tags("a,") == ["a", ""]

    def test_empty_input_yields_single_empty_tag(self):
        assert split_tags("") == [""]

    def test_duplicates_kept(self):
        assert split_tags("x,x") == ["x", "x"]


class TestPost:
    """Test Post entity"""

    def test_new_post_has_no_likes(self):
        post = make_post()

        assert post.liking_users == []
        assert post.like_count == 0

    def test_with_like_returns_updated_copy(self):
        # Arrange
        post = make_post()

        # Act
        liked = post.with_like("bob.near")

        # Assert
        assert liked.liking_users == ["bob.near"]
        assert post.liking_users == []

    def test_repeated_likes_accumulate(self):
        post = make_post().with_like("bob.near").with_like("bob.near")

        assert post.liking_users == ["bob.near", "bob.near"]
        assert post.like_count == 2

    def test_snapshot_is_independent(self):
        post = make_post()
        copy = post.snapshot()

        copy.liking_users.append("carol.near")
        copy.tags.append("extra")

        assert post.liking_users == []
        assert post.tags == ["tag1", "tag2", "tag3"]
        assert copy == make_post(liking_users=["carol.near"], tags=["tag1", "tag2", "tag3", "extra"])

    def test_post_to_dict(self):
        # Arrange
        post = make_post(liking_users=["bob.near"])

        # Act
        result = post.to_dict()

        # Assert
        assert result == {
            "id": 0,
            "title": "Test",
            "description": "Test Description",
            "tags": ["tag1", "tag2", "tag3"],
            "media": "post.png",
            "liking_users": ["bob.near"],
            "owner_id": "alice.near",
        }

    def test_post_from_dict(self):
        data = make_post(id=4, liking_users=["bob.near"]).to_dict()

        post = Post.from_dict(data)

        assert post.id == 4
        assert post.liking_users == ["bob.near"]
        assert post.owner_id == "alice.near"

    def test_from_dict_defaults_missing_likes(self):
        data = make_post().to_dict()
        del data["liking_users"]

        assert Post.from_dict(data).liking_users == []
