"""Unit tests for Comment domain entity."""

from hnclone.domain.comment import Comment

NOW = 1_700_000_000


class TestHasContent:
    def test_deleted_comment_has_no_content(self):
        assert Comment(id=1, time=NOW, by="u", text="text", deleted=True).has_content() is False

    def test_dead_comment_has_no_content(self):
        assert Comment(id=1, time=NOW, by="u", text="text", dead=True).has_content() is False

    def test_missing_text(self):
        assert Comment(id=1, time=NOW, by="u").has_content() is False

    def test_empty_text(self):
        assert Comment(id=1, time=NOW, by="u", text="").has_content() is False

    def test_whitespace_text(self):
        assert Comment(id=1, time=NOW, by="u", text="   ").has_content() is False

    def test_valid_comment(self):
        comment = Comment(id=1, time=NOW, by="u", text="valid", deleted=False, dead=False)
        assert comment.has_content() is True


class TestAuthor:
    def test_author_name(self):
        assert Comment(id=1, time=NOW, by="testuser").author == "testuser"

    def test_missing_author_is_anonymous(self):
        assert Comment(id=1, time=NOW).author == "anonymous"

    def test_empty_author_is_anonymous(self):
        assert Comment(id=1, time=NOW, by="").author == "anonymous"


class TestReplies:
    def test_no_kids(self):
        comment = Comment(id=1, time=NOW)
        assert comment.has_replies() is False
        assert comment.reply_count() == 0

    def test_empty_kids(self):
        comment = Comment(id=1, time=NOW, kids=())
        assert comment.has_replies() is False
        assert comment.reply_count() == 0

    def test_with_kids(self):
        comment = Comment(id=1, time=NOW, kids=(2, 3, 4))
        assert comment.has_replies() is True
        assert comment.reply_count() == 3
        assert comment.kid_ids == [2, 3, 4]


class TestFromApi:
    def test_all_fields(self):
        comment = Comment.from_hn_api(
            {
                "id": 1,
                "type": "comment",
                "by": "testuser",
                "text": "test comment",
                "kids": [2, 3],
                "parent": 0,
                "time": NOW,
                "deleted": False,
                "dead": False,
            }
        )

        assert comment.id == 1
        assert comment.by == "testuser"
        assert comment.kids == (2, 3)
        assert comment.parent == 0
        assert comment.deleted is False
        assert comment.dead is False

    def test_optional_fields_absent(self):
        comment = Comment.from_hn_api({"id": 1, "time": NOW})

        assert comment.by is None
        assert comment.text is None
        assert comment.kids is None
        assert comment.parent is None
        assert comment.deleted is None
        assert comment.dead is None
