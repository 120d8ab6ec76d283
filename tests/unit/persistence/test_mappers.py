"""Unit tests for row/domain mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from numtalk.persistence.mappers import post_to_dict, row_to_post
from tests.conftest import make_chain_post


class TestRowToPost:
    def test_row_without_comments_maps_to_empty_list(self):
        """Rows written before comments existed carry NULL."""
        row = {
            "id": uuid4(),
            "author_id": "u1",
            "author_name": None,
            "text": "legacy",
            "start_number": None,
            "nodes": [],
            "comments": None,
            "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        }

        post = row_to_post(row)

        assert post.comments == []
        assert post.text == "legacy"

    def test_string_id_is_parsed(self):
        post_id = uuid4()
        row = {
            "id": str(post_id),
            "author_id": "u1",
            "text": "x",
            "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
        }

        assert row_to_post(row).id == post_id


class TestPostToDict:
    def test_embedded_nodes_are_json_ready(self):
        post = make_chain_post(5)

        row = post_to_dict(post)

        node = row["nodes"][0]
        assert node["id"] == str(post.nodes[0].id)
        assert node["result"] == 5
        assert node["op"] is None
        assert isinstance(node["created_at"], str)
        assert row["comments"] == []

    def test_stored_row_maps_back_to_same_post(self):
        post = make_chain_post(5)

        assert row_to_post(post_to_dict(post)) == post
