"""
Tests for parsed node flattening
"""

from osm_request.xml.flatten import flatten_attributes, is_raw_node, reflatten_nested, unwrap_first


class TestUnwrapFirst:
    """Test suite for unwrap_first"""

    def test_first_item(self):
        assert unwrap_first({"name": ["Main St", "High St"]}, "name") == "Main St"

    def test_absent_key(self):
        assert unwrap_first({}, "name") is None

    def test_empty_list(self):
        assert unwrap_first({"name": []}, "name") is None

    def test_falsy_value(self):
        assert unwrap_first({"name": ""}, "name") is None
        assert unwrap_first({"name": None}, "name") is None

    def test_unwrapped_value_returned_as_is(self):
        assert unwrap_first({"_": "text"}, "_") == "text"


class TestFlattenAttributes:
    """Test suite for flatten_attributes"""

    def test_attributes_and_child(self):
        node = {"$": {"id": "5"}, "name": ["Main St"]}

        assert flatten_attributes(node) == {"id": "5", "name": "Main St"}

    def test_empty_child_omitted(self):
        node = {"$": {"id": "5"}, "name": ["Main St"], "tags": []}

        assert flatten_attributes(node) == {"id": "5", "name": "Main St"}

    def test_no_attributes(self):
        assert flatten_attributes({"text": ["hello"]}) == {"text": "hello"}

    def test_siblings_after_first_dropped(self):
        node = {"lang": ["en", "fr", "de"]}

        assert flatten_attributes(node) == {"lang": "en"}

    def test_does_not_recurse(self):
        home = {"$": {"lat": "1.5", "lon": "2.5"}}
        flat = flatten_attributes({"$": {"id": "1"}, "home": [home]})

        assert flat["home"] is home

    def test_input_not_modified(self):
        node = {"$": {"id": "5"}, "name": ["Main St"]}
        flatten_attributes(node)["id"] = "6"

        assert node == {"$": {"id": "5"}, "name": ["Main St"]}


class TestReflattenNested:
    """Test suite for the one level nested flattening pass"""

    def test_raw_node_values_flattened(self):
        user = {
            "id": "1",
            "changesets": {"$": {"count": "42"}},
            "home": {"$": {"lat": "1.5", "lon": "2.5", "zoom": "3"}},
        }

        assert reflatten_nested(user) == {
            "id": "1",
            "changesets": {"count": "42"},
            "home": {"lat": "1.5", "lon": "2.5", "zoom": "3"},
        }

    def test_flat_values_unchanged(self):
        user = {"id": "1", "description": "hi", "blocks": {"received": [{"$": {"count": "0"}}]}}

        assert reflatten_nested(user) == user

    def test_idempotent(self):
        user = {"id": "1", "traces": {"$": {"count": "2"}}}
        once = reflatten_nested(user)

        assert reflatten_nested(once) == once

    def test_is_raw_node(self):
        assert is_raw_node({"$": {"id": "1"}})
        assert not is_raw_node({"$": {}})
        assert not is_raw_node({"id": "1"})
        assert not is_raw_node("text")
