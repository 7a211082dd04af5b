"""
Tests unitaires pour la sérialisation des paramètres.
"""

from marvel_client.client.query import query_string


class TestQueryString:
    """Tests pour query_string."""

    def test_example_with_list(self):
        """Les listes sont jointes par des virgules, l'ordre d'insertion est conservé."""
        params = {
            "nameStartsWith": "spider",
            "comics": [1, 2, 3],
            "orderBy": "name",
        }

        assert query_string(params) == "nameStartsWith=spider&comics=1,2,3&orderBy=name"

    def test_scalars_preserve_insertion_order(self):
        """Pas de tri des clés."""
        params = {"offset": 20, "limit": 10, "orderBy": "-modified"}

        assert query_string(params) == "offset=20&limit=10&orderBy=-modified"

    def test_reversed_insertion_order(self):
        assert query_string({"b": 1, "a": 2}) == "b=1&a=2"

    def test_tuple_values(self):
        assert query_string({"events": (116, 238)}) == "events=116,238"

    def test_single_element_list(self):
        assert query_string({"series": [454]}) == "series=454"

    def test_empty_mapping(self):
        assert query_string({}) == ""

    def test_none_values_are_skipped(self):
        """Un paramètre None est omis."""
        assert query_string({"name": None, "limit": 5}) == "limit=5"

    def test_booleans_are_lowercase(self):
        assert query_string({"noVariants": True, "hasDigitalIssue": False}) == (
            "noVariants=true&hasDigitalIssue=false"
        )

    def test_no_percent_encoding(self):
        """Les valeurs ne sont pas encodées."""
        assert query_string({"dateRange": "2013-01-01,2013-01-02"}) == (
            "dateRange=2013-01-01,2013-01-02"
        )
        assert query_string({"title": "X-Men: Legacy"}) == "title=X-Men: Legacy"
