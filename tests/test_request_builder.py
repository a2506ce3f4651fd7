import pytest

from resthttp import RequestBuilder, RequestConstructionError

URL = "https://h.example/api/items"


class TestRequestBuilder:
    def test_method_defaults_to_get(self) -> None:
        request = RequestBuilder().path(URL).build()

        assert request.method == "GET"
        assert str(request.url) == URL

    @pytest.mark.parametrize("verb", ["get", "post", "put", "delete"])
    def test_verbs(self, verb: str) -> None:
        builder = getattr(RequestBuilder(), verb)()

        assert builder.method == verb.upper()
        assert builder.path(URL).build().method == verb.upper()

    def test_last_verb_wins(self) -> None:
        request = RequestBuilder().get().delete().path(URL).build()

        assert request.method == "DELETE"

    def test_query_params_sorted_regardless_of_order(self) -> None:
        first = RequestBuilder().path(URL).query_param("b", "2").query_param("a", "1")
        second = RequestBuilder().path(URL).query_param("a", "1").query_param("b", "2")

        assert str(first.build().url) == f"{URL}?a=1&b=2"
        assert str(first.build().url) == str(second.build().url)

    def test_query_param_last_write_wins(self) -> None:
        request = (
            RequestBuilder()
            .path(URL)
            .query_param("page", "1")
            .query_param("page", "2")
            .build()
        )

        assert request.url.params.get_list("page") == ["2"]

    def test_query_params_are_encoded(self) -> None:
        request = RequestBuilder().path(URL).query_param("q", "a b&c").build()

        assert request.url.query == b"q=a+b%26c"
        assert request.url.params["q"] == "a b&c"

    def test_query_merged_with_existing_query(self) -> None:
        request = RequestBuilder().path(f"{URL}?z=9").query_param("a", "1").build()

        assert str(request.url) == f"{URL}?a=1&z=9"

    def test_repeated_key_from_path_is_kept(self) -> None:
        request = RequestBuilder().path(f"{URL}?b=0&a=0").query_param("a", "1").build()

        assert request.url.params.multi_items() == [("a", "0"), ("a", "1"), ("b", "0")]
        assert request.url.query == b"a=0&a=1&b=0"

    def test_no_query_params_leaves_url_alone(self) -> None:
        request = RequestBuilder().path(f"{URL}?z=9").build()

        assert str(request.url) == f"{URL}?z=9"

    def test_build_rederives_query_from_current_state(self) -> None:
        builder = RequestBuilder().path(URL).query_param("a", "1")
        builder.build()

        request = builder.query_param("b", "2").build()

        assert str(request.url) == f"{URL}?a=1&b=2"

    def test_with_content(self) -> None:
        request = RequestBuilder().post().path(URL).with_content(b'{"id":1}').build()

        assert request.read() == b'{"id":1}'

    def test_as_json_is_recorded_but_not_sent(self) -> None:
        builder = RequestBuilder().get().path(URL).as_json()

        request = builder.build()

        assert builder.accept == "application/json"
        assert "Accept" not in request.headers
        assert "Content-Type" not in request.headers

    def test_query_params_snapshot(self) -> None:
        builder = RequestBuilder().query_param("a", "1")

        params = builder.query_params
        params["b"] = "2"

        assert builder.query_params == {"a": "1"}

    def test_invalid_path(self) -> None:
        with pytest.raises(RequestConstructionError):
            RequestBuilder().path("https://exa\tmple.com").build()

    def test_invalid_path_with_query_params(self) -> None:
        with pytest.raises(RequestConstructionError):
            RequestBuilder().path("https://exa\tmple.com").query_param("a", "1").build()
