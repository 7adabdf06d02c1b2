import json
import logging
import uuid
from pathlib import Path
from urllib.parse import parse_qsl, urlsplit

import pytest

from api_docs_postman.config import DocumentationConfig, load_config
from api_docs_postman.parser.endpoints import load_grouping
from api_docs_postman.writer.base_url import BaseUrlError, format_root, resolve_base_url
from api_docs_postman.writer.collection import (
    SCHEMA_URL,
    PostmanCollectionWriter,
    build_collection,
    host_of,
)

FIXTURES = Path(__file__).parent / "fixtures"


def _failing_resolver(base_url):
    raise RuntimeError("no application root")


class TestFormatRoot:
    def test_trailing_slash_removed(self):
        assert format_root("https://a.test/") == "https://a.test"

    def test_app_url_used_when_unset(self):
        assert format_root(None, app_url="http://app.test/") == "http://app.test"

    def test_nothing_configured(self):
        with pytest.raises(BaseUrlError):
            format_root(None)


class TestResolveBaseUrl:
    def test_resolved(self):
        resolved = resolve_base_url("https://a.test/")
        assert resolved.value == "https://a.test"
        assert resolved.fallback is False

    def test_fallback_on_failure(self, caplog):
        with caplog.at_level(logging.WARNING):
            resolved = resolve_base_url("localhost:8000", _failing_resolver)
        assert resolved.value == "localhost:8000"
        assert resolved.fallback is True
        assert "Could not resolve base URL" in caplog.text

    def test_fallback_without_configured_value(self):
        assert resolve_base_url(None).value == ""


class TestHostOf:
    def test_absolute_url(self):
        assert host_of("https://api.example.com:8443/v1") == "api.example.com"

    def test_case_preserved(self):
        assert host_of("https://API.Example.com/v1") == "API.Example.com"

    def test_ipv6_keeps_brackets(self):
        assert host_of("http://[::1]:8000") == "[::1]"

    def test_userinfo_dropped(self):
        assert host_of("https://user:pw@api.example.com:8443") == "api.example.com"

    def test_not_absolute(self):
        assert host_of("api.example.com") == "api.example.com"
        assert host_of("") == ""


class TestCollectionEnvelope:
    def test_base_url_variable(self):
        collection = build_collection({}, DocumentationConfig(base_url="https://api.example.com/"))
        assert collection["variable"] == [
            {"id": "baseUrl", "key": "baseUrl", "type": "string", "name": "string", "value": "api.example.com"},
        ]

    def test_postman_base_url_override(self):
        config = DocumentationConfig(base_url="http://a.test", postman={"base_url": "https://b.test"})
        writer = PostmanCollectionWriter(config)
        assert writer.base_url == "https://b.test"
        assert writer.generate({})["variable"][0]["value"] == "b.test"

    def test_resolver_failure_uses_raw_value(self):
        config = DocumentationConfig(base_url="not a url")
        writer = PostmanCollectionWriter(config, resolver=_failing_resolver)
        assert writer.generate({})["variable"][0]["value"] == "not a url"

    def test_info_block(self):
        collection = build_collection({}, DocumentationConfig(base_url="http://a.test", title="Shop", description="Docs"))
        info = collection["info"]
        assert info["name"] == "Shop"
        assert info["description"] == "Docs"
        assert info["schema"] == SCHEMA_URL
        assert "v2.1.0" in info["schema"]
        uuid.UUID(info["_postman_id"])

    def test_name_derived_from_app_name(self):
        collection = build_collection({}, DocumentationConfig(base_url="http://a.test", app_name="Shop"))
        assert collection["info"]["name"] == "Shop API"
        assert collection["info"]["description"] == ""

    def test_postman_id_unique_per_build(self):
        writer = PostmanCollectionWriter(DocumentationConfig(base_url="http://a.test"))
        assert writer.generate({})["info"]["_postman_id"] != writer.generate({})["info"]["_postman_id"]

    def test_auth_disabled_by_default(self):
        assert build_collection({}, DocumentationConfig(base_url="http://a.test"))["auth"] == {"type": "noauth"}

    def test_top_level_keys(self):
        collection = build_collection({}, DocumentationConfig(base_url="http://a.test"))
        assert list(collection) == ["variable", "info", "item", "auth"]


class TestCollectionFromFixtures:
    @pytest.fixture
    def collection(self):
        config = load_config(FIXTURES / "config.yaml")
        return build_collection(load_grouping(FIXTURES / "endpoints.yaml"), config)

    def test_groups_in_order(self, collection):
        assert [g["name"] for g in collection["item"]] == ["Users", "Health"]
        assert collection["item"][0]["description"] == "Manage user accounts."

    def test_requests_in_order(self, collection):
        names = [i["name"] for i in collection["item"][0]["item"]]
        assert names == ["List users", "users/{id}"]

    def test_apikey_auth(self, collection):
        assert collection["auth"]["type"] == "apikey"
        assert collection["auth"]["apikey"][1]["value"] == "X-Api-Key"

    def test_list_users_request(self, collection):
        request = collection["item"][0]["item"][0]["request"]
        assert request["method"] == "GET"
        assert "auth" not in request
        assert request["header"][0] == {"key": "Authorization", "value": "Bearer {{token}}"}
        query = {q["key"]: q for q in request["url"]["query"]}
        assert list(query) == ["page", "search", "ids[0]", "ids[1]"]
        assert query["page"]["description"] == "The page number."
        assert query["search"]["disabled"] is True
        assert query["page"]["disabled"] is False

    def test_update_user_request(self, collection):
        request = collection["item"][0]["item"][1]["request"]
        assert request["method"] == "PUT"
        assert request["auth"] == {"type": "noauth"}
        assert request["url"]["variable"] == [
            {"id": "id", "key": "id", "value": "42", "description": "The user ID."},
        ]
        assert request["body"] == {
            "mode": "formdata",
            "formdata": [
                {"key": "name", "value": "Jane Doe", "type": "text"},
                {"key": "avatar", "src": [], "type": "file"},
            ],
        }

    def test_every_item_named(self, collection):
        for group in collection["item"]:
            for item in group["item"]:
                assert item["name"]

    def test_raw_urls_round_trip(self, collection):
        for group in collection["item"]:
            for item in group["item"]:
                url = item["request"]["url"]
                parts = urlsplit(url["raw"])
                assert parts.netloc == url["host"]
                assert parts.path == "/" + url["path"]
                assert [k for k, _ in parse_qsl(parts.query, keep_blank_values=True)] == [
                    q["key"] for q in url["query"]
                ]

    def test_json_serializable(self, collection):
        assert json.loads(json.dumps(collection)) == collection


class TestYamlExampleValues:
    def test_yaml_date_in_body_builds(self, tmp_path):
        f = tmp_path / "endpoints.yaml"
        f.write_text(
            "Users:\n"
            "  - uri: users\n"
            "    methods: [POST]\n"
            "    bodyParameters:\n"
            "      birthday: 1990-05-01\n"
        )
        collection = build_collection(load_grouping(f), DocumentationConfig(base_url="http://a.test"))
        body = collection["item"][0]["item"][0]["request"]["body"]
        assert json.loads(body["raw"]) == {"birthday": "1990-05-01"}
