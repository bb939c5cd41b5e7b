"""Tests for Schema Loader."""

import json

import pytest

from src.schema_refs.errors import ContainerLoadError, InvalidReferenceError
from src.schema_refs.json_ref import JsonRef
from src.schema_refs.loader import SchemaLoader


class TestSchemaLoader:
    """Test cases for SchemaLoader."""

    @pytest.fixture
    def loader(self):
        return SchemaLoader()

    @pytest.fixture
    def schema_dir(self, tmp_path):
        (tmp_path / "main.json").write_text(
            json.dumps({"definitions": {"a": {"$ref": "types.yaml#/name"}}}), encoding="utf-8"
        )
        (tmp_path / "types.yaml").write_text("name:\n  type: string\n", encoding="utf-8")
        (tmp_path / "broken.json").write_text("{", encoding="utf-8")
        return tmp_path

    def test_register_and_get_container(self, loader):
        """Test that registered documents are returned by root."""
        document = {"type": "object"}
        container = loader.register("http://example.com/schema.json", document)

        found = loader.get_container(JsonRef.from_string("http://example.com/schema.json#/type"))

        assert found is container
        assert found.document is document
        assert str(found.locator) == "http://example.com/schema.json"

    def test_register_rejects_fragment(self, loader):
        """Test that a locator must be a document root."""
        with pytest.raises(InvalidReferenceError, match="must not have a fragment"):
            loader.register("http://example.com/schema.json#/a", {})

    def test_register_schema_uses_id(self, loader):
        """Test registration under $id and the draft-04 id keyword."""
        with_dollar_id = loader.register_schema({"$id": "http://example.com/a.json#"})
        with_id = loader.register_schema({"id": "http://example.com/b.json"})

        assert str(with_dollar_id.locator) == "http://example.com/a.json"
        assert loader.get_container(JsonRef.from_string("http://example.com/b.json")) is with_id

    def test_register_schema_without_id_is_anonymous(self, loader):
        """Test that documents without an id get the empty locator."""
        container = loader.register_schema({"type": "string"})

        assert container.locator == JsonRef.empty()

    def test_register_schema_with_unusable_id(self, loader):
        """Test that an id with a non-pointer fragment is ignored."""
        container = loader.register_schema({"id": "http://example.com/c.json#anchor"})

        assert container.locator == JsonRef.empty()

    def test_load_json_file(self, loader, schema_dir):
        """Test loading a JSON file by path."""
        container = loader.load_file(schema_dir / "main.json")

        assert container.locator.scheme == "file"
        assert str(container.locator).endswith("/main.json")
        assert container.document["definitions"]["a"] == {"$ref": "types.yaml#/name"}

    def test_load_yaml_file_by_reference(self, loader, schema_dir):
        """Test loading a sibling YAML document from a resolved reference."""
        main = loader.load_file(schema_dir / "main.json")
        target = main.locator.resolve(JsonRef.from_string("types.yaml#/name"))

        container = loader.get_container(target.root)

        assert container.document == {"name": {"type": "string"}}

    def test_containers_are_cached(self, loader, schema_dir):
        """Test that each document is parsed once."""
        first = loader.load_file(schema_dir / "main.json")
        (schema_dir / "main.json").write_text("{}", encoding="utf-8")

        assert loader.load_file(schema_dir / "main.json") is first

        loader.clear()
        assert loader.load_file(schema_dir / "main.json").document == {}

    def test_missing_file(self, loader, schema_dir):
        """Test that a missing document is a load error."""
        with pytest.raises(ContainerLoadError, match="File not found") as excinfo:
            loader.load_file(schema_dir / "missing.json")

        assert excinfo.value.locator.endswith("/missing.json")

    def test_unparseable_file(self, loader, schema_dir):
        """Test that a parse failure is a load error."""
        with pytest.raises(ContainerLoadError, match="Invalid JSON format"):
            loader.load_file(schema_dir / "broken.json")

    def test_unsupported_scheme(self, loader):
        """Test that network documents are not fetched."""
        with pytest.raises(ContainerLoadError, match="unsupported URI scheme 'https'"):
            loader.get_container(JsonRef.from_string("https://example.com/schema.json"))

    def test_relative_root(self, loader):
        """Test that a relative reference cannot be loaded on its own."""
        with pytest.raises(ContainerLoadError, match="relative reference"):
            loader.get_container(JsonRef.from_string("other.json"))
