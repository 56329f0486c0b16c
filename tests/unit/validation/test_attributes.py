"""Tests for assignment interception on JSON attributes."""

import pytest

from recjson.validation.attributes import JsonAttribute, install_json_attribute


@pytest.fixture
def document_type():
    class Document:
        pass

    install_json_attribute(Document, "data")
    return Document


class TestJsonAttribute:
    """Test JSON decoding on assignment."""

    def test_valid_json_text_is_decoded(self, document_type):
        document = document_type()
        document.data = '{"name": "Ada", "tags": [1, 2]}'

        assert document.data == {"name": "Ada", "tags": [1, 2]}
        assert document.data_invalid_json is None

    @pytest.mark.parametrize("text,expected", [
        ("5", 5),
        ('"hello"', "hello"),
        ("null", None),
        ("[true, false]", [True, False]),
    ])
    def test_scalar_json_text(self, document_type, text, expected):
        document = document_type()
        document.data = text
        assert document.data == expected

    def test_malformed_text_sets_flag(self, document_type):
        document = document_type()
        document.data = "{not json"

        assert document.data == {}
        assert document.data_invalid_json == "{not json"

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", '{"a": NaN}', "[Infinity]"])
    def test_non_standard_constants_are_invalid(self, document_type, text):
        document = document_type()
        document.data = text

        assert document.data == {}
        assert document.data_invalid_json == text

    def test_structured_value_stored_unchanged(self, document_type):
        value = {"already": "decoded"}
        document = document_type()
        document.data = value

        assert document.data is value
        assert document.data_invalid_json is None

    def test_none_stored_unchanged(self, document_type):
        document = document_type()
        document.data = None
        assert document.data is None
        assert document.data_invalid_json is None

    def test_flag_cleared_by_next_assignment(self, document_type):
        document = document_type()
        document.data = "abc"
        assert document.data_invalid_json == "abc"

        document.data = '{"ok": true}'
        assert document.data_invalid_json is None

        document.data = "abc"
        document.data = ["structured"]
        assert document.data_invalid_json is None

    def test_flag_is_per_instance(self, document_type):
        broken = document_type()
        fine = document_type()
        broken.data = "abc"
        fine.data = "{}"

        assert broken.data_invalid_json == "abc"
        assert fine.data_invalid_json is None

    def test_unassigned_attribute_reads_none(self, document_type):
        document = document_type()
        assert document.data is None
        assert document.data_invalid_json is None

    def test_flag_accessor_is_read_only(self, document_type):
        document = document_type()
        with pytest.raises(AttributeError):
            document.data_invalid_json = "x"

    def test_class_access_returns_descriptor(self, document_type):
        assert isinstance(document_type.data, JsonAttribute)


class TestInstallJsonAttribute:
    """Test installation on existing attributes."""

    def test_class_default_kept(self):
        class Settings:
            data = {"theme": "dark"}

        install_json_attribute(Settings, "data")
        settings = Settings()

        assert settings.data == {"theme": "dark"}
        settings.data = '{"theme": "light"}'
        assert settings.data == {"theme": "light"}
        assert Settings().data == {"theme": "dark"}

    def test_wraps_existing_property(self):
        class Settings:
            def __init__(self):
                self.stored = []

            @property
            def data(self):
                return self.stored[-1] if self.stored else None

            @data.setter
            def data(self, value):
                self.stored.append(value)

        install_json_attribute(Settings, "data")
        settings = Settings()
        settings.data = '{"a": 1}'
        settings.data = "broken"

        assert settings.stored == [{"a": 1}, {}]
        assert settings.data == {}
        assert settings.data_invalid_json == "broken"

    def test_installed_once(self):
        class Document:
            pass

        first = install_json_attribute(Document, "data")
        second = install_json_attribute(Document, "data")
        assert first is second

        document = Document()
        document.data = '"5"'
        assert document.data == "5"

    def test_subclass_reuses_parent_descriptor(self):
        class Base:
            pass

        class Child(Base):
            pass

        descriptor = install_json_attribute(Base, "data")
        assert install_json_attribute(Child, "data") is descriptor
