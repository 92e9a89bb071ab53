"""Configuration Tests (TargetProfile / TypeRefSettings)"""

import pytest
from pydantic import ValidationError

from codegraph_typeref import (
    INT,
    ConfigurationError,
    ListType,
    TargetProfile,
    TupleType,
    TypeReferenceTranslator,
    TypeRefSettings,
    get_settings,
)


class TestTargetProfile:
    def test_defaults(self):
        profile = TargetProfile()
        assert profile.dict_name == "Dictionary"
        assert profile.dict_namespace == "System.Collections.Generic"
        assert profile.tuple_namespace == "System"
        assert profile.callable_namespace == "System"
        assert profile.object_reference().name == "object"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            TargetProfile(list_name="   ")

    def test_name_stripped(self):
        assert TargetProfile(set_name=" HashSet ").set_name == "HashSet"

    def test_blank_namespace_means_none(self):
        assert TargetProfile(tuple_namespace="").tuple_namespace is None

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            TargetProfile(frozenset_name="ISet")

    def test_frozen(self):
        profile = TargetProfile()
        with pytest.raises(ValidationError):
            profile.list_name = "IList"


class TestSettings:
    def test_defaults(self, reset_settings, monkeypatch):
        monkeypatch.delenv("TYPEREF_LOG_LEVEL", raising=False)
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.profile == TargetProfile()

    def test_cached(self, reset_settings):
        assert get_settings() is get_settings()

    def test_env_override(self, reset_settings, monkeypatch):
        monkeypatch.setenv("TYPEREF_LOG_LEVEL", "debug")
        monkeypatch.setenv("TYPEREF_PROFILE__SET_NAME", "HashSet")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.profile.set_name == "HashSet"

    def test_invalid_env_wrapped(self, reset_settings, monkeypatch):
        monkeypatch.setenv("TYPEREF_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()
        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_direct_instantiation(self):
        settings = TypeRefSettings(profile=TargetProfile(list_name="IList"))
        assert settings.profile.list_name == "IList"

    def test_translator_uses_settings_profile(self, reset_settings, monkeypatch):
        monkeypatch.setenv("TYPEREF_PROFILE__TUPLE_NAMESPACE", "System.Runtime")
        ref, namespaces = TypeReferenceTranslator({}).translate(TupleType((INT,)))
        assert str(ref) == "Tuple<int>"
        assert namespaces == {"System.Runtime"}

    def test_explicit_profile_wins(self, reset_settings, monkeypatch):
        monkeypatch.setenv("TYPEREF_PROFILE__LIST_NAME", "IList")
        translator = TypeReferenceTranslator({}, profile=TargetProfile())
        assert str(translator.translate(ListType(INT))[0]) == "List<int>"
