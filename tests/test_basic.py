"""Tests for the samentity package."""

import httpx
import pytest

from samentity import (
    API,
    API_VERSION,
    DFARSResponse,
    Entity,
    EntityResponse,
    FARResponse,
    ParseError,
    SamEntityError,
    dump_response,
    parse_response,
    parse_entity,
    settings,
)
from samentity.config import Settings


class TestPackageImports:
    """Test that package exports are available."""

    def test_parser_imports(self) -> None:
        """Test that the parse functions are importable."""
        assert parse_response is not None
        assert parse_entity is not None
        assert dump_response is not None

    def test_model_imports(self) -> None:
        """Test that models are importable."""
        assert EntityResponse is not None
        assert Entity is not None

    def test_exception_imports(self) -> None:
        """Test that exceptions are importable."""
        assert SamEntityError is not None
        assert ParseError is not None

    def test_settings_import(self) -> None:
        """Test that settings is importable."""
        assert settings is not None


class TestExceptionHierarchy:
    """Test exception class hierarchy."""

    def test_parse_error_is_sam_entity_error(self) -> None:
        """ParseError should be a subclass of SamEntityError."""
        assert issubclass(ParseError, SamEntityError)

    def test_can_catch_with_base(self) -> None:
        """Parse failures should be catchable with SamEntityError."""
        with pytest.raises(SamEntityError):
            parse_response(b"{")


class TestSettings:
    """Test configuration settings."""

    def test_defaults(self) -> None:
        """Defaults should point at the production Entity API."""
        defaults = Settings(_env_file=None)
        assert defaults.SAM_ENTITY_API_SCHEME == "https"
        assert defaults.SAM_ENTITY_API_HOST == "api.sam.gov"
        assert defaults.SAM_ENTITY_API_PATH == "entity-information/v2/entities"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The host can be switched through the environment."""
        monkeypatch.setenv("SAM_ENTITY_API_HOST", "api-alpha.sam.gov")

        overridden = Settings(_env_file=None)
        assert overridden.SAM_ENTITY_API_HOST == "api-alpha.sam.gov"

    def test_no_required_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should load with an empty environment."""
        for name in ("SAM_ENTITY_API_SCHEME", "SAM_ENTITY_API_HOST"):
            monkeypatch.delenv(name, raising=False)

        assert Settings(_env_file=None) is not None


class TestApi:
    """Test the API location constants."""

    def test_version(self) -> None:
        """The schema version should be 2.5."""
        assert API_VERSION == 2.5

    def test_base_url(self) -> None:
        """API should be scheme, host and path with no query."""
        assert isinstance(API, httpx.URL)
        assert API.scheme == "https"
        assert API.host == settings.SAM_ENTITY_API_HOST
        assert API.path == "/entity-information/v2/entities"
        assert API.query == b""

    def test_caller_query(self) -> None:
        """Caller parameters should merge into a new URL."""
        url = API.copy_merge_params({"api_key": "secret", "ueiSAM": "C6M7C2FLKER5"})

        assert url.path == API.path
        assert url.params["api_key"] == "secret"
        assert url.params["ueiSAM"] == "C6M7C2FLKER5"
        # Base URL is unchanged
        assert "api_key" not in API.params

    def test_dfars_response_aliases_far_response(self) -> None:
        """DFARS responses share the FAR response shape."""
        assert DFARSResponse is FARResponse
