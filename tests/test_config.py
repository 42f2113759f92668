"""Tests for pkgroute.config — RouteConfig frozen dataclass."""

import pytest

from pkgroute.config import VERSION_MARKER, RouteConfig
from pkgroute.errors import ConfigurationError


class TestRouteConfig:
    def test_defaults(self) -> None:
        cfg = RouteConfig()

        assert cfg.route_name == "package"
        assert cfg.param_name == "package"
        assert cfg.version_marker == VERSION_MARKER == "v"
        assert cfg.prefix == "/"
        assert cfg.debug is False

    def test_override(self) -> None:
        cfg = RouteConfig(prefix="/package", version_marker="at", debug=True)

        assert cfg.prefix == "/package"
        assert cfg.version_marker == "at"
        assert cfg.debug is True

    def test_frozen(self) -> None:
        cfg = RouteConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_defaults_validate(self) -> None:
        RouteConfig().validate()


class TestValidate:
    @pytest.mark.parametrize(
        ("kwargs", "fragment"),
        [
            ({"route_name": ""}, "route_name"),
            ({"param_name": ""}, "param_name"),
            ({"version_marker": ""}, "version_marker"),
            ({"version_marker": "v/x"}, "version_marker"),
            ({"prefix": "package"}, "prefix"),
        ],
    )
    def test_rejects(self, kwargs: dict[str, str], fragment: str) -> None:
        with pytest.raises(ConfigurationError, match=fragment):
            RouteConfig(**kwargs).validate()
