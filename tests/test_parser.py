"""Tests for pkgroute.routing.parser — segments to package identity."""

import pytest

from pkgroute.routing.parser import parse_path, parse_segments, split_path
from pkgroute.routing.route import PackageIdentity


def _ident(name: str, version: str | None = None) -> PackageIdentity:
    return PackageIdentity(package_name=name, requested_version=version)


class TestVersionMarker:
    def test_unscoped(self) -> None:
        assert parse_segments(["nuxt", "v", "4.2.0"]) == _ident("nuxt", "4.2.0")

    def test_scoped(self) -> None:
        assert parse_segments(["@nuxt", "kit", "v", "1.0.0"]) == _ident("@nuxt/kit", "1.0.0")

    def test_first_marker_wins(self) -> None:
        assert parse_segments(["a", "v", "b", "v", "c"]) == _ident("a", "b/v/c")

    def test_trailing_marker_ignored(self) -> None:
        assert parse_segments(["a", "v"]) == _ident("a/v")

    def test_lone_marker(self) -> None:
        assert parse_segments(["v"]) == _ident("v")

    def test_marker_first_segment(self) -> None:
        """Nothing before the marker still splits, with an empty name."""
        assert parse_segments(["v", "1.0.0"]) == _ident("", "1.0.0")

    def test_marker_beats_fused_version(self) -> None:
        assert parse_segments(["pkg@1.0", "v", "2.0"]) == _ident("pkg@1.0", "2.0")

    def test_custom_marker(self) -> None:
        assert parse_segments(["nuxt", "-", "4.2.0"], marker="-") == _ident("nuxt", "4.2.0")
        assert parse_segments(["nuxt", "v", "4.2.0"], marker="-") == _ident("nuxt/v/4.2.0")

    def test_marker_match_is_exact(self) -> None:
        assert parse_segments(["nuxt", "V", "4.2.0"]) == _ident("nuxt/V/4.2.0")
        assert parse_segments(["nuxt", "v1", "4.2.0"]) == _ident("nuxt/v1/4.2.0")


class TestFusedVersion:
    def test_unscoped(self) -> None:
        assert parse_segments(["axios@1.13.3"]) == _ident("axios", "1.13.3")

    def test_scoped_single_segment(self) -> None:
        assert parse_segments(["@nuxt/kit@1.0.0"]) == _ident("@nuxt/kit", "1.0.0")

    def test_scoped_split_segments(self) -> None:
        assert parse_segments(["@nuxt", "kit@1.0.0"]) == _ident("@nuxt/kit", "1.0.0")

    def test_dist_tag(self) -> None:
        assert parse_segments(["vue@next"]) == _ident("vue", "next")

    def test_last_at_separates_version(self) -> None:
        assert parse_segments(["a@b@c"]) == _ident("a@b", "c")

    def test_slash_in_version_falls_through(self) -> None:
        assert parse_segments(["axios@1.0", "extra"]) == _ident("axios@1.0/extra")

    def test_scoped_without_version(self) -> None:
        assert parse_segments(["@nuxt", "kit"]) == _ident("@nuxt/kit")

    def test_trailing_at_is_not_a_version(self) -> None:
        assert parse_segments(["axios@"]) == _ident("axios@")

    def test_newline_is_an_ordinary_character(self) -> None:
        assert parse_segments(["axios@1.0\n"]) == _ident("axios", "1.0\n")
        assert parse_segments(["axios\n"]) == _ident("axios\n")


class TestNoVersion:
    @pytest.mark.parametrize(
        ("segments", "name"),
        [
            (["nuxt"], "nuxt"),
            (["@nuxt", "kit"], "@nuxt/kit"),
            (["a", "b", "c"], "a/b/c"),
        ],
    )
    def test_joined_name(self, segments: list[str], name: str) -> None:
        assert parse_segments(segments) == _ident(name)

    def test_empty(self) -> None:
        assert parse_segments([]) == _ident("")

    def test_accepts_tuple(self) -> None:
        assert parse_segments(("nuxt", "v", "1")) == _ident("nuxt", "1")


class TestParsePath:
    def test_split_drops_empty_segments(self) -> None:
        assert split_path("//@nuxt//kit/") == ("@nuxt", "kit")

    def test_split_root(self) -> None:
        assert split_path("/") == ()

    def test_split_decodes(self) -> None:
        assert split_path("/%40nuxt/kit") == ("@nuxt", "kit")

    def test_parse_path(self) -> None:
        assert parse_path("/@nuxt/kit/v/1.0.0") == _ident("@nuxt/kit", "1.0.0")
        assert parse_path("/axios@1.13.3") == _ident("axios", "1.13.3")
        assert parse_path("/") == _ident("")
