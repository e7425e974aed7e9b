import pytest

from src.core.utils.patterns import compile_path_pattern, path_matches


class TestCompilePathPattern:
    def test_double_star_spans_segments(self) -> None:
        regex = compile_path_pattern("/api/**")
        assert regex.match("/api/users/42/accounts")

    def test_single_star_stays_in_segment(self) -> None:
        regex = compile_path_pattern("/api/*")
        assert regex.match("/api/users")
        assert not regex.match("/api/users/42")

    def test_question_mark_matches_one_char(self) -> None:
        regex = compile_path_pattern("/v?/items")
        assert regex.match("/v1/items")
        assert not regex.match("/v10/items")
        assert not regex.match("/v//items")

    def test_literal_characters_are_escaped(self) -> None:
        regex = compile_path_pattern("/files/report.pdf")
        assert regex.match("/files/report.pdf")
        assert not regex.match("/files/reportXpdf")

    def test_trailing_segment_wildcard_matches_zero_segments(self) -> None:
        regex = compile_path_pattern("/api/**")
        assert regex.match("/api")
        assert not regex.match("/apiary")

    def test_inner_segment_wildcard(self) -> None:
        regex = compile_path_pattern("/banque/**/comptes")
        assert regex.match("/banque/comptes")
        assert regex.match("/banque/v1/clients/comptes")
        assert not regex.match("/banque/comptesX")

    def test_bare_double_star_is_not_a_segment(self) -> None:
        regex = compile_path_pattern("/static**")
        assert regex.match("/static")
        assert regex.match("/static/css/app.css")
        assert regex.match("/staticfiles")

    def test_compiled_patterns_are_cached(self) -> None:
        assert compile_path_pattern("/banque/**") is compile_path_pattern("/banque/**")


class TestPathMatches:
    @pytest.mark.parametrize("path", ["/", "/api/users", "/deeply/nested/path", "/api/items?x=1"])
    def test_match_all_pattern(self, path: str) -> None:
        assert path_matches(path, "/**") is True

    def test_trailing_double_star_matches_bare_prefix(self) -> None:
        assert path_matches("/api", "/api/**") is True
        assert path_matches("/api/", "/api/**") is True

    def test_prefix_pattern_excludes_other_roots(self) -> None:
        assert path_matches("/health", "/api/**") is False
        assert path_matches("/apiary", "/api/**") is False

    def test_exact_pattern(self) -> None:
        assert path_matches("/banque/comptes", "/banque/comptes") is True
        assert path_matches("/banque/comptes/1", "/banque/comptes") is False

    def test_empty_inputs(self) -> None:
        assert path_matches("", "/**") is False
        assert path_matches("/api", "") is False
