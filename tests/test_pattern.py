"""Tests for the public API: translate, matches, filter, get_matcher."""

import pytest

import fnglob
from fnglob import Options, PatternSet, PatternTypeError, get_matcher, matches, translate


PLAIN = ["abc", "a/b/c", "file.txt", "dir/sub/file-1_2.md", "with space"]


class TestLiteralPatterns:
    @pytest.mark.parametrize("p", PLAIN)
    def test_matches_itself(self, p):
        assert matches(p, p) is True

    @pytest.mark.parametrize("p", PLAIN)
    def test_rejects_longer_name(self, p):
        assert matches(p + "x", p) is False

    def test_unterminated_brace(self):
        assert matches("{", "{") is True

    def test_unterminated_bracket(self):
        assert matches("[", "[") is True
        assert matches("a[b", "a[b") is True

    def test_stray_closing_delimiters(self):
        assert matches("}", "}") is True
        assert matches("a]", "a]") is True

    def test_trailing_empty_member_is_literal(self):
        assert matches("a{b}", "a{b,}") is True
        assert matches("ab", "a{b,}") is False

    def test_single_member_braces(self):
        assert matches("a{b}c", "a{b}c") is True
        assert matches("abc", "a{b}c") is False

    def test_escaped_star(self):
        assert matches("a*", "a\\*") is True
        assert matches("ab", "a\\*") is False


class TestBraces:
    def test_alternatives(self):
        assert matches("test.json", "t{est,ango}.{js,json}") is True
        assert matches("tango.js", "t{est,ango}.{js,json}") is True
        assert matches("tent.js", "t{est,ango}.{js,json}") is False

    def test_numeric_range_with_class(self):
        assert matches("01.json", "[0-9]{0..9}.json") is True
        assert matches("0a.json", "[0-9]{0..9}.json") is False

    def test_alternatives_across_segments(self):
        assert matches("lib/x.js", "{src,lib}/*.js") is True
        assert matches("doc/x.js", "{src,lib}/*.js") is False


class TestNegation:
    @pytest.mark.parametrize("path", ["a.js", "a.py", "src/a.js", ".js"])
    def test_single_bang_inverts(self, path):
        assert matches(path, "!*.js") is (not matches(path, "*.js"))

    @pytest.mark.parametrize("path", ["a.js", "a.py"])
    def test_double_bang_cancels(self, path):
        assert matches(path, "!!*.js") is matches(path, "*.js")

    def test_negate_option(self):
        assert matches("a.js", "*.js", negate=True) is False
        assert matches("a.js", "!*.js", negate=True) is True

    def test_bang_after_start_is_literal(self):
        assert matches("a!b", "a!b") is True


class TestOptions:
    def test_dot(self):
        assert matches(".hidden", "*") is False
        assert matches(".hidden", "*", dot=True) is True

    def test_ignore_case(self):
        assert matches("A", "a", ignore_case=True) is True
        assert matches("A", "a") is False

    def test_no_globstar(self):
        assert matches("a/b/c", "a/**", globstar=False) is False
        assert matches("a/b", "a/**", globstar=False) is True

    def test_options_object(self):
        options = Options(dot=True, ignore_case=True)
        assert matches("X/.Y", "x/*", options) is True

    def test_keyword_overrides_object(self):
        options = Options(dot=True)
        assert matches(".a", "*", options, dot=False) is False


class TestGlobstar:
    def test_end_of_pattern(self):
        assert matches("a/b/c", "a/**") is True
        assert matches("a/.b/c", "a/**") is False
        assert matches("a/.b/c", "a/**", dot=True) is True

    def test_character_class_negation(self):
        assert matches("d", "[^a-c]*") is True
        assert matches("a", "[^a-c]*") is False

    def test_leading_star_non_empty(self):
        assert matches("a/", "a/*") is False
        assert matches("a/b", "a/*") is True


class TestTranslate:
    def test_negation_flag(self):
        assert translate("!a").is_negated is True
        assert translate("!!a").is_negated is False
        assert translate("a", negate=True).is_negated is True
        assert translate("!a", negate=True).is_negated is False

    def test_expands_braces(self):
        ps = translate("a/{b,c}")
        assert isinstance(ps, PatternSet)
        assert len(ps.patterns) == 2

    def test_reusable(self):
        ps = translate("**/*.md")
        assert ps.matches("docs/api.md") is True
        assert ps.matches("docs/api.txt") is False
        assert ps("readme.md") is True

    def test_any_match_ignores_negation(self):
        ps = translate("!*.md")
        assert ps.any_match("a.md") is True
        assert ps.matches("a.md") is False

    def test_immutable(self):
        ps = translate("a")
        with pytest.raises(AttributeError):
            ps.is_negated = True


class TestFilter:
    def test_preserves_order(self):
        assert fnglob.filter(["a", "b", "ab"], "a*") == ["a", "ab"]

    def test_accepts_any_iterable(self):
        assert fnglob.filter(iter(["x.py", "y.js"]), "*.py") == ["x.py"]

    def test_tree_star(self, tree_paths):
        # single-segment patterns match any segment of the path
        assert fnglob.filter(tree_paths, "*.txt") == [
            "readme.txt", "src/sub/deep.txt", "data.txt",
        ]

    def test_tree_star_in_subdir(self, tree_paths):
        assert fnglob.filter(tree_paths, "src/*") == ["src/main.py", "src/util.py"]

    def test_tree_doublestar(self, tree_paths):
        result = fnglob.filter(tree_paths, "**")
        assert ".hidden" not in result
        assert "src/.config" not in result
        assert "src/sub/deep.txt" in result
        assert len(result) == len(tree_paths) - 2

    def test_tree_doublestar_extension(self, tree_paths):
        assert fnglob.filter(tree_paths, "src/**/*.py") == ["src/main.py", "src/util.py"]

    def test_tree_question(self, tree_paths):
        assert fnglob.filter(tree_paths, "docs/???.md") == ["docs/api.md"]

    def test_tree_dotstar(self, tree_paths):
        assert fnglob.filter(tree_paths, ".*") == [".hidden", "src/.config"]

    def test_negated_filter(self, tree_paths):
        assert fnglob.filter(tree_paths, "!**/*.{py,md}") == [
            "readme.txt", ".hidden", "src/.config", "src/sub/deep.txt", "data.txt",
        ]


class TestGetMatcher:
    def test_predicate(self, tree_paths):
        is_doc = get_matcher("docs/*.md")
        assert [p for p in tree_paths if is_doc(p)] == ["docs/guide.md", "docs/api.md"]


class TestTypeErrors:
    def test_path_not_str(self):
        with pytest.raises(PatternTypeError):
            matches(None, "a")

    def test_pattern_not_str(self):
        with pytest.raises(PatternTypeError):
            matches("a", b"a")

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            translate(42)

    def test_filter_rejects_str(self):
        with pytest.raises(PatternTypeError):
            fnglob.filter("abc", "a")

    def test_filter_checks_each_path(self):
        with pytest.raises(PatternTypeError):
            fnglob.filter(["a", 1], "a")
