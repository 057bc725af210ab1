"""Tests for the CSS value parser, serializer and walk."""

import pytest

from cssvg.value import (
    UNCHANGED,
    CommentNode,
    DivNode,
    FunctionNode,
    Replaced,
    SpaceNode,
    StringNode,
    WordNode,
    parse_value,
    stringify,
    walk,
)


# ---------------------------------------------------------------------------
# Lossless round trip
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "source",
    [
        "",
        "red",
        "1px solid #000",
        "url(a.png) no-repeat",
        'url("a.png")',
        "url( 'a.png' )",
        "url(  data:image/svg+xml,%3Csvg%3E  )",
        "url()",
        "URL(icon.svg)",
        "calc(100% - (2 * 1em))",
        "rgba(0, 0, 0, .5)",
        "a/*comment*/b",
        "1px/2px",
        '12px/1.5 "Helvetica Neue", sans-serif',
        "url(data:image/svg+xml;charset=utf-8,<svg xmlns='http://www.w3.org/2000/svg'></svg>)",
        'url("data:image/svg+xml;charset=utf-8,<svg xmlns=\\"http://www.w3.org/2000/svg\\"/>")',
        "image-set(url(a.png) 1x, url(b.png) 2x)",
        '"unclosed',
        "  leading and trailing  ",
    ],
)
def test_round_trip(source):
    assert stringify(parse_value(source)) == source


# ---------------------------------------------------------------------------
# Tree shape
# ---------------------------------------------------------------------------


class TestWords:
    def test_words_and_spaces(self):
        assert parse_value("1px solid") == [
            WordNode("1px"),
            SpaceNode(" "),
            WordNode("solid"),
        ]

    def test_div_captures_whitespace(self):
        nodes = parse_value("a , b")
        assert nodes == [WordNode("a"), DivNode(",", " ", " "), WordNode("b")]

    def test_comment(self):
        assert parse_value("/* hi */") == [CommentNode(" hi ")]


class TestStrings:
    def test_double_quoted(self):
        assert parse_value('"abc"') == [StringNode("abc", '"')]

    def test_single_quoted(self):
        assert parse_value("'abc'") == [StringNode("abc", "'")]

    def test_escapes_kept_raw(self):
        assert parse_value('"a\\"b"') == [StringNode('a\\"b', '"')]

    def test_unclosed(self):
        assert parse_value('"abc') == [StringNode("abc", '"', unclosed=True)]


class TestFunctions:
    def test_quoted_url(self):
        assert parse_value('url("a.svg")') == [
            FunctionNode("url", [StringNode("a.svg", '"')])
        ]

    def test_unquoted_url_is_single_word(self):
        nodes = parse_value("url( data:image/svg+xml,<svg a='b c'/> )")
        assert nodes == [
            FunctionNode(
                "url",
                [WordNode("data:image/svg+xml,<svg a='b c'/>")],
                before=" ",
                after=" ",
            )
        ]

    def test_quoted_url_whitespace_on_function(self):
        node = parse_value("url( 'a' )")[0]
        assert node.before == " "
        assert node.after == " "
        assert node.nodes == [StringNode("a", "'")]

    def test_empty_url(self):
        assert parse_value("url()") == [FunctionNode("url", [])]

    def test_is_url_case_insensitive(self):
        assert parse_value("URL(a)")[0].is_url
        assert not parse_value("calc(1px)")[0].is_url

    def test_nested(self):
        node = parse_value("calc(1px + (2px))")[0]
        assert node.value == "calc"
        assert isinstance(node.nodes[-1], FunctionNode)
        assert node.nodes[-1].value == ""


class TestMalformed:
    @pytest.mark.parametrize(
        "source",
        [
            "a)",
            ") url(a.png) )",
            "calc(1px",
            "calc(1px + (2px",
            "url(",
            "url(a.png ",
            'url("a.png"',
            "a \\",
            '"abc\\',
            "a /* open comment",
            "/*/",
            "url(a\\)",
        ],
    )
    def test_round_trip(self, source):
        assert stringify(parse_value(source)) == source

    def test_stray_close_paren_is_word(self):
        assert parse_value("a )") == [WordNode("a"), SpaceNode(" "), WordNode(")")]

    def test_close_paren_after_function_is_word(self):
        nodes = parse_value("f(a))")
        assert nodes == [FunctionNode("f", [WordNode("a")]), WordNode(")")]

    def test_unclosed_function(self):
        assert parse_value("calc(1px ") == [
            FunctionNode("calc", [WordNode("1px")], after=" ", unclosed=True)
        ]

    def test_nested_unclosed_functions(self):
        node = parse_value("a(b(c")[0]
        assert node.unclosed
        assert node.nodes == [FunctionNode("b", [WordNode("c")], unclosed=True)]

    def test_inner_function_closed(self):
        node = parse_value("a(b(c)")[0]
        assert node.unclosed
        assert node.nodes == [FunctionNode("b", [WordNode("c")])]

    def test_unclosed_unquoted_url(self):
        assert parse_value("url( a.svg") == [
            FunctionNode("url", [WordNode("a.svg")], before=" ", unclosed=True)
        ]

    def test_escaped_paren_does_not_close_url(self):
        node = parse_value("url(a\\)")[0]
        assert node.unclosed
        assert node.nodes == [WordNode("a\\)")]

    def test_unclosed_quoted_url(self):
        assert parse_value('url("a.svg"') == [
            FunctionNode("url", [StringNode("a.svg", '"')], unclosed=True)
        ]

    def test_trailing_backslash_is_word(self):
        assert parse_value("a \\") == [WordNode("a"), SpaceNode(" "), WordNode("\\")]

    def test_unclosed_comment(self):
        assert parse_value("a/* b") == [WordNode("a"), CommentNode(" b", unclosed=True)]


# ---------------------------------------------------------------------------
# Walk
# ---------------------------------------------------------------------------


class TestWalk:
    def test_unchanged_returns_equal_tree(self):
        nodes = parse_value("image-set(url(a.png) 1x)")
        assert walk(nodes, lambda node: UNCHANGED) == nodes

    def test_visits_in_source_order(self):
        seen = []

        def visit(node):
            seen.append(stringify(node))
            return UNCHANGED

        walk(parse_value("a f(b) c"), visit)
        assert seen == ["a", " ", "f(b)", "b", " ", "c"]

    def test_replaced_node_not_descended(self):
        seen = []

        def visit(node):
            seen.append(node)
            if isinstance(node, FunctionNode):
                return Replaced(WordNode("x"))
            return UNCHANGED

        result = walk(parse_value("f(a b)"), visit)
        assert result == [WordNode("x")]
        assert len(seen) == 1

    def test_nested_replacement(self):
        def visit(node):
            if node == WordNode("old"):
                return Replaced(WordNode("new"))
            return UNCHANGED

        nodes = parse_value("outer(inner(old) 1x)")
        assert stringify(walk(nodes, visit)) == "outer(inner(new) 1x)"

    def test_input_not_mutated(self):
        nodes = parse_value("f(old)")
        walk(nodes, lambda n: Replaced(WordNode("new")) if n == WordNode("old") else UNCHANGED)
        assert stringify(nodes) == "f(old)"
