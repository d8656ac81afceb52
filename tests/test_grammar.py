"""Tests for named-rule grammars."""

from __future__ import annotations

import logging

import pytest

from expecta import (
    DuplicateRuleError, ExpectaError, Grammar, Token, UndefinedRuleError,
    alternation, optional, repetition, sequence, terminal, tree_to_data,
)


def lex(src: str) -> list[Token]:
    """Helper: whitespace-separated tokens, digits become 'num'."""
    out = []
    for word in src.split():
        out.append(Token("num" if word.isdigit() else "punct", word))
    return out


def list_grammar() -> Grammar:
    g = Grammar()
    g.define("value", alternation([terminal({"type": "num"}), g.ref("list")]))
    g.define("list", sequence([
        terminal("["),
        optional(sequence([g.ref("value"), repetition(sequence([terminal(","), g.ref("value")]))])),
        terminal("]"),
    ]))
    return g


class TestGrammar:
    def test_first_rule_is_start(self):
        g = list_grammar()
        assert g.start == "value"
        assert g.names() == ["value", "list"]

    def test_recursive_rules(self):
        node = list_grammar().match(lex("[ 1 , [ 2 ] , [ ] ]"))
        assert node is not None
        assert node.length == 10
        assert tree_to_data(node) == {
            "rule": "value",
            "contents": [{
                "rule": "list",
                "contents": [
                    ["punct", "["],
                    {"rule": "value", "contents": [["num", "1"]]},
                    ["punct", ","],
                    {"rule": "value", "contents": [{
                        "rule": "list",
                        "contents": [
                            ["punct", "["],
                            {"rule": "value", "contents": [["num", "2"]]},
                            ["punct", "]"],
                        ],
                    }]},
                    ["punct", ","],
                    {"rule": "value", "contents": [{
                        "rule": "list",
                        "contents": [["punct", "["], ["punct", "]"]],
                    }]},
                    ["punct", "]"],
                ],
            }],
        }

    def test_explicit_start_rule(self):
        g = list_grammar()
        assert g.match(lex("1"), start="list") is None
        assert g.match(lex("[ 1 ]"), start="list").rule_name == "list"

    def test_prefix_match_without_complete(self):
        node = list_grammar().match(lex("1 2"))
        assert node.length == 1

    def test_complete_rejects_leftovers(self, caplog):
        g = list_grammar()
        with caplog.at_level(logging.DEBUG, logger="expecta.match.grammar"):
            assert g.match(lex("1 2"), complete=True) is None
        assert "matched 1 of 2 tokens" in caplog.text
        assert g.match(lex("[ 1 ]"), complete=True) is not None

    def test_no_match(self):
        assert list_grammar().match(lex("[ 1 ,")) is None

    def test_forward_reference(self):
        g = Grammar()
        g.define("pair", sequence([g.ref("atom"), g.ref("atom")]))
        g.define("atom", terminal({"type": "num"}))
        node = g.match(lex("1 2"))
        assert [c.rule_name for c in node.contents] == ["atom", "atom"]

    def test_undefined_rule(self):
        g = Grammar()
        g.define("top", g.ref("missing"))
        with pytest.raises(UndefinedRuleError) as exc:
            g.match(lex("1"))
        assert "missing" in str(exc.value)
        with pytest.raises(KeyError):
            g.require_rule("nope")

    def test_duplicate_rule(self):
        g = Grammar()
        g.define("a", terminal("1"))
        with pytest.raises(DuplicateRuleError):
            g.define("a", terminal("2"))

    def test_empty_grammar(self):
        with pytest.raises(ExpectaError):
            Grammar().match(lex("1"))

    def test_define_returns_named_matcher(self):
        g = Grammar()
        num = g.define("num", terminal({"type": "num"}))
        assert num(lex("7")).rule_name == "num"
