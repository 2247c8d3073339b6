import pytest

from lgenkit.ast_nodes import (
    AssignmentAST,
    AtomicAST,
    StringSequenceAST,
    TokenDeclarationAST,
    VariableAST,
)
from lgenkit.lexical import ErrorCollector, ErrorType
from lgenkit.lgen_syntax import ast_engine, build_parser, token_grammar
from lgenkit.tokens import Token, TokenType


def _declaration_tokens(words):
    tokens = [
        Token(1, 1, "token", TokenType.KEYWORD),
        Token(1, 7, "abc", TokenType.VARIABLE),
        Token(1, 11, "=", TokenType.OPERATOR),
        Token(1, 13, "[", TokenType.SYMBOL),
    ]
    column = 14
    for index, word in enumerate(words):
        if index:
            tokens.append(Token(1, column, ",", TokenType.SYMBOL))
            column += 1
        tokens.append(Token(1, column, word, TokenType.LITERAL_STRING))
        column += len(word)
    tokens.append(Token(1, column, "]", TokenType.SYMBOL))
    tokens.append(Token(1, column + 1, "$", TokenType.END))
    return tokens


def _parse(tokens):
    parser = build_parser()
    collector = ErrorCollector()
    for token in tokens:
        parser.parse(token, collector)
    return parser, collector


def test_parse_declaration_builds_words_grammar():
    parser, collector = _parse(_declaration_tokens(["if", "else"]))
    assert collector.errors == []
    result = parser.ast
    assert isinstance(result, TokenDeclarationAST)
    assert result.symbol == "TOKEN"
    grammar = result.eval()
    assert grammar.start_symbol.symbol == "start_symbol"
    assert {t.symbol for t in grammar.terminals} == {"i", "f", "e", "l", "s"}


def test_parse_single_word():
    parser, collector = _parse(_declaration_tokens(["for"]))
    assert len(collector) == 0
    grammar = parser.ast.eval()
    assert [t.symbol for t in grammar.terminals] == ["f", "o", "r"]


def test_unexpected_first_symbol_reported():
    parser = build_parser()
    collector = ErrorCollector()
    parser.parse(Token(1, 1, "=", TokenType.OPERATOR), collector)
    errors = collector.errors
    assert len(errors) == 1
    assert errors[0].type is ErrorType.GRAMMATICAL
    assert errors[0].message == "Unexpected symbol '=',expected 'token',"
    assert (errors[0].line, errors[0].column) == (1, 1)


def test_unexpected_eof_reported():
    parser = build_parser()
    collector = ErrorCollector()
    parser.parse(Token(2, 5, "$", TokenType.END), collector)
    errors = collector.errors
    assert len(errors) == 1
    assert errors[0].message.startswith("Unexpected EOF symbol ,expected ")
    assert (errors[0].line, errors[0].column) == (2, 5)


def test_missing_bracket_reports_error():
    tokens = _declaration_tokens(["if"])
    without_close = [t for t in tokens if t.text != "]"]
    _, collector = _parse(without_close)
    assert len(collector) == 1
    assert collector.errors[0].type is ErrorType.GRAMMATICAL


def test_token_grammar_start_and_productions():
    grammar = token_grammar()
    assert grammar.start_symbol.symbol == "TOKEN"
    assert {nt.symbol for nt in grammar.non_terminals} == {
        "TOKEN",
        "TOKEN_DECLARATION",
        "STRING_LIST",
        "STRING_SEQUENCE",
    }
    assert len(grammar.rules) == 5


def test_rule_rejects_wrong_symbols():
    grammar = token_grammar()
    rule = grammar.get_production_rule("TOKEN_DECLARATION--->tokenvariable")
    wrong = [AtomicAST("[", 1, 1, "["), VariableAST("variable", 1, 2, name="x")]
    with pytest.raises(ValueError):
        rule(wrong, "TOKEN_DECLARATION")


def test_single_text_rule_builds_sequence():
    grammar = token_grammar()
    rule = grammar.get_production_rule("STRING_SEQUENCE--->Text")
    node = rule([AtomicAST("Text", 3, 4, "word")], "STRING_SEQUENCE")
    assert isinstance(node, StringSequenceAST)
    assert node.items == ["word"]
    assert (node.line, node.column) == (3, 4)


def test_ast_engine_nodes():
    variable = ast_engine(Token(1, 2, "name", TokenType.VARIABLE), "$")
    assert isinstance(variable, VariableAST)
    assert (variable.symbol, variable.name) == ("variable", "name")
    literal = ast_engine(Token(1, 2, "abc", TokenType.LITERAL_STRING), "$")
    assert (literal.symbol, literal.eval()) == ("Text", "abc")
    assign = ast_engine(Token(1, 2, "=", TokenType.OPERATOR), "$")
    assert isinstance(assign, AssignmentAST)
    assert assign.eval() is None
    end = ast_engine(Token(1, 2, "$", TokenType.END), "$")
    assert end.symbol == "$"
    keyword = ast_engine(Token(1, 2, "token", TokenType.KEYWORD), "$")
    assert isinstance(keyword, TokenDeclarationAST)
    assert keyword.symbol == "token"


@pytest.mark.parametrize("text", ["[", "]", ";", ","])
def test_ast_engine_symbols(text):
    node = ast_engine(Token(1, 1, text, TokenType.SYMBOL), "$")
    assert node.symbol == text
    assert node.eval() == text


@pytest.mark.parametrize(
    "token",
    [
        Token(1, 1, "while", TokenType.KEYWORD),
        Token(1, 1, "|", TokenType.SYMBOL),
        Token(1, 1, "<", TokenType.OPERATOR),
        Token(1, 1, "?", TokenType.GARBAGE),
    ],
)
def test_ast_engine_rejects_unknown(token):
    with pytest.raises(ValueError):
        ast_engine(token, "$")


def test_build_parser_end_marker_and_fixed_reductions():
    parser = build_parser()
    assert parser.end_marker == "$"
    with pytest.raises(TypeError):
        parser.set_reduction("X->y", lambda nodes, symbol: nodes[0])