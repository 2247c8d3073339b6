import pytest

from lgenkit.ast_nodes import AtomicAST, StringSequenceAST
from lgenkit.attributed_parser import AttributedParserSLR
from lgenkit.grammar import AttributedGrammar, GrammarSymbol, SymbolType
from lgenkit.lexical import ErrorCollector, ErrorType
from lgenkit.parser import ParserAction
from lgenkit.tokens import Token, TokenType

L = GrammarSymbol("L", SymbolType.NON_TERMINAL)
X = GrammarSymbol("x", SymbolType.TERMINAL)
COMMA = GrammarSymbol(",", SymbolType.TERMINAL)
END = GrammarSymbol("$", SymbolType.TERMINAL)


def _single(children, new_symbol):
    return StringSequenceAST(
        new_symbol, children[0].line, children[0].column, items=[children[0].value]
    )


def _append(children, new_symbol):
    children[0].items.append(children[2].value)
    return children[0]


def _grammar(single_rule=_single):
    grammar = AttributedGrammar(L)
    grammar.add_production(L, [L, COMMA, X], _append)
    grammar.add_production(L, [X], single_rule)
    return grammar


def _engine(token, endmarker):
    return AtomicAST(token.text, token.line, token.column, token.text)


def _token(text, column):
    kind = TokenType.END if text == "$" else TokenType.SYMBOL
    return Token(1, column, text, kind)


def _feed(parser, texts, collector):
    for column, text in enumerate(texts, start=1):
        parser.parse(_token(text, column), collector)


def test_parses_list_with_grammar_rules():
    parser = AttributedParserSLR(_grammar(), END, _engine)
    collector = ErrorCollector()
    _feed(parser, ["x", ",", "x", ",", "x", "$"], collector)
    assert collector.errors == []
    assert parser.ast.symbol == "L"
    assert parser.ast.items == ["x", "x", "x"]


def test_start_state_shifts_terminal():
    parser = AttributedParserSLR(_grammar(), END, _engine)
    action = parser.action_table[parser.start_state]["x"]
    assert action.action is ParserAction.SHIFT
    assert parser.end_marker == "$"


def test_unexpected_symbol_message_is_quoted():
    parser = AttributedParserSLR(_grammar(), END, _engine)
    collector = ErrorCollector()
    parser.parse(Token(2, 5, ",", TokenType.SYMBOL), collector)
    [error] = collector.errors
    assert error.message == "Unexpected symbol ',',expected 'x',"
    assert error.type is ErrorType.GRAMMATICAL
    assert (error.line, error.column) == (2, 5)


def test_unexpected_eof_message():
    parser = AttributedParserSLR(_grammar(), END, _engine)
    collector = ErrorCollector()
    parser.parse(_token("$", 1), collector)
    [error] = collector.errors
    assert error.message == "Unexpected EOF symbol ,expected 'x',"


def test_parsing_continues_after_error():
    parser = AttributedParserSLR(_grammar(), END, _engine)
    collector = ErrorCollector()
    _feed(parser, [",", "x", "$"], collector)
    assert len(collector) == 1
    assert parser.ast.items == ["x"]


def test_set_reduction_is_rejected():
    parser = AttributedParserSLR(_grammar(), END, _engine)
    with pytest.raises(TypeError):
        parser.set_reduction("L--->x", _single)


def test_missing_rule_raises_on_reduction():
    parser = AttributedParserSLR(_grammar(single_rule=None), END, _engine)
    collector = ErrorCollector()
    parser.parse(_token("x", 1), collector)
    with pytest.raises(LookupError):
        parser.parse(_token("$", 2), collector)


def test_requires_attributed_grammar():
    from lgenkit.grammar import Grammar

    plain = Grammar(L)
    plain.add_production(L, [X])
    with pytest.raises(TypeError):
        AttributedParserSLR(plain, END, _engine)