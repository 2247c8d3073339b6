# lgenkit

`lgenkit` is a small library for building SLR(1) parsers from context-free
grammars. It has no runtime dependencies.

- **Grammars** (`lgenkit.grammar`): `GrammarSymbol`, `SymbolType`, `Grammar`
  and `AttributedGrammar`, with FIRST and FOLLOW set computation. Invalid
  operations raise `GrammarError`.
- **Grammar operations** (`lgenkit.grammar_ops`): `get_words_grammar`,
  `add_word_to_grammar`, `grammar_union`, `attributed_grammar_union`,
  `augment_grammar` and `augment_attributed_grammar`.
- **Tokens** (`lgenkit.tokens`): the `Token` dataclass, `TokenType` and a
  `TokenExtractor` that picks a token type by priority (lower number wins;
  no match gives `TokenType.GARBAGE`).
- **Lexical checks and errors** (`lgenkit.lexical`): `LexicalRule`,
  `LexicalAnalyzer`, and the error model `ErrorType`, `CompileError` and
  `ErrorCollector`.
- **LR(0) items** (`lgenkit.items`): `ItemLR0`, `ItemLR0Collection`,
  `lr0_collection`, `closure`, `goto`, `canonical_lr0_collection` and
  `format_collection`.
- **SLR(1) parsers** (`lgenkit.parser`, `lgenkit.attributed_parser`):
  `ParserSLR`, `AttributedParserSLR`, the table entries `Action`,
  `Reduction` and `ParserAction`, and `dump_parser`.
- **The token-declaration language** (`lgenkit.lgen_symbols`,
  `lgenkit.lgen_syntax`, `lgenkit.ast_nodes`): a ready-made attributed
  grammar for statements of the form `token name = [ ..., ... ]`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Grammars

```python
from lgenkit.grammar import Grammar, GrammarSymbol, SymbolType

E = GrammarSymbol("E", SymbolType.NON_TERMINAL)
plus = GrammarSymbol("+", SymbolType.TERMINAL)
num = GrammarSymbol("num", SymbolType.TERMINAL)
end = GrammarSymbol("$", SymbolType.TERMINAL)

g = Grammar(E)                       # the first non terminal is the start symbol
g.add_production(E, [E, plus, num])
g.add_production(E, [num])
g.make_firsts_and_follows(end)

print([s.symbol for s in g.first([E])])   # ['num']
print([s.symbol for s in g.follow(E)])    # ['$', '+']
```

Adding the same production twice, or a production whose head is a terminal,
raises `GrammarError`. The empty string is a terminal created with
`epsilon=True` and used alone as a production body.

`AttributedGrammar.add_production(symbol, production, rule)` attaches a rule
to each production. A rule is called with the list of child nodes and the
head's name and returns the new node. Rules are looked up by
`get_production_id(head, symbols)`, which is the head, `--->` and the joined
body symbols; `get_production_rule` raises `GrammarError` for an unknown id.

`get_words_grammar(["if", "else"])` returns a right-regular grammar that
recognises exactly the given words, one terminal per character.
`grammar_union` and `attributed_grammar_union` need at least two grammars
and raise `ValueError` otherwise.

## SLR(1) parsing

`ParserSLR(grammar, endmarker, ast_engine)` augments the grammar, builds the
canonical LR(0) collection and fills its action and reduce tables
(`action_table`, `reduce_table`, `start_state`, `end_marker`). The
`ast_engine(token, endmarker)` callable turns each token into a leaf node;
nodes must have `symbol`, `line` and `column` attributes.

Tokens are fed one at a time with `parse(token, collector)`, ending with a
token whose node symbol is the end marker. Reductions for a `ParserSLR` are
registered with `set_reduction(reduction_id, reductor)`, where the id is the
head, `->` and the joined body symbols; reducing a production without one
raises `LookupError`. A symbol the current state does not accept is not
raised: a `CompileError` with `ErrorType.GRAMMATICAL` listing the expected
terminals is added to the collector. After parsing, `parser.ast` is the node
at the bottom of the stack (`LookupError` if nothing was parsed).

`AttributedParserSLR` requires an `AttributedGrammar` (`TypeError`
otherwise) and takes its reductions from the grammar's rules; its
`set_reduction` always raises `TypeError`.

`dump_parser(parser, path="")` writes the tables as `PARSER.json` into the
given directory (the current directory when empty) and returns the file's
path. A missing path raises `FileNotFoundError`, a file path
`NotADirectoryError`.

## The token-declaration language

`lgen_syntax.build_parser()` returns an `AttributedParserSLR` built from
`token_grammar()`, `ast_engine` and the end marker `$`. Parsing a
declaration yields a `TokenDeclarationAST` whose `eval()` is the words
grammar of the listed strings:

```python
from lgenkit.lexical import ErrorCollector
from lgenkit.lgen_syntax import build_parser
from lgenkit.tokens import Token, TokenType as T

parser = build_parser()
collector = ErrorCollector()
tokens = [
    (T.KEYWORD, "token"), (T.VARIABLE, "keywords"), (T.OPERATOR, "="),
    (T.SYMBOL, "["), (T.LITERAL_STRING, "if"), (T.SYMBOL, ","),
    (T.LITERAL_STRING, "else"), (T.SYMBOL, "]"), (T.END, "$"),
]
for column, (kind, text) in enumerate(tokens, start=1):
    parser.parse(Token(1, column, text, kind), collector)

grammar = parser.ast.eval()      # recognises "if" and "else"
```

The value of each string is the token's text as given. `ast_engine` raises
`ValueError` for a token it has no node for.

`lgen_symbols` holds the language's grammar symbols and the lexical grammars
of its tokens: `keyword_token_grammar()`, `variable_token_grammar()`,
`symbol_token_grammar()`, `operator_token_grammar()` and
`literal_string_token_grammar()`.

## What the package does not do

- It has no lexer: nothing turns source text into `Token` values or runs the
  lexical grammars as automata. Tokens must be built by the caller.
- It has no command-line program and does not read declaration files.
- `AssignmentAST` holds its operands but evaluating it does nothing, and
  there is no interpreter that evaluates whole programs.