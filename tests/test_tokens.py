from lgenkit.tokens import Token, TokenExtractor, TokenType


def _extractor():
    return TokenExtractor(
        {
            0: TokenType.KEYWORD,
            1: TokenType.VARIABLE,
            2: TokenType.SYMBOL,
        }
    )


def test_token_type_values_follow_declaration_order():
    garbage = _extractor().get_token([], 1, 1, "@")
    variable = _extractor().get_token([TokenType.VARIABLE], 1, 1, "x")
    assert garbage.type == 0
    assert variable.type == 6
    assert TokenType.END == 1


def test_highest_priority_wins():
    keyword_text = "token"
    result = _extractor().get_token([TokenType.VARIABLE, TokenType.KEYWORD], 3, 7, keyword_text)
    assert result == Token(3, 7, keyword_text, TokenType.KEYWORD)


def test_single_candidate():
    result = _extractor().get_token([TokenType.SYMBOL], 1, 1, "[")
    assert result.type is TokenType.SYMBOL
    assert result.text == "["
    assert (result.line, result.column) == (1, 1)


def test_no_candidate_gives_garbage():
    result = _extractor().get_token([], 2, 5, "@")
    assert result.type is TokenType.GARBAGE
    assert result.text == "@"


def test_candidate_without_priority_gives_garbage():
    result = _extractor().get_token([TokenType.OPERATOR], 1, 1, "=")
    assert result.type is TokenType.GARBAGE


def test_priority_keys_need_not_be_given_in_order():
    extractor = TokenExtractor({5: TokenType.VARIABLE, 1: TokenType.KEYWORD})
    result = extractor.get_token([TokenType.VARIABLE, TokenType.KEYWORD], 1, 1, "x")
    assert result.type is TokenType.KEYWORD