from collections import namedtuple
from functools import reduce
import operator

import regex

from .util import UnrecognizedToken
from .machine import Machine


# kind: name of the matched group; text: word as typed; name: lower cased text
Token = namedtuple('Token', ['kind', 'text', 'name'])


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Words are whitespace separated; each is classified on its own, case
    insensitively. Holds no internal state.
    '''
    # Integral part of a number
    INTEGRAL = r'''
                # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                (?:
                    # 1, 12, or the 1 in 1_200.
                    \d{1,3}
                    (?:
                        # The 4, 45, etc. in 1234, 12345, etc.
                        \d
                        |
                        # Support not just digits, but thousands separators
                        (?:
                            _\d{3}
                        )
                    )*
                )
                '''
    # Fractional part of a number
    FRACTIONAL = r'''
                  # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                  (?:
                      \d+
                      (?:
                          _\d+
                      )*
                  )
                  '''
    # Scientific notation suffix
    EXPONENT = r'''
                (?:
                    e
                    [+\-]?
                    \d+
                )
                '''
    # Non-finite floats
    SPECIAL = r'''
               (?:
                   inf(?:inity)?
                   |
                   nan
               )
               '''
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+\-]?
              (?:
                  (?:
                      (?:
                          # 1, 12, 1_200, 1_200. (notice trailing dot), 1.3
                          {INTEGRAL}
                          (?:
                              \.
                              {FRACTIONAL}?
                          )?
                      )|(?:
                          # .2, 0.2, 0.200_200
                          {INTEGRAL}?
                          \.
                          {FRACTIONAL}
                      )
                  )
                  {EXPONENT}?
                  |
                  # Whatever else float() takes: inf, infinity, nan
                  {SPECIAL}
              )
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL,
                         EXPONENT=EXPONENT, SPECIAL=SPECIAL)

    assert not [operator
                for operator
                in Machine.OPERATORS
                if operator != operator.lower()]
    # + - * /, anything that isn't spelled out
    OPERATOR = r'(?:' + r'|'.join(regex.escape(name)
                                  for name in Machine.OPERATORS
                                  if not name.isalpha()) + r')'
    # sqrt, pow, fib
    FUNCTION = r'(?:' + r'|'.join(name
                                  for name in Machine.OPERATORS
                                  if name.isalpha()) + r')'
    CLEAR = r'clear'
    SHOW = r'(?:show|stack)'
    HELP = r'(?:help|\?)'
    QUIT = r'(?:quit|exit|q)'
    WORD = r'\S+'

    # All possible lexemes. Exactly one group matches a good word.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<function>' + FUNCTION + r')|' \
             r'(?<clear>' + CLEAR + r')|' \
             r'(?<show>' + SHOW + r')|' \
             r'(?<help>' + HELP + r')|' \
             r'(?<quit>' + QUIT + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.IGNORECASE,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def words(self, line):
        '''
        Split line into whitespace separated words.
        '''
        return regex.findall(type(self).WORD, line)

    def classify(self, word):
        '''
        Return Token for word.

        Raises UnrecognizedToken if word is neither command nor number.
        '''
        match = regex.fullmatch(type(self).LEXEME, word,
                                flags=type(self).FLAGS)
        if match is None:
            raise UnrecognizedToken(word)
        return Token(match.lastgroup, word, word.lower())

    def lex(self, line):
        '''
        Take a line and yield all tokens.

        Lazy, so tokens before a bad word can be acted upon before it raises.
        '''
        for word in self.words(line):
            yield self.classify(word)
