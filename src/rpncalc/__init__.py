'''
RPN calculator.

Keeps a single stack of floats. Numbers are pushed, operators pop their
operands and push the result:

    > 1 2 + 3 4 + *
    Result: 21

Supports the four arithmetic operators, sqrt, pow and fib, plus the clear and
show stack commands. Errors only abort the rest of the line they occur on; the
stack keeps whatever the earlier tokens did to it.
'''

from .cli import CLI, main
from .dispatcher import Dispatcher, QUIT
from .lexer import Lexer, Token
from .machine import Machine


__all__ = 'Machine', 'Lexer', 'Token', 'Dispatcher', 'QUIT', 'CLI', 'main'
