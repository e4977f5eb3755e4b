from collections import deque
import math

from .util import (EmptyStack, InsufficientOperands, DivisionByZero,
                   NegativeSqrt, NonIntegerInput, NegativeInput,
                   UnknownOperator, wrap_user_errors, format_number)


# Smallest n with F(n) past the largest float
FIB_OVERFLOW = 1477


def _isodd(n):
    return n.is_integer() and n % 2 == 1


def _pow(base, exponent):
    '''
    math.pow, but with the IEEE result where math.pow raises.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _isodd(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 to a negative power; keeps the sign of zero for odd exponents
        if base == 0:
            if _isodd(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Owns the operand stack and applies operators to it. Nothing outside the
    machine should hold on to self.stack.
    '''

    def __init__(self, trace=print):
        '''
        Create empty stack machine.

        :param trace: Callable taking one line of text; receives a line per
                      computation, and the stack listing. Defaults to print.
        '''
        self.stack = deque()
        self.trace = trace

    def push(self, value):
        '''
        Push value onto the top of the stack.
        '''
        self.stack.append(float(value))

    @wrap_user_errors('Empty stack', EmptyStack)
    def pop(self):
        '''
        Pop and return element at top of stack.
        '''
        return self.stack.pop()

    def clear(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    @wrap_user_errors('Empty stack', EmptyStack)
    def peek(self):
        '''
        Return the element on the top of the stack, leaving it there.
        '''
        return self.stack[-1]

    result = peek

    def size(self):
        return len(self.stack)

    def isempty(self):
        return not self.stack

    def __len__(self):
        return len(self.stack)

    def apply(self, operator):
        '''
        Apply named operator or function to the stack.

        Operands are popped as the operator goes, so whatever was popped before
        an error is gone.
        '''
        name = operator.lower()
        try:
            f = type(self).OPERATORS[name]
        except KeyError:
            raise UnknownOperator("Unknown operator '{}'".format(operator))
        f(self)

    def printstack(self):
        '''
        Print all elements on the stack, top of the stack first.
        '''
        if not self.stack:
            self.trace('Stack: [empty]')
            return
        self.trace('Stack (top -> bottom): ' +
                   ' '.join(map(format_number, reversed(self.stack))))
        self.trace('Stack size: {}'.format(len(self.stack)))

    def _computed(self, expression, result):
        self.trace('Computed: {} = {}'.format(expression,
                                              format_number(result)))

    def _binary(self, symbol, f):
        # b is the top of the stack, a the one below
        b = self.pop()
        a = self.pop()
        result = f(a, b)
        self.push(result)
        self._computed('{} {} {}'.format(format_number(a), symbol,
                                         format_number(b)),
                       result)

    def add(self):
        self._binary('+', lambda a, b: a + b)

    def subtract(self):
        self._binary('-', lambda a, b: a - b)

    def multiply(self):
        self._binary('*', lambda a, b: a * b)

    def divide(self):
        '''
        Divide second element by top element.

        The divisor is checked after it is popped but before the dividend is.
        '''
        b = self.pop()
        if b == 0:
            raise DivisionByZero('Division by zero')
        a = self.pop()
        result = a / b
        self.push(result)
        self._computed('{} / {}'.format(format_number(a), format_number(b)),
                       result)

    def sqrt(self):
        '''
        Replace top element with its square root.
        '''
        a = self.pop()
        if a < 0:
            raise NegativeSqrt('Cannot take the square root of a negative '
                               'number')
        result = math.sqrt(a)
        self.push(result)
        self._computed('sqrt({})'.format(format_number(a)), result)

    def power(self):
        '''
        Raise second element (base) to the top element (exponent).

        Never fails on the numbers themselves: overflow gives an infinity, a
        negative base with a fractional exponent gives nan, as C's pow does.
        '''
        if len(self.stack) < 2:
            raise InsufficientOperands('pow needs two operands')
        exponent = self.pop()
        base = self.pop()
        result = _pow(base, exponent)
        self.push(result)
        self._computed('{} ^ {}'.format(format_number(base),
                                        format_number(exponent)),
                       result)

    def fibonacci(self):
        '''
        Replace top element n with the nth Fibonacci number, F(0) = 0.

        F(n) no longer fits a float from FIB_OVERFLOW on, so that is inf
        without counting up to it.
        '''
        n = self.pop()
        if not n.is_integer():
            raise NonIntegerInput('fib input must be an integer')
        if n < 0:
            raise NegativeInput('fib input must be non-negative')
        if n >= FIB_OVERFLOW:
            a = math.inf
        else:
            a, b = 0.0, 1.0
            for _ in range(int(n)):
                a, b = b, a + b
        self.push(a)
        self._computed('fib({})'.format(format_number(n)), a)

    # Language mapping to stack operations. Keys are lower case.
    OPERATORS = {
        '+': add,
        '-': subtract,
        '*': multiply,
        '/': divide,
        'sqrt': sqrt,
        'pow': power,
        'fib': fibonacci,
    }
    # Number of operands each operator consumes.
    ARITY = {
        '+': 2,
        '-': 2,
        '*': 2,
        '/': 2,
        'sqrt': 1,
        'pow': 2,
        'fib': 1,
    }


__all__ = 'Machine',
