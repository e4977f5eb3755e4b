'''
RPN stack machine tests
'''

import math

from rpncalc.util import (EmptyStack, InsufficientOperands,
                          DivisionByZero, NegativeSqrt, NonIntegerInput,
                          NegativeInput, UnknownOperator)

from pytest import raises, mark


def stacked(machine, *values):
    for value in values:
        machine.push(value)
    return machine


def test_lifo(machine):
    stacked(machine, 1, 2.5, -3)
    assert machine.size() == 3
    assert [machine.pop() for _ in range(3)] == [-3, 2.5, 1]
    assert machine.isempty()


def test_pop_empty(machine):
    with raises(EmptyStack, match='Empty stack'):
        machine.pop()


def test_peek_leaves_top(machine):
    stacked(machine, 1, 2)
    assert machine.peek() == 2
    assert machine.result() == 2
    assert machine.size() == 2


def test_peek_empty(machine):
    with raises(EmptyStack):
        machine.peek()
    with raises(EmptyStack):
        machine.result()


def test_clear(machine):
    stacked(machine, 1, 2, 3)
    machine.clear()
    assert machine.size() == 0
    machine.clear()
    assert machine.size() == 0
    assert len(machine) == 0


@mark.parametrize('a, b, operator, expected', [(5, 3, '+', 8),
                                               (10, 4, '-', 6),
                                               (3, 4, '*', 12),
                                               (15, 3, '/', 5),
                                               (1, 4, '/', 0.25),
                                               (2, 3, 'pow', 8),
                                               (2, -1, 'POW', 0.5)])
def test_binary(machine, a, b, operator, expected):
    stacked(machine, a, b).apply(operator)
    assert list(machine.stack) == [expected]


def test_binary_traces(machine, lines):
    stacked(machine, 5, 3).apply('+')
    stacked(machine, 2).apply('/')
    assert lines == ['Computed: 5 + 3 = 8', 'Computed: 8 / 2 = 4']


def test_binary_underflow_loses_operand(machine):
    stacked(machine, 5)
    with raises(EmptyStack):
        machine.apply('+')
    assert machine.isempty()


def test_divide_by_zero(machine):
    stacked(machine, 7, 5, 0)
    with raises(DivisionByZero, match='Division by zero'):
        machine.apply('/')
    # Divisor gone, dividend untouched
    assert list(machine.stack) == [7, 5]


def test_divide_by_negative_zero(machine):
    stacked(machine, 1, -0.0)
    with raises(DivisionByZero):
        machine.apply('/')


def test_sqrt(machine, lines):
    stacked(machine, 25).apply('sqrt')
    assert list(machine.stack) == [5]
    assert lines == ['Computed: sqrt(25) = 5']


def test_sqrt_negative(machine):
    stacked(machine, -1)
    with raises(NegativeSqrt):
        machine.apply('sqrt')
    assert machine.isempty()


def test_sqrt_empty(machine):
    with raises(EmptyStack):
        machine.apply('sqrt')


def test_pow_insufficient(machine):
    stacked(machine, 2)
    with raises(InsufficientOperands):
        machine.apply('pow')
    # Nothing popped
    assert list(machine.stack) == [2]


@mark.parametrize('base, exponent, expected', [(10, 400, math.inf),
                                               (-10, 401, -math.inf),
                                               (-10, 400, math.inf),
                                               (0.1, -400, math.inf),
                                               (0, -1, math.inf),
                                               (-0.0, -1, -math.inf),
                                               (-0.0, -2, math.inf)])
def test_pow_out_of_range(machine, base, exponent, expected):
    stacked(machine, base, exponent).apply('pow')
    assert list(machine.stack) == [expected]


def test_pow_no_real_result(machine, lines):
    stacked(machine, -8, 0.5).apply('pow')
    assert machine.size() == 1
    assert math.isnan(machine.peek())
    assert lines == ['Computed: -8 ^ 0.5 = nan']


def test_pow_traces(machine, lines):
    stacked(machine, 2, 3).apply('pow')
    assert lines == ['Computed: 2 ^ 3 = 8']


@mark.parametrize('n, expected', [(0, 0), (1, 1), (2, 1), (6, 8), (10, 55),
                                  (50, 12586269025)])
def test_fib(machine, n, expected):
    stacked(machine, n).apply('fib')
    assert list(machine.stack) == [expected]


def test_fib_traces(machine, lines):
    stacked(machine, 6).apply('FIB')
    assert lines == ['Computed: fib(6) = 8']


def test_fib_largest_finite(machine):
    stacked(machine, 1476).apply('fib')
    assert math.isfinite(machine.peek())
    assert machine.peek() > 1e308


@mark.parametrize('n', [1477, 1e12, 1e300])
def test_fib_overflow(machine, lines, n):
    # Must not count all the way up to n
    stacked(machine, n).apply('fib')
    assert list(machine.stack) == [math.inf]
    assert lines == ['Computed: fib({:g}) = inf'.format(n)]


@mark.parametrize('n', [3.5, -0.5, math.nan, math.inf])
def test_fib_non_integer(machine, n):
    stacked(machine, n)
    with raises(NonIntegerInput):
        machine.apply('fib')
    assert machine.isempty()


def test_fib_negative(machine):
    stacked(machine, -3)
    with raises(NegativeInput):
        machine.apply('fib')


def test_unknown_operator(machine):
    stacked(machine, 1, 2)
    with raises(UnknownOperator, match="Unknown operator 'mod'"):
        machine.apply('mod')
    assert list(machine.stack) == [1, 2]


def test_compound(machine):
    stacked(machine, 1, 2).apply('+')
    stacked(machine, 3, 4).apply('+')
    machine.apply('*')
    assert list(machine.stack) == [21]


def test_printstack(machine, lines):
    machine.printstack()
    stacked(machine, 1, 2.5, 3).printstack()
    assert lines == ['Stack: [empty]',
                     'Stack (top -> bottom): 3 2.5 1',
                     'Stack size: 3']
