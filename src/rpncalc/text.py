'''
Static text shown by the command line interface.
'''

RULE = '=' * 42
THIN_RULE = '-' * 42

BANNER = '''\
{rule}
        RPN calculator
{rule}
Reverse Polish Notation
{rule}
Features:
  * Basic arithmetic (+ - * /)
  * Functions (sqrt, pow, fib)
  * Stack commands (clear, show)
  * Errors never lose the session
{rule}
Type 'help' for help
Type 'batch' for worked examples
Type 'quit' to leave
{rule}'''.format(rule=RULE)

HELP = '''\

RPN calculator help
{rule}

Arithmetic:
  +       add          5 3 +     -> 8
  -       subtract     10 4 -    -> 6
  *       multiply     3 4 *     -> 12
  /       divide       15 3 /    -> 5

Functions:
  sqrt    square root  25 sqrt   -> 5
  pow     power        2 3 pow   -> 8
  fib     Fibonacci    6 fib     -> 8

Stack commands:
  clear   empty the stack
  show    print the stack
  stack   print the stack (alias)

Session commands:
  help    print this help
  ?       print this help (shortcut)
  batch   run the worked examples (empties the stack)
  quit    leave
  exit    leave (alias)
  q       leave (shortcut)

Tips:
  * Commands are case insensitive
  * Integers and decimals are both fine
  * An expression can span several lines
  * Separate numbers and operators with spaces

Worked expressions:
  (2 + 3) * 4        -> 2 3 + 4 *
  10 - (6 / 2)       -> 10 6 2 / -
  (1 + 2) * (3 + 4)  -> 1 2 + 3 4 + *
  sqrt(9 + 16)       -> 9 16 + sqrt
{rule}'''.format(rule=RULE)

# (expression, description) pairs run by the batch command.
BATCH = [
    ('5 5 +', 'Addition: 5 + 5'),
    ('10 2 /', 'Division: 10 / 2'),
    ('3 4 *', 'Multiplication: 3 * 4'),
    ('15 7 -', 'Subtraction: 15 - 7'),
    ('2 3 pow', 'Power: 2^3'),
    ('25 sqrt', 'Square root: sqrt(25)'),
    ('6 fib', 'Fibonacci: F(6)'),
    ('1 2 + 3 * 4 /', 'Compound: (1 + 2) * 3 / 4'),
    ('5 1 2 + 4 * + 3 -', 'Compound: 5 + (1 + 2) * 4 - 3'),
    ('2 3 + 4 5 + *', 'Nested: (2 + 3) * (4 + 5)'),
]
