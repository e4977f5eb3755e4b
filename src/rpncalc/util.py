from functools import wraps


class RPNError(Exception):
    pass


class EmptyStack(RPNError):
    pass


class InsufficientOperands(RPNError):
    pass


class DivisionByZero(RPNError):
    pass


class NegativeSqrt(RPNError):
    pass


class NonIntegerInput(RPNError):
    pass


class NegativeInput(RPNError):
    pass


class UnknownOperator(RPNError):
    pass


class UnrecognizedToken(RPNError):
    '''
    Word that is neither a command nor a number.

    Keeps the raw word around as token.
    '''
    def __init__(self, token):
        super().__init__("Unrecognized input '{}'".format(token))
        self.token = token


def wrap_user_errors(fmt, error=RPNError):
    '''
    Ugly hack decorator that converts exceptions to user errors.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator


def format_number(n):
    '''
    Format like C's %g: six significant digits, no trailing zeros.
    '''
    return '{:g}'.format(n)


def format_result(n):
    '''
    Format final result: integral values without a fraction, others with six
    decimals.
    '''
    if n.is_integer() and abs(n) < 2 ** 53:
        return '{:.0f}'.format(n)
    return '{:.6f}'.format(n)
