from pytest import Item, fixture

from rpncalc.machine import Machine
from rpncalc.dispatcher import Dispatcher


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP -o enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def lines():
    '''
    Everything the machine and dispatcher would have printed.
    '''
    return []


@fixture
def machine(lines):
    return Machine(trace=lines.append)


@fixture
def dispatcher(machine, lines):
    return Dispatcher(machine, output=lines.append)
