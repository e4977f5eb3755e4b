import logging

from .util import RPNError, format_number
from .lexer import Lexer
from .text import HELP


logger = logging.getLogger(__name__)

# Returned by Dispatcher.run/feed when the line asked to quit.
QUIT = object()


class Dispatcher:
    '''
    Routes the tokens of a line to a machine.

    Stateless across lines, apart from the machine itself. Each line runs
    left to right, and stops at the first error, clear, show, help or quit.
    Whatever ran before the stop stays done.
    '''

    def __init__(self, machine, lexer=None, output=print, helper=None):
        '''
        :param machine: Machine to mutate.
        :param output: Callable taking one line of text, for notices.
        :param helper: Called without arguments on help; defaults to writing
                       the help text to output.
        '''
        self.machine = machine
        self.lexer = lexer or Lexer()
        self.output = output
        self.helper = helper or self.printhelp

    def printhelp(self):
        for line in HELP.splitlines():
            self.output(line)

    def run(self, line):
        '''
        Run a line of tokens on the machine.

        Raises RPNError on the first bad token. Returns QUIT if the line asked
        to quit, None otherwise.
        '''
        line = line.strip(' \t')
        if not line:
            return None
        applied = False
        for token in self.lexer.lex(line):
            if token.kind in ('operator', 'function'):
                self.machine.apply(token.name)
                applied = True
                self.output('Executed: {}'.format(token.text))
            elif token.kind == 'clear':
                self.machine.clear()
                self.output('Stack cleared')
                return None
            elif token.kind == 'show':
                self.machine.printstack()
                return None
            elif token.kind == 'help':
                self.helper()
                return None
            elif token.kind == 'quit':
                return QUIT
            else:
                value = float(token.text.replace('_', ''))
                self.machine.push(value)
                self.output('Pushed: {}'.format(format_number(value)))
        size = self.machine.size()
        if applied and size > 1:
            self.output('Note: {} value(s) left unused on the stack'
                        .format(size - 1))
        return None

    def feed(self, line):
        '''
        Like run, but reports errors instead of raising them.

        An error only aborts the rest of the line.
        '''
        try:
            return self.run(line)
        except RPNError as e:
            logger.debug('Aborted line %r', line, exc_info=True)
            self.output('Error: {}'.format(e.args[0]))
            return None
