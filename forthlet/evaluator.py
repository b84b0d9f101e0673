import logging

from forthlet.dictionary import Dictionary
from forthlet.errors import DivisionByZero, ForthError, StackUnderflow
from forthlet.parser import Parser

logger = logging.getLogger(__name__)


def _divide(b, a):
    """ a / b, truncated toward zero rather than floored. """
    if b == 0:
        raise DivisionByZero()
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -quotient
    return quotient


class Evaluator(object):
    """
    A Forth evaluator. It has a data stack, a dictionary of words and not
    much else.

    Every call to :meth:`eval` either goes through completely or not at all:
    the line is run against copies of the stack and dictionary, and those
    only replace the real ones once the whole line has succeeded. A
    :exc:`ForthError` leaves the evaluator exactly as it was.
    """
    def __init__(self, extra_chars=''):
        self.data_stack = []
        self.words = Dictionary()
        self.primitives = {}
        self.extra_chars = extra_chars

        self.add_stackmethod('+', lambda b, a: a + b)
        self.add_stackmethod('-', lambda b, a: a - b)
        self.add_stackmethod('*', lambda b, a: a * b)
        self.add_stackmethod('/', _divide)
        self.add_stackmethod('dup', lambda a: (a, a))
        self.add_stackmethod('drop', lambda a: None)
        self.add_stackmethod('swap', lambda b, a: (b, a))
        self.add_stackmethod('over', lambda b, a: (a, b, a))

    def add_stackmethod(self, word, func):
        """
        Turns a given function `func` into a stack-consumer and makes it a
        primitive word.

        The function will get its arguments from the stack automatically, in
        the order they pop off (so from the stack [1, 2] the call to a
        two-argument function will be func(2, 1)). The function's return value
        (or values) are assumed to go back on the stack.

        If the stack doesn't hold enough arguments, nothing is popped and
        :exc:`StackUnderflow` is raised instead.
        """
        num_args = func.__code__.co_argcount
        def stack_helper(stack):
            if len(stack) < num_args:
                raise StackUnderflow()
            args = [stack.pop() for x in range(num_args)]
            ret = func(*args)
            if ret is None:
                return
            try:
                stack.extend(ret)
            except TypeError:
                stack.append(ret)
        self.primitives[word] = stack_helper
        self.words.add_builtin(word)

    def eval(self, text=''):
        logger.debug('eval %r', text)
        stack = list(self.data_stack)
        words = self.words.copy()
        try:
            self._eval_into(text, stack, words)
        except ForthError as e:
            logger.debug('%r failed (%s); state left unchanged', text, e)
            raise

        self.data_stack = stack
        self.words = words
        return self

    def _eval_into(self, text, stack, words):
        parser = Parser(text, self.extra_chars)
        if parser.at_definition():
            name, body, rest = parser.parse_definition()
            words.define(name, body)
            if rest.strip():
                self._eval_into(rest, stack, words)
        else:
            for word in parser.generate():
                self.interpret(words.resolve(word), stack)

    def interpret(self, tokens, stack):
        for token in tokens:
            if isinstance(token, int):
                stack.append(token)
            else:
                self.primitives[token](stack)
        return stack

    def tokenize(self, text):
        """
        What an expression would run as, once every word in it has been
        resolved, without running it.
        """
        tokens = []
        for word in Parser(text, self.extra_chars).generate():
            tokens.extend(self.words.resolve(word))
        return tokens

    def format_stack(self):
        return ' '.join(str(value) for value in self.data_stack)


def new(extra_chars=''):
    return Evaluator(extra_chars)
