"""
Everything that can go wrong while evaluating a line. Every one of them is a
:exc:`ForthError`, so a host only ever needs to catch the one.
"""


class ForthError(Exception): pass


class StackUnderflow(ForthError):
    def __init__(self):
        ForthError.__init__(self, 'stack underflow')


class DivisionByZero(ForthError):
    def __init__(self):
        ForthError.__init__(self, 'division by zero')


class InvalidWord(ForthError):
    """ A definition tried to name a word with a number. """
    def __init__(self, word):
        self.word = word
        ForthError.__init__(self, 'invalid word: %s' % word)


class UnknownWord(ForthError):
    def __init__(self, word):
        self.word = word
        ForthError.__init__(self, 'unknown word: %s' % word)
