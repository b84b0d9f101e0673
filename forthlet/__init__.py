"""
Implements a small Forth evaluator, i.e., an object holding a stack of
integers and a dictionary of words, which evaluates lines of Forth against
that state.

Usage should be as simple as:
    >>> import forthlet
    >>> ev = forthlet.new().eval("1 2 +")
    >>> ev.format_stack()
    '3'

Only eight words are built in: + - * / drop dup swap over. New words are
defined with the usual colon syntax, e.g. ": square dup * ;", and are
expanded as they are defined: redefining a word later does not change the
meaning of words that were already built on it.

Anything that goes wrong raises a :exc:`forthlet.ForthError` and leaves the
evaluator as it was before the offending line.

For an interactive prompt, see :mod:`forthlet_repl`.
"""
from forthlet.errors import *
from forthlet.parser import Parser, tokenize
from forthlet.dictionary import Dictionary
from forthlet.evaluator import Evaluator, new
