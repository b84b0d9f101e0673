"""
The word dictionary: word name -> expansion.

An expansion is a flat tuple of integer literals and primitive operator
names. Primitives expand to themselves. Everything else is expanded when it
is defined, by splicing in the expansions its body refers to *as they are at
that moment*; later redefinitions of those words don't reach back into
words already defined with them.

    >>> d = Dictionary()
    >>> d.add_builtin('dup')
    >>> d.define('foo', ['dup'])
    ('dup',)
    >>> d.define('bar', ['foo', 'foo'])
    ('dup', 'dup')
    >>> d.define('foo', ['5'])
    (5,)
    >>> d['bar']
    ('dup', 'dup')
"""
import logging

from forthlet.errors import InvalidWord, UnknownWord
from forthlet.parser import parse_number

logger = logging.getLogger(__name__)


class Dictionary(object):
    def __init__(self, entries=None):
        self.entries = dict(entries or {})

    def __contains__(self, name):
        return name in self.entries

    def __getitem__(self, name):
        return self.entries[name]

    def __len__(self):
        return len(self.entries)

    def copy(self):
        # Expansions are tuples, so sharing them between copies is fine.
        return Dictionary(self.entries)

    def names(self):
        return sorted(self.entries)

    def add_builtin(self, name):
        self.entries[name] = (name,)

    def is_builtin(self, name):
        return self.entries.get(name) == (name,)

    def resolve(self, word):
        """
        Turns one word of input into the tokens it stands for: a number
        stands for itself, anything else for its expansion.
        """
        number = parse_number(word)
        if number is not None:
            return (number,)
        try:
            return self.entries[word]
        except KeyError:
            raise UnknownWord(word)

    def expand(self, words):
        expansion = []
        for word in words:
            expansion.extend(self.resolve(word))
        return tuple(expansion)

    def define(self, name, body):
        """
        Stores `name` as the expansion of the `body` words, replacing any
        previous meaning, and returns that expansion.

        Nothing is stored if the name is missing or numeric, or if the body
        uses a word that isn't defined yet.
        """
        if not name or parse_number(name) is not None:
            raise InvalidWord(name or '')

        expansion = self.expand(body)
        self.entries[name] = expansion
        logger.debug('defined %s as [%s]', name, ' '.join(map(str, expansion)))
        return expansion
