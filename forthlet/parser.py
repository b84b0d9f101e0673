import re

# Printable ASCII, space through tilde. Anything else reads as a space.
PRINTABLE_CHARS = ' -~'

# Older front-ends also let the euro sign through; available on request.
LEGACY_EXTRA_CHARS = '€'

NUMBER_PATTERN = re.compile(r'[+-]?[0-9]+\Z')


def normalize(text, extra_chars=''):
    """
    Blank out every character not in the allow-list (printable ASCII plus
    `extra_chars`), then lowercase what is left.
    """
    disallowed = '[^%s%s]' % (PRINTABLE_CHARS, re.escape(extra_chars))
    return re.sub(disallowed, ' ', text).lower()


def parse_number(word):
    """ The integer `word` spells out in decimal, or None if it isn't one. """
    if NUMBER_PATTERN.match(word) is None:
        return None
    return int(word)


def tokenize(text, extra_chars=''):
    return list(Parser(text, extra_chars).generate())


class Parser(object):
    """
    Very simple Forth parser -- not much more than a few primitives useful for
    consuming a line of input in a Forth-compatible way (e.g. consume a word,
    consume a definition up to its `;`).

    The text is normalized on the way in (see :func:`normalize`), so the
    parser only ever deals in lowercase printable characters and plain
    spaces; tabs and newlines have already become spaces.

    The parser is stateful, in as much as each instance thereof is given an
    initial string to operate on, and calls to parse_whatever will advance the
    parser's position within that string, if necessary (thus, the next call
    will start from where the previous left off).

    The parse_* methods will raise :exc:`StopIteration` when the string has
    been completely consumed; at that point, the current :class:`Parser`
    instance may be thrown away and a fresh one made for the next bits of
    input. :meth:`generate` turns that into the end of its iteration.
    """
    def __init__(self, text, extra_chars=''):
        self.text = normalize(text, extra_chars)
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a regex. The
        regex is applied to a slice of self.text starting from self.pos and
        ending at the end of the string.

        Note that matches are only ever expected at the start of the string
        slice.
        """
        if self.is_finished:
            raise StopIteration()
        found = re.match(pattern, self.text[self.pos:])
        if found is None:
            return None
        self.pos += found.end()
        return found.group()

    def parse_whitespace(self):
        return self._consume(r' *')

    def parse_word(self):
        return self._consume(r'[^ ]+')

    def parse_rest_of_line(self):
        return self._consume(r'.*')

    def next_word(self):
        self.parse_whitespace()
        return self.parse_word()

    def generate(self):
        while True:
            try:
                word = self.next_word()
            except StopIteration:
                return
            yield word

    def at_definition(self):
        """
        Skips leading whitespace and reports whether the text continues with
        a `:`, i.e. whether this is a word definition rather than an
        expression.
        """
        try:
            self.parse_whitespace()
        except StopIteration:
            return False
        return self.text.startswith(':', self.pos)

    def parse_definition(self):
        """
        Consumes a whole `: name body... ;` clause and returns the name (None
        if there wasn't one), the list of body words, and whatever text
        followed the `;`.

        A definition with no `;` runs to the end of the text.
        """
        self._consume(r':')
        command, rest = '', ''
        try:
            command = self._consume(r'[^;]*')
            self._consume(r';')
            rest = self.parse_rest_of_line()
        except StopIteration:
            pass  # ran out of text; whatever we have is the definition.

        words = command.split()
        if not words:
            return None, [], rest
        return words[0], words[1:], rest
