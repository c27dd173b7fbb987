"""Scanning primitives for HTTP header values, following RFC 7230 section 3.2.6.

Every ``*_length`` function looks at ``text`` from index ``start`` and returns how many characters
make up the construct found there, or 0 when the construct is not present. None of them raise.

    tchar         = "!" / "#" / "$" / "%" / "&" / "'" / "*" / "+" / "-" / "." /
                    "^" / "_" / "`" / "|" / "~" / DIGIT / ALPHA
    token         = 1*tchar
    quoted-string = DQUOTE *( qdtext / quoted-pair ) DQUOTE
    quoted-pair   = "\\" ( HTAB / SP / VCHAR / obs-text )
    OWS           = *( SP / HTAB / obs-fold )
    obs-fold      = CRLF 1*( SP / HTAB )
"""
import string

TCHARS = frozenset("!#$%&'*+-.^_`|~" + string.digits + string.ascii_letters)
WHITESPACE = ' \t'


def whitespace_length(text, start):
    current = start
    length = len(text)
    while current < length:
        char = text[current]
        if char in WHITESPACE:
            current += 1
        elif char == '\r' and text[current + 1:current + 2] == '\n' and \
                text[current + 2:current + 3] in (' ', '\t'):
            # obsolete line folding
            current += 3
        else:
            break
    return current - start


def token_length(text, start):
    current = start
    length = len(text)
    while current < length and text[current] in TCHARS:
        current += 1
    return current - start


def _is_qdtext(char):
    return char == '\t' or (char >= ' ' and char != '\x7f')


def quoted_string_length(text, start):
    """Return the length of the quoted string at ``start``, including both quotes.

    An unterminated string, a control character inside the quotes or an escape of a non-ASCII
    character all yield 0.
    """
    length = len(text)
    if start >= length or text[start] != '"':
        return 0
    current = start + 1
    while current < length:
        char = text[current]
        if char == '"':
            return current + 1 - start
        if char == '\\':
            if current + 1 >= length or not _is_qdtext(text[current + 1]) or ord(text[current + 1]) > 127:
                return 0
            current += 2
        elif _is_qdtext(char):
            current += 1
        else:
            return 0
    return 0


def value_length(text, start):
    """Length of a parameter value at ``start``: a token or a quoted string."""
    return token_length(text, start) or quoted_string_length(text, start)


def is_token(text):
    return bool(text) and token_length(text, 0) == len(text)


def is_value(text):
    """True if ``text`` may be stored as a parameter value: empty, a token or a quoted string."""
    return text == '' or value_length(text, 0) == len(text)
