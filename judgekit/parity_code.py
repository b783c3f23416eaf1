"""Decode letters sent as 6-bit codewords that tolerate one flipped bit."""

CODEWORDS = {
    "A": "000000",
    "B": "001111",
    "C": "010011",
    "D": "011100",
    "E": "100110",
    "F": "101001",
    "G": "110101",
    "H": "111010",
}

WORD_LENGTH = 6


class DecodeError(ValueError):
    """Raised when a word cannot be read as any letter.

    ``position`` is the 1-based index of the failing word within a message,
    or None when a single word was decoded.
    """

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


def _distance(left, right):
    return sum(a != b for a, b in zip(left, right))


def decode_symbol(bits):
    """Return the letter whose codeword differs from ``bits`` in at most one place."""
    if len(bits) != WORD_LENGTH or set(bits) - {"0", "1"}:
        raise DecodeError(f"not a {WORD_LENGTH}-bit word: {bits!r}")
    for letter, word in CODEWORDS.items():
        if _distance(bits, word) <= 1:
            return letter
    raise DecodeError(f"no letter within one bit of {bits!r}")


def decode(message, length):
    """Decode the first ``length`` words of ``message``.

    Raises DecodeError carrying the position of the first unreadable word.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if len(message) < length * WORD_LENGTH:
        raise ValueError("message is shorter than the stated length")

    letters = []
    for index in range(length):
        chunk = message[index * WORD_LENGTH:(index + 1) * WORD_LENGTH]
        try:
            letters.append(decode_symbol(chunk))
        except DecodeError as err:
            raise DecodeError(str(err), position=index + 1) from err
    return "".join(letters)