import io
from collections import Counter
from enum import Enum
from typing import Callable, Iterable, Iterator, Union

import regex

# Letters, marks, decimal digits, connector punctuation and joiners.
WORD_RE = regex.compile(r"[\p{Alphabetic}\p{M}\p{Nd}\p{Pc}\p{Join_Control}]+")

Line = Union[str, bytes]


class CountOption(Enum):
    """Unit counted by :func:`count`."""

    CHAR = "char"
    WORD = "word"
    LINE = "line"

    @classmethod
    def default(cls) -> "CountOption":
        return cls.WORD

    @classmethod
    def parse(cls, value: Union["CountOption", str]) -> "CountOption":
        """Return the option for a member or a mode name such as ``"words"``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            # Accept the plural forms used by wc-style tools.
            if name.endswith("s"):
                name = name[:-1]
            for option in cls:
                if option.value == name:
                    return option
        raise ValueError(
            f"Unsupported mode: {value!r}. Choose from chars|words|lines."
        )


def _split_chars(line: str) -> Iterable[str]:
    return line


def _split_words(line: str) -> Iterable[str]:
    return WORD_RE.findall(line)


def _split_line(line: str) -> Iterable[str]:
    return (line,)


def _get_splitter(option: CountOption) -> Callable[[str], Iterable[str]]:
    if option is CountOption.CHAR:
        return _split_chars
    if option is CountOption.WORD:
        return _split_words
    return _split_line


def _strip_terminator(line: Line) -> Line:
    # "\r" is only part of the terminator when it precedes "\n".
    newline, carriage = ("\n", "\r") if isinstance(line, str) else (b"\n", b"\r")
    if line.endswith(newline):
        line = line[:-1]
        if line.endswith(carriage):
            line = line[:-1]
    return line


def _read_lines(source: Union[Iterable[Line], str, bytes]) -> Iterator[str]:
    """
    Yield decoded lines without their terminators.
    Byte lines are decoded strictly, so invalid UTF-8 raises UnicodeDecodeError.
    """
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    elif isinstance(source, str):
        source = io.StringIO(source, newline="\n")
    for raw in source:
        line = _strip_terminator(raw)
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        yield line


def count(
    source: Union[Iterable[Line], str, bytes],
    option: Union[CountOption, str] = CountOption.WORD,
) -> "Counter[str]":
    """
    Read ``source`` line by line and count how often each unit occurs.

    The unit depends on ``option``:

    * ``CountOption.CHAR``: every Unicode code point.
    * ``CountOption.WORD``: every run of letters, marks, digits and ``_``.
    * ``CountOption.LINE``: every line, separated by ``\\n`` or ``\\r\\n``.

    ``source`` may be a binary or text file object, any iterable of lines, or a
    whole ``str``/``bytes`` value. It is consumed once.

    A line that is not valid UTF-8 raises ``UnicodeDecodeError`` and nothing is
    returned for the partially read input.

    >>> freqs = count(io.BytesIO(b"aa bb cc bb"), CountOption.WORD)
    >>> freqs["aa"], freqs["bb"], freqs["cc"]
    (1, 2, 1)
    """
    split = _get_splitter(CountOption.parse(option))
    freqs: "Counter[str]" = Counter()
    for line in _read_lines(source):
        freqs.update(split(line))
    return freqs
