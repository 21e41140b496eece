"""Short-option command line scanning in the classic getopt style.

Options start with ``-`` or ``/``; a letter followed by ``:`` in the option
string takes an argument, either attached or as the next word.
"""

from __future__ import annotations

from typing import Iterator, Sequence


class OptionScanner:
    """Scan option letters from an argument list (program name excluded)."""

    def __init__(
        self, args: Sequence[str], optstring: str, report_errors: bool = True
    ) -> None:
        self.args = list(args)
        self.optstring = optstring
        self.report_errors = report_errors
        self._index = 0
        self._word: str | None = None
        self._pos: int | None = None

    def _error(self, letter: str) -> str:
        return "?" if self.report_errors else letter

    def _next_letter(self) -> tuple[str, int, bool] | None:
        """Locate the next option letter; return (word, position, fresh)."""
        if self._word is not None and self._pos is not None:
            pos = self._pos + 1
            if pos < len(self._word):
                return self._word, pos, False

        self._word = None
        self._pos = None
        if self._index >= len(self.args):
            return None

        word = self.args[self._index]
        self._index += 1
        if not word or word[0] not in "-/":
            self._index -= 1
            return None
        if word in ("-", "--"):
            return None
        return word, 1, True

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(letter, argument)`` pairs until the options run out."""
        while True:
            found = self._next_letter()
            if found is None:
                return
            word, pos, fresh = found
            letter = word[pos] if pos < len(word) else ""

            if letter == ":":
                if fresh:
                    self._word, self._pos = None, None
                else:
                    self._word, self._pos = word, pos
                yield (self._error(":"), None)
                continue

            spec = self.optstring.find(letter) if letter else -1
            if spec < 0:
                self._word, self._pos = None, None
                yield (self._error(letter), None)
                continue

            takes_argument = self.optstring[spec + 1 : spec + 2] == ":"
            if not takes_argument:
                self._word, self._pos = word, pos
                yield (letter, None)
                continue

            self._word, self._pos = None, None
            if pos + 1 < len(word):
                yield (letter, word[pos + 1 :])
            elif self._index < len(self.args):
                value = self.args[self._index]
                self._index += 1
                yield (letter, value)
            else:
                yield (self._error(letter), None)

    def remaining(self) -> list[str]:
        """Return the arguments not consumed as options."""
        return self.args[self._index :]


def getopt(
    args: Sequence[str], optstring: str, report_errors: bool = True
) -> tuple[list[tuple[str, str | None]], list[str]]:
    """Return the parsed ``(letter, argument)`` pairs and the leftover arguments."""
    scanner = OptionScanner(args, optstring, report_errors)
    options = list(scanner)
    return options, scanner.remaining()