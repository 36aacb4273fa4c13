"""Command line entry point: read an EXPLAIN document and print the report."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Any, Optional, Sequence, TextIO

from mea.convert import convert
from mea.explain import load_explain
from mea.render import write_report

EXIT_OK = 0
EXIT_ERROR = 1


@dataclass
class CLI:
    """Reads from a file or ``stdin`` and writes the report to ``stdout``."""

    stdin: IO[Any]
    stdout: TextIO
    stderr: Optional[TextIO] = None

    def run(self, args: Sequence[str]) -> None:
        """Analyse the document named by ``args[1]``, or standard input.

        ``args[0]`` is the program name. Raises :class:`OSError` when the
        input cannot be read and :class:`ValueError` when it is not valid JSON.
        """
        filename = args[1] if len(args) > 1 else ""
        program = args[0] if args else ""

        if filename in ("", "-"):
            explain = self._decode(self.stdin)
        else:
            try:
                handle = open(filename, "rb")
            except OSError as err:
                raise OSError(f"failed to read {program}: {err}") from err
            with handle:
                explain = self._decode(handle)

        write_report(self.stdout, convert(explain))

    @staticmethod
    def _decode(stream: IO[Any]):
        try:
            return load_explain(stream)
        except ValueError as err:
            raise ValueError(f"failed to decode JSON: {err}") from err


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; ``argv`` excludes the program name."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    cli = CLI(stdin=sys.stdin, stdout=sys.stdout, stderr=sys.stderr)
    try:
        cli.run(["mea", *arguments])
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())