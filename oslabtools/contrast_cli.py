"""Interactive command that changes the contrast of one image file."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Sequence

from oslabtools.contrast import change_contrast

_PROMPTS = (
    "Enter the number of threads: ",
    "Enter the contrast factor: ",
    "Enter the input image path: ",
    "Enter the output image path: ",
)


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for threads, factor, input and output, then adjust the image.

    Answers may also be given as arguments in the same order; any that are
    missing are read as whitespace-separated words from standard input.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > len(_PROMPTS):
        print(
            "Usage: contrast [numThreads] [factor] [input] [output]",
            file=sys.stderr,
        )
        return 2

    tokens = _stdin_tokens()
    answers = list(args)
    for prompt in _PROMPTS[len(answers):]:
        print(prompt, end="", flush=True)
        token = next(tokens, None)
        if token is None:
            print("\nUnexpected end of input", file=sys.stderr)
            return 1
        answers.append(token)

    threads_text, factor_text, input_path, output_path = answers
    try:
        num_threads = int(threads_text)
        factor = float(factor_text)
    except ValueError as exc:
        print(f"Invalid number: {exc}", file=sys.stderr)
        return 1

    try:
        change_contrast(input_path, output_path, factor, num_threads)
    except (ValueError, RuntimeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())