"""Shared functionality for election, vote and result file I/O. Internal."""

from __future__ import annotations

import io
import json
import typing
from typing import Any, Callable, Iterable, TextIO, Tuple


class ParseError(Exception):
    """An input that is invalid according to the given format was detected."""
    pass


def loaders(line_loader: Callable[..., Any],
            error: type = ParseError,
            ) -> Tuple[Callable[..., Any], Callable[..., Any]]:
    """Create load() and loads() functions from an iterating function.

    Text decoding errors met while reading the file are reraised as the
    given parse error.
    """
    return_annot = typing.get_type_hints(line_loader).get('return')
    if return_annot is None:
        return_annot = Any

    def load(file: TextIO, **kwargs) -> return_annot:
        try:
            return line_loader(file, **kwargs)
        except UnicodeDecodeError as e:
            raise error(f'invalid text encoding: {e}') from e

    def loads(text: str, **kwargs) -> return_annot:
        return line_loader(io.StringIO(text), **kwargs)

    return load, loads


def dumpers(line_dumper: Callable[..., Iterable[str]]
            ) -> Tuple[Callable[..., None], Callable[..., str]]:
    """Create dump() and dumps() functions from a line generator function.

    The dump() function serializes the whole output before writing any of
    it, so that a serialization failure never leaves a partial file.
    """

    def dumps(*args, **kwargs) -> str:
        return ''.join(
            line + ('' if line.endswith('\n') else '\n')
            for line in line_dumper(*args, **kwargs)
        )

    def dump(file: TextIO, *args, **kwargs) -> None:
        file.write(dumps(*args, **kwargs))

    return dump, dumps


def parse_json(text: str, error: type, what: str) -> Any:
    """Parse a JSON document, reraising decoding errors as the given error."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise error(f'invalid JSON in {what}: {e}') from e


def from_json(text: str,
              constructor: Callable[[Any], Any],
              error: type,
              what: str,
              ) -> Any:
    """Parse a JSON document and construct an object from it.

    Structural errors of the constructor (raised as ValueError) are reraised
    as the given parse error too.
    """
    value = parse_json(text, error, what)
    try:
        return constructor(value)
    except ValueError as e:
        raise error(f'{what}: {e}') from e
