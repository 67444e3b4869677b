#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/utils/io_utils.py
"""Reading Markdown sources and writing rendered output."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import IO, Union

from notemark.exceptions import InputError, OutputWriteError

InputSource = Union[str, Path, IO[str], IO[bytes]]
OutputTarget = Union[str, Path, IO[str], IO[bytes], None]


def _decode(data: Union[str, bytes], source_name: str) -> str:
    if isinstance(data, str):
        return data
    try:
        # utf-8-sig drops a leading BOM
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InputError(f"Input is not valid UTF-8: {source_name}", file_path=source_name, original_error=e) from e


def read_text_source(source: InputSource) -> str:
    """Read Markdown text from a path, ``"-"`` (stdin), or a file-like object.

    Parameters
    ----------
    source : str, Path, or file-like
        Where to read from. ``"-"`` reads standard input.

    Returns
    -------
    str
        Decoded text

    Raises
    ------
    InputError
        If the file does not exist, cannot be read, or is not valid UTF-8

    """
    if isinstance(source, (str, Path)):
        if str(source) == "-":
            return _decode(sys.stdin.buffer.read(), "<stdin>")

        path = Path(source)
        if not path.is_file():
            raise InputError(f"Input file not found: {path}", file_path=str(path))
        try:
            data = path.read_bytes()
        except OSError as e:
            raise InputError(f"Could not read input file: {path}", file_path=str(path), original_error=e) from e
        return _decode(data, str(path))

    if hasattr(source, "read"):
        name = str(getattr(source, "name", "<stream>"))
        try:
            data = source.read()
        except OSError as e:
            raise InputError(f"Could not read input stream: {name}", file_path=name, original_error=e) from e
        return _decode(data, name)

    raise TypeError(f"Unsupported input type: {type(source)}")


def write_content(content: str, output: OutputTarget) -> Union[io.StringIO, None]:
    """Write rendered text to a destination, or return it as a StringIO.

    Parameters
    ----------
    content : str
        Rendered output
    output : str, Path, file-like, or None
        - None: returns ``StringIO(content)``
        - str or Path: writes a UTF-8 file at that path
        - binary file-like: writes UTF-8 encoded bytes
        - text file-like: writes the string

    Returns
    -------
    StringIO or None
        StringIO when ``output`` is None, otherwise None

    Raises
    ------
    OutputWriteError
        If writing to a file path fails
    TypeError
        If ``output`` is not a supported destination

    """
    if output is None:
        return io.StringIO(content)

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return None

    if hasattr(output, "write"):
        if isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            output.write(content.encode("utf-8"))  # type: ignore[arg-type]
        else:
            output.write(content)  # type: ignore[arg-type]
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["InputSource", "OutputTarget", "read_text_source", "write_content"]
