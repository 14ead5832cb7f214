# =============================================================================
# File: file_io.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================
import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from copywriter.exceptions.custom_exceptions import FileProcessingError


def read_text(file_path: Union[str, Path]) -> str:
    """
    Read a source file as UTF-8 text, keeping its line endings untouched.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text_atomic(file_path: Union[str, Path], content: str) -> None:
    """
    Replace a file's content by writing a temp file beside it and renaming it over the target.

    The original file is never left partially written. Its permission bits are carried over.

    Raises:
        FileProcessingError: If the file or its directory is not writable, or the write fails
    """
    target = Path(file_path)
    parent_dir = target.resolve().parent
    if not parent_dir.exists():
        raise FileProcessingError(str(file_path), f"Parent directory does not exist: {parent_dir}")
    if not os.access(parent_dir, os.W_OK):
        raise FileProcessingError(str(file_path), f"No write permission for directory: {parent_dir}")
    if target.exists() and not os.access(target, os.W_OK):
        raise FileProcessingError(str(file_path), "File is not writable")

    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=parent_dir)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if target.exists():
            shutil.copymode(target, tmp_path)
        os.replace(tmp_path, target.resolve())
    except OSError as e:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise FileProcessingError(str(file_path), f"Cannot write file: {e}") from e
