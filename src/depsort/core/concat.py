"""Concatenate files in a given order (the build step fed by sort_files)."""

import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

import structlog

from ..constants import DEFAULT_ENCODING, DEFAULT_SEPARATOR

logger = structlog.get_logger(__name__)


def concatenate_files(
    paths: Iterable[str | Path],
    output: str | Path,
    separator: str = DEFAULT_SEPARATOR,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """
    Write the contents of ``paths`` to ``output`` in order.

    The result is written to a temporary file beside ``output`` and moved
    into place only once every input has been read, so a failed run leaves
    the previous build untouched. An input that is the output file itself
    (e.g. ``src/app.js`` matched by ``src/*.js``) is skipped.

    Args:
        paths: Files to combine, already in the desired order.
        output: Destination file. Parent directories are created.
        separator: Text written between consecutive files.
        encoding: Encoding used to read inputs and write the output.

    Returns:
        Number of files written.
    """
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    resolved_output = output_path.resolve()

    fd, temp_path = tempfile.mkstemp(
        prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
    )
    count = 0
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            for path in paths:
                if Path(path).resolve() == resolved_output:
                    logger.debug("Skipping output file among inputs", path=str(path))
                    continue
                if count:
                    f.write(separator)
                f.write(Path(path).read_text(encoding=encoding))
                count += 1
        os.replace(temp_path, output_path)
    except BaseException:
        Path(temp_path).unlink(missing_ok=True)
        raise

    logger.info("Concatenated files", output=str(output_path), file_count=count)
    return count
