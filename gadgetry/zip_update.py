"""Rewrite a zip archive (such as an epub) through a caller-supplied operation."""

from __future__ import annotations

import os
import zipfile
from typing import Callable, Iterable, Mapping, Union

MIMETYPE = "mimetype"

Operation = Callable[[Mapping[str, bytes], zipfile.ZipFile], Iterable[str]]


class ZipUpdateError(Exception):
    """The archive could not be read, rewritten or swapped into place."""


def _copy_info(info: zipfile.ZipInfo, compress_type: int) -> zipfile.ZipInfo:
    new_info = zipfile.ZipInfo(info.filename, date_time=info.date_time)
    new_info.compress_type = compress_type
    new_info.external_attr = info.external_attr
    new_info.comment = info.comment
    return new_info


def update_zip(src: Union[str, os.PathLike], operation: Operation) -> None:
    """Rebuild ``src`` with ``operation`` writing the entries it handles.

    ``operation`` receives the archive contents by name and the writer for the
    new archive, and returns the names it wrote. The ``mimetype`` entry is
    written first and uncompressed; every other untouched entry is copied over
    compressed. The old archive is kept as ``<src>.original``.
    """
    src = os.fspath(src)
    temp_zip = src + ".temp"

    try:
        reader = zipfile.ZipFile(src)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ZipUpdateError(f"failed to get zip contents for {src!r}: {exc}") from exc

    with reader:
        infos = {info.filename: info for info in reader.infolist()}
        contents = {name: reader.read(info) for name, info in infos.items()}

        try:
            writer = zipfile.ZipFile(temp_zip, "w")
        except OSError as exc:
            raise ZipUpdateError(
                f"failed to create temporary zip file {temp_zip!r} for {src!r}: {exc}"
            ) from exc

        with writer:
            if MIMETYPE in infos:
                try:
                    writer.writestr(
                        _copy_info(infos[MIMETYPE], zipfile.ZIP_STORED), contents[MIMETYPE]
                    )
                except (OSError, ValueError) as exc:
                    raise ZipUpdateError("failed to copy mimetype to zip file") from exc

            handled = set(operation(contents, writer))
            handled.add(MIMETYPE)

            for name, info in infos.items():
                if name in handled:
                    continue
                try:
                    writer.writestr(_copy_info(info, zipfile.ZIP_DEFLATED), contents[name])
                except (OSError, ValueError) as exc:
                    raise ZipUpdateError(
                        f"failed to write file {name!r} to zip for {src!r}"
                    ) from exc

    try:
        os.rename(src, src + ".original")
        os.rename(temp_zip, src)
    except OSError as exc:
        raise ZipUpdateError(f"failed to swap in updated zip for {src!r}: {exc}") from exc