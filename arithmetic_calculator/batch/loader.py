"""Read operations files, plain text or archived."""
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr
from py7zr.exceptions import Bad7zFile

# Exceptions raised by the archive readers on corrupt or mislabelled files
CORRUPT_ARCHIVE_ERRORS = (zipfile.BadZipFile, tarfile.ReadError, Bad7zFile)


def _strip_lines(content: str) -> List[str]:
    """Return the non-empty, stripped lines of `content`."""
    return [line.strip() for line in content.splitlines() if line.strip()]


def _is_tar_xz(path: Path) -> bool:
    return path.suffixes[-2:] == [".tar", ".xz"]


def _read_zip(archive_path: Path) -> str:
    with zipfile.ZipFile(archive_path, "r") as zf:
        names = [n for n in zf.namelist() if n.endswith(".txt")]
        if not names:
            raise ValueError(f"No .txt file found in zip archive {archive_path}")
        return zf.read(names[0]).decode("utf-8")


def _read_tar_xz(archive_path: Path) -> str:
    with tarfile.open(archive_path, "r:xz") as tf:
        members = [m for m in tf.getmembers() if m.isfile() and m.name.endswith(".txt")]
        if not members:
            raise ValueError(f"No .txt file found in tar.xz archive {archive_path}")
        return tf.extractfile(members[0]).read().decode("utf-8")


def _read_7z(archive_path: Path) -> str:
    # py7zr only extracts to disk
    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)
        with py7zr.SevenZipFile(archive_path, mode="r") as archive:
            names = [n for n in archive.getnames() if n.endswith(".txt")]
            if not names:
                raise ValueError(f"No .txt file found in 7z archive {archive_path}")
            archive.extract(path=tmpdir_path, targets=[names[0]])
        return (tmpdir_path / names[0]).read_text(encoding="utf-8")


def _read_archive(archive_path: Path) -> str:
    """
    Return the content of the first .txt file found in a supported archive.

    Supported formats:
    - .zip
    - .tar.xz
    - .7z

    :param Path archive_path: Path to the archive file

    :return: Content of the archived .txt file
    :rtype: str
    :raises ValueError: If the archive is corrupt, holds no .txt file, or its format is unsupported
    """
    if archive_path.suffix == ".zip":
        reader = _read_zip
    elif _is_tar_xz(archive_path):
        reader = _read_tar_xz
    elif archive_path.suffix == ".7z":
        reader = _read_7z
    else:
        raise ValueError(f"Unsupported archive format: {''.join(archive_path.suffixes)}")

    try:
        return reader(archive_path)
    except CORRUPT_ARCHIVE_ERRORS as exc:
        raise ValueError(f"Corrupt archive {archive_path}: {exc}") from exc


def load_expressions(path: Path) -> List[str]:
    """
    Load expressions, one per line, from an operations file.

    :param Path path: A .txt file or a .zip/.tar.xz/.7z archive holding one

    :return: Non-empty expression lines, stripped
    :rtype: List[str]
    :raises ValueError: If the archive is corrupt, unsupported, or contains no .txt file
    """
    path = Path(path)
    if path.suffix == ".txt":
        content = path.read_text(encoding="utf-8")
    else:
        content = _read_archive(path)
    return _strip_lines(content)


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results file path for an operations file.

    - Keeps the input's folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt'

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    :param Path input_path: Path to the input file
    :return: Path to the output file
    """
    input_path = Path(input_path)
    name = input_path.name
    stem = name[: -len("".join(input_path.suffixes))] if input_path.suffixes else name
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")
