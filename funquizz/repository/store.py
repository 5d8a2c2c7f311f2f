"""
JSON file storage for repositories.

One document per repository. Loading always re-shuffles answers, so a
saved-then-loaded repository shows answers in a new order.
"""

from __future__ import annotations

import json
import random
from pathlib import Path

from loguru import logger

from funquizz.core.errors import IOFailureError, MalformedInputError

from .repository import Repository
from .strategies import RepositoryType, parse_repository_type

REPOSITORY_SUFFIX = ".json"


def load_repository(path: str | Path, rng: random.Random | None = None) -> Repository:
    """
    Load a repository from a JSON file.

    Args:
        path: Repository file
        rng: Random source for shuffles and draws (fresh one if None)

    Raises:
        IOFailureError: file cannot be opened
        MalformedInputError: invalid JSON or document structure
        UnknownVariantError: unknown repository or question type
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Invalid JSON: {exc.msg}", context=str(path)) from exc
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"File is not valid UTF-8: {exc.reason}", context=str(path)) from exc
    except OSError as exc:
        raise IOFailureError(f"Failed to open file: {exc}", context=str(path)) from exc

    repository = Repository.from_document(data, rng=rng, path=path)
    logger.info(
        f"Loaded {repository.repository_type.value} repository with "
        f"{repository.question_count} questions from {path}"
    )
    return repository


def save_repository(
    repository: Repository,
    path: str | Path | None = None,
    indent: int = 2,
) -> Path:
    """
    Write a repository to disk.

    Args:
        repository: Repository to save
        path: Target file (defaults to the path it was loaded from)
        indent: JSON indentation

    Returns:
        Path written

    Raises:
        IOFailureError: no target path, or the file cannot be written
    """
    target = Path(path) if path is not None else repository.path
    if target is None:
        raise IOFailureError("Repository has no file path to save to")

    document = repository.to_document()
    # Staged beside the target; a failed write leaves the existing file intact
    staging = target.with_name(f".{target.name}.tmp")
    try:
        with open(staging, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=indent, ensure_ascii=False)
        staging.replace(target)
    except OSError as exc:
        staging.unlink(missing_ok=True)
        raise IOFailureError(f"Failed to write file: {exc}", context=str(target)) from exc

    repository.path = target
    logger.info(f"Saved {repository.question_count} questions to {target}")
    return target


def create_repository(
    path: str | Path,
    repository_type: str | RepositoryType = RepositoryType.INTELLIGENT,
    overwrite: bool = False,
    indent: int = 2,
) -> Repository:
    """
    Create an empty repository file.

    A ``.json`` suffix is appended when missing.

    Raises:
        IOFailureError: target exists and ``overwrite`` is False, or write fails
        UnknownVariantError: unknown repository type
    """
    path = Path(path)
    if path.suffix.lower() != REPOSITORY_SUFFIX:
        path = path.with_name(path.name + REPOSITORY_SUFFIX)
    if path.exists() and not overwrite:
        raise IOFailureError("File already exists", context=str(path))

    repository = Repository(parse_repository_type(repository_type), path=path)
    save_repository(repository, path, indent=indent)
    return repository
