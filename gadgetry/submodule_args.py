"""Argument checks and output parsing for the submodule branch commands."""

from __future__ import annotations

import re

TICKET_ARG_EMPTY = "ticket-abbreviation must have a non-whitespace value"
BRANCH_NAME_ARG_EMPTY = "branch-name must have a non-whitespace value"
REPO_PARENT_PATH_ARG_EMPTY = "repo-parent-path must have a non-whitespace value"
SUBMODULE_NAME_ARG_EMPTY = "submodule must have a non-whitespace value"
BRANCH_PREFIX_ARG_EMPTY = "branch-prefix must have a non-whitespace value"

_PR_LINK = re.compile(r"https:[^\n]*")


class ValidationError(ValueError):
    """A command argument was missing or blank."""


def _require(value: str, message: str) -> None:
    if not value.strip():
        raise ValidationError(message)


def validate_submodule_create(
    ticket_abbreviation: str,
    branch_name: str,
    repo_folder_path: str,
    submodule_name: str,
    branch_prefix: str,
) -> None:
    """Raise :class:`ValidationError` for the first blank argument of a create run."""
    _require(ticket_abbreviation, TICKET_ARG_EMPTY)
    _require(branch_name, BRANCH_NAME_ARG_EMPTY)
    _require(repo_folder_path, REPO_PARENT_PATH_ARG_EMPTY)
    _require(submodule_name, SUBMODULE_NAME_ARG_EMPTY)
    _require(branch_prefix, BRANCH_PREFIX_ARG_EMPTY)


def validate_submodule_update(
    branch_name: str, repo_folder_path: str, submodule_name: str
) -> None:
    """Raise :class:`ValidationError` for the first blank argument of an update run."""
    _require(branch_name, BRANCH_NAME_ARG_EMPTY)
    _require(repo_folder_path, REPO_PARENT_PATH_ARG_EMPTY)
    _require(submodule_name, SUBMODULE_NAME_ARG_EMPTY)


def get_pull_request_link(push_output: str) -> str:
    """Return the first https link in the output of a push, or an empty string."""
    match = _PR_LINK.search(push_output)
    return match.group(0) if match else ""