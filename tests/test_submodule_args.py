import pytest

from gadgetry.submodule_args import (
    BRANCH_NAME_ARG_EMPTY,
    BRANCH_PREFIX_ARG_EMPTY,
    REPO_PARENT_PATH_ARG_EMPTY,
    SUBMODULE_NAME_ARG_EMPTY,
    TICKET_ARG_EMPTY,
    ValidationError,
    get_pull_request_link,
    validate_submodule_create,
    validate_submodule_update,
)

PUSH_OUTPUT = """Enumerating objects: 11, done.
Counting objects: 100% (11/11), done.
Delta compression using up to 12 threads
Compressing objects: 100% (6/6), done.
Writing objects: 100% (6/6), 536 bytes | 0 bytes/s, done.
Total 6 (delta 5), reused 0 (delta 0), pack-reused 0
remote: Resolving deltas: 100% (5/5), completed with 5 local objects.
remote:
remote: Create a pull request for 'branch-name' on GitHub by visiting:
remote:      https://example.com/org/repo/pull/new/branch-name
remote:
To example.com:org/repo.git
\t* [new branch]        branch-name -> branch-name
branch 'branch-name' set up to track 'origin/branch-name'."""


@pytest.mark.parametrize(
    ("push_output", "expected"),
    [
        ("", ""),
        (PUSH_OUTPUT, "https://example.com/org/repo/pull/new/branch-name"),
    ],
)
def test_get_pull_request_link(push_output, expected):
    assert get_pull_request_link(push_output) == expected


def test_get_pull_request_link_takes_first_link():
    output = "remote: https://example.com/a\nremote: https://example.com/b\n"
    assert get_pull_request_link(output) == "https://example.com/a"


@pytest.mark.parametrize(
    ("ticket", "branch", "repo_path", "submodule", "prefix", "message"),
    [
        ("", "name", "/users/username/home/", "submodule", "prefix", TICKET_ARG_EMPTY),
        ("ticket", "", "/users/username/home/", "submodule", "prefix", BRANCH_NAME_ARG_EMPTY),
        ("ticket", "name", "", "submodule", "prefix", REPO_PARENT_PATH_ARG_EMPTY),
        ("ticket", "name", "/users/username/home/", "", "prefix", SUBMODULE_NAME_ARG_EMPTY),
        ("ticket", "name", "/users/username/home/", "submodule", "", BRANCH_PREFIX_ARG_EMPTY),
    ],
)
def test_validate_submodule_create_errors(ticket, branch, repo_path, submodule, prefix, message):
    with pytest.raises(ValidationError) as excinfo:
        validate_submodule_create(ticket, branch, repo_path, submodule, prefix)
    assert str(excinfo.value) == message


def test_validate_submodule_create_passes():
    assert (
        validate_submodule_create(
            "ticket", "name", "/users/username/home/", "submodule", "prefix"
        )
        is None
    )


def test_validate_submodule_create_whitespace_is_blank():
    with pytest.raises(ValidationError) as excinfo:
        validate_submodule_create("   ", "name", "/users/username/home/", "submodule", "prefix")
    assert str(excinfo.value) == TICKET_ARG_EMPTY


@pytest.mark.parametrize(
    ("branch", "repo_path", "submodule", "message"),
    [
        ("", "/users/username/home/", "submodule", BRANCH_NAME_ARG_EMPTY),
        ("name", "", "submodule", REPO_PARENT_PATH_ARG_EMPTY),
        ("name", "/users/username/home/", "", SUBMODULE_NAME_ARG_EMPTY),
    ],
)
def test_validate_submodule_update_errors(branch, repo_path, submodule, message):
    with pytest.raises(ValidationError) as excinfo:
        validate_submodule_update(branch, repo_path, submodule)
    assert str(excinfo.value) == message


def test_validate_submodule_update_passes():
    assert validate_submodule_update("name", "/users/username/home/", "submodule") is None