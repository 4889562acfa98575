import pytest

from repofetch.project import ProjectInfo, get_repo_name
from repofetch.utils import NumberSeparator


def _project(branches, tags, name="onefetch", sep=NumberSeparator.PLAIN):
    return ProjectInfo(
        repo_name=name,
        number_of_branches=branches,
        number_of_tags=tags,
        number_separator=sep,
        separator="->",
    )


def test_display_project_info():
    assert _project(3, 2).value() == "onefetch (3 branches, 2 tags)"


def test_display_project_info_when_no_branches_no_tags():
    assert _project(0, 0).value() == "onefetch"


def test_display_project_info_when_no_tags():
    assert _project(3, 0).value() == "onefetch (3 branches)"


def test_display_project_info_when_no_branches():
    assert _project(0, 2).value() == "onefetch (2 tags)"


def test_display_project_info_when_one_branch_one_tag():
    assert _project(1, 1).value() == "onefetch (1 branch, 1 tag)"


def test_get_repo_name_when_no_remote():
    assert get_repo_name("", None) == ""


def test_display_project_info_when_no_repo_name():
    assert _project(0, 0, name="").value() == ""


def test_display_uses_number_separator():
    assert _project(1234, 0, sep=NumberSeparator.COMMA).value() == "onefetch (1,234 branches)"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/user/repo.git", "repo"),
        ("https://example.com/user/repo", "repo"),
        ("ssh://example.com/user/tool.git", "tool"),
        ("git@example.com:user/onefetch.git", "onefetch"),
    ],
)
def test_get_repo_name_from_url(url, expected):
    assert get_repo_name(url, None) == expected


def test_get_repo_name_falls_back_to_manifest():
    assert get_repo_name("https://example.com/", "from-manifest") == "from-manifest"


def test_serialize():
    data = _project(3, 2).serialize()
    assert data == {
        "ProjectInfo": {
            "repoName": "onefetch",
            "numberOfBranches": 3,
            "numberOfTags": 2,
            "numberSeparator": "",
            "separator": "->",
        }
    }