import json

import pytest

from repofetch.info import Info
from repofetch.loc import LocInfo
from repofetch.pending import PendingInfo
from repofetch.style import AnsiColor, on_color
from repofetch.text_colors import TextColors
from repofetch.title import Title
from repofetch.utils import NumberSeparator
from repofetch.version import VersionInfo


@pytest.fixture
def colors():
    return TextColors.from_codes([], AnsiColor.BLUE)


@pytest.fixture
def fields():
    return [
        VersionInfo(version="v.1.50.0"),
        PendingInfo(added=0, deleted=0, modified=4),
        LocInfo(lines_of_code=1235, number_separator=NumberSeparator.PLAIN),
    ]


def test_fields_are_rendered_in_order(colors, fields):
    info = Info(info_fields=fields, text_colors=colors, no_color_palette=True, separator=":")
    text = str(info)
    lines = text.splitlines()
    assert len(lines) == 3
    assert "v.1.50.0" in lines[0]
    assert "4+-" in lines[1]
    assert "1235" in lines[2]
    assert text.endswith("\n")


def test_each_field_line_is_its_styled_line(colors, fields):
    info = Info(info_fields=fields, text_colors=colors, no_color_palette=True, separator=":")
    expected = "".join(f.write_styled(False, colors, ":") for f in fields)
    assert str(info) == expected


def test_empty_fields_are_not_written(colors):
    info = Info(
        info_fields=[VersionInfo(version=""), PendingInfo()],
        text_colors=colors,
        no_color_palette=True,
    )
    assert str(info) == ""


def test_title_comes_first(colors, fields):
    title = Title(git_username="onefetch-committer-name", git_version="git v2.37.2", separator="->")
    info = Info(info_fields=fields, text_colors=colors, title=title, no_color_palette=True)
    text = str(info)
    assert text.startswith(str(title))
    assert "onefetch-committer-name" in text


def test_palette_is_drawn_by_default(colors):
    info = Info(info_fields=[], text_colors=colors)
    text = str(info)
    assert text.startswith("\n")
    for code in range(40, 48):
        assert f"\x1b[{code}m" in text
    assert text.endswith(on_color("   ", AnsiColor.WHITE) + "\n")


def test_palette_can_be_turned_off(colors):
    info = Info(info_fields=[], text_colors=colors, no_color_palette=True)
    assert str(info) == ""


def test_to_dict_without_title(colors, fields):
    info = Info(info_fields=fields, text_colors=colors)
    data = info.to_dict()
    assert data["title"] is None
    assert data["infoFields"][0] == {"VersionInfo": {"version": "v.1.50.0"}}
    assert data["infoFields"][2] == {"LocInfo": {"linesOfCode": 1235}}
    assert len(data["infoFields"]) == 3


def test_to_dict_with_title_leaves_out_rendering_options(colors, fields):
    title = Title(git_username="onefetch-committer-name", git_version="git v2.37.2")
    info = Info(info_fields=fields, text_colors=colors, title=title, no_bold=True, separator="->")
    data = info.to_dict()
    assert data["title"] == {
        "gitUsername": "onefetch-committer-name",
        "gitVersion": "git v2.37.2",
    }
    assert set(data) == {"title", "infoFields"}


def test_to_json_round_trips(colors, fields):
    title = Title(git_username="onefetch-committer-name", git_version="git v2.37.2")
    info = Info(info_fields=fields, text_colors=colors, title=title)
    text = info.to_json()
    assert json.loads(text) == info.to_dict()
    assert "\n  " in text