from repofetch.style import AnsiColor, num_to_color
from repofetch.text_colors import TextColors


def test_no_custom_colors():
    primary = AnsiColor.BLUE
    colors = TextColors.from_codes([], primary)
    assert colors.title == primary
    assert colors.separator == AnsiColor.DEFAULT
    assert colors.underline == AnsiColor.DEFAULT
    assert colors.subtitle == primary
    assert colors.info == AnsiColor.DEFAULT


def test_with_custom_colors():
    custom = [0, 1, 2, 3, 4, 5]
    colors = TextColors.from_codes(custom, AnsiColor.BLUE)
    assert colors.title == num_to_color(custom[0])
    assert colors.separator == num_to_color(custom[1])
    assert colors.underline == num_to_color(custom[2])
    assert colors.subtitle == num_to_color(custom[3])
    assert colors.info == num_to_color(custom[5])


def test_with_some_custom_colors():
    custom = [0, 1, 2]
    primary = AnsiColor.BLUE
    colors = TextColors.from_codes(custom, primary)
    assert colors.title == num_to_color(custom[0])
    assert colors.separator == num_to_color(custom[1])
    assert colors.underline == num_to_color(custom[2])
    assert colors.subtitle == primary
    assert colors.info == AnsiColor.DEFAULT