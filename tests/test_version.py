from repofetch.version import VersionInfo, pick_version


def test_display_version_info():
    assert VersionInfo(version="v.1.50.0").value() == "v.1.50.0"


def test_title():
    assert VersionInfo(version="1").title() == "Version"


def test_pick_version_most_recent_tag():
    tags = [("v1", 100), ("v2", 200), ("v0", 150)]
    assert pick_version(tags, "9.9.9") == "v2"


def test_pick_version_first_tag_wins_ties():
    assert pick_version([("a", 100), ("b", 100)], None) == "a"


def test_pick_version_falls_back_to_manifest():
    assert pick_version([], "1.2.3") == "1.2.3"


def test_pick_version_ignores_pre_epoch_commits():
    assert pick_version([("old", -5), ("zero", 0)], "1.0.0") == "1.0.0"


def test_pick_version_nothing_known():
    assert pick_version([], None) == ""


def test_serialize():
    assert VersionInfo(version="v2").serialize() == {"VersionInfo": {"version": "v2"}}