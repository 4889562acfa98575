import time

from repofetch.last_change import LastChangeInfo


def test_display_last_change_info():
    info = LastChangeInfo(last_change="34 minutes ago")
    assert info.value() == "34 minutes ago"


def test_title():
    assert LastChangeInfo(last_change="now").title() == "Last change"


def test_from_time_iso():
    info = LastChangeInfo.from_time(0, True)
    assert info.value() == "1970-01-01T00:00:00Z"


def test_from_time_human_year_ago():
    year_ago = int(time.time()) - 366 * 24 * 60 * 60
    info = LastChangeInfo.from_time(year_ago, False)
    assert info.value() == "a year ago"


def test_serialize():
    info = LastChangeInfo(last_change="now")
    assert info.serialize() == {"LastChangeInfo": {"lastChange": "now"}}