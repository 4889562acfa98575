from repofetch.pending import PendingInfo, StatusSummary


def test_display_pending_info():
    info = PendingInfo(added=0, deleted=0, modified=4)
    assert info.value() == "4+-"


def test_display_all_kinds():
    info = PendingInfo(added=2, deleted=1, modified=4)
    assert info.value() == "4+- 2+ 1-"


def test_display_without_modified():
    info = PendingInfo(added=2, deleted=1, modified=0)
    assert info.value() == "2+ 1-"


def test_display_nothing_pending():
    assert PendingInfo().value() == ""


def test_from_summaries():
    info = PendingInfo.from_summaries(
        [
            StatusSummary.REMOVED,
            StatusSummary.ADDED,
            StatusSummary.COPIED,
            StatusSummary.MODIFIED,
            StatusSummary.TYPE_CHANGE,
            StatusSummary.RENAMED,
            StatusSummary.INTENT_TO_ADD,
            StatusSummary.CONFLICT,
        ]
    )
    assert (info.added, info.deleted, info.modified) == (3, 2, 2)


def test_title_and_serialize():
    info = PendingInfo(added=1, deleted=2, modified=3)
    assert info.title() == "Pending"
    assert info.serialize() == {"PendingInfo": {"added": 1, "deleted": 2, "modified": 3}}