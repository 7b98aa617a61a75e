from relay_planner.services import PairingHistory


def test_empty_history_has_no_pairs(abc_roster):
    history = PairingHistory.empty(abc_roster)
    a, b, c = abc_roster
    assert not history.has_sent(a, b)
    assert not history.has_sent(b, a)
    assert history.pair_count() == 0


def test_record_returns_updated_copy(abc_roster):
    a, b, _ = abc_roster
    history = PairingHistory.empty(abc_roster)
    updated = history.record(a, b)
    assert updated.has_sent(a, b)
    assert not updated.has_sent(b, a)
    assert not history.has_sent(a, b)


def test_record_is_directed_and_accumulates(abc_roster):
    a, b, c = abc_roster
    history = PairingHistory.empty(abc_roster).record(a, b).record(a, c)
    assert history.sent_by(a) == frozenset({b.id, c.id})
    assert history.sent_by(b) == frozenset()
    assert history.pair_count() == 2


def test_history_accepts_raw_ids():
    history = PairingHistory.empty([1, 2]).record(1, 2)
    assert history.has_sent(1, 2)
    assert not history.has_sent(2, 1)


def test_unknown_sender_has_sent_nothing():
    history = PairingHistory.empty([])
    assert not history.has_sent(5, 6)
    assert history.record(5, 6).has_sent(5, 6)
