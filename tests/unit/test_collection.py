from screen_compare.services.collection import MAX_SCREENS, ScreenCollection
from screen_compare.services.palette import color_for_index
from screen_compare.utils.errors import ErrorKind
from screen_compare.utils.typing import ScreenSpec

def test_initial_state_has_two_defaults():
    c = ScreenCollection()
    entries = c.snapshot().entries
    assert len(entries) == 2
    assert [e.color for e in entries] == [color_for_index(0), color_for_index(1)]
    assert len(set(c.snapshot().ids())) == 2

def test_add_uses_defaults_and_next_color():
    c = ScreenCollection()
    res = c.add()
    assert res.success
    e = res.entry
    assert (e.diagonal, e.aspect_x, e.aspect_y) == (24.0, 16.0, 9.0)
    assert e.color == color_for_index(2)
    assert c.snapshot().entries[-1].id == e.id

def test_add_with_spec_gets_fresh_id():
    c = ScreenCollection()
    res = c.add(ScreenSpec(id=1, diagonal="32", aspect_x=16, aspect_y=10, color="#123456"))
    assert res.success and res.entry.id not in (1, 2)
    assert res.entry.diagonal == 32.0 and res.entry.color == "#123456"

def test_add_beyond_capacity_is_rejected():
    c = ScreenCollection()
    while len(c) < MAX_SCREENS:
        assert c.add().success
    before = c.snapshot()
    res = c.add()
    assert not res.success and res.error_kind is ErrorKind.CAPACITY_EXCEEDED
    assert res.error
    assert c.snapshot() == before and len(c) == MAX_SCREENS
    assert not c.can_add

def test_remove_keeps_ids_and_order():
    c = ScreenCollection()
    third = c.add().entry
    first_id, second_id = c.snapshot().ids()[:2]
    assert c.remove(second_id).success
    assert c.snapshot().ids() == (first_id, third.id)

def test_remove_last_entry_is_noop():
    c = ScreenCollection()
    c.remove(c.snapshot().ids()[0])
    assert len(c) == 1 and not c.can_remove
    only = c.snapshot().ids()[0]
    res = c.remove(only)
    assert not res.success and res.error_kind is ErrorKind.MINIMUM_ENTRIES
    assert c.snapshot().ids() == (only,)

def test_remove_unknown_id():
    c = ScreenCollection()
    res = c.remove(999)
    assert not res.success and res.error_kind is ErrorKind.NOT_FOUND
    assert len(c) == 2

def test_ids_never_reused():
    c = ScreenCollection()
    seen = set(c.snapshot().ids())
    for _ in range(3):
        new = c.add().entry
        assert new.id not in seen
        seen.add(new.id)
        c.remove(new.id)
    c.reset()
    assert not (set(c.snapshot().ids()) & seen)

def test_color_survives_removal_of_earlier_entries():
    c = ScreenCollection()
    added = c.add().entry
    c.remove(c.snapshot().ids()[0])
    assert c.get(added.id).color == added.color

def test_update_partial_fields():
    c = ScreenCollection()
    target = c.snapshot().entries[1]
    res = c.update(target.id, {"diagonal": "40"})
    assert res.success
    e = c.get(target.id)
    assert e.diagonal == 40.0
    assert (e.aspect_x, e.aspect_y, e.color) == (target.aspect_x, target.aspect_y, target.color)

def test_update_field_keeps_raw_text():
    c = ScreenCollection()
    sid = c.snapshot().ids()[0]
    assert c.update_field(sid, "aspect_x", "sixteen").success
    assert c.get(sid).aspect_x == "sixteen"

def test_update_unknown_id_or_field_is_noop():
    c = ScreenCollection()
    before = c.snapshot()
    assert c.update(42, {"diagonal": 10}).error_kind is ErrorKind.NOT_FOUND
    sid = before.ids()[0]
    assert c.update(sid, {"depth": 3}).error_kind is ErrorKind.FIELD_INVALID
    assert c.snapshot() == before

def test_snapshot_is_a_copy():
    c = ScreenCollection()
    snap = c.snapshot()
    snap.entries[0].diagonal = 99.0
    assert c.snapshot().entries[0].diagonal != 99.0

def test_reset_restores_defaults():
    c = ScreenCollection()
    defaults = [(e.diagonal, e.aspect_x, e.aspect_y, e.color) for e in c.snapshot()]
    c.add()
    c.update(c.snapshot().ids()[0], {"diagonal": 5})
    c.reset()
    assert [(e.diagonal, e.aspect_x, e.aspect_y, e.color) for e in c.snapshot()] == defaults

def test_subscribers_see_complete_snapshots():
    c = ScreenCollection()
    seen = []
    unsubscribe = c.subscribe(lambda state: seen.append(state.ids()))
    added = c.add().entry
    c.update(added.id, {"color": "#abcdef"})
    c.remove(999)  # failed mutations do not notify
    assert len(seen) == 2 and seen[0][-1] == added.id
    unsubscribe()
    c.add()
    assert len(seen) == 2

def test_failing_subscriber_does_not_block_others():
    c = ScreenCollection()
    calls = []
    def boom(state):
        raise RuntimeError("boom")
    c.subscribe(boom)
    c.subscribe(lambda state: calls.append(len(state)))
    assert c.add().success
    assert calls == [3]

def test_long_numeric_text_is_stored_exactly():
    c = ScreenCollection()
    sid = c.snapshot().ids()[0]
    c.update_field(sid, "diagonal", "0.00000000000000000000000000000000001")
    assert c.get(sid).diagonal == 1e-35
    c.update_field(sid, "diagonal", "1" + "0" * 35)
    assert c.get(sid).diagonal == 1e35

def test_update_rejects_bad_color():
    c = ScreenCollection()
    before = c.snapshot()
    sid = before.ids()[0]
    for bad in (None, "None", "red", "#12"):
        res = c.update_field(sid, "color", bad)
        assert not res.success and res.error_kind is ErrorKind.FIELD_INVALID
    assert c.snapshot() == before
    assert c.update_field(sid, "color", "#00ff00").success
    assert c.get(sid).color == "#00ff00"

def test_add_rejects_bad_color():
    c = ScreenCollection()
    res = c.add(ScreenSpec(id=0, diagonal=20, aspect_x=4, aspect_y=3, color="not-a-color"))
    assert not res.success and res.error_kind is ErrorKind.FIELD_INVALID
    assert len(c) == 2
    # an empty color falls back to the palette
    res = c.add(ScreenSpec(id=0, diagonal=20, aspect_x=4, aspect_y=3, color=""))
    assert res.success and res.entry.color == color_for_index(2)
