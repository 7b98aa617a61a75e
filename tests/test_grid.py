from relay_planner.services import GroupKey, Roster, build_grid, format_grid, generate_schedule

from helpers import ScriptedRandom


def scripted_schedule(participants):
    return generate_schedule(participants, 2, ScriptedRandom([[2, 3], [3, 1], [1, 2]]))


def test_grid_has_row_per_chain_and_column_per_round(abc_roster):
    grid = build_grid(scripted_schedule(abc_roster))
    assert len(grid) == 3
    assert all(len(row) == 2 for row in grid)
    assert grid[2][1] is None
    assert grid[0][1].round == 2


def test_recipient_key_flags_contacted_twice(abc_roster):
    grid = build_grid(scripted_schedule(abc_roster), GroupKey.RECIPIENT)
    first_round = [row[0] for row in grid]
    # A receives from both B and C in round 1
    assert [cell.flagged for cell in first_round] == [False, True, True]
    assert grid[0][1].flagged and grid[1][1].flagged


def test_sender_key_flags_nothing_without_collisions(abc_roster):
    grid = build_grid(scripted_schedule(abc_roster), GroupKey.SENDER)
    assert not any(cell.flagged for row in grid for cell in row if cell)


def test_limit_raises_flag_threshold(abc_roster):
    grid = build_grid(scripted_schedule(abc_roster), GroupKey.RECIPIENT, limit=2)
    assert not any(cell.flagged for row in grid for cell in row if cell)


def test_format_grid_renders_table(abc_roster):
    text = format_grid(scripted_schedule(abc_roster), GroupKey.RECIPIENT)
    lines = text.splitlines()
    assert lines[0].split() == ["Week", "1", "Week", "2"]
    assert lines[1].split() == ["A→B", "B→C*"]
    assert lines[2].split() == ["B→A*", "A→C*"]
    assert lines[3].split() == ["C→A*", "-"]


def test_rename_shows_in_existing_schedule():
    roster = Roster.create(3, ["A", "B", "C"])
    schedule = scripted_schedule(roster.participants)
    roster.rename(1, "Ann")
    text = format_grid(schedule)
    assert "Ann→B" in text
    assert "B→Ann" in text
