from ballgame.score import DEFAULT_PLAYER_NAME, MAX_HIGH_SCORES, HighScores, Score


def test_score_starts_at_zero():
    assert Score().value == 0


def test_record_sorts_descending():
    table = HighScores()
    table.record("a", 3)
    table.record("b", 7)
    result = table.record("c", 5)
    assert result == [("b", 7), ("c", 5), ("a", 3)]
    assert table.scores is result


def test_record_keeps_ties_in_insertion_order():
    table = HighScores()
    table.record("first", 4)
    table.record("second", 4)
    assert table.scores == [("first", 4), ("second", 4)]


def test_record_truncates_to_limit():
    table = HighScores()
    for value in range(15):
        table.record(DEFAULT_PLAYER_NAME, value)
    assert len(table.scores) == MAX_HIGH_SCORES
    assert len(table.scores) == 10
    assert table.scores[0] == (DEFAULT_PLAYER_NAME, 14)
    assert table.scores[-1] == (DEFAULT_PLAYER_NAME, 5)


def test_low_score_dropped_when_full():
    table = HighScores()
    for value in range(10, 20):
        table.record("x", value)
    table.record("late", 1)
    assert ("late", 1) not in table.scores
    assert len(table.scores) == MAX_HIGH_SCORES


def test_record_with_default_player_name():
    table = HighScores()
    assert table.record(DEFAULT_PLAYER_NAME, 1) == [("Player", 1)]