from ark_smart_breeding.models import LoadResult, LoadStatus, Outcome


def test_outcome_truthiness():
    assert Outcome.success()
    assert not Outcome.failure("disk full")


def test_not_found_outcome_has_no_message():
    value, outcome = LoadResult(None, LoadStatus.NOT_FOUND)
    assert value is None
    assert outcome == Outcome(False, None)


def test_failure_without_message_gets_default():
    outcome = LoadResult(None, LoadStatus.PARSE_ERROR).outcome
    assert outcome.ok is False
    assert "parse_error" in outcome.message


def test_ok_result_unpacks():
    value, outcome = LoadResult({"version": 3}, LoadStatus.OK)
    assert value == {"version": 3}
    assert outcome == Outcome.success()
