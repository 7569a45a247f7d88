from inventory.db.results import Outcome, Result


def test_result_constructors_set_outcome():
    assert Result.success([]).ok
    assert Result.success([]).value == []
    assert Result.missing("gone").not_found
    assert Result.rejected("bad role").invalid

    cause = RuntimeError("disk full")
    failure = Result.storage_error("Failed to create role", cause)
    assert failure.failed
    assert failure.cause is cause
    assert failure.outcome is Outcome.STORAGE_ERROR


def test_outcomes_are_mutually_exclusive():
    result = Result.missing("nope")
    assert not result.ok
    assert not result.invalid
    assert not result.failed
