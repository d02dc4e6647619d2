import pytest

from coursechain.ledger import AuthorizationError, Ledger
from coursechain.progress import (
    ProgressContract,
    ProgressError,
    ProgressErrorCode as Code,
)

COURSE = "BLOCKCHAIN101"


def code_of(func, *args):
    """Call func and return the code of the ProgressError it raises."""
    with pytest.raises(ProgressError) as info:
        func(*args)
    return info.value.code


def assert_rejections(contract, user, course_id, too_high):
    cases = [
        (0, True, Code.INVALID_PROGRESS),
        (too_high, True, Code.INVALID_PROGRESS),
        (1, True, Code.MODULE_ALREADY_COMPLETED),
        (1, False, Code.NON_INCREASING_PROGRESS),
    ]
    for module, completed, code in cases:
        assert code_of(contract.update_progress, user, course_id, module, completed) is code


@pytest.fixture
def ledger():
    return Ledger()


@pytest.fixture
def admin(ledger):
    return ledger.generate_address()


@pytest.fixture
def user(ledger):
    return ledger.generate_address()


@pytest.fixture
def blank(ledger):
    return ProgressContract(ledger)


@pytest.fixture
def contract(blank, ledger, admin):
    ledger.mock_all_auths()
    blank.initialize(admin)
    return blank


@pytest.fixture
def course(contract):
    contract.add_course(COURSE, 5)
    return COURSE


def test_initialize(contract, admin):
    contract.add_course("X", 1)
    assert contract.get_course_modules("X") == 1
    assert code_of(contract.initialize, admin) is Code.ALREADY_INITIALIZED


def test_initialize_requires_admin_auth(blank, ledger, admin):
    ledger.mock_auths([])
    with pytest.raises(AuthorizationError):
        blank.initialize(admin)


def test_add_course_before_initialize(blank, ledger):
    ledger.mock_all_auths()
    assert code_of(blank.add_course, "RUST101", 10) is Code.NOT_INITIALIZED


def test_add_course_requires_admin_auth(contract, ledger, user):
    ledger.mock_auths([user])
    with pytest.raises(AuthorizationError):
        contract.add_course("RUST101", 10)


def test_course_management(contract):
    contract.add_course("RUST101", 10)
    assert contract.get_course_modules("RUST101") == 10
    assert code_of(contract.get_course_modules, "INVALID") is Code.COURSE_NOT_FOUND


def test_user_progress(contract, user):
    course_id, total_modules = "RUST101", 10
    contract.add_course(course_id, total_modules)

    contract.update_progress(user, course_id, 1, True)
    progress = contract.get_progress(user, course_id)
    assert len(progress) == total_modules + 1
    assert progress[1] is True

    contract.update_progress(user, course_id, 2, True)
    assert contract.get_completion_percentage(user, course_id) == 20

    assert_rejections(contract, user, course_id, 11)

    contract.update_progress(user, course_id, 3, True)
    assert contract.get_progress(user, course_id)[1:4] == [True, True, True]
    assert contract.get_completion_percentage(user, course_id) == 30


def test_progress_validation_rules(contract, user, course):
    contract.update_progress(user, course, 1, True)
    assert_rejections(contract, user, course, 6)

    for module in range(2, 6):
        contract.update_progress(user, course, module, True)

    assert contract.get_completion_percentage(user, course) == 100


def test_get_progress_without_any_updates(contract, user, course):
    assert code_of(contract.get_progress, user, course) is Code.NOT_INITIALIZED


def test_get_progress_for_other_course(contract, user, course):
    contract.add_course("OTHER", 3)
    contract.update_progress(user, course, 1, True)
    assert code_of(contract.get_progress, user, "OTHER") is Code.NOT_INITIALIZED


def test_update_progress_unknown_course(contract, user, course):
    assert code_of(contract.update_progress, user, "NOPE", 1, True) is (
        Code.COURSE_NOT_FOUND
    )


def test_update_progress_requires_user_auth(contract, ledger, admin, user, course):
    ledger.mock_auths([admin])
    with pytest.raises(AuthorizationError):
        contract.update_progress(user, course, 1, True)


def test_invalid_update_stores_nothing(contract, user, course):
    assert code_of(contract.update_progress, user, course, 9, True) is (
        Code.INVALID_PROGRESS
    )
    assert code_of(contract.get_progress, user, course) is Code.NOT_INITIALIZED


def test_marking_incomplete_module_incomplete_records_progress(contract, user, course):
    contract.update_progress(user, course, 2, False)
    assert contract.get_progress(user, course) == [False] * 6
    assert contract.get_completion_percentage(user, course) == 0


def test_returned_progress_is_a_copy(contract, user, course):
    contract.update_progress(user, course, 1, True)
    progress = contract.get_progress(user, course)
    progress[2] = True
    assert contract.get_progress(user, course)[2] is False


def test_course_with_no_modules(contract, user, course):
    contract.add_course("EMPTY", 0)
    assert code_of(contract.update_progress, user, "EMPTY", 1, True) is (
        Code.INVALID_PROGRESS
    )


def test_events(contract, ledger, user, course):
    steps = [
        (1, True, False, ("info", "progress_update"), "1,true"),
        (7, False, True, ("error", "invalid_module"), "7,false"),
        (1, True, True, ("error", "already_completed"), "1"),
        (1, False, True, ("error", "non_increasing"), "1,true->false"),
    ]
    for module, completed, fails, topics, tail in steps:
        if fails:
            with pytest.raises(ProgressError):
                contract.update_progress(user, course, module, completed)
        else:
            contract.update_progress(user, course, module, completed)
        assert ledger.events[-1].topics == topics
        assert ledger.events[-1].data == f"{user},{course},{tail}"


def test_error_carries_code():
    assert ProgressError(4).code is Code.COURSE_NOT_FOUND