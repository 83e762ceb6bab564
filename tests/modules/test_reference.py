from digiwallet.modules.common.types import TransactionType
from digiwallet.modules.transactions import ReferenceIdGenerator


def fixed_clock(ms):
    return lambda: ms * 1_000_000


def test_prefix_by_type():
    generator = ReferenceIdGenerator(clock=fixed_clock(1_700_000_000_000))

    assert generator.next_id(TransactionType.CREDIT) == "CR-1700000000000"
    assert generator.next_id(TransactionType.DEBIT) == "DB-1700000000001"


def test_ids_strictly_increase_when_clock_stalls():
    generator = ReferenceIdGenerator(clock=fixed_clock(5))

    ids = [generator.next_id(TransactionType.CREDIT) for _ in range(4)]

    assert ids == ["CR-5", "CR-6", "CR-7", "CR-8"]


def test_clock_going_backwards_does_not_repeat():
    readings = iter([100, 50, 200])
    generator = ReferenceIdGenerator(clock=lambda: next(readings) * 1_000_000)

    assert [generator.next_id(TransactionType.DEBIT) for _ in range(3)] == ["DB-100", "DB-101", "DB-200"]


def test_custom_prefixes():
    generator = ReferenceIdGenerator(credit_prefix="IN", debit_prefix="OUT", clock=fixed_clock(1))

    assert generator.next_id(TransactionType.DEBIT) == "OUT-1"
