from balance_relocator.relocation import (
    RelocationStep,
    apply_plan,
    is_feasible,
    plan_relocations,
    prefix_balances,
)
from balance_relocator.report import RelocationReport


def test_plan_names_relocated_expense():
    txs = [10, -10, -1, 1, 10]
    plan = plan_relocations(txs)

    assert plan.relocations == 1
    assert plan.steps == (RelocationStep(at_index=2, expense_index=1, amount=10),)
    assert plan.relocated_indices == [1]
    assert plan.final_balance == sum(txs) + 10
    assert plan.min_balance == 0


def test_plan_each_small_expense_relocated_where_it_happens():
    plan = plan_relocations([-1, -1, -1, 1, 1, 1, 1])

    assert [(s.at_index, s.expense_index) for s in plan.steps] == [(0, 0), (1, 1), (2, 2)]
    assert plan.relocated_total == 3
    assert plan.final_balance == 4


def test_plan_without_relocations():
    plan = plan_relocations([5, -2, -3, 1])

    assert plan.relocations == 0
    assert plan.steps == ()
    assert plan.final_balance == 1
    assert plan.min_balance == 0


def test_plan_empty_input():
    plan = plan_relocations([])

    assert plan.relocations == 0
    assert plan.final_balance == 0
    assert plan.min_balance == 0


def test_min_balance_tracks_lowest_point():
    assert plan_relocations([3, 4]).min_balance == 3
    assert plan_relocations([3, -1, 4]).min_balance == 2


def test_apply_plan_moves_relocated_expenses_to_the_end():
    txs = [10, -10, -1, 1, 10]
    plan = plan_relocations(txs)

    reordered = apply_plan(txs, plan)
    assert reordered == [10, -1, 1, 10, -10]
    assert prefix_balances(reordered) == [10, 9, 10, 20, 10]
    assert is_feasible(reordered)
    assert not is_feasible(txs)


def test_apply_plan_keeps_relocation_order_in_tail():
    txs = [-1, -3, 2, 5]
    plan = plan_relocations(txs)

    assert plan.relocations == 2
    assert apply_plan(txs, plan) == [2, 5, -1, -3]


def test_report_from_plan():
    plan = plan_relocations([10, -10, -1, 1, 10])
    report = RelocationReport.from_plan(plan)

    assert report.relocations == 1
    assert report.relocated_indices == [1]
    assert report.steps[0].amount == 10

    dumped = report.model_dump()
    assert dumped["final_balance"] == 20
    assert dumped["steps"] == [{"at_index": 2, "expense_index": 1, "amount": 10}]
