"""
Tests for employee lifecycle transitions and the salary split convention.
"""

import pytest
from datetime import date
from decimal import Decimal

from eos_benefits.business_logic.entities import ServiceBreakdownEntity, ComputedServicePeriod
from eos_benefits.business_logic.salary_resolver import salary_at
from eos_benefits.constants import EmployeeStatus, TerminationReason, REASON_OPENING_BALANCE
from eos_benefits.utils.salary_split import split_total_salary


@pytest.fixture
def hired(employee_manager):
    return employee_manager.create_employee(
        name="  Sara Ali ",
        hire_date=date(2018, 1, 1),
        basic_salary=Decimal("8000"),
        housing_allowance=Decimal("2000"),
        employee_id="emp-7",
        employee_number="E-007",
    )


class TestSalarySplit:

    def test_split_of_13500(self):
        parts = split_total_salary(13500)
        assert parts["basic_salary"] == Decimal("10000.00")
        assert parts["housing_allowance"] == Decimal("2500.00")
        assert parts["transport_allowance"] == Decimal("1000.00")
        assert parts["other_allowances"] == Decimal("0")

    def test_split_rounds_and_keeps_total(self):
        parts = split_total_salary("10000", other_allowances=300)
        assert parts["basic_salary"] == Decimal("7407.41")
        assert parts["housing_allowance"] == Decimal("1851.85")
        assert parts["transport_allowance"] == Decimal("740.74")
        assert parts["basic_salary"] + parts["housing_allowance"] + parts["transport_allowance"] == Decimal("10000")
        assert parts["other_allowances"] == Decimal("300")


class TestCreateEmployee:

    def test_initial_history_entry(self, hired):
        assert hired.name == "Sara Ali"
        assert hired.status is EmployeeStatus.ACTIVE
        assert len(hired.salary_history) == 1
        entry = hired.salary_history[0]
        assert entry.date == date(2018, 1, 1)
        assert entry.total == Decimal("10000")
        assert entry.reason == REASON_OPENING_BALANCE
        assert hired.current_salary_total == Decimal("10000")

    @pytest.mark.parametrize("kwargs", [
        dict(name="", hire_date=date(2020, 1, 1)),
        dict(name="X", hire_date="2020-01-01"),
        dict(name="X", hire_date=date(2020, 1, 1), basic_salary=-1),
        dict(name="X", hire_date=date(2020, 1, 1), opening_balance=-5),
    ])
    def test_invalid_input_is_rejected(self, employee_manager, kwargs):
        with pytest.raises(ValueError):
            employee_manager.create_employee(**kwargs)


class TestChangeSalary:

    def test_appends_history_and_updates_live_fields(self, employee_manager, hired):
        updated = employee_manager.change_salary(hired, date(2023, 1, 1), 13500, reason="Annual Review")

        assert len(updated.salary_history) == 2
        assert updated.basic_salary == Decimal("10000.00")
        assert updated.housing_allowance == Decimal("2500.00")
        assert updated.transport_allowance == Decimal("1000.00")
        assert updated.current_salary_total == Decimal("13500")
        assert updated.salary_history[-1].reason == "Annual Review"
        # the original value is untouched
        assert len(hired.salary_history) == 1
        assert hired.current_salary_total == Decimal("10000")

    def test_history_drives_past_salary(self, employee_manager, hired):
        updated = employee_manager.change_salary(hired, date(2023, 1, 1), 13500)
        assert salary_at(updated, date(2022, 6, 30)) == Decimal("10000")
        assert salary_at(updated, date(2023, 6, 30)) == Decimal("13500")

    def test_other_allowances_are_included_in_entry_total(self, employee_manager, hired):
        updated = employee_manager.change_salary(hired, date(2023, 1, 1), 13500, other_allowances=500)
        assert updated.salary_history[-1].total == Decimal("14000")
        assert updated.current_salary_total == Decimal("14000")

    def test_backdated_change_keeps_the_live_salary(self, employee_manager, hired):
        raised = employee_manager.change_salary(hired, date(2023, 1, 1), 15000)
        backfilled = employee_manager.change_salary(raised, date(2020, 1, 1), 12000)

        assert len(backfilled.salary_history) == 3
        assert backfilled.current_salary_total == Decimal("15000")
        assert salary_at(backfilled, date(2024, 1, 1)) == Decimal("15000")
        assert salary_at(backfilled, date(2021, 6, 1)) == Decimal("12000")
        assert salary_at(backfilled, date(2019, 6, 1)) == Decimal("10000")

    def test_change_on_the_latest_entry_date_updates_live_fields(self, employee_manager, hired):
        updated = employee_manager.change_salary(hired, date(2018, 1, 1), 13500, reason="Offer correction")
        assert updated.current_salary_total == Decimal("13500")

    def test_negative_salary_is_rejected(self, employee_manager, hired):
        with pytest.raises(ValueError):
            employee_manager.change_salary(hired, date(2023, 1, 1), -1)

    def test_terminated_employee_is_rejected(self, employee_manager, hired):
        terminated = employee_manager.terminate(hired, date(2022, 1, 1), TerminationReason.MUTUAL_AGREEMENT)
        with pytest.raises(ValueError):
            employee_manager.change_salary(terminated, date(2023, 1, 1), 13500)


class TestCorrectionsAndHistory:

    def test_correct_current_salary_keeps_history(self, employee_manager, hired):
        corrected = employee_manager.correct_current_salary(hired, basic_salary=9000)
        assert len(corrected.salary_history) == 1
        assert corrected.current_salary_total == Decimal("11000")
        assert salary_at(corrected, date(2024, 1, 1)) == Decimal("11000")

    def test_correct_without_changes_returns_same_employee(self, employee_manager, hired):
        assert employee_manager.correct_current_salary(hired) is hired

    def test_remove_history_entry_resyncs_live_fields(self, employee_manager, hired):
        updated = employee_manager.change_salary(hired, date(2023, 1, 1), 13500)
        reverted = employee_manager.remove_history_entry(updated, 1)
        assert len(reverted.salary_history) == 1
        assert reverted.basic_salary == Decimal("8000")
        assert reverted.current_salary_total == Decimal("10000")

    def test_removing_last_entry_zeroes_live_fields(self, employee_manager, hired):
        emptied = employee_manager.remove_history_entry(hired, 0)
        assert emptied.salary_history == ()
        assert emptied.current_salary_total == Decimal("0")

    def test_remove_out_of_range(self, employee_manager, hired):
        with pytest.raises(ValueError):
            employee_manager.remove_history_entry(hired, 3)


class TestTerminationAndPayout:

    def test_terminate(self, employee_manager, hired):
        terminated = employee_manager.terminate(hired, date(2024, 3, 31), TerminationReason.RESIGNATION)
        assert terminated.status is EmployeeStatus.TERMINATED
        assert terminated.termination_date == date(2024, 3, 31)
        assert terminated.termination_reason is TerminationReason.RESIGNATION
        assert terminated.contract_end_date == date(2024, 3, 31)

    def test_terminate_before_hire_is_rejected(self, employee_manager, hired):
        with pytest.raises(ValueError):
            employee_manager.terminate(hired, date(2017, 12, 31), TerminationReason.RESIGNATION)

    def test_terminate_twice_is_rejected(self, employee_manager, hired):
        terminated = employee_manager.terminate(hired, date(2024, 3, 31), TerminationReason.RESIGNATION)
        with pytest.raises(ValueError):
            employee_manager.terminate(terminated, date(2024, 4, 30), TerminationReason.RESIGNATION)

    def test_record_payout(self, employee_manager, hired):
        terminated = employee_manager.terminate(hired, date(2024, 3, 31), TerminationReason.TERMINATION_BY_EMPLOYER)
        paid = employee_manager.record_payout(terminated, "36000", date(2024, 4, 15))
        assert paid.payout_amount == Decimal("36000")
        assert paid.payout_date == date(2024, 4, 15)

    def test_payout_for_active_employee_is_rejected(self, employee_manager, hired):
        with pytest.raises(ValueError):
            employee_manager.record_payout(hired, 1000, date(2024, 4, 15))

    def test_negative_payout_is_rejected(self, employee_manager, hired):
        terminated = employee_manager.terminate(hired, date(2024, 3, 31), TerminationReason.RESIGNATION)
        with pytest.raises(ValueError):
            employee_manager.record_payout(terminated, -1, date(2024, 4, 15))


class TestManualServicePeriod:

    def test_set_and_clear(self, employee_manager, hired):
        breakdown = ServiceBreakdownEntity(years=12, months=0, days=0)
        manual = employee_manager.set_manual_service_breakdown(hired, breakdown)
        assert manual.manual_service_breakdown == breakdown

        cleared = employee_manager.clear_manual_service_breakdown(manual)
        assert cleared.manual_service_breakdown is None
        assert isinstance(cleared.service_period_source, ComputedServicePeriod)

    def test_requires_breakdown_entity(self, employee_manager, hired):
        with pytest.raises(ValueError):
            employee_manager.set_manual_service_breakdown(hired, (12, 0, 0))


class TestEditHistoryEntry:

    @pytest.fixture
    def raised(self, employee_manager, hired):
        return employee_manager.change_salary(hired, date(2023, 1, 1), 13500)

    def test_retotal_latest_entry_resplits_and_updates_live_fields(self, employee_manager, raised):
        edited = employee_manager.edit_history_entry(raised, 1, total=16200)
        entry = edited.salary_history[1]
        assert entry.basic_salary == Decimal("12000.00")
        assert entry.housing_allowance == Decimal("3000.00")
        assert entry.transport_allowance == Decimal("1200.00")
        assert entry.total == Decimal("16200")
        assert entry.date == date(2023, 1, 1)
        assert edited.basic_salary == Decimal("12000.00")
        assert salary_at(edited, date(2024, 1, 1)) == Decimal("16200")

    def test_retotal_older_entry_leaves_live_fields(self, employee_manager, raised):
        edited = employee_manager.edit_history_entry(raised, 0, total=9450, reason="Corrected offer")
        assert edited.salary_history[0].total == Decimal("9450")
        assert edited.salary_history[0].reason == "Corrected offer"
        assert edited.current_salary_total == Decimal("13500")
        assert salary_at(edited, date(2020, 1, 1)) == Decimal("9450")

    def test_redating_latest_entry_resyncs_to_new_latest(self, employee_manager, raised):
        edited = employee_manager.edit_history_entry(raised, 1, effective_date=date(2017, 6, 1))
        assert edited.salary_history[1].date == date(2017, 6, 1)
        assert edited.basic_salary == Decimal("8000")
        assert edited.current_salary_total == Decimal("10000")

    def test_other_allowances_are_kept(self, employee_manager):
        employee = employee_manager.create_employee(
            name="Khalid", hire_date=date(2020, 1, 1), basic_salary=9000, other_allowances=500
        )
        edited = employee_manager.edit_history_entry(employee, 0, total=13500)
        entry = edited.salary_history[0]
        assert entry.other_allowances == Decimal("500")
        assert entry.total == Decimal("14000")
        assert edited.current_salary_total == Decimal("14000")

    def test_no_changes_returns_same_employee(self, employee_manager, raised):
        assert employee_manager.edit_history_entry(raised, 0) is raised

    @pytest.mark.parametrize("kwargs", [
        dict(index=5, total=1000),
        dict(index=0, total=-1),
        dict(index=0, effective_date="2020-01-01"),
    ])
    def test_invalid_edits_are_rejected(self, employee_manager, raised, kwargs):
        with pytest.raises(ValueError):
            employee_manager.edit_history_entry(raised, **kwargs)
