"""Unit tests for ValidationService."""

from datetime import date, timedelta

import pytest

from squadleave.services.validation_service import (
    LeaveProposal,
    ValidationService,
    describe_outcome,
)
from squadleave.shared.enums import RejectReason, RequestType, Specialty


@pytest.fixture
def dc_ia_team(make_employee):
    """Employees 1-5 in DC-IA, 6 in DC-UX."""
    return [make_employee(str(i)) for i in range(1, 6)] + [make_employee("6", Specialty.DC_UX)]


@pytest.fixture
def june_vacations(make_request):
    """Employees 1-4 on vacation 2025-06-01..2025-06-05."""
    return [
        make_request(str(i), date(2025, 6, 1), date(2025, 6, 5), id=f"v{i}")
        for i in range(1, 5)
    ]


class TestRequiredFields:
    """Rules 1 and 2: presence and range sanity."""

    @pytest.mark.parametrize("field", ["employee_id", "start_date", "end_date"])
    def test_missing_field(self, dc_ia_team, field):
        values = dict(employee_id="1", start_date=date(2025, 6, 1), end_date=date(2025, 6, 2))
        values[field] = None
        outcome = ValidationService.validate(LeaveProposal(**values), [], dc_ia_team)

        assert outcome.rejected
        assert outcome.reason == RejectReason.MISSING_FIELDS

    def test_unparsable_date_counts_as_missing(self, dc_ia_team):
        proposal = LeaveProposal(employee_id="1", start_date="06/01/2025", end_date="2025-06-02")
        outcome = ValidationService.validate(proposal, [], dc_ia_team)
        assert outcome.reason == RejectReason.MISSING_FIELDS

    def test_inverted_range(self, dc_ia_team):
        proposal = LeaveProposal(employee_id="1", start_date=date(2025, 6, 5), end_date=date(2025, 6, 1))
        outcome = ValidationService.validate(proposal, [], dc_ia_team)
        assert outcome.reason == RejectReason.INVERTED_RANGE

    def test_inverted_range_wins_over_unknown_employee(self, dc_ia_team):
        proposal = LeaveProposal(employee_id="99", start_date=date(2025, 6, 5), end_date=date(2025, 6, 1))
        outcome = ValidationService.validate(proposal, [], dc_ia_team)
        assert outcome.reason == RejectReason.INVERTED_RANGE

    def test_unresolved_employee(self, dc_ia_team):
        proposal = LeaveProposal(employee_id="99", start_date=date(2025, 6, 1), end_date=date(2025, 6, 1))
        outcome = ValidationService.validate(proposal, [], dc_ia_team)
        assert outcome.reason == RejectReason.UNRESOLVED_EMPLOYEE

    def test_overlap_reported_before_unknown_employee(self, dc_ia_team, make_request):
        existing = [make_request("99", date(2025, 6, 1), date(2025, 6, 3), id="orphan")]
        proposal = LeaveProposal(employee_id="99", start_date=date(2025, 6, 2), end_date=date(2025, 6, 2))
        outcome = ValidationService.validate(proposal, existing, dc_ia_team)
        assert outcome.reason == RejectReason.OVERLAPS_EXISTING_REQUEST
        assert outcome.conflicting_request.id == "orphan"


class TestPersonalOverlap:
    """Rule 3: one employee cannot hold two overlapping requests of any type."""

    def test_touching_end_is_overlap(self, dc_ia_team, make_request):
        existing = [make_request("1", date(2025, 3, 10), date(2025, 3, 15), id="mar")]
        proposal = LeaveProposal(
            employee_id="1", start_date=date(2025, 3, 15), end_date=date(2025, 3, 15),
            type=RequestType.DAY_OFF,
        )
        outcome = ValidationService.validate(proposal, existing, dc_ia_team)

        assert outcome.reason == RejectReason.OVERLAPS_EXISTING_REQUEST
        assert outcome.conflicting_request.id == "mar"

    def test_next_day_is_accepted(self, dc_ia_team, make_request):
        existing = [make_request("1", date(2025, 3, 10), date(2025, 3, 15))]
        proposal = LeaveProposal(
            employee_id="1", start_date=date(2025, 3, 16), end_date=date(2025, 3, 16),
            type=RequestType.DAY_OFF,
        )
        assert ValidationService.validate(proposal, existing, dc_ia_team).accepted

    def test_identical_single_day(self, dc_ia_team, make_request):
        existing = [make_request("1", date(2025, 7, 1), date(2025, 7, 1), RequestType.SICK_LEAVE)]
        proposal = LeaveProposal(employee_id="1", start_date=date(2025, 7, 1), end_date=date(2025, 7, 1),
                                 type=RequestType.DAY_OFF)
        outcome = ValidationService.validate(proposal, existing, dc_ia_team)
        assert outcome.reason == RejectReason.OVERLAPS_EXISTING_REQUEST

    def test_containing_interval(self, dc_ia_team, make_request):
        existing = [make_request("1", date(2025, 7, 10), date(2025, 7, 12))]
        proposal = LeaveProposal(employee_id="1", start_date=date(2025, 7, 1), end_date=date(2025, 7, 31))
        outcome = ValidationService.validate(proposal, existing, dc_ia_team)
        assert outcome.reason == RejectReason.OVERLAPS_EXISTING_REQUEST

    @pytest.mark.parametrize("request_type", list(RequestType))
    def test_disjoint_interval_accepted_for_any_type(self, dc_ia_team, make_request, request_type):
        existing = [
            make_request("1", date(2025, 1, 6), date(2025, 1, 10)),
            make_request("1", date(2025, 2, 3), date(2025, 2, 3), RequestType.DAY_OFF),
        ]
        proposal = LeaveProposal(
            employee_id="1", start_date=date(2025, 1, 13), end_date=date(2025, 1, 20), type=request_type,
        )
        assert ValidationService.validate(proposal, existing, dc_ia_team).accepted

    def test_other_employee_requests_do_not_overlap(self, dc_ia_team, make_request):
        existing = [make_request("2", date(2025, 3, 10), date(2025, 3, 15))]
        proposal = LeaveProposal(employee_id="1", start_date=date(2025, 3, 10), end_date=date(2025, 3, 15))
        assert ValidationService.validate(proposal, existing, dc_ia_team).accepted

    def test_overlap_checked_before_capacity(self, dc_ia_team, june_vacations):
        proposal = LeaveProposal(employee_id="1", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3))
        outcome = ValidationService.validate(proposal, june_vacations, dc_ia_team)
        assert outcome.reason == RejectReason.OVERLAPS_EXISTING_REQUEST


class TestCapacity:
    """Rule 4: at most capacity_limit vacations per specialty per day."""

    def test_fifth_vacation_rejected(self, dc_ia_team, june_vacations):
        proposal = LeaveProposal(employee_id="5", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3))
        outcome = ValidationService.validate(proposal, june_vacations, dc_ia_team)

        assert outcome.reason == RejectReason.CAPACITY_EXCEEDED
        assert outcome.offending_date == date(2025, 6, 3)
        assert outcome.specialty == Specialty.DC_IA

    def test_first_offending_date_reported(self, dc_ia_team, june_vacations):
        proposal = LeaveProposal(employee_id="5", start_date=date(2025, 5, 28), end_date=date(2025, 6, 10))
        outcome = ValidationService.validate(proposal, june_vacations, dc_ia_team)
        assert outcome.offending_date == date(2025, 6, 1)

    @pytest.mark.parametrize("request_type", [RequestType.SICK_LEAVE, RequestType.DAY_OFF])
    def test_non_vacation_ignores_capacity(self, dc_ia_team, june_vacations, request_type):
        proposal = LeaveProposal(
            employee_id="5", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3), type=request_type,
        )
        assert ValidationService.validate(proposal, june_vacations, dc_ia_team).accepted

    def test_other_specialty_unaffected(self, dc_ia_team, june_vacations):
        proposal = LeaveProposal(employee_id="6", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3))
        assert ValidationService.validate(proposal, june_vacations, dc_ia_team).accepted

    def test_three_existing_is_below_cap(self, dc_ia_team, june_vacations):
        proposal = LeaveProposal(employee_id="5", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3))
        assert ValidationService.validate(proposal, june_vacations[:3], dc_ia_team).accepted

    def test_day_offs_do_not_consume_capacity(self, dc_ia_team, make_request):
        existing = [
            make_request(str(i), date(2025, 6, 1), date(2025, 6, 5), RequestType.DAY_OFF)
            for i in range(1, 5)
        ]
        proposal = LeaveProposal(employee_id="5", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3))
        assert ValidationService.validate(proposal, existing, dc_ia_team).accepted

    def test_custom_limit(self, dc_ia_team, june_vacations):
        proposal = LeaveProposal(employee_id="5", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3))
        outcome = ValidationService.validate(proposal, june_vacations[:2], dc_ia_team, capacity_limit=2)
        assert outcome.reason == RejectReason.CAPACITY_EXCEEDED

    def test_inactive_employees_still_count(self, make_employee, make_request):
        team = [make_employee(str(i), active=(i != 1)) for i in range(1, 6)]
        existing = [make_request(str(i), date(2025, 6, 1), date(2025, 6, 5)) for i in range(1, 5)]
        proposal = LeaveProposal(employee_id="5", start_date=date(2025, 6, 2), end_date=date(2025, 6, 2))
        assert ValidationService.validate(proposal, existing, team).reason == RejectReason.CAPACITY_EXCEEDED


class TestAcceptance:
    """Accepted outcomes carry the normalized request."""

    def test_external_flag_forced_false_for_non_vacation(self, dc_ia_team):
        proposal = LeaveProposal(
            employee_id="1", start_date=date(2025, 8, 1), end_date=date(2025, 8, 1),
            type=RequestType.SICK_LEAVE, externally_logged=True,
        )
        outcome = ValidationService.validate(proposal, [], dc_ia_team)
        assert outcome.accepted
        assert outcome.request.externally_logged is False

    def test_external_flag_kept_for_vacation(self, dc_ia_team):
        proposal = LeaveProposal(
            employee_id="1", start_date=date(2025, 8, 1), end_date=date(2025, 8, 5), externally_logged=True,
        )
        assert ValidationService.validate(proposal, [], dc_ia_team).request.externally_logged is True

    def test_iso_strings_normalized_to_dates(self, dc_ia_team):
        proposal = LeaveProposal(employee_id="1", start_date="2025-08-01", end_date="2025-08-05")
        outcome = ValidationService.validate(proposal, [], dc_ia_team)
        assert outcome.request.start_date == date(2025, 8, 1)
        assert outcome.request.end_date == date(2025, 8, 5)

    def test_inputs_not_mutated(self, dc_ia_team, june_vacations):
        before = [(r.id, r.start_date, r.end_date) for r in june_vacations]
        proposal = LeaveProposal(employee_id="5", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3))
        ValidationService.validate(proposal, june_vacations, dc_ia_team)
        assert [(r.id, r.start_date, r.end_date) for r in june_vacations] == before

    def test_long_vacation_far_from_others(self, dc_ia_team, june_vacations):
        start = date(2025, 9, 1)
        proposal = LeaveProposal(employee_id="5", start_date=start, end_date=start + timedelta(days=29))
        assert ValidationService.validate(proposal, june_vacations, dc_ia_team).accepted


class TestDescribeOutcome:
    """Default rejection messages."""

    def test_accepted_has_no_message(self, dc_ia_team):
        proposal = LeaveProposal(employee_id="1", start_date=date(2025, 8, 1), end_date=date(2025, 8, 1))
        assert describe_outcome(ValidationService.validate(proposal, [], dc_ia_team)) == ""

    def test_overlap_message_portuguese(self, dc_ia_team, make_request):
        existing = [make_request("1", date(2025, 3, 10), date(2025, 3, 15))]
        proposal = LeaveProposal(employee_id="1", start_date=date(2025, 3, 15), end_date=date(2025, 3, 15))
        message = describe_outcome(ValidationService.validate(proposal, existing, dc_ia_team))
        assert "Férias" in message
        assert "10/03" in message
        assert "15/03" in message

    def test_capacity_message_english(self, dc_ia_team, june_vacations):
        proposal = LeaveProposal(employee_id="5", start_date=date(2025, 6, 3), end_date=date(2025, 6, 3))
        message = describe_outcome(ValidationService.validate(proposal, june_vacations, dc_ia_team), "en")
        assert "DC-IA" in message
        assert "03/06/2025" in message
        assert "4" in message

    def test_unknown_language_falls_back_to_portuguese(self, dc_ia_team):
        proposal = LeaveProposal(employee_id="1")
        message = describe_outcome(ValidationService.validate(proposal, [], dc_ia_team), "de")
        assert message == "Preencha todos os campos obrigatórios."
