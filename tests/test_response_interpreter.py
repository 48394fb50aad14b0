from __future__ import annotations

import logging

import pytest

from marathon_deployer.domain.entities import AppStatus, OrchestratorResponse
from marathon_deployer.domain.response_interpreter import (
    StatusReport,
    classify_health,
    interpret_deploy,
    interpret_rollback,
    interpret_scale,
    interpret_status,
    select_rollback_version,
)
from marathon_deployer.shared.constants import HealthState
from marathon_deployer.shared.domain_exceptions import FatalDeploymentError
from marathon_deployer.shared.validation_utils import safe_percent


class TestHealthClassification:
    @pytest.mark.parametrize("instances", [0, 1, 5])
    def test_no_running_tasks_is_down(self, instances: int) -> None:
        assert classify_health(AppStatus(instances=instances, tasks_running=0)) == HealthState.DOWN

    @pytest.mark.parametrize(("running", "instances"), [(1, 2), (2, 5)])
    def test_fewer_running_than_instances_is_partially_up(self, running: int, instances: int) -> None:
        status = AppStatus(instances=instances, tasks_running=running)
        assert classify_health(status) == HealthState.PARTIALLY_UP

    @pytest.mark.parametrize("count", [1, 3])
    def test_all_instances_running_is_up(self, count: int) -> None:
        assert classify_health(AppStatus(instances=count, tasks_running=count)) == HealthState.UP


class TestSafePercent:
    def test_rounds_half_up(self) -> None:
        assert safe_percent(1, 8) == 13
        assert safe_percent(1, 3) == 33
        assert safe_percent(2, 3) == 67

    @pytest.mark.parametrize(("num", "den"), [(0, 0), (3, 0), ("x", 2), (None, 2), (float("nan"), 1), (10**400, 1)])
    def test_zero_or_non_numeric_yields_zero(self, num, den) -> None:
        assert safe_percent(num, den) == 0


class TestStatus:
    def test_report_for_healthy_app(self) -> None:
        response = OrchestratorResponse(200, {"app": {
            "instances": 4, "tasksRunning": 4, "tasksHealthy": 3, "tasksUnhealthy": 1, "tasksStaged": 0,
        }})

        report = interpret_status(response, target="prod")

        assert report.running_percent == 100
        assert report.healthy_percent == 75
        assert report.staged_percent == 0
        assert report.health == HealthState.UP
        assert report.warnings() == ["Unhealthy: 1"]

    def test_missing_counters_default_to_zero(self) -> None:
        report = interpret_status(OrchestratorResponse(200, {"app": {"instances": "n/a"}}))

        assert report.status == AppStatus()
        assert (report.running_percent, report.healthy_percent, report.staged_percent) == (0, 0, 0)
        assert report.health == HealthState.DOWN

    def test_report_lines_omit_zero_staged_and_unhealthy(self) -> None:
        status = AppStatus(instances=2, tasks_running=2, tasks_healthy=2, tasks_unhealthy=0, tasks_staged=0)
        texts = [text for _, text in StatusReport.from_status(status, "prod").report_lines()]

        assert not any(text.startswith("Staged") for text in texts)
        assert not any(text.startswith("Unhealthy") for text in texts)

    def test_report_lines_include_staged_and_partial_warning(self) -> None:
        status = AppStatus(instances=4, tasks_running=2, tasks_healthy=2, tasks_staged=2)
        lines = StatusReport.from_status(status, "dev").report_lines()
        texts = [text for _, text in lines]

        assert "Running: 2 / 4 (50%)" in texts
        assert "Healthy: 2 / 2 (100%)" in texts
        assert "Staged: 2 (50%)" in texts
        assert lines[-1][0] == logging.WARNING
        assert "2 de 4" in lines[-1][1]

    def test_down_app_reports_error_line(self) -> None:
        lines = StatusReport.from_status(AppStatus(instances=2)).report_lines()
        assert lines[-1][0] == logging.ERROR

    @pytest.mark.parametrize(
        "response",
        [OrchestratorResponse(404, {"message": "not found"}), OrchestratorResponse(200, {}),
         OrchestratorResponse(200, "oops")],
    )
    def test_non_200_or_missing_app_is_fatal(self, response: OrchestratorResponse) -> None:
        with pytest.raises(FatalDeploymentError) as excinfo:
            interpret_status(response)
        assert excinfo.value.action == "status"


class TestDeploy:
    def test_success_reports_deployment_fields(self) -> None:
        outcome = interpret_deploy(OrchestratorResponse(201, {"deploymentId": "d1", "version": "3"}))

        assert outcome.succeeded
        assert outcome.deployment_id == "d1"
        assert outcome.version == "3"

    def test_success_without_fields_is_quiet(self) -> None:
        outcome = interpret_deploy(OrchestratorResponse(201, {}))

        assert outcome.succeeded
        assert outcome.deployment_id is None
        assert outcome.version is None

    def test_only_one_field_is_not_reported(self) -> None:
        outcome = interpret_deploy(OrchestratorResponse(200, {"version": "3"}))

        assert outcome.succeeded
        assert outcome.version is None

    def test_conflict_is_fatal_with_message(self) -> None:
        with pytest.raises(FatalDeploymentError) as excinfo:
            interpret_deploy(OrchestratorResponse(409, {"message": "conflict"}))

        assert excinfo.value.message == "conflict"
        assert excinfo.value.status_code == 409
        assert excinfo.value.action == "deploy"

    def test_202_is_not_a_deploy_success(self) -> None:
        with pytest.raises(FatalDeploymentError):
            interpret_deploy(OrchestratorResponse(202, {}))


class TestScale:
    def test_success(self) -> None:
        outcome = interpret_scale(OrchestratorResponse(200, {"deploymentId": "d2", "version": "v9"}), 3)

        assert outcome.succeeded
        assert outcome.details == {"instances": 3}

    def test_rejected_by_orchestrator_is_fatal(self) -> None:
        with pytest.raises(FatalDeploymentError) as excinfo:
            interpret_scale(OrchestratorResponse(422, {"message": "invalid"}), -1)

        assert excinfo.value.status_code == 422
        assert excinfo.value.message == "invalid"


class TestRollback:
    def test_selects_previous_version(self) -> None:
        response = OrchestratorResponse(200, {"versions": ["v3", "v2", "v1"]})
        assert select_rollback_version(response) == "v2"

    @pytest.mark.parametrize("body", [{"versions": ["v3"]}, {"versions": []}, {}])
    def test_less_than_two_versions_is_fatal(self, body) -> None:
        with pytest.raises(FatalDeploymentError):
            select_rollback_version(OrchestratorResponse(200, body))

    @pytest.mark.parametrize("body", [{"versions": 5}, {"versions": "v3"}, {"versions": None}])
    def test_malformed_version_list_is_fatal(self, body) -> None:
        with pytest.raises(FatalDeploymentError):
            select_rollback_version(OrchestratorResponse(200, body))

    def test_failed_versions_fetch_is_fatal(self) -> None:
        with pytest.raises(FatalDeploymentError) as excinfo:
            select_rollback_version(OrchestratorResponse(500, "boom"))
        assert excinfo.value.status_code == 500

    def test_rollback_write_failure_is_not_fatal(self) -> None:
        outcome = interpret_rollback(OrchestratorResponse(409, {"message": "locked"}), "v2")

        assert not outcome.succeeded
        assert not outcome.fatal
        assert outcome.message == "locked"
