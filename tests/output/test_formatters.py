"""Tests for format_result dispatch and the Rich renderers."""

from __future__ import annotations

import json

from papilio.output.formatters import OutputSettings, format_result
from papilio.output.renderers import progress_bar, render_quiet, render_result
from papilio.services.result import ServiceError, ServiceResult
from papilio.services.wheel import WheelService


def _err(op: str = "submit_task", msg: str = "No domain panel is open") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="PANEL_CLOSED", message=msg))


class TestFormatResult:
    def test_json(self) -> None:
        result = ServiceResult(ok=True, op="add_task", data={"id": "a"})
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["data"]["id"] == "a"

    def test_json_beats_quiet(self) -> None:
        result = ServiceResult(ok=True, op="wheel")
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "wheel"

    def test_quiet(self) -> None:
        result = ServiceResult(ok=True, op="close_panel", data={"changed": True})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: close_panel"

    def test_default_is_rich(self) -> None:
        result = ServiceResult(ok=True, op="close_panel", data={"state": "closed"})
        output = format_result(result)
        assert output.startswith("OK")
        assert "state: closed" in output


class TestRenderQuiet:
    def test_items_print_ids(self) -> None:
        result = ServiceResult(ok=True, op="list_domains", data={"items": [{"id": "a"}, {"id": "b"}]})
        assert render_quiet(result) == "a\nb"

    def test_created_id(self) -> None:
        result = ServiceResult(ok=True, op="add_task", data={"changed": True, "id": "t-1"})
        assert render_quiet(result) == "t-1"

    def test_error(self) -> None:
        assert render_quiet(_err()).startswith("ERROR: submit_task")


class TestRenderResult:
    def test_error(self) -> None:
        output = render_result(_err())
        assert "ERROR" in output
        assert "No domain panel is open" in output

    def test_error_detail_verbose(self) -> None:
        result = ServiceResult(
            ok=False,
            op="select_domain",
            error=ServiceError(code="UNKNOWN_DOMAIN", message="bad", detail={"known": ["career"]}),
        )
        assert "known" in render_result(result, verbose=True)
        assert "known" not in render_result(result)

    def test_mutation_noop(self) -> None:
        result = ServiceResult(ok=True, op="toggle_task", data={"changed": False, "id": "x"})
        assert "no change" in render_result(result)

    def test_domains_table(self, service: WheelService) -> None:
        service.add_task("career", "Update CV")
        output = render_result(service.list_domains())
        assert "Career" in output
        assert "Self-Care" in output
        assert "0/1" in output
        assert "points: 0" in output

    def test_tasks_table(self, service: WheelService) -> None:
        task_id = service.add_task("health", "Walk daily").data["id"]
        service.toggle_task(task_id)
        output = render_result(service.domain_tasks("health"))
        assert "Walk daily" in output
        assert "[x]" in output
        assert "100%" in output
        assert "1 tasks" in output

    def test_wheel_table_marks_active(self, service: WheelService) -> None:
        service.select_domain("finances")
        output = render_result(service.wheel())
        assert "▶ Finances" in output
        assert "31°–59°" in output


class TestProgressBar:
    def test_bounds(self) -> None:
        assert progress_bar(0, width=4) == "░░░░"
        assert progress_bar(100, width=4) == "████"
        assert progress_bar(150, width=4) == "████"

    def test_half(self) -> None:
        assert progress_bar(50, width=10) == "█████░░░░░"
