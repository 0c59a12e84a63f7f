"""Run report output."""

from pathlib import Path

import structlog

from titanic_harness.models.report import CaseOutcome, SuiteReport

log = structlog.get_logger(__name__)

_MARKS = {
    CaseOutcome.PASSED: "PASS",
    CaseOutcome.FAILED: "FAIL",
    CaseOutcome.ERROR: "ERROR",
}


def write_report(report: SuiteReport, results_dir: Path) -> Path:
    """Write `report` as JSON into `results_dir` and return the file path."""
    results_dir.mkdir(parents=True, exist_ok=True)
    path = results_dir / f"run-{report.run_id}.json"
    path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    log.info("report_written", path=str(path))
    return path


def format_summary(report: SuiteReport) -> str:
    """Plain-text summary for the terminal."""
    lines = [
        "=" * 60,
        f"Titanic API suite - run {report.run_id} against {report.base_url}",
        "=" * 60,
    ]
    for error in report.setup.errors:
        lines.append(f"  [SETUP] {error}")
    for case in report.cases:
        lines.append(f"  [{_MARKS[case.outcome]}] {case.title}")
        if case.message:
            lines.append(f"         {case.message}")
        if case.cleanup.attempted and not case.cleanup.complete:
            lines.append(
                f"         cleanup incomplete: forbidden={case.cleanup.forbidden} "
                f"failed={case.cleanup.failed} lingering={case.cleanup.lingering}"
            )
    lines.append("-" * 60)
    lines.append(
        f"  passed: {report.passed}  failed: {report.failed}  errors: {report.errored}"
    )
    return "\n".join(lines)
