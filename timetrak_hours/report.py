from .config import DEFAULT_EXPECTED_HOURS_PER_DAY
from .models import Report


def build_report(days_worked, hours_worked, expected_hours_per_day=DEFAULT_EXPECTED_HOURS_PER_DAY):
    expected_hours = expected_hours_per_day * days_worked
    return Report(
        days_worked=days_worked,
        hours_worked=hours_worked,
        expected_hours=expected_hours,
        delta=hours_worked - expected_hours,
    )


def format_report(report):
    lines = [
        f"Days worked: {report.days_worked}",
        f"Hours worked: {report.hours_worked:.2f}",
        f"Expected hours: {report.expected_hours:.2f}",
    ]
    if report.delta >= 0:
        lines.append(f"Status: Over by {report.delta:.2f} hours")
    else:
        lines.append(f"Status: Down by {-report.delta:.2f} hours")
    return lines


def log_result(days_worked, hours_worked, expected_hours_per_day=DEFAULT_EXPECTED_HOURS_PER_DAY):
    """Print the worked/expected summary and return the Report it was built from."""
    report = build_report(days_worked, hours_worked, expected_hours_per_day)
    for line in format_report(report):
        print(line)
    return report
