from __future__ import annotations

from pathlib import Path
from typing import Iterable

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from fluentcheck.scope import FailureRecord


def write_junit(
    path: Path,
    failures: Iterable[FailureRecord],
    suite_name: str = "soft assertions",
) -> Path:
    """Write collected failures to a JUnit XML file, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for index, record in enumerate(failures, start=1):
        case = TestCase(f"{suite_name} #{index}")
        # classname is the call-site file so runners group failures by test module
        case.classname = record.location.rsplit(":", 1)[0] if record.location else suite_name
        case.result = Failure(record.message)
        suite.add_testcase(case)

    # Use append (not +=) to keep the suite's own attributes
    xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
