"""
Execution listener: logs the suite and per-test lifecycle and attaches failure
messages to the Allure report.

It only reads reports. Outcomes, ordering and inputs are never touched.
"""
import logging

import allure

from logging_helper import log_status

logger = logging.getLogger(__name__)

KNOWN_DEFECT = "known_defect"


def _failure_message(report) -> str:
    longrepr = getattr(report, "longrepr", None)
    crash = getattr(longrepr, "reprcrash", None)
    if crash is not None:
        return crash.message
    return str(longrepr) if longrepr is not None else "<no failure details>"


def _test_name(report) -> str:
    return report.nodeid.split("::")[-1]


class ExecutionListener:
    def __init__(self, suite_name="Bookstore API", base_url=None):
        self.suite_name = suite_name
        self.base_url = base_url
        self.passed = 0
        self.failed = 0
        self.skipped = 0
        self.known_defects = 0

    def pytest_sessionstart(self, session):
        logger.info(f"===== Starting Test Suite: {self.suite_name} =====")
        if self.base_url:
            logger.info(f"Target API: {self.base_url}")

    def pytest_runtest_logstart(self, nodeid, location):
        logger.info(f">>> Starting Test: {nodeid.split('::')[-1]}")

    def pytest_runtest_logreport(self, report):
        if report.when == "call":
            if report.passed:
                self.on_test_success(report)
            elif report.failed:
                self.on_test_failure(report)
            elif report.skipped:
                self.on_test_skipped(report)
        elif report.when == "setup":
            if report.failed:
                self.on_test_failure(report)
            elif report.skipped:
                self.on_test_skipped(report)

    def on_test_success(self, report):
        self.passed += 1
        log_status("good", f"<<< Test PASSED: {_test_name(report)}")

    def on_test_failure(self, report):
        self.failed += 1
        message = _failure_message(report)
        log_status("error", f"<<< Test FAILED: {_test_name(report)}")
        logger.error(f"Failure Reason: {message}")
        if KNOWN_DEFECT in report.keywords:
            self.known_defects += 1
            log_status("warning", f"Known API defect still present: {_test_name(report)}")
        allure.attach(message, name="Failure Message", attachment_type=allure.attachment_type.TEXT)

    def on_test_skipped(self, report):
        self.skipped += 1
        log_status("warning", f"<<< Test SKIPPED: {_test_name(report)}")

    def pytest_sessionfinish(self, session, exitstatus):
        logger.info(f"===== Finished Test Suite: {self.suite_name} =====")
        logger.info(f"Tests Passed: {self.passed}")
        logger.info(f"Tests Failed: {self.failed} (known API defects: {self.known_defects})")
        logger.info(f"Tests Skipped: {self.skipped}")
