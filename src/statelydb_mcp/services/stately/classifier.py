"""
Classification of stately CLI output.

The stately CLI reports success only through human-readable text, so every
marker string and pattern the tools depend on is kept in this module.
Classifiers never raise.
"""

import re
from dataclasses import dataclass

from statelydb_mcp.services.stately.process import ProcessResult

SCHEMA_VALID_MARKER = "Schema is valid"
DRY_RUN_MARKER = "Dry Run: Schema was not published."
ITEM_FAILURE_GLYPH = "\u2718"  # ✘, printed next to each failed migration item
LOGGED_IN_MARKER = "Stately UserID"
DEFAULT_AUTH_HOST = "oauth.stately.cloud"


@dataclass(frozen=True)
class Verdict:
    """Outcome of classifying one command's output."""

    success: bool
    message: str

    @property
    def is_error(self) -> bool:
        return not self.success


def activation_url_pattern(auth_host: str = DEFAULT_AUTH_HOST) -> re.Pattern[str]:
    """Pattern matching the device activation URL printed by ``stately login``."""
    return re.compile(
        rf"(https://{re.escape(auth_host)}/activate\?user_code=[A-Za-z0-9-]+)",
        re.IGNORECASE,
    )


def extract_activation_url(text: str, auth_host: str = DEFAULT_AUTH_HOST) -> str | None:
    """Return the first activation URL in text, if any."""
    match = activation_url_pattern(auth_host).search(text or "")
    return match.group(1) if match else None


def classify_validate(result: ProcessResult) -> Verdict:
    """``stately schema validate``: valid when stdout says so, whatever the exit code."""
    if SCHEMA_VALID_MARKER in result.stdout:
        return Verdict(True, "Schema is valid.")
    return Verdict(False, f"Schema is invalid. Error: {result.stderr}\nOutput: {result.stdout}")


def classify_migrations(result: ProcessResult) -> Verdict:
    """``stately schema put --dry-run``: the dry run must complete with no failed item."""
    valid = DRY_RUN_MARKER in result.stdout and ITEM_FAILURE_GLYPH not in result.stdout
    if valid:
        return Verdict(True, "Migrations are valid.")
    return Verdict(False, f"Migrations are invalid. Error: {result.stderr} Output: {result.stdout}")


def classify_login(stdout: str, stderr: str = "", auth_host: str = DEFAULT_AUTH_HOST) -> Verdict:
    """``stately login``: succeeds only when an activation URL can be extracted.

    Takes raw text rather than a ProcessResult so partial output from a failed
    run can be classified too.
    """
    url = extract_activation_url(stdout, auth_host)
    if url:
        return Verdict(True, f"Please visit this URL to complete the authentication process: {url}")
    message = f"Login URL not found in output. Full output: {stdout}"
    if stderr:
        message += f"\nError: {stderr}"
    return Verdict(False, message)


def classify_whoami(result: ProcessResult) -> Verdict:
    """``stately whoami``: logged in when the user id line is present."""
    if LOGGED_IN_MARKER in result.stdout:
        return Verdict(True, f"You are logged in. Details: {result.stdout}")
    return Verdict(False, "You are not logged in.")


def classify_put(result: ProcessResult) -> Verdict:
    """``stately schema put``: published when nothing was written to stderr."""
    if not result.stderr:
        return Verdict(True, f"Schema published successfully: {result.stdout}")
    return Verdict(False, f"Failed to publish schema: {result.stderr} {result.stdout}")
