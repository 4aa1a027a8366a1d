"""Command-line interface for App Store Connect.

Usage:
    asc status      # Full app status summary
    asc review      # Check review submission status
    asc rejection   # Rejection details and Resolution Center messages
    asc builds      # List recent builds
    asc apps        # List all apps
    asc ready       # Check if ready for submission

Run ``asc --help`` for the full command list.
"""

from __future__ import annotations

import html
import json
import logging
import os
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import click

from app_store_connect import __version__
from app_store_connect.errors import ApiError, ConfigurationError
from app_store_connect.models import AppStoreVersion
from app_store_connect.resources import AppStoreConnect
from app_store_connect.session import WebSession

logger = logging.getLogger(__name__)

RULE = "=" * 50

SCREENSHOT_DISPLAY_TYPES = (
    "APP_IPHONE_67",
    "APP_IPHONE_65",
    "APP_IPHONE_55",
    "APP_IPAD_PRO_129",
    "APP_IPAD_PRO_11",
)
SCREENSHOT_SUFFIXES = (".png", ".jpg", ".jpeg")

# Share of users reached on each day of a phased release.
ROLLOUT_PERCENTAGES = {1: 1, 2: 2, 3: 5, 4: 10, 5: 20, 6: 50, 7: 100}

STATE_COLORS = {
    "READY_FOR_SALE": "green",
    "APPROVED": "green",
    "READY_TO_SUBMIT": "green",
    "COMPLETE": "green",
    "VALID": "green",
    "ACTIVE": "green",
    "WAITING_FOR_REVIEW": "yellow",
    "IN_REVIEW": "yellow",
    "PROCESSING": "yellow",
    "PAUSED": "yellow",
    "REJECTED": "red",
    "DEVELOPER_REJECTED": "red",
    "MISSING_METADATA": "red",
    "UNRESOLVED_ISSUES": "red",
    "FAILED": "red",
    "INVALID": "red",
}


@dataclass
class CliState:
    """Global options and the lazily built client, shared by all commands."""

    json_output: bool = False
    color: bool | None = None
    client: AppStoreConnect | None = None
    session: WebSession | None = None

    def get_client(self) -> AppStoreConnect:
        if self.client is None:
            self.client = AppStoreConnect()
        return self.client

    def get_session(self) -> WebSession:
        if self.session is None:
            self.session = self.client.session if self.client else WebSession()
        return self.session


pass_state = click.make_pass_decorator(CliState, ensure=True)


class AscGroup(click.Group):
    """Command group that turns library errors into messages and exit code 1."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except ConfigurationError as e:
            state = ctx.find_object(CliState)
            color = state.color if state else None
            click.echo(f"{click.style('Configuration Error:', fg='red')} {e}", color=color)
            click.echo(color=color)
            click.echo("Run 'asc --help' for setup instructions", color=color)
            ctx.exit(1)
        except ApiError as e:
            state = ctx.find_object(CliState)
            color = state.color if state else None
            click.echo(f"{click.style('API Error:', fg='red')} {e}", color=color)
            ctx.exit(1)


def _echo(state: CliState, message: str = "", **style: Any) -> None:
    if style:
        message = click.style(message, **style)
    click.echo(message, color=state.color)


def _colored(value: str | None) -> str:
    """Color a state name the way the status views do."""
    text = value or "UNKNOWN"
    color = STATE_COLORS.get(text)
    return click.style(text, fg=color) if color else text


def _heading(state: CliState, title: str) -> None:
    _echo(state, title, bold=True)
    _echo(state, RULE)
    _echo(state)


def _output_json(data: Any) -> None:
    if isinstance(data, list):
        data = [item.to_dict() if hasattr(item, "to_dict") else item for item in data]
    elif hasattr(data, "to_dict"):
        data = data.to_dict()
    click.echo(json.dumps(data, indent=2, default=str))


def _truncate(text: str | None, limit: int) -> str:
    if not text:
        return ""
    return text[:limit] + ("..." if len(text) > limit else "")


def _plain_text(markup: str) -> list[str]:
    """Resolution Center bodies are HTML; reduce them to display lines."""
    text = re.sub(r"<br\s*/?>", "\n", markup)
    text = text.replace("</p>", "\n")
    text = html.unescape(re.sub(r"<[^>]+>", "", text))
    return [line.strip() for line in text.splitlines() if line.strip()]


def _find_version(client: AppStoreConnect, *states: str) -> AppStoreVersion | None:
    versions = client.app_store_versions()
    for wanted in states:
        for version in versions:
            if version.state == wanted:
                return version
    return None


@click.group(cls=AscGroup, invoke_without_command=True)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors (also honors NO_COLOR).")
@click.option("--verbose", is_flag=True, help="Log HTTP requests and debug details.")
@click.option("--quiet", is_flag=True, help="Only log errors.")
@click.version_option(__version__, prog_name="asc")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, no_color: bool, verbose: bool, quiet: bool) -> None:
    """App Store Connect command-line client.

    Credentials are read from APP_STORE_CONNECT_KEY_ID,
    APP_STORE_CONNECT_ISSUER_ID and APP_STORE_CONNECT_PRIVATE_KEY_PATH
    (a .env file in the working directory is loaded too).
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    state = ctx.ensure_object(CliState)
    state.json_output = json_output
    if no_color or os.environ.get("NO_COLOR"):
        state.color = False

    if ctx.invoked_subcommand is None:
        ctx.invoke(status)


# App status


@cli.command()
@pass_state
def status(state: CliState) -> None:
    """Full app status summary."""
    result = state.get_client().app_status()
    if state.json_output:
        _output_json(result)
        return

    _heading(state, "App Store Connect Status")
    _echo(state, f"{click.style('App:', bold=True)} {result.app.name} ({result.app.bundle_id})")
    _echo(state)

    _echo(state, "Versions:", bold=True)
    for version in result.versions:
        _echo(state, f"  {version.version_string}: {_colored(version.state)} ({version.release_type})")
    _echo(state)

    if result.latest_review:
        review = result.latest_review
        _echo(state, "Latest Review Submission:", bold=True)
        _echo(state, f"  State: {_colored(review.state)}")
        _echo(state, f"  Platform: {review.platform}")
        if review.submitted_date:
            _echo(state, f"  Submitted: {review.submitted_date}")
        _echo(state)

    _echo(state, "Subscription Products:", bold=True)
    for sub in sorted(result.subscriptions, key=lambda s: s.group_level or 0):
        _echo(state, f"  {sub.name}: {_colored(sub.state)} (Level {sub.group_level})")
        _echo(state, f"    Product ID: {sub.product_id}")


@cli.command()
@pass_state
def apps(state: CliState) -> None:
    """List all apps."""
    records = state.get_client().apps()
    if state.json_output:
        _output_json(records)
        return

    _heading(state, "All Apps")
    for app in records:
        _echo(state, app.name or app.id, bold=True)
        _echo(state, f"  ID: {app.id}")
        _echo(state, f"  Bundle ID: {app.bundle_id}")
        _echo(state, f"  SKU: {app.sku}")
        _echo(state)


@cli.command()
@click.option("--limit", default=10, show_default=True, help="Number of builds to list.")
@pass_state
def builds(state: CliState, limit: int) -> None:
    """List recent builds."""
    records = state.get_client().builds(limit=limit)
    if state.json_output:
        _output_json(records)
        return

    _heading(state, "Recent Builds")
    if not records:
        _echo(state, "No builds found.")
        return
    for build in records:
        _echo(state, f"Build {build.version}")
        _echo(state, f"  State: {_colored(build.processing_state)}")
        _echo(state, f"  Audience: {build.build_audience_type}")
        _echo(state, f"  Uploaded: {build.uploaded_date or 'N/A'}")
        _echo(state)


@cli.command()
@click.option("--platform", help="Only show versions for this platform (IOS, MAC_OS...).")
@pass_state
def versions(state: CliState, platform: str | None) -> None:
    """List App Store versions."""
    records = state.get_client().app_store_versions(platform=platform)
    if state.json_output:
        _output_json(records)
        return

    _heading(state, "App Store Versions")
    if not records:
        _echo(state, "No versions found.")
        return
    for version in records:
        _echo(state, f"{version.version_string} [{version.platform}]: {_colored(version.state)}")
        _echo(state, f"  ID: {version.id}")
        _echo(state, f"  Release type: {version.release_type}")


@cli.command()
@pass_state
def ready(state: CliState) -> None:
    """Check if the app is ready for submission."""
    result = state.get_client().submission_readiness()
    if state.json_output:
        _output_json(result)
        return

    _heading(state, "Submission Readiness Check")
    if result.ready:
        _echo(state, "App appears ready for submission!", fg="green")
    else:
        _echo(state, "Issues found:", fg="red")
        for issue in result.issues:
            _echo(state, f"  - {issue}")
    _echo(state)
    _echo(state, f"Current state: {result.current_state}")


# Review


@cli.command()
@pass_state
def review(state: CliState) -> None:
    """Check review submission status."""
    records = state.get_client().review_submissions(limit=10)
    if state.json_output:
        _output_json(records)
        return

    _heading(state, "Review Submissions")
    if not records:
        _echo(state, "No review submissions found.")
        return
    for number, submission in enumerate(records, 1):
        _echo(state, f"{number}. {_colored(submission.state)}")
        _echo(state, f"   Platform: {submission.platform}")
        _echo(state, f"   Submitted: {submission.submitted_date or 'N/A'}")
        _echo(state)


@cli.command()
@pass_state
def rejection(state: CliState) -> None:
    """Show rejection details and Resolution Center messages."""
    client = state.get_client()
    info = client.rejection_info()
    if state.json_output:
        _output_json(info.to_dict() if info else None)
        return

    _heading(state, "Rejection Details")
    if info is None:
        _echo(state, "No rejected versions found.", fg="green")
        return

    if info.submission_state == "UNRESOLVED_ISSUES" and info.state not in ("REJECTED", "METADATA_REJECTED", "INVALID_BINARY"):
        _echo(state, "Submission has UNRESOLVED ISSUES (rejection pending)", fg="red")
    else:
        _echo(state, f"Version {info.version_string} was REJECTED", fg="red")
    _echo(state)
    if info.version_id:
        _echo(state, f"Version ID: {info.version_id}")
    if info.state:
        _echo(state, f"State: {info.state}")

    if not info.submission_id:
        _echo(state, "No submission ID found - cannot fetch Resolution Center messages", fg="yellow")
        return

    _echo(state, f"Submission ID: {info.submission_id}")
    _echo(state, f"Submission State: {info.submission_state}")

    try:
        items = client.review_submission_items(info.submission_id)
    except ApiError as e:
        _echo(state, f"Could not fetch submission items: {e}", fg="yellow")
    else:
        if items:
            _echo(state)
            _echo(state, "Submission Items:", bold=True)
            for item in items:
                resolved = " (resolved)" if item.resolved else ""
                _echo(state, f"  - {_colored(item.state)}{resolved}")

    try:
        threads = client.resolution_center_threads(info.submission_id)
    except ApiError as e:
        _echo(state)
        _echo(state, f"Could not fetch Resolution Center messages: {e}", fg="yellow")
        return

    if not threads:
        _echo(state, "No Resolution Center threads found for this submission", fg="yellow")
        return

    _echo(state)
    _echo(state, "Resolution Center Messages:", bold=True)
    for thread in threads:
        _echo(state, f"  Thread: {thread.thread_type}")
        try:
            messages = client.rejection_reasons(thread.id)
        except ApiError as e:
            _echo(state, f"  Could not fetch messages: {e}", fg="yellow")
            continue
        for message in messages:
            _echo(state)
            _echo(state, f"  {click.style('Date:', bold=True)} {message.created_date}")
            _echo(state, "  Message:", bold=True)
            for line in _plain_text(message.body or ""):
                _echo(state, f"    {line}")


@cli.command()
@click.option("--save", "save_from", type=click.File("r"), help="Save a fastlane session from FILE ('-' for stdin).")
@click.option("--clear", is_flag=True, help="Delete the saved session file.")
@pass_state
def session(state: CliState, save_from: Any, clear: bool) -> None:
    """Show or manage the web session used for the Resolution Center."""
    web_session = state.get_session()

    if clear:
        web_session.clear()
        _echo(state, "Session cleared.", fg="green")
        return

    if save_from is not None:
        path = web_session.save(save_from.read())
        if not web_session.valid:
            _echo(state, "Saved session has no myacinfo cookie; Resolution Center access will fail.", fg="yellow")
        _echo(state, f"Session saved to {path}", fg="green")
        return

    _heading(state, "Session Status")
    if web_session.valid:
        _echo(state, "Session available", fg="green")
        _echo(state, "  Resolution Center access: enabled")
        _echo(state, "  Rejection messages: available")
        return

    _echo(state, "No session found", fg="yellow")
    _echo(state)
    _echo(state, "To enable Resolution Center access (rejection messages):")
    _echo(state)
    _echo(state, "  1. Generate a session token:")
    _echo(state, "     fastlane spaceauth -u your@apple.id", fg="cyan")
    _echo(state, "  2. Set the environment variable or save it:")
    _echo(state, '     export FASTLANE_SESSION="..."', fg="cyan")
    _echo(state, "     asc session --save -", fg="cyan")
    _echo(state, "  3. Run the rejection command again:")
    _echo(state, "     asc rejection", fg="cyan")


# In-app purchases


@cli.command()
@pass_state
def iaps(state: CliState) -> None:
    """List in-app purchases."""
    records = state.get_client().in_app_purchases()
    if state.json_output:
        _output_json(records)
        return

    _heading(state, "In-App Purchases")
    if not records:
        _echo(state, "No in-app purchases found.")
        return
    for iap in records:
        _echo(state, f"{click.style(iap.name or iap.product_id or iap.id, bold=True)} ({iap.purchase_type})")
        _echo(state, f"  ID: {iap.id}")
        _echo(state, f"  Product ID: {iap.product_id}")
        _echo(state, f"  State: {_colored(iap.state)}")
        _echo(state, f"  Review Note: {iap.review_note or '(none)'}")
        _echo(state)


@cli.command("iap-details")
@click.argument("iap_id")
@pass_state
def iap_details(state: CliState, iap_id: str) -> None:
    """Show in-app purchase IAP_ID with its localizations."""
    client = state.get_client()
    iap = client.in_app_purchase(iap_id)
    localizations = client.in_app_purchase_localizations(iap_id)
    if state.json_output:
        _output_json({**iap.to_dict(), "localizations": [loc.to_dict() for loc in localizations]})
        return

    _heading(state, f"In-App Purchase: {iap.name or iap.product_id}")
    _echo(state, f"Product ID: {iap.product_id}")
    _echo(state, f"Type: {iap.purchase_type}")
    _echo(state, f"State: {_colored(iap.state)}")
    _echo(state, f"Review Note: {iap.review_note or '(none)'}")
    _echo(state)
    _echo(state, "Localizations:", bold=True)
    if not localizations:
        _echo(state, "  (none)")
    for loc in localizations:
        _echo(state, f"  {loc.locale}: {loc.name}")
        if loc.description:
            _echo(state, f"    {loc.description}")


# Customer reviews


@cli.command("customer-reviews")
@click.option("--limit", default=20, show_default=True, help="Number of reviews to list.")
@pass_state
def customer_reviews(state: CliState, limit: int) -> None:
    """List recent customer reviews and their responses."""
    client = state.get_client()
    records = client.customer_reviews(limit=limit)
    if state.json_output:
        _output_json(records)
        return

    _heading(state, "Customer Reviews")
    if not records:
        _echo(state, "No customer reviews found.")
        return

    for number, item in enumerate(records, 1):
        rating = item.rating or 0
        stars = click.style("★" * rating + "☆" * (5 - rating), fg="yellow")
        _echo(state, f"{number}. {stars} ({item.territory})")
        _echo(state, f"   {click.style(item.title or '', bold=True)}")
        if item.body:
            _echo(state, f"   {_truncate(item.body, 200)}")
        _echo(state, f"   By: {item.reviewer_nickname} on {item.created_date or 'N/A'}")
        _echo(state, f"   ID: {item.id}")

        try:
            response = client.customer_review_response(item.id)
        except ApiError as e:
            logger.debug(f"Could not fetch response for review {item.id}: {e}")
            response = None
        if response:
            _echo(state, f"   {click.style('-> Response:', fg='green')} {_truncate(response.response_body, 100)}")
        _echo(state)


@cli.command("respond-review")
@click.argument("review_id")
@click.argument("response", nargs=-1, required=True)
@click.option("--yes", "-y", is_flag=True, help="Replace an existing response without asking.")
@pass_state
def respond_review(state: CliState, review_id: str, response: tuple[str, ...], yes: bool) -> None:
    """Respond to customer review REVIEW_ID."""
    client = state.get_client()
    response_body = " ".join(response)

    existing = client.customer_review_response(review_id)
    if existing:
        _echo(state, "This review already has a response:", fg="yellow")
        _echo(state, f"  {existing.response_body}")
        if not yes and not click.confirm("Delete existing response and create new one?", default=False):
            _echo(state, "Cancelled.")
            return
        client.delete_customer_review_response(existing.id)
        _echo(state, "Deleted existing response.", fg="green")

    client.create_customer_review_response(review_id, response_body)
    _echo(state, "Response posted successfully!", fg="green")
    _echo(state, f"  Review ID: {review_id}")
    _echo(state, f"  Response: {response_body}")


# Releases


@cli.command("create-version")
@click.argument("version_string")
@click.argument(
    "release_type",
    default="AFTER_APPROVAL",
    type=click.Choice(["MANUAL", "AFTER_APPROVAL", "SCHEDULED"], case_sensitive=False),
)
@click.option("--platform", default="IOS", show_default=True)
@click.option("--release-date", help="Earliest release date (ISO 8601) for SCHEDULED releases.")
@pass_state
def create_version(
    state: CliState,
    version_string: str,
    release_type: str,
    platform: str,
    release_date: str | None,
) -> None:
    """Create App Store version VERSION_STRING."""
    version = state.get_client().create_app_store_version(
        version_string,
        platform=platform,
        release_type=release_type.upper(),
        earliest_release_date=release_date,
    )
    if state.json_output:
        _output_json(version)
        return
    _echo(state, f"Created version {version.version_string}", fg="green")
    _echo(state, f"  ID: {version.id}")
    _echo(state, f"  State: {version.state}")
    _echo(state, f"  Release type: {version.release_type}")


@cli.command("phased-release")
@pass_state
def phased_release(state: CliState) -> None:
    """Show phased release status for the active version."""
    client = state.get_client()
    version = _find_version(client, "READY_FOR_SALE", "PENDING_DEVELOPER_RELEASE", "PREPARE_FOR_SUBMISSION")
    if version is None:
        if state.json_output:
            _output_json(None)
        else:
            _echo(state, "No active version found.")
        return

    phased = client.phased_release(version.id)
    if state.json_output:
        _output_json(phased.to_dict() if phased else None)
        return

    _heading(state, "Phased Release Status")
    _echo(state, f"{click.style('Version:', bold=True)} {version.version_string} ({version.state})")
    _echo(state)
    if phased is None:
        _echo(state, "Phased release not enabled for this version.")
        _echo(state)
        _echo(state, "Use 'asc enable-phased-release' to enable gradual rollout.")
        return

    _echo(state, "Phased Release:", bold=True)
    _echo(state, f"  ID: {phased.id}")
    _echo(state, f"  State: {_colored(phased.state)}")
    _echo(state, f"  Day: {phased.current_day_number or 'N/A'} of 7")
    _echo(state, f"  Start Date: {phased.start_date or 'Not started'}")
    if phased.current_day_number:
        _echo(state, f"  Rollout: {ROLLOUT_PERCENTAGES.get(phased.current_day_number, 0)}% of users")


@cli.command("enable-phased-release")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@pass_state
def enable_phased_release(state: CliState, yes: bool) -> None:
    """Enable a 7-day phased release for the version being prepared."""
    client = state.get_client()
    version = _find_version(client, "PREPARE_FOR_SUBMISSION")
    if version is None:
        _echo(state, "No version in PREPARE_FOR_SUBMISSION state.", fg="red")
        return

    existing = client.phased_release(version.id)
    if existing:
        _echo(state, f"Phased release already enabled for version {version.version_string}.", fg="yellow")
        _echo(state, f"  State: {existing.state}")
        return

    if not yes and not click.confirm(f"Enable phased release for version {version.version_string}?", default=False):
        _echo(state, "Cancelled.")
        return

    created = client.create_phased_release(version.id)
    _echo(state, "Phased release enabled!", fg="green")
    _echo(state, f"  Version: {version.version_string}")
    _echo(state, f"  Phased Release ID: {created.id}")


def _change_phased_release(state: CliState, target: str, skip_state: str, done: str) -> None:
    client = state.get_client()
    phased = client.active_phased_release()
    if phased is None:
        _echo(state, "No phased release found for the version on sale.", fg="red")
        return
    if phased.state == skip_state:
        _echo(state, f"Phased release is already {skip_state}.", fg="yellow")
        return

    updated = client.update_phased_release(phased.id, target)
    _echo(state, done, fg="green")
    _echo(state, f"  State: {updated.state}")


@cli.command("pause-release")
@pass_state
def pause_release(state: CliState) -> None:
    """Pause the phased release of the version on sale."""
    _change_phased_release(state, "PAUSED", "PAUSED", "Phased release paused.")


@cli.command("resume-release")
@pass_state
def resume_release(state: CliState) -> None:
    """Resume a paused phased release."""
    _change_phased_release(state, "ACTIVE", "ACTIVE", "Phased release resumed.")


@cli.command("complete-release")
@pass_state
def complete_release(state: CliState) -> None:
    """Release the version on sale to all users immediately."""
    _change_phased_release(state, "COMPLETE", "COMPLETE", "Released to all users.")


@cli.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@pass_state
def release(state: CliState, yes: bool) -> None:
    """Release the version waiting for a manual developer release."""
    client = state.get_client()
    version = _find_version(client, "PENDING_DEVELOPER_RELEASE")
    if version is None:
        _echo(state, "No version in PENDING_DEVELOPER_RELEASE state.", fg="red")
        return

    if not yes and not click.confirm(f"Release version {version.version_string} to the App Store?", default=False):
        _echo(state, "Cancelled.")
        return

    client.release_version(version.id)
    _echo(state, f"Version {version.version_string} released!", fg="green")


@cli.command("pre-order")
@pass_state
def pre_order(state: CliState) -> None:
    """Show pre-order status."""
    current = state.get_client().pre_order()
    if state.json_output:
        _output_json(current)
        return

    _heading(state, "Pre-Order Status")
    if current is None:
        _echo(state, "Pre-orders not enabled.")
        _echo(state)
        _echo(state, "Use 'asc enable-pre-order YYYY-MM-DD' to enable pre-orders.")
        return
    _echo(state, f"  ID: {current.id}")
    _echo(state, f"  Available since: {current.pre_order_available_date or 'N/A'}")
    _echo(state, f"  Release date: {current.app_release_date or 'N/A'}")


@cli.command("enable-pre-order")
@click.argument("release_date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--yes", "-y", is_flag=True, help="Change an existing release date without asking.")
@pass_state
def enable_pre_order(state: CliState, release_date: datetime, yes: bool) -> None:
    """Make the app available for pre-order until RELEASE_DATE (YYYY-MM-DD)."""
    client = state.get_client()
    date = release_date.strftime("%Y-%m-%d")

    existing = client.pre_order()
    if existing:
        _echo(state, f"Pre-order already enabled (release date: {existing.app_release_date}).", fg="yellow")
        if not yes and not click.confirm(f"Change release date to {date}?", default=False):
            _echo(state, "Cancelled.")
            return
        updated = client.update_pre_order(existing.id, date)
        _echo(state, "Pre-order release date updated!", fg="green")
    else:
        updated = client.create_pre_order(date)
        _echo(state, "Pre-order enabled!", fg="green")
    _echo(state, f"  Release date: {updated.app_release_date}")


@cli.command("cancel-pre-order")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@pass_state
def cancel_pre_order(state: CliState, yes: bool) -> None:
    """Stop offering the app for pre-order."""
    client = state.get_client()
    existing = client.pre_order()
    if existing is None:
        _echo(state, "Pre-orders not enabled.", fg="yellow")
        return

    if not yes and not click.confirm("Cancel pre-order?", default=False):
        _echo(state, "Cancelled.")
        return

    client.delete_pre_order(existing.id)
    _echo(state, "Pre-order cancelled.", fg="green")


# TestFlight


@cli.command()
@click.option("--limit", default=50, show_default=True)
@pass_state
def testers(state: CliState, limit: int) -> None:
    """List TestFlight beta testers."""
    records = state.get_client().beta_testers(limit=limit)
    if state.json_output:
        _output_json(records)
        return

    _heading(state, "Beta Testers")
    if not records:
        _echo(state, "No beta testers found.")
        return
    for tester in records:
        name = " ".join(filter(None, [tester.first_name, tester.last_name])) or "(no name)"
        _echo(state, f"{name} <{tester.email}>")
        _echo(state, f"  ID: {tester.id}")
        _echo(state, f"  State: {tester.state}  Invite: {tester.invite_type}")


@cli.command("add-tester")
@click.argument("email")
@click.argument("first_name", required=False)
@click.argument("last_name", required=False)
@click.option("--group", "group_ids", multiple=True, help="Beta group ID to add the tester to (repeatable).")
@pass_state
def add_tester(
    state: CliState,
    email: str,
    first_name: str | None,
    last_name: str | None,
    group_ids: tuple[str, ...],
) -> None:
    """Invite EMAIL as a TestFlight tester."""
    tester = state.get_client().create_beta_tester(
        email,
        first_name=first_name,
        last_name=last_name,
        group_ids=list(group_ids),
    )
    _echo(state, f"Added tester {tester.email}", fg="green")
    _echo(state, f"  ID: {tester.id}")


@cli.command("remove-tester")
@click.argument("tester_id")
@pass_state
def remove_tester(state: CliState, tester_id: str) -> None:
    """Remove TestFlight tester TESTER_ID."""
    state.get_client().delete_beta_tester(tester_id)
    _echo(state, f"Removed tester {tester_id}", fg="green")


# Screenshots


@cli.command()
@pass_state
def screenshots(state: CliState) -> None:
    """List screenshots of the version being prepared."""
    client = state.get_client()
    version = _find_version(client, "PREPARE_FOR_SUBMISSION")
    if version is None:
        all_versions = client.app_store_versions()
        version = all_versions[0] if all_versions else None
    if version is None:
        _echo(state, "No versions found.")
        return

    _heading(state, "App Screenshots")
    _echo(state, f"{click.style('Version:', bold=True)} {version.version_string}")
    _echo(state)

    for localization in client.app_store_version_localizations(version.id):
        _echo(state, f"{localization.locale}:", bold=True)
        try:
            sets = client.app_screenshot_sets(localization.id)
            if not sets:
                _echo(state, "  No screenshot sets found.")
            for screenshot_set in sets:
                _echo(state, f"  {screenshot_set.display_type}:", bold=True)
                shots = client.app_screenshots(screenshot_set.id)
                if not shots:
                    _echo(state, "    (no screenshots)")
                for number, shot in enumerate(shots, 1):
                    upload_state = click.style(
                        f"[{shot.upload_state}]",
                        fg="green" if shot.upload_state == "COMPLETE" else "yellow",
                    )
                    _echo(state, f"    {number}. {shot.file_name} {upload_state}")
                    _echo(state, f"       ID: {shot.id}")
        except ApiError as e:
            _echo(state, f"  Could not fetch screenshots: {e}", fg="yellow")
        _echo(state)


@cli.command("upload-screenshots")
@click.argument("locale")
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
@pass_state
def upload_screenshots(state: CliState, locale: str, directory: Path) -> None:
    """Upload screenshots from DIRECTORY for LOCALE.

    DIRECTORY holds one folder per display type (APP_IPHONE_67,
    APP_IPHONE_65, APP_IPHONE_55, APP_IPAD_PRO_129, APP_IPAD_PRO_11), each
    containing PNG or JPEG images.
    """
    client = state.get_client()
    version = _find_version(client, "PREPARE_FOR_SUBMISSION")
    if version is None:
        _echo(state, "No version in PREPARE_FOR_SUBMISSION state.", fg="red")
        raise click.exceptions.Exit(1)

    localizations = client.app_store_version_localizations(version.id)
    localization = next((loc for loc in localizations if loc.locale == locale), None)
    if localization is None:
        _echo(state, f"Localization not found: {locale}", fg="red")
        _echo(state, f"Available: {', '.join(str(loc.locale) for loc in localizations)}")
        raise click.exceptions.Exit(1)

    uploaded = 0
    failures: list[str] = []
    existing_sets = {s.display_type: s for s in client.app_screenshot_sets(localization.id)}

    for display_type in SCREENSHOT_DISPLAY_TYPES:
        type_dir = directory / display_type
        if not type_dir.is_dir():
            continue
        files = sorted(p for p in type_dir.iterdir() if p.suffix.lower() in SCREENSHOT_SUFFIXES)
        if not files:
            continue

        screenshot_set = existing_sets.get(display_type)
        if screenshot_set is None:
            _echo(state, f"Creating screenshot set for {display_type}...")
            screenshot_set = client.create_app_screenshot_set(localization.id, display_type)

        _echo(state, f"Uploading {len(files)} file(s) to {display_type}...")
        done, failed = client.upload_app_screenshots(screenshot_set.id, files)
        uploaded += len(done)
        for file_path, error in failed.items():
            failure = f"{display_type}/{Path(file_path).name}: {error}"
            _echo(state, f"  Warning: {failure}", fg="yellow")
            failures.append(failure)

    _echo(state)
    _echo(state, f"Uploaded {uploaded} screenshot(s)", fg="green")
    if failures:
        _echo(state, "Errors:", fg="red")
        for failure in failures:
            _echo(state, f"  - {failure}")


# Debugging


@cli.command()
@pass_state
def token(state: CliState) -> None:
    """Print a fresh JWT for manual API calls."""
    click.echo(state.get_client().authenticator.get_token())


def main() -> None:
    cli(prog_name="asc")


if __name__ == "__main__":
    main()
