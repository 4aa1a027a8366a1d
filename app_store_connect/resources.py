"""Resource methods for App Store Connect.

Each method maps one-to-one onto a REST path and returns typed records.
Methods that act on an app use the configured app unless ``app_id`` is
passed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app_store_connect.client import AppStoreConnectClient
from app_store_connect.errors import ApiError, NotFoundError, SessionRequiredError
from app_store_connect.models import (
    App,
    AppStatus,
    AppStoreVersion,
    BetaGroup,
    BetaTester,
    Build,
    CustomerReview,
    CustomerReviewResponse,
    InAppPurchase,
    InAppPurchaseLocalization,
    PhasedRelease,
    PreOrder,
    Readiness,
    RejectionInfo,
    ResolutionCenterMessage,
    ResolutionCenterThread,
    ReviewSubmission,
    ReviewSubmissionItem,
    Screenshot,
    ScreenshotSet,
    Subscription,
    SubscriptionGroup,
    VersionLocalization,
)

if TYPE_CHECKING:
    import os

logger = logging.getLogger(__name__)

REJECTED_VERSION_STATES = ("REJECTED", "METADATA_REJECTED", "INVALID_BINARY")
PHASED_RELEASE_STATES = ("INACTIVE", "ACTIVE", "PAUSED", "COMPLETE")


def _compact(**attributes: Any) -> dict[str, Any]:
    """Drop attributes that were not supplied."""
    return {key: value for key, value in attributes.items() if value is not None}


def _relationship(type_: str, id_: str) -> dict[str, Any]:
    return {"data": {"type": type_, "id": id_}}


class AppStoreConnect(AppStoreConnectClient):
    """App Store Connect API client.

    Usage:
        client = AppStoreConnect()          # configured from the environment
        client.apps()
        client.app_status()
        client.customer_reviews(limit=5)
    """

    # Apps and status

    def apps(self) -> list[App]:
        """List every app the API key can see, across all pages.

        Returns:
            App records
        """
        return App.from_document(self.get_all("/apps"))

    def app(self, app_id: str | None = None) -> App:
        """Fetch a single app.

        Args:
            app_id: App Apple ID, defaults to the configured one

        Returns:
            App record

        Raises:
            ConfigurationError: If no app ID is given or configured
        """
        app_id = self.config.require_app_id(app_id)
        return App.from_body(self.get(f"/apps/{app_id}"))[0]

    def app_store_versions(
        self,
        app_id: str | None = None,
        platform: str | None = None,
    ) -> list[AppStoreVersion]:
        """List App Store versions of an app, newest first.

        Args:
            app_id: App Apple ID, defaults to the configured one
            platform: Optional platform filter (IOS, MAC_OS, TV_OS, VISION_OS)

        Returns:
            Version records
        """
        app_id = self.config.require_app_id(app_id)
        params = {"filter[platform]": platform} if platform else None
        return AppStoreVersion.from_body(
            self.get(f"/apps/{app_id}/appStoreVersions", params=params)
        )

    def builds(self, app_id: str | None = None, limit: int = 10) -> list[Build]:
        """List recent builds.

        Args:
            app_id: App Apple ID, defaults to the configured one
            limit: Maximum number of builds to return

        Returns:
            Build records
        """
        app_id = self.config.require_app_id(app_id)
        return Build.from_body(self.get(f"/apps/{app_id}/builds", params={"limit": limit}))

    def review_submissions(
        self,
        app_id: str | None = None,
        limit: int = 10,
    ) -> list[ReviewSubmission]:
        """List review submissions, most recent first.

        Args:
            app_id: App Apple ID, defaults to the configured one
            limit: Maximum number of submissions to return

        Returns:
            Review submission records
        """
        app_id = self.config.require_app_id(app_id)
        return ReviewSubmission.from_body(
            self.get(f"/apps/{app_id}/reviewSubmissions", params={"limit": limit})
        )

    def review_submission_items(self, submission_id: str) -> list[ReviewSubmissionItem]:
        """Items (versions, in-app purchases...) of a review submission."""
        return ReviewSubmissionItem.from_body(
            self.get(f"/reviewSubmissions/{submission_id}/items")
        )

    def subscription_groups(self, app_id: str | None = None) -> list[SubscriptionGroup]:
        app_id = self.config.require_app_id(app_id)
        return SubscriptionGroup.from_body(self.get(f"/apps/{app_id}/subscriptionGroups"))

    def subscriptions(self, app_id: str | None = None) -> list[Subscription]:
        """All subscription products across the app's subscription groups."""
        subscriptions: list[Subscription] = []
        for group in self.subscription_groups(app_id):
            subscriptions.extend(
                Subscription.from_body(self.get(f"/subscriptionGroups/{group.id}/subscriptions"))
            )
        return subscriptions

    def app_status(self, app_id: str | None = None) -> AppStatus:
        """Collect app, versions, latest review submission and subscriptions."""
        app_id = self.config.require_app_id(app_id)
        reviews = self.review_submissions(app_id)
        return AppStatus(
            app=self.app(app_id),
            versions=self.app_store_versions(app_id),
            latest_review=reviews[0] if reviews else None,
            subscriptions=self.subscriptions(app_id),
        )

    def submission_readiness(self, app_id: str | None = None) -> Readiness:
        """Check whether the app looks ready to submit for review.

        Returns:
            Readiness with the list of blocking issues found
        """
        status = self.app_status(app_id)
        issues: list[str] = []

        states = {version.state for version in status.versions}
        rejected = next((v for v in status.versions if v.state == "REJECTED"), None)
        if rejected:
            issues.append(
                f"Version {rejected.version_string} was REJECTED - check App Store Connect for details"
            )

        missing = [s.product_id for s in status.subscriptions if s.state == "MISSING_METADATA"]
        if missing:
            issues.append(f"Subscriptions missing metadata: {', '.join(map(str, missing))}")

        sub_rejected = [s.product_id for s in status.subscriptions if s.state == "REJECTED"]
        if sub_rejected:
            issues.append(f"Subscriptions rejected: {', '.join(map(str, sub_rejected))}")

        if "WAITING_FOR_REVIEW" in states:
            current_state = "WAITING_FOR_REVIEW"
        elif "PREPARE_FOR_SUBMISSION" in states:
            current_state = "PREPARE_FOR_SUBMISSION"
        else:
            current_state = "UNKNOWN"

        return Readiness(
            ready=not issues,
            current_state=current_state,
            issues=issues,
            status=status,
        )

    # Version metadata

    def app_store_version_localizations(self, version_id: str) -> list[VersionLocalization]:
        """Localized metadata (description, keywords...) of a version."""
        return VersionLocalization.from_body(
            self.get(f"/appStoreVersions/{version_id}/appStoreVersionLocalizations")
        )

    def update_app_store_version_localization(
        self,
        localization_id: str,
        description: str | None = None,
        whats_new: str | None = None,
        keywords: str | None = None,
        promotional_text: str | None = None,
        marketing_url: str | None = None,
        support_url: str | None = None,
    ) -> VersionLocalization | None:
        """Update description, what's new and friends.

        Returns:
            Updated localization, or None if no field was given
        """
        attributes = _compact(
            description=description,
            whatsNew=whats_new,
            keywords=keywords,
            promotionalText=promotional_text,
            marketingUrl=marketing_url,
            supportUrl=support_url,
        )
        if not attributes:
            return None

        body = self.patch(
            f"/appStoreVersionLocalizations/{localization_id}",
            body={
                "data": {
                    "type": "appStoreVersionLocalizations",
                    "id": localization_id,
                    "attributes": attributes,
                }
            },
        )
        return VersionLocalization.from_body(body)[0]

    # Review submissions and the Resolution Center

    def create_review_submission(
        self,
        platform: str = "IOS",
        app_id: str | None = None,
    ) -> ReviewSubmission:
        """Open a new review submission for the app.

        Args:
            platform: Platform the submission is for
            app_id: App Apple ID, defaults to the configured one

        Returns:
            The created submission
        """
        app_id = self.config.require_app_id(app_id)
        body = self.post(
            "/reviewSubmissions",
            body={
                "data": {
                    "type": "reviewSubmissions",
                    "attributes": {"platform": platform},
                    "relationships": {"app": _relationship("apps", app_id)},
                }
            },
        )
        return ReviewSubmission.from_body(body)[0]

    def cancel_review_submission(self, submission_id: str) -> ReviewSubmission:
        """Withdraw a submission from review."""
        body = self.patch(
            f"/reviewSubmissions/{submission_id}",
            body={
                "data": {
                    "type": "reviewSubmissions",
                    "id": submission_id,
                    "attributes": {"canceled": True},
                }
            },
        )
        return ReviewSubmission.from_body(body)[0]

    def rejection_info(self, app_id: str | None = None) -> RejectionInfo | None:
        """Find the most recent rejection, if there is one.

        Looks for a version in a rejected state, then for a review
        submission with unresolved issues.
        """
        app_id = self.config.require_app_id(app_id)
        versions = self.app_store_versions(app_id)
        submissions = self.review_submissions(app_id)
        latest = submissions[0] if submissions else None

        rejected = next((v for v in versions if v.state in REJECTED_VERSION_STATES), None)
        if rejected is None and (latest is None or latest.state != "UNRESOLVED_ISSUES"):
            return None

        version = rejected or (versions[0] if versions else None)
        return RejectionInfo(
            version_id=version.id if version else None,
            version_string=version.version_string if version else None,
            state=version.state if version else None,
            submission_id=latest.id if latest else None,
            submission_state=latest.state if latest else None,
        )

    def resolution_center_threads(self, submission_id: str) -> list[ResolutionCenterThread]:
        """Resolution Center threads attached to a review submission.

        Raises:
            SessionRequiredError: If no web session is configured and Apple
                refuses the API key
        """
        body = self._iris(
            "/resolutionCenterThreads",
            params={"filter[reviewSubmission]": submission_id},
            context="Resolution Center API error",
        )
        return ResolutionCenterThread.from_body(body)

    def resolution_center_messages(self, thread_id: str) -> list[ResolutionCenterMessage]:
        body = self._iris(
            f"/resolutionCenterThreads/{thread_id}/resolutionCenterMessages",
            context="Resolution Center messages error",
        )
        return ResolutionCenterMessage.from_body(body)

    def rejection_reasons(self, thread_id: str) -> list[ResolutionCenterMessage]:
        """Messages of a thread that carry a body."""
        return [m for m in self.resolution_center_messages(thread_id) if m.body]

    def _iris(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        context: str = "Resolution Center error",
    ) -> dict[str, Any]:
        try:
            return self.iris_get(path, params=params)
        except SessionRequiredError:
            raise
        except ApiError as e:
            raise ApiError(
                f"{context}: {e}. Detailed rejection messages may require App Store Connect web UI access.",
                status=e.status,
                path=e.path,
                detail=e.detail,
            ) from e

    # In-app purchases

    def in_app_purchases(self, app_id: str | None = None) -> list[InAppPurchase]:
        """List the app's in-app purchases.

        Args:
            app_id: App Apple ID, defaults to the configured one

        Returns:
            In-app purchase records
        """
        app_id = self.config.require_app_id(app_id)
        return InAppPurchase.from_body(self.get(f"/apps/{app_id}/inAppPurchasesV2"))

    def in_app_purchase(self, iap_id: str) -> InAppPurchase:
        return InAppPurchase.from_body(self.get(f"/inAppPurchasesV2/{iap_id}"))[0]

    def in_app_purchase_localizations(self, iap_id: str) -> list[InAppPurchaseLocalization]:
        """Display names and descriptions users see, per locale."""
        return InAppPurchaseLocalization.from_body(
            self.get(f"/inAppPurchasesV2/{iap_id}/inAppPurchaseLocalizations")
        )

    def update_in_app_purchase(
        self,
        iap_id: str,
        name: str | None = None,
        review_note: str | None = None,
    ) -> InAppPurchase | None:
        """Update the reference name or the note for App Review.

        Returns:
            Updated in-app purchase, or None if no field was given
        """
        attributes = _compact(name=name, reviewNote=review_note)
        if not attributes:
            return None

        body = self.patch(
            f"/inAppPurchasesV2/{iap_id}",
            body={"data": {"type": "inAppPurchases", "id": iap_id, "attributes": attributes}},
        )
        return InAppPurchase.from_body(body)[0]

    def create_in_app_purchase_localization(
        self,
        iap_id: str,
        locale: str,
        name: str,
        description: str | None = None,
    ) -> InAppPurchaseLocalization:
        body = self.post(
            "/inAppPurchaseLocalizations",
            body={
                "data": {
                    "type": "inAppPurchaseLocalizations",
                    "attributes": _compact(locale=locale, name=name, description=description),
                    "relationships": {"inAppPurchaseV2": _relationship("inAppPurchases", iap_id)},
                }
            },
        )
        return InAppPurchaseLocalization.from_body(body)[0]

    def update_in_app_purchase_localization(
        self,
        localization_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> InAppPurchaseLocalization | None:
        """Update a localization's display name or description.

        Returns:
            Updated localization, or None if no field was given
        """
        attributes = _compact(name=name, description=description)
        if not attributes:
            return None

        body = self.patch(
            f"/inAppPurchaseLocalizations/{localization_id}",
            body={
                "data": {
                    "type": "inAppPurchaseLocalizations",
                    "id": localization_id,
                    "attributes": attributes,
                }
            },
        )
        return InAppPurchaseLocalization.from_body(body)[0]

    def delete_in_app_purchase_localization(self, localization_id: str) -> None:
        self.delete(f"/inAppPurchaseLocalizations/{localization_id}")

    def submit_in_app_purchase(self, iap_id: str) -> None:
        """Submit an in-app purchase for review with the next app version."""
        self.post(
            "/inAppPurchaseSubmissions",
            body={
                "data": {
                    "type": "inAppPurchaseSubmissions",
                    "relationships": {"inAppPurchaseV2": _relationship("inAppPurchases", iap_id)},
                }
            },
        )

    # Customer reviews

    def customer_reviews(
        self,
        app_id: str | None = None,
        limit: int = 20,
        sort: str = "-createdDate",
    ) -> list[CustomerReview]:
        """List customer reviews.

        Args:
            app_id: App Apple ID, defaults to the configured one
            limit: Maximum number of reviews to return
            sort: Sort expression understood by the API

        Returns:
            Customer review records
        """
        app_id = self.config.require_app_id(app_id)
        return CustomerReview.from_body(
            self.get(
                f"/apps/{app_id}/customerReviews",
                params={"limit": limit, "sort": sort},
            )
        )

    def customer_review_response(self, review_id: str) -> CustomerReviewResponse | None:
        """The developer response to a review, or None if there is none."""
        try:
            body = self.get(f"/customerReviews/{review_id}/response")
        except NotFoundError:
            return None
        records = CustomerReviewResponse.from_body(body)
        return records[0] if records else None

    def create_customer_review_response(
        self,
        review_id: str,
        response_body: str,
    ) -> CustomerReviewResponse:
        """Publish a response to a customer review.

        Args:
            review_id: Customer review ID
            response_body: Text of the response

        Returns:
            The created response
        """
        body = self.post(
            "/customerReviewResponses",
            body={
                "data": {
                    "type": "customerReviewResponses",
                    "attributes": {"responseBody": response_body},
                    "relationships": {"review": _relationship("customerReviews", review_id)},
                }
            },
        )
        return CustomerReviewResponse.from_body(body)[0]

    def delete_customer_review_response(self, response_id: str) -> None:
        self.delete(f"/customerReviewResponses/{response_id}")

    # Releases

    def create_app_store_version(
        self,
        version_string: str,
        platform: str = "IOS",
        release_type: str = "AFTER_APPROVAL",
        earliest_release_date: str | None = None,
        app_id: str | None = None,
    ) -> AppStoreVersion:
        """Create a new App Store version.

        Args:
            version_string: Marketing version, e.g. ``1.2.0``
            platform: IOS, MAC_OS, TV_OS or VISION_OS
            release_type: MANUAL, AFTER_APPROVAL or SCHEDULED
            earliest_release_date: ISO 8601 date, only used when SCHEDULED
            app_id: Target app, defaults to the configured one
        """
        app_id = self.config.require_app_id(app_id)
        attributes = {
            "versionString": version_string,
            "platform": platform,
            "releaseType": release_type,
        }
        if earliest_release_date and release_type == "SCHEDULED":
            attributes["earliestReleaseDate"] = earliest_release_date

        body = self.post(
            "/appStoreVersions",
            body={
                "data": {
                    "type": "appStoreVersions",
                    "attributes": attributes,
                    "relationships": {"app": _relationship("apps", app_id)},
                }
            },
        )
        return AppStoreVersion.from_body(body)[0]

    def release_version(self, version_id: str) -> None:
        """Release a version that is waiting for a manual developer release.

        Raises:
            ApiError: If the version is not in PENDING_DEVELOPER_RELEASE
        """
        version = AppStoreVersion.from_body(self.get(f"/appStoreVersions/{version_id}"))[0]
        if version.state != "PENDING_DEVELOPER_RELEASE":
            raise ApiError(
                f"Version must be PENDING_DEVELOPER_RELEASE to release (current: {version.state})",
                path=f"/appStoreVersions/{version_id}",
            )

        logger.info(f"Requesting release of version {version.version_string}")
        self.post(
            "/appStoreVersionReleaseRequests",
            body={
                "data": {
                    "type": "appStoreVersionReleaseRequests",
                    "relationships": {
                        "appStoreVersion": _relationship("appStoreVersions", version_id),
                    },
                }
            },
        )

    def phased_release(self, version_id: str) -> PhasedRelease | None:
        """Phased release of a version, or None if it has none."""
        try:
            body = self.get(f"/appStoreVersions/{version_id}/appStoreVersionPhasedRelease")
        except NotFoundError:
            return None
        records = PhasedRelease.from_body(body)
        return records[0] if records else None

    def active_phased_release(self, app_id: str | None = None) -> PhasedRelease | None:
        """Phased release of the version currently on sale, if any."""
        live = next(
            (v for v in self.app_store_versions(app_id) if v.state == "READY_FOR_SALE"),
            None,
        )
        if live is None:
            return None
        return self.phased_release(live.id)

    def create_phased_release(self, version_id: str) -> PhasedRelease:
        """Enable the 7-day phased rollout for a version."""
        body = self.post(
            "/appStoreVersionPhasedReleases",
            body={
                "data": {
                    "type": "appStoreVersionPhasedReleases",
                    "attributes": {"phasedReleaseState": "INACTIVE"},
                    "relationships": {
                        "appStoreVersion": _relationship("appStoreVersions", version_id),
                    },
                }
            },
        )
        return PhasedRelease.from_body(body)[0]

    def update_phased_release(self, phased_release_id: str, state: str) -> PhasedRelease:
        """Pause, resume or complete a phased rollout.

        Args:
            phased_release_id: Phased release ID
            state: INACTIVE, ACTIVE, PAUSED or COMPLETE (case-insensitive)

        Returns:
            Updated phased release

        Raises:
            ValueError: If ``state`` is not a phased release state
        """
        state = state.upper()
        if state not in PHASED_RELEASE_STATES:
            raise ValueError(
                f"Invalid phased release state {state!r}; expected one of {', '.join(PHASED_RELEASE_STATES)}"
            )
        body = self.patch(
            f"/appStoreVersionPhasedReleases/{phased_release_id}",
            body={
                "data": {
                    "type": "appStoreVersionPhasedReleases",
                    "id": phased_release_id,
                    "attributes": {"phasedReleaseState": state},
                }
            },
        )
        return PhasedRelease.from_body(body)[0]

    def pre_order(self, app_id: str | None = None) -> PreOrder | None:
        """Pre-order settings of an app, or None when pre-orders are off."""
        app_id = self.config.require_app_id(app_id)
        try:
            body = self.get(f"/apps/{app_id}/preOrder")
        except NotFoundError:
            return None
        records = PreOrder.from_body(body)
        return records[0] if records else None

    def create_pre_order(self, app_release_date: str, app_id: str | None = None) -> PreOrder:
        """Make the app available for pre-order.

        Args:
            app_release_date: Release date, ``YYYY-MM-DD``
            app_id: App Apple ID, defaults to the configured one

        Returns:
            The created pre-order
        """
        app_id = self.config.require_app_id(app_id)
        body = self.post(
            "/appPreOrders",
            body={
                "data": {
                    "type": "appPreOrders",
                    "attributes": {"appReleaseDate": app_release_date},
                    "relationships": {"app": _relationship("apps", app_id)},
                }
            },
        )
        return PreOrder.from_body(body)[0]

    def update_pre_order(self, pre_order_id: str, app_release_date: str) -> PreOrder:
        """Move the release date of an existing pre-order."""
        body = self.patch(
            f"/appPreOrders/{pre_order_id}",
            body={
                "data": {
                    "type": "appPreOrders",
                    "id": pre_order_id,
                    "attributes": {"appReleaseDate": app_release_date},
                }
            },
        )
        return PreOrder.from_body(body)[0]

    def delete_pre_order(self, pre_order_id: str) -> None:
        self.delete(f"/appPreOrders/{pre_order_id}")

    # TestFlight

    def beta_testers(self, app_id: str | None = None, limit: int = 50) -> list[BetaTester]:
        """List TestFlight testers of an app.

        Args:
            app_id: App Apple ID, defaults to the configured one
            limit: Maximum number of testers to return

        Returns:
            Beta tester records
        """
        app_id = self.config.require_app_id(app_id)
        return BetaTester.from_body(
            self.get("/betaTesters", params={"filter[apps]": app_id, "limit": limit})
        )

    def beta_groups(self, app_id: str | None = None) -> list[BetaGroup]:
        app_id = self.config.require_app_id(app_id)
        return BetaGroup.from_body(self.get(f"/apps/{app_id}/betaGroups"))

    def create_beta_tester(
        self,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        group_ids: list[str] | None = None,
    ) -> BetaTester:
        """Invite a tester, optionally straight into beta groups."""
        data: dict[str, Any] = {
            "type": "betaTesters",
            "attributes": _compact(email=email, firstName=first_name, lastName=last_name),
        }
        if group_ids:
            data["relationships"] = {
                "betaGroups": {
                    "data": [{"type": "betaGroups", "id": group_id} for group_id in group_ids]
                }
            }
        return BetaTester.from_body(self.post("/betaTesters", body={"data": data}))[0]

    def delete_beta_tester(self, tester_id: str) -> None:
        self.delete(f"/betaTesters/{tester_id}")

    # Screenshots

    def app_screenshot_sets(self, localization_id: str) -> list[ScreenshotSet]:
        """Screenshot sets (one per display type) of a version localization."""
        return ScreenshotSet.from_body(
            self.get(f"/appStoreVersionLocalizations/{localization_id}/appScreenshotSets")
        )

    def app_screenshots(self, screenshot_set_id: str) -> list[Screenshot]:
        return Screenshot.from_body(self.get(f"/appScreenshotSets/{screenshot_set_id}/appScreenshots"))

    def create_app_screenshot_set(self, localization_id: str, display_type: str) -> ScreenshotSet:
        """Create an empty screenshot set.

        Args:
            localization_id: Version localization ID
            display_type: Device class, e.g. ``APP_IPHONE_67``

        Returns:
            The created set
        """
        body = self.post(
            "/appScreenshotSets",
            body={
                "data": {
                    "type": "appScreenshotSets",
                    "attributes": {"screenshotDisplayType": display_type},
                    "relationships": {
                        "appStoreVersionLocalization": _relationship(
                            "appStoreVersionLocalizations", localization_id
                        ),
                    },
                }
            },
        )
        return ScreenshotSet.from_body(body)[0]

    def upload_app_screenshot(
        self,
        screenshot_set_id: str,
        file_path: str | os.PathLike[str],
    ) -> Screenshot:
        """Upload one image into a screenshot set.

        Raises:
            UploadError: If the file cannot be read or a part is rejected
        """
        resource = self.upload_asset(
            resource_type="appScreenshots",
            relationship="appScreenshotSet",
            parent_type="appScreenshotSets",
            parent_id=screenshot_set_id,
            file_path=file_path,
        )
        return Screenshot.from_resource(resource)

    def upload_app_screenshots(
        self,
        screenshot_set_id: str,
        file_paths: list[str | os.PathLike[str]],
    ) -> tuple[list[Screenshot], dict[str, ApiError]]:
        """Upload several screenshots, continuing past individual failures.

        Returns:
            Uploaded screenshots and a mapping of file path to the error
            that stopped it
        """
        uploaded: list[Screenshot] = []
        failed: dict[str, ApiError] = {}
        for file_path in file_paths:
            try:
                uploaded.append(self.upload_app_screenshot(screenshot_set_id, file_path))
            except ApiError as e:
                logger.warning(f"Failed to upload {file_path}: {e}")
                failed[str(file_path)] = e
        return uploaded, failed

    def delete_app_screenshot(self, screenshot_id: str) -> None:
        self.delete(f"/appScreenshots/{screenshot_id}")


__all__ = ["AppStoreConnect"]
