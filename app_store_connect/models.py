"""Typed records for App Store Connect resources.

Each record is a dataclass whose fields name the JSON:API attribute they
are read from. ``Record.from_resource`` does the mapping generically, so a
new resource type is just a field list.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, TypeVar

from app_store_connect.jsonapi import Document, Resource

R = TypeVar("R", bound="Record")


def attr(source: str) -> Any:
    """Declare a record field read from a (dotted) JSON:API attribute path."""
    return field(default=None, metadata={"source": source})


@dataclass(frozen=True)
class Record:
    """Base class for resource records."""

    id: str

    @classmethod
    def from_resource(cls: type[R], resource: Resource) -> R:
        values: dict[str, Any] = {"id": resource.id}
        for f in fields(cls):
            source = f.metadata.get("source")
            if source:
                values[f.name] = resource.attribute(source)
        return cls(**values)

    @classmethod
    def from_document(cls: type[R], document: Document) -> list[R]:
        return [cls.from_resource(resource) for resource in document.resources()]

    @classmethod
    def from_body(cls: type[R], body: Any) -> list[R]:
        return cls.from_document(Document.parse(body))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class App(Record):
    name: str | None = attr("name")
    bundle_id: str | None = attr("bundleId")
    sku: str | None = attr("sku")
    primary_locale: str | None = attr("primaryLocale")


@dataclass(frozen=True)
class AppStoreVersion(Record):
    version_string: str | None = attr("versionString")
    state: str | None = attr("appStoreState")
    platform: str | None = attr("platform")
    release_type: str | None = attr("releaseType")
    created_date: str | None = attr("createdDate")
    earliest_release_date: str | None = attr("earliestReleaseDate")


@dataclass(frozen=True)
class Build(Record):
    version: str | None = attr("version")
    uploaded_date: str | None = attr("uploadedDate")
    processing_state: str | None = attr("processingState")
    build_audience_type: str | None = attr("buildAudienceType")
    expired: bool | None = attr("expired")


@dataclass(frozen=True)
class ReviewSubmission(Record):
    state: str | None = attr("state")
    platform: str | None = attr("platform")
    submitted_date: str | None = attr("submittedDate")


@dataclass(frozen=True)
class ReviewSubmissionItem(Record):
    state: str | None = attr("state")
    resolved: bool | None = attr("resolved")


@dataclass(frozen=True)
class SubscriptionGroup(Record):
    reference_name: str | None = attr("referenceName")


@dataclass(frozen=True)
class Subscription(Record):
    product_id: str | None = attr("productId")
    name: str | None = attr("name")
    state: str | None = attr("state")
    group_level: int | None = attr("groupLevel")
    subscription_period: str | None = attr("subscriptionPeriod")


@dataclass(frozen=True)
class VersionLocalization(Record):
    locale: str | None = attr("locale")
    description: str | None = attr("description")
    keywords: str | None = attr("keywords")
    whats_new: str | None = attr("whatsNew")
    promotional_text: str | None = attr("promotionalText")
    marketing_url: str | None = attr("marketingUrl")
    support_url: str | None = attr("supportUrl")


@dataclass(frozen=True)
class CustomerReview(Record):
    rating: int | None = attr("rating")
    title: str | None = attr("title")
    body: str | None = attr("body")
    reviewer_nickname: str | None = attr("reviewerNickname")
    created_date: str | None = attr("createdDate")
    territory: str | None = attr("territory")


@dataclass(frozen=True)
class CustomerReviewResponse(Record):
    response_body: str | None = attr("responseBody")
    last_modified_date: str | None = attr("lastModifiedDate")
    state: str | None = attr("state")


@dataclass(frozen=True)
class PhasedRelease(Record):
    state: str | None = attr("phasedReleaseState")
    start_date: str | None = attr("startDate")
    total_pause_duration: int | None = attr("totalPauseDuration")
    current_day_number: int | None = attr("currentDayNumber")


@dataclass(frozen=True)
class BetaTester(Record):
    email: str | None = attr("email")
    first_name: str | None = attr("firstName")
    last_name: str | None = attr("lastName")
    invite_type: str | None = attr("inviteType")
    state: str | None = attr("betaTestersState")


@dataclass(frozen=True)
class BetaGroup(Record):
    name: str | None = attr("name")
    is_internal_group: bool | None = attr("isInternalGroup")
    public_link_enabled: bool | None = attr("publicLinkEnabled")
    public_link: str | None = attr("publicLink")


@dataclass(frozen=True)
class ScreenshotSet(Record):
    display_type: str | None = attr("screenshotDisplayType")


@dataclass(frozen=True)
class Screenshot(Record):
    file_name: str | None = attr("fileName")
    file_size: int | None = attr("fileSize")
    upload_state: str | None = attr("assetDeliveryState.state")
    source_file_checksum: str | None = attr("sourceFileChecksum")


@dataclass(frozen=True)
class ResolutionCenterThread(Record):
    thread_type: str | None = attr("threadType")
    state: str | None = attr("state")


@dataclass(frozen=True)
class ResolutionCenterMessage(Record):
    body: str | None = attr("messageBody")
    created_date: str | None = attr("createdDate")


@dataclass(frozen=True)
class InAppPurchase(Record):
    product_id: str | None = attr("productId")
    name: str | None = attr("name")
    state: str | None = attr("state")
    purchase_type: str | None = attr("inAppPurchaseType")
    review_note: str | None = attr("reviewNote")


@dataclass(frozen=True)
class InAppPurchaseLocalization(Record):
    locale: str | None = attr("locale")
    name: str | None = attr("name")
    description: str | None = attr("description")
    state: str | None = attr("state")


@dataclass(frozen=True)
class PreOrder(Record):
    pre_order_available_date: str | None = attr("preOrderAvailableDate")
    app_release_date: str | None = attr("appReleaseDate")


# Aggregates built from several requests


@dataclass(frozen=True)
class AppStatus:
    app: App
    versions: list[AppStoreVersion] = field(default_factory=list)
    latest_review: ReviewSubmission | None = None
    subscriptions: list[Subscription] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Readiness:
    ready: bool
    current_state: str
    issues: list[str]
    status: AppStatus

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RejectionInfo:
    version_id: str | None
    version_string: str | None
    state: str | None
    submission_id: str | None = None
    submission_state: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
