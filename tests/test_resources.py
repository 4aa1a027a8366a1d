"""Tests for the resource methods."""

from __future__ import annotations

import dataclasses

import pytest

from app_store_connect.errors import (
    ApiError,
    ConfigurationError,
    SessionRequiredError,
    UploadError,
)
from app_store_connect.models import Readiness, Screenshot
from app_store_connect.transport import HttpResponse
from conftest import APP_ID, resource, respond

API = "https://api.appstoreconnect.apple.com/v1"


def route(transport, routes):
    """Answer requests from a ``{(method, url): body}`` table."""

    def execute(method, url, **kwargs):
        key = (method, url)
        if key not in routes:
            return HttpResponse(404, {})
        result = routes[key]
        return result if isinstance(result, HttpResponse) else HttpResponse(200, result)

    transport.execute.side_effect = execute


def status_routes(versions, submissions, subscriptions):
    return {
        ("GET", f"{API}/apps/{APP_ID}"): {
            "data": resource("apps", APP_ID, name="Demo", bundleId="com.example.demo")
        },
        ("GET", f"{API}/apps/{APP_ID}/appStoreVersions"): {"data": versions},
        ("GET", f"{API}/apps/{APP_ID}/reviewSubmissions"): {"data": submissions},
        ("GET", f"{API}/apps/{APP_ID}/subscriptionGroups"): {
            "data": [resource("subscriptionGroups", "g1", referenceName="Premium")]
        },
        ("GET", f"{API}/subscriptionGroups/g1/subscriptions"): {"data": subscriptions},
    }


def version(id_, state, version_string="1.0"):
    return resource("appStoreVersions", id_, versionString=version_string, appStoreState=state)


class TestApps:
    def test_apps_follows_pagination(self, client, transport):
        respond(
            transport,
            {"data": [resource("apps", "1", name="One")], "links": {"next": f"{API}/apps?cursor=x"}},
            {"data": [resource("apps", "2", name="Two")]},
        )

        assert [app.name for app in client.apps()] == ["One", "Two"]

    def test_app_requires_app_id(self, client, transport):
        client.config = dataclasses.replace(client.config, app_id=None)

        with pytest.raises(ConfigurationError, match="APP_STORE_CONNECT_APP_ID"):
            client.app()

        transport.execute.assert_not_called()

    def test_builds_passes_limit(self, client, transport):
        respond(transport, {"data": [resource("builds", "b1", version="7", processingState="VALID")]})

        (build,) = client.builds(limit=3)

        assert build.processing_state == "VALID"
        assert transport.execute.call_args.kwargs["params"] == {"limit": 3}

    def test_versions_platform_filter(self, client, transport):
        respond(transport, {"data": []})

        client.app_store_versions(platform="MAC_OS")

        assert transport.execute.call_args.kwargs["params"] == {"filter[platform]": "MAC_OS"}


class TestStatus:
    def test_app_status(self, client, transport):
        route(
            transport,
            status_routes(
                versions=[version("v1", "READY_FOR_SALE")],
                submissions=[resource("reviewSubmissions", "r1", state="COMPLETE")],
                subscriptions=[resource("subscriptions", "s1", productId="pro.monthly", state="APPROVED")],
            ),
        )

        status = client.app_status()

        assert status.app.bundle_id == "com.example.demo"
        assert status.versions[0].state == "READY_FOR_SALE"
        assert status.latest_review.id == "r1"
        assert status.subscriptions[0].product_id == "pro.monthly"

    def test_ready_when_nothing_blocks(self, client, transport):
        route(
            transport,
            status_routes(
                versions=[version("v2", "PREPARE_FOR_SUBMISSION", "2.0")],
                submissions=[],
                subscriptions=[resource("subscriptions", "s1", productId="pro.monthly", state="READY_TO_SUBMIT")],
            ),
        )

        readiness = client.submission_readiness()

        assert isinstance(readiness, Readiness)
        assert readiness.ready
        assert readiness.issues == []
        assert readiness.current_state == "PREPARE_FOR_SUBMISSION"

    def test_issues_block_submission(self, client, transport):
        route(
            transport,
            status_routes(
                versions=[version("v2", "REJECTED", "2.0")],
                submissions=[],
                subscriptions=[
                    resource("subscriptions", "s1", productId="pro.monthly", state="MISSING_METADATA"),
                    resource("subscriptions", "s2", productId="pro.yearly", state="REJECTED"),
                ],
            ),
        )

        readiness = client.submission_readiness()

        assert not readiness.ready
        assert readiness.current_state == "UNKNOWN"
        assert readiness.issues == [
            "Version 2.0 was REJECTED - check App Store Connect for details",
            "Subscriptions missing metadata: pro.monthly",
            "Subscriptions rejected: pro.yearly",
        ]

    def test_newest_rejected_version_is_reported(self, client, transport):
        route(
            transport,
            status_routes(
                versions=[version("v3", "REJECTED", "3.0"), version("v2", "REJECTED", "2.0")],
                submissions=[],
                subscriptions=[],
            ),
        )

        readiness = client.submission_readiness()

        assert readiness.issues == ["Version 3.0 was REJECTED - check App Store Connect for details"]


class TestReview:
    def test_rejection_info_from_rejected_version(self, client, transport):
        route(
            transport,
            {
                ("GET", f"{API}/apps/{APP_ID}/appStoreVersions"): {
                    "data": [version("v3", "REJECTED", "3.0"), version("v2", "READY_FOR_SALE", "2.0")]
                },
                ("GET", f"{API}/apps/{APP_ID}/reviewSubmissions"): {
                    "data": [resource("reviewSubmissions", "r9", state="UNRESOLVED_ISSUES")]
                },
            },
        )

        info = client.rejection_info()

        assert info.version_id == "v3"
        assert info.version_string == "3.0"
        assert info.submission_id == "r9"
        assert info.submission_state == "UNRESOLVED_ISSUES"

    def test_no_rejection(self, client, transport):
        route(
            transport,
            {
                ("GET", f"{API}/apps/{APP_ID}/appStoreVersions"): {"data": [version("v2", "READY_FOR_SALE")]},
                ("GET", f"{API}/apps/{APP_ID}/reviewSubmissions"): {
                    "data": [resource("reviewSubmissions", "r1", state="COMPLETE")]
                },
            },
        )

        assert client.rejection_info() is None

    def test_unresolved_submission_falls_back_to_newest_version(self, client, transport):
        route(
            transport,
            {
                ("GET", f"{API}/apps/{APP_ID}/appStoreVersions"): {
                    "data": [version("v4", "PREPARE_FOR_SUBMISSION", "4.0"), version("v3", "READY_FOR_SALE", "3.0")]
                },
                ("GET", f"{API}/apps/{APP_ID}/reviewSubmissions"): {
                    "data": [resource("reviewSubmissions", "r10", state="UNRESOLVED_ISSUES")]
                },
            },
        )

        info = client.rejection_info()

        assert info.version_id == "v4"
        assert info.version_string == "4.0"
        assert info.state == "PREPARE_FOR_SUBMISSION"
        assert info.submission_id == "r10"
        assert info.submission_state == "UNRESOLVED_ISSUES"

    def test_cancel_review_submission(self, client, transport):
        respond(transport, {"data": resource("reviewSubmissions", "r1", state="CANCELING")})

        submission = client.cancel_review_submission("r1")

        assert submission.state == "CANCELING"
        method, url = transport.execute.call_args.args
        assert (method, url) == ("PATCH", f"{API}/reviewSubmissions/r1")
        assert transport.execute.call_args.kwargs["json_body"]["data"]["attributes"] == {"canceled": True}

    def test_resolution_center_without_session(self, client, transport):
        respond(transport, {}, status=403)

        with pytest.raises(SessionRequiredError):
            client.resolution_center_threads("r1")

    def test_resolution_center_other_failure_is_wrapped(self, client, transport):
        respond(transport, {"errors": [{"detail": "boom"}]}, status=500)

        with pytest.raises(ApiError, match="Resolution Center API error") as excinfo:
            client.resolution_center_threads("r1")

        assert excinfo.value.status == 500

    def test_rejection_reasons_skip_empty_messages(self, client, transport):
        respond(
            transport,
            {
                "data": [
                    resource("resolutionCenterMessages", "m1", messageBody="<p>Guideline 2.1</p>", createdDate="2024-05-01"),
                    resource("resolutionCenterMessages", "m2"),
                ]
            },
        )

        reasons = client.rejection_reasons("t1")

        assert [m.id for m in reasons] == ["m1"]


class TestCustomerReviews:
    def test_missing_response_is_none(self, client, transport):
        respond(transport, {}, status=404)

        assert client.customer_review_response("rev-1") is None

    def test_create_response(self, client, transport):
        respond(transport, {"data": resource("customerReviewResponses", "resp-1", responseBody="Thanks!")}, status=201)

        response = client.create_customer_review_response("rev-1", "Thanks!")

        assert response.response_body == "Thanks!"
        data = transport.execute.call_args.kwargs["json_body"]["data"]
        assert data["relationships"]["review"]["data"] == {"type": "customerReviews", "id": "rev-1"}


class TestReleases:
    def test_release_date_only_sent_when_scheduled(self, client, transport):
        respond(
            transport,
            {"data": version("v5", "PREPARE_FOR_SUBMISSION", "5.0")},
            {"data": version("v6", "PREPARE_FOR_SUBMISSION", "6.0")},
        )

        client.create_app_store_version("5.0", earliest_release_date="2030-01-01T00:00:00Z")
        first = transport.execute.call_args.kwargs["json_body"]["data"]["attributes"]
        client.create_app_store_version("6.0", release_type="SCHEDULED", earliest_release_date="2030-01-01T00:00:00Z")
        second = transport.execute.call_args.kwargs["json_body"]["data"]["attributes"]

        assert "earliestReleaseDate" not in first
        assert second["earliestReleaseDate"] == "2030-01-01T00:00:00Z"

    def test_phased_release_not_found_is_none(self, client, transport):
        respond(transport, {}, status=404)

        assert client.phased_release("v1") is None

    def test_update_phased_release_validates_state(self, client, transport):
        with pytest.raises(ValueError, match="Invalid phased release state"):
            client.update_phased_release("p1", "STOPPED")

        transport.execute.assert_not_called()

    def test_pause_phased_release(self, client, transport):
        respond(transport, {"data": resource("appStoreVersionPhasedReleases", "p1", phasedReleaseState="PAUSED")})

        phased = client.update_phased_release("p1", "paused")

        assert phased.state == "PAUSED"
        assert transport.execute.call_args.kwargs["json_body"]["data"]["attributes"] == {"phasedReleaseState": "PAUSED"}

    def test_active_phased_release(self, client, transport):
        route(
            transport,
            {
                ("GET", f"{API}/apps/{APP_ID}/appStoreVersions"): {
                    "data": [version("v2", "PREPARE_FOR_SUBMISSION"), version("v1", "READY_FOR_SALE")]
                },
                ("GET", f"{API}/appStoreVersions/v1/appStoreVersionPhasedRelease"): {
                    "data": resource("appStoreVersionPhasedReleases", "p1", phasedReleaseState="ACTIVE", currentDayNumber=3)
                },
            },
        )

        phased = client.active_phased_release()

        assert phased.id == "p1"
        assert phased.current_day_number == 3


class TestTestFlight:
    def test_create_beta_tester_with_groups(self, client, transport):
        respond(transport, {"data": resource("betaTesters", "t1", email="a@example.com")}, status=201)

        tester = client.create_beta_tester("a@example.com", first_name="Ada", group_ids=["g1", "g2"])

        assert tester.email == "a@example.com"
        data = transport.execute.call_args.kwargs["json_body"]["data"]
        assert data["attributes"] == {"email": "a@example.com", "firstName": "Ada"}
        assert [g["id"] for g in data["relationships"]["betaGroups"]["data"]] == ["g1", "g2"]

    def test_beta_testers_filter_by_app(self, client, transport):
        respond(transport, {"data": []})

        client.beta_testers(limit=5)

        assert transport.execute.call_args.kwargs["params"] == {"filter[apps]": APP_ID, "limit": 5}


class TestScreenshots:
    def test_upload_screenshot_returns_record(self, client, transport, tmp_path):
        image = tmp_path / "home.png"
        image.write_bytes(b"png")
        respond(
            transport,
            {"data": resource("appScreenshots", "s1", fileName="home.png", uploadOperations=[])},
            {"data": resource("appScreenshots", "s1", fileName="home.png", assetDeliveryState={"state": "UPLOAD_COMPLETE"})},
        )

        screenshot = client.upload_app_screenshot("set-1", image)

        assert screenshot.upload_state == "UPLOAD_COMPLETE"
        reserve = transport.execute.call_args_list[0].kwargs["json_body"]["data"]
        assert reserve["relationships"]["appScreenshotSet"]["data"] == {"type": "appScreenshotSets", "id": "set-1"}

    def test_batch_upload_continues_past_failures(self, client, tmp_path, monkeypatch):
        good = tmp_path / "good.png"
        bad = tmp_path / "bad.png"

        def upload(screenshot_set_id, file_path):
            if file_path == bad:
                raise UploadError("Upload failed: 500", status=500)
            return Screenshot(id="s1", file_name=file_path.name)

        monkeypatch.setattr(client, "upload_app_screenshot", upload)

        uploaded, failed = client.upload_app_screenshots("set-1", [bad, good])

        assert [s.file_name for s in uploaded] == ["good.png"]
        assert list(failed) == [str(bad)]

    def test_missing_file_does_not_stop_the_batch(self, client, transport, tmp_path):
        missing = tmp_path / "missing.png"
        good = tmp_path / "good.png"
        good.write_bytes(b"png")
        respond(
            transport,
            {"data": resource("appScreenshots", "s2", fileName="good.png", uploadOperations=[])},
            {"data": resource("appScreenshots", "s2", fileName="good.png", assetDeliveryState={"state": "UPLOAD_COMPLETE"})},
        )

        uploaded, failed = client.upload_app_screenshots("set-1", [missing, good])

        assert [s.file_name for s in uploaded] == ["good.png"]
        assert list(failed) == [str(missing)]
        assert isinstance(failed[str(missing)], UploadError)
        assert "Could not read" in str(failed[str(missing)])
        assert transport.execute.call_count == 2


class TestInAppPurchases:
    def test_in_app_purchases(self, client, transport):
        respond(
            transport,
            {
                "data": [
                    resource(
                        "inAppPurchases",
                        "iap1",
                        productId="coins.100",
                        name="100 Coins",
                        state="READY_TO_SUBMIT",
                        inAppPurchaseType="CONSUMABLE",
                    )
                ]
            },
        )

        (iap,) = client.in_app_purchases()

        assert iap.product_id == "coins.100"
        assert iap.purchase_type == "CONSUMABLE"
        assert iap.review_note is None
        method, url = transport.execute.call_args.args
        assert (method, url) == ("GET", f"{API}/apps/{APP_ID}/inAppPurchasesV2")

    def test_in_app_purchase(self, client, transport):
        respond(transport, {"data": resource("inAppPurchases", "iap1", name="100 Coins", reviewNote="Tap Store")})

        iap = client.in_app_purchase("iap1")

        assert iap.review_note == "Tap Store"
        assert transport.execute.call_args.args == ("GET", f"{API}/inAppPurchasesV2/iap1")

    def test_update_without_fields_sends_nothing(self, client, transport):
        assert client.update_in_app_purchase("iap1") is None

        transport.execute.assert_not_called()

    def test_create_localization(self, client, transport):
        respond(
            transport,
            {"data": resource("inAppPurchaseLocalizations", "loc1", locale="en-US", name="100 Coins")},
            status=201,
        )

        localization = client.create_in_app_purchase_localization("iap1", "en-US", "100 Coins")

        assert localization.locale == "en-US"
        data = transport.execute.call_args.kwargs["json_body"]["data"]
        assert data["attributes"] == {"locale": "en-US", "name": "100 Coins"}
        assert data["relationships"]["inAppPurchaseV2"]["data"] == {"type": "inAppPurchases", "id": "iap1"}


class TestPreOrders:
    def test_pre_order_not_enabled_is_none(self, client, transport):
        respond(transport, {}, status=404)

        assert client.pre_order() is None

    def test_pre_order(self, client, transport):
        respond(
            transport,
            {"data": resource("appPreOrders", "po1", appReleaseDate="2030-06-01", preOrderAvailableDate="2030-01-01")},
        )

        current = client.pre_order()

        assert current.app_release_date == "2030-06-01"
        assert transport.execute.call_args.args == ("GET", f"{API}/apps/{APP_ID}/preOrder")

    def test_create_pre_order(self, client, transport):
        respond(transport, {"data": resource("appPreOrders", "po1", appReleaseDate="2030-06-01")}, status=201)

        created = client.create_pre_order("2030-06-01")

        assert created.id == "po1"
        data = transport.execute.call_args.kwargs["json_body"]["data"]
        assert data["attributes"] == {"appReleaseDate": "2030-06-01"}
        assert data["relationships"]["app"]["data"] == {"type": "apps", "id": APP_ID}

    def test_update_and_delete_pre_order(self, client, transport):
        respond(transport, {"data": resource("appPreOrders", "po1", appReleaseDate="2030-07-01")}, {})

        updated = client.update_pre_order("po1", "2030-07-01")
        client.delete_pre_order("po1")

        assert updated.app_release_date == "2030-07-01"
        calls = [call.args for call in transport.execute.call_args_list]
        assert calls == [("PATCH", f"{API}/appPreOrders/po1"), ("DELETE", f"{API}/appPreOrders/po1")]


class TestReleaseVersion:
    def test_release_pending_version(self, client, transport):
        respond(
            transport,
            {"data": version("v7", "PENDING_DEVELOPER_RELEASE", "7.0")},
            {"data": resource("appStoreVersionReleaseRequests", "rr1")},
        )

        client.release_version("v7")

        method, url = transport.execute.call_args.args
        assert (method, url) == ("POST", f"{API}/appStoreVersionReleaseRequests")
        data = transport.execute.call_args.kwargs["json_body"]["data"]
        assert data["relationships"]["appStoreVersion"]["data"] == {"type": "appStoreVersions", "id": "v7"}

    def test_refuses_other_states(self, client, transport):
        respond(transport, {"data": version("v7", "READY_FOR_SALE", "7.0")})

        with pytest.raises(ApiError, match=r"PENDING_DEVELOPER_RELEASE to release \(current: READY_FOR_SALE\)"):
            client.release_version("v7")

        assert transport.execute.call_count == 1
