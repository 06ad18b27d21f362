"""Tests for the wttr.in client with mocked httpx."""

from http import HTTPStatus

import httpx
import pytest
import respx

from skypanel.ingest.wttr_client import (
    InvalidLocationError,
    UNKNOWN_LOCATION_SENTINEL,
    WttrClient,
)

BASE_URL = "https://test-wttr.example.com"
J1 = {"format": "j1"}


@pytest.fixture
def wttr() -> WttrClient:
    return WttrClient(base_url=BASE_URL, timeout=1.0)


class TestBuildUrl:
    def test_format_selector(self, wttr: WttrClient):
        url = wttr.build_url("70737")
        assert url.path == "/70737"
        assert url.params["format"] == "j1"

    def test_location_quoted(self, wttr: WttrClient):
        url = wttr.build_url("New Orleans")
        assert url.raw_path.startswith(b"/New%20Orleans")

    def test_surrounding_whitespace_stripped(self, wttr: WttrClient):
        assert wttr.build_url("  70737 ").path == "/70737"

    @pytest.mark.parametrize("location", ["", "   ", "707\n37"])
    def test_unusable_location(self, wttr: WttrClient, location: str):
        with pytest.raises(InvalidLocationError):
            wttr.build_url(location)


class TestGetForecast:
    @respx.mock
    def test_success(self, wttr: WttrClient, wttr_raw: str):
        respx.get(f"{BASE_URL}/70737", params=J1).mock(
            return_value=httpx.Response(200, text=wttr_raw)
        )
        result = wttr.get_forecast("70737")
        assert result.ok
        assert result.status == HTTPStatus.OK
        assert result.body == wttr_raw

    @respx.mock
    def test_request_headers_and_query(self, wttr: WttrClient, wttr_raw: str):
        route = respx.get(f"{BASE_URL}/70737", params=J1).mock(
            return_value=httpx.Response(200, text=wttr_raw)
        )
        wttr.get_forecast("70737")
        request = route.calls[0].request
        assert "skypanel" in request.headers["user-agent"]
        assert request.url.params["format"] == "j1"

    def test_unusable_location_skips_network(self, wttr: WttrClient):
        with respx.mock(assert_all_called=False) as router:
            route = router.get(url__startswith=BASE_URL).mock(
                return_value=httpx.Response(200, text="{}")
            )
            result = wttr.get_forecast("")
        assert not result.ok
        assert result.status == HTTPStatus.NOT_FOUND
        assert not route.called
        # the route lived only on the local router
        assert not respx.routes

    @respx.mock
    def test_transport_error(self, wttr: WttrClient):
        respx.get(f"{BASE_URL}/70737", params=J1).mock(side_effect=httpx.ConnectError("refused"))
        result = wttr.get_forecast("70737")
        assert not result.ok
        assert result.status == HTTPStatus.GATEWAY_TIMEOUT

    @respx.mock
    def test_timeout(self, wttr: WttrClient):
        respx.get(f"{BASE_URL}/70737", params=J1).mock(side_effect=httpx.ReadTimeout("slow"))
        result = wttr.get_forecast("70737")
        assert result.status == HTTPStatus.GATEWAY_TIMEOUT

    @respx.mock
    @pytest.mark.parametrize("status", [404, 500, 503])
    def test_error_status(self, wttr: WttrClient, status: int):
        respx.get(f"{BASE_URL}/70737", params=J1).mock(return_value=httpx.Response(status))
        result = wttr.get_forecast("70737")
        assert not result.ok
        assert result.status == HTTPStatus(status)

    @respx.mock
    def test_non_standard_status(self, wttr: WttrClient):
        respx.get(f"{BASE_URL}/70737", params=J1).mock(return_value=httpx.Response(599))
        result = wttr.get_forecast("70737")
        assert result.status == HTTPStatus.BAD_GATEWAY

    @respx.mock
    def test_unknown_location_sentinel(self, wttr: WttrClient):
        body = f"{UNKNOWN_LOCATION_SENTINEL} ~Bermuda+triangle"
        respx.get(f"{BASE_URL}/nowhere", params=J1).mock(return_value=httpx.Response(200, text=body))
        result = wttr.get_forecast("nowhere")
        assert not result.ok
        assert result.status == HTTPStatus.TOO_MANY_REQUESTS

    @respx.mock
    def test_no_retry(self, wttr: WttrClient):
        route = respx.get(f"{BASE_URL}/70737", params=J1).mock(return_value=httpx.Response(503))
        wttr.get_forecast("70737")
        assert route.call_count == 1
