"""Outbound clients against httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from movies_api.clients.movie_info_client import MovieInfoClient
from movies_api.clients.reviews_client import ReviewsClient
from movies_api.core.exceptions import ClientError, NotFound, ServerError
from movies_api.core.retry import RetryPolicy
from tests.helpers import BATMAN_BEGINS, BATMAN_REVIEWS

BASE = "http://upstream"
NO_WAIT = RetryPolicy(max_attempts=4, delay=0)


@pytest.fixture
async def http(upstreams):
    client = upstreams.http_client()
    yield client
    await client.aclose()


@pytest.fixture
def movie_infos(http):
    return MovieInfoClient(http, f"{BASE}/v1/movieinfos/", retry=NO_WAIT)


@pytest.fixture
def reviews(http):
    return ReviewsClient(http, f"{BASE}/v1/reviews", retry=NO_WAIT)


async def test_fetch_by_id_returns_movie_info(movie_infos, upstreams):
    upstreams.json("/v1/movieinfos/1", BATMAN_BEGINS)

    info = await movie_infos.fetch_by_id("1")

    assert info.name == "Batman Begins"
    assert info.cast == ["Christian Bale", "Michael Cane"]
    assert info.release_date.isoformat() == "2005-06-15"


async def test_fetch_by_id_404_is_not_found(movie_infos, upstreams):
    upstreams.text("/v1/movieinfos/7", "", 404)

    with pytest.raises(NotFound) as e:
        await movie_infos.fetch_by_id("7")

    assert e.value.message == (
        "There is no MovieInfo Available for the passed in Id : 7")


async def test_fetch_by_id_4xx_keeps_status_and_body(movie_infos, upstreams):
    upstreams.text("/v1/movieinfos/1", "nope", 403)

    with pytest.raises(ClientError) as e:
        await movie_infos.fetch_by_id("1")

    assert e.value.status_code == 403
    assert e.value.message == "nope"
    assert upstreams.count("/v1/movieinfos/1") == 1


async def test_fetch_by_id_5xx_keeps_upstream_status(movie_infos, upstreams):
    upstreams.text("/v1/movieinfos/1", "gateway", 502)

    with pytest.raises(ServerError) as e:
        await movie_infos.fetch_by_id("1")

    assert e.value.upstream_status == 502
    assert e.value.status_code == 500
    assert e.value.message == "Server exception in MovieInfoService : gateway"


async def test_unreachable_upstream_is_server_error(movie_infos, upstreams):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    upstreams.stub("/v1/movieinfos/1", lambda: refuse)

    with pytest.raises(ServerError) as e:
        await movie_infos.fetch_by_id("1")

    assert e.value.upstream_status == 503
    assert upstreams.count("/v1/movieinfos/1") == 4


async def test_fetch_reviews(reviews, upstreams):
    upstreams.json("/v1/reviews", BATMAN_REVIEWS)

    result = await reviews.fetch_by_movie_id("1")

    assert [r.review_id for r in result] == ["r1", "r2"]
    assert upstreams.calls[0].url.params["movieInfoId"] == "1"


async def test_fetch_reviews_404_is_empty(reviews, upstreams):
    assert await reviews.fetch_by_movie_id("1") == []


async def test_fetch_reviews_4xx_is_client_error(reviews, upstreams):
    upstreams.text("/v1/reviews", "bad movieInfoId", 400)

    with pytest.raises(ClientError) as e:
        await reviews.fetch_by_movie_id("x")

    assert e.value.status_code == 400
    assert upstreams.count("/v1/reviews") == 1


async def test_fetch_reviews_recovers_after_5xx(reviews, upstreams):
    upstreams.stub("/v1/reviews",
                   lambda: httpx.Response(503, text="busy"),
                   lambda: httpx.Response(200, json=BATMAN_REVIEWS))

    result = await reviews.fetch_by_movie_id("1")

    assert len(result) == 2
    assert upstreams.count("/v1/reviews") == 2


@pytest.mark.parametrize("movie_info_id, raw_path", [
    ("1?x=1", b"/v1/movieinfos/1%3Fx%3D1"),
    ("1#frag", b"/v1/movieinfos/1%23frag"),
    ("1/reviews", b"/v1/movieinfos/1%2Freviews"),
])
async def test_fetch_by_id_sends_id_as_single_path_segment(
        movie_infos, upstreams, movie_info_id, raw_path):
    upstreams.json("/v1/movieinfos/1", BATMAN_BEGINS)

    with pytest.raises(NotFound):
        await movie_infos.fetch_by_id(movie_info_id)

    assert [c.url.raw_path for c in upstreams.calls] == [raw_path]


@pytest.mark.parametrize("movie_info_id", [".", ".."])
async def test_dot_segment_ids_are_not_found_without_calling_upstream(
        movie_infos, upstreams, movie_info_id):
    with pytest.raises(NotFound):
        await movie_infos.fetch_by_id(movie_info_id)

    assert upstreams.calls == []
