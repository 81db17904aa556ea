from datetime import date
from typing import Any, Callable, Dict, List, Union

import httpx

MOVIE_INFOS = "/v1/movieinfos"
REVIEWS = "/v1/reviews"
MOVIES = "/v1/movies"

BATMAN_BEGINS: Dict[str, Any] = {
    "movieInfoId": "1",
    "name": "Batman Begins",
    "year": 2005,
    "cast": ["Christian Bale", "Michael Cane"],
    "release_date": "2005-06-15",
}

BATMAN_REVIEWS: List[Dict[str, Any]] = [
    {"reviewId": "r1", "movieInfoId": 1,
     "comment": "Awesome Movie", "rating": 9.0},
    {"reviewId": "r2", "movieInfoId": 1,
     "comment": "Excellent Movie", "rating": 8.0},
]


def movie_info(name: str, year: int, cast: List[str], released: str,
               movie_info_id: str | None = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "name": name,
        "year": year,
        "cast": cast,
        "release_date": date.fromisoformat(released).isoformat(),
    }
    if movie_info_id is not None:
        body["movieInfoId"] = movie_info_id
    return body


def seed_movie_infos() -> List[Dict[str, Any]]:
    return [
        movie_info("Batman Begins", 2005,
                   ["Christian Bale", "Michael Cane"], "2005-06-15"),
        movie_info("The Dark Knight", 2008,
                   ["Christian Bale", "HeathLedger"], "2008-07-18"),
        movie_info("Dark Knight Rises", 2012,
                   ["Christian Bale", "Tom Hardy"], "2012-07-20",
                   movie_info_id="abc"),
    ]


Stub = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeUpstreams:
    """Заглушка movie-info и review сервисов поверх httpx.MockTransport.

    Для каждого path хранится очередь ответов; последний ответ
    повторяется для всех следующих запросов. Незастабленный path отвечает 404.
    """

    def __init__(self) -> None:
        self.routes: Dict[str, List[Callable[[], Stub]]] = {}
        self.calls: List[httpx.Request] = []

    def stub(self, path: str, *responses: Callable[[], Stub]) -> None:
        self.routes[path] = list(responses)

    def json(self, path: str, payload: Any, status: int = 200) -> None:
        self.stub(path, lambda: httpx.Response(status, json=payload))

    def text(self, path: str, body: str, status: int) -> None:
        self.stub(path, lambda: httpx.Response(status, text=body))

    def count(self, path: str) -> int:
        return sum(1 for r in self.calls if r.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        queue = self.routes.get(request.url.path)
        if not queue:
            return httpx.Response(404)
        factory = queue.pop(0) if len(queue) > 1 else queue[0]
        result = factory()
        if callable(result):
            return result(request)
        return result

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
