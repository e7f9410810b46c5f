"""
Pytest configuration for pantheon-scoreboard tests.

No test touches the network: HTTP goes through httpx.MockTransport serving
an in-memory set of CSV files.
"""

import httpx
import pytest

from pantheon_scoreboard.core.http import CsvClient, CsvFetchError


SPLIT_2024_1 = """PlayerID,Score,GameName,Date,Notes
Alex E.,2.0,Clue,01/20/2024,
Nainoa,3,Catan,01/20/2024,longest road, again
Alex E.,2,Codenames,02/03/2024,
Isabelle,1.5,Clue,02/03/2024,
"""

SPLIT_2024_2 = """PlayerID,Score,GameName,Date,Notes
Teresa,4,Azul,07/20/2024,
Isabelle,4,Azul,07/20/2024,
Nainoa,1,Azul,07/20/2024,
"""


def make_transport(files: dict[str, str], status: dict[str, int] | None = None) -> httpx.MockTransport:
    """Serve ``files`` by URL path; unknown paths get 404.

    ``status`` forces a response code for a path (e.g. 500).
    """
    status = status or {}

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path.lstrip("/")
        if path in status:
            return httpx.Response(status[path], text="error")
        if path in files:
            return httpx.Response(200, text=files[path])
        return httpx.Response(404, text="Not Found")

    return httpx.MockTransport(handler)


@pytest.fixture
def csv_files() -> dict[str, str]:
    """CSV files served by the mock web server, keyed by path."""
    return {
        "data/2024_Split1.csv": SPLIT_2024_1,
        "data/2024_Split2.csv": SPLIT_2024_2,
    }


@pytest.fixture
async def csv_client(csv_files):
    """CsvClient wired to the mock web server."""
    async with CsvClient(
        base_url="http://scoreboard.test",
        transport=make_transport(csv_files),
    ) as client:
        yield client


@pytest.fixture
def fetch_from():
    """Build a fetch callable from a plain dict, without httpx.

    Missing paths raise CsvFetchError with status 404, like CsvClient.
    """

    def factory(files: dict[str, str]):
        calls: list[str] = []

        async def fetch(path: str) -> str:
            calls.append(path)
            if path not in files:
                raise CsvFetchError(f"HTTP 404 for {path}", path=path, status_code=404)
            return files[path]

        fetch.calls = calls
        return fetch

    return factory
