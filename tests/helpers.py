"""테스트 공용 데이터와 httpx 목 헬퍼"""
import json
import shutil
import subprocess

import httpx
import pytest


def _sqlite3_supports_json() -> bool:
    binary = shutil.which("sqlite3")
    if not binary:
        return False
    try:
        output = subprocess.run(
            [binary, "--version"], capture_output=True, text=True, timeout=10
        ).stdout
    except (OSError, subprocess.SubprocessError):
        return False
    try:
        major, minor = (int(part) for part in output.split()[0].split(".")[:2])
    except (IndexError, ValueError):
        return False
    return (major, minor) >= (3, 33)


SQLITE3_AVAILABLE = _sqlite3_supports_json()
requires_sqlite3 = pytest.mark.skipif(not SQLITE3_AVAILABLE, reason="sqlite3 CLI with -json not available")


def json_transport(routes: dict, calls: list = None) -> httpx.MockTransport:
    """경로별 JSON 응답을 돌려주는 httpx 목 전송 계층 (없는 경로는 404)"""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        payload = routes.get(request.url.path)
        if payload is None:
            return httpx.Response(404, json={"status_message": "not found"})
        if isinstance(payload, httpx.Response):
            return payload
        return httpx.Response(200, content=json.dumps(payload), headers={"content-type": "application/json"})

    return httpx.MockTransport(handler)


FIGHT_CLUB = {
    "id": 550,
    "title": "Fight Club",
    "original_title": "Fight Club",
    "imdb_id": "tt0137523",
    "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
    "tagline": "Mischief. Mayhem. Soap.",
    "overview": "A ticking-time-bomb insomniac and a slippery soap salesman...",
    "original_language": "en",
    "runtime": 139,
    "release_date": "1999-10-15",
    "vote_average": 8.4,
    "vote_count": 26280,
    "revenue": 100853753,
}

FIGHT_CLUB_CREDITS = {
    "id": 550,
    "cast": [
        {"id": 819, "name": "Edward Norton", "character": "The Narrator", "profile_path": "/norton.jpg"},
        {"id": 287, "name": "Brad Pitt", "character": "Tyler Durden", "profile_path": "/pitt.jpg"},
        {"id": 1283, "name": "Helena Bonham Carter", "character": "Marla Singer", "profile_path": None},
    ],
    "crew": [
        {"id": 7467, "name": "David Fincher", "job": "Director", "profile_path": "/fincher.jpg"},
        {"id": 7474, "name": "Ross Grayson Bell", "job": "Producer", "profile_path": None},
        {"id": 7475, "name": "Ceán Chaffin", "job": "Producer", "profile_path": None},
        {"id": 7469, "name": "Jim Uhls", "job": "Screenplay", "profile_path": None},
    ],
}
