import pytest

from neighborhood_api.routes.neighbors import get_leaderboard_service


@pytest.fixture
def override_leaderboard_service():
    """Swap the leaderboard service dependency; cleared after the test."""
    applied = []

    def _apply(app, service):
        app.dependency_overrides[get_leaderboard_service] = lambda: service
        applied.append(app)

    yield _apply

    for app in applied:
        app.dependency_overrides.pop(get_leaderboard_service, None)
