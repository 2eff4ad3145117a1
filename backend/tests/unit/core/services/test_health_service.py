import pytest

from notesnest.core.services.health_service import HealthService


class FakeScalarResult:
    def scalar(self):
        return 1


class FakeSession:
    def __init__(self, ok=True):
        self.ok = ok
        self.executed = []

    async def execute(self, stmt):
        self.executed.append(stmt)
        if self.ok:
            return FakeScalarResult()
        raise RuntimeError("db down")


@pytest.mark.asyncio
async def test_database_health_ok():
    session = FakeSession(ok=True)
    result = await HealthService(session).check_database_health()

    assert result["connected"] is True
    assert result["status"] == "healthy"
    assert result["response_time_ms"] >= 0
    assert len(session.executed) == 1


@pytest.mark.asyncio
async def test_database_health_failure_reports_error_type():
    result = await HealthService(FakeSession(ok=False)).check_database_health()

    assert result == {
        "connected": False,
        "status": "unhealthy",
        "error": "RuntimeError",
        "response_time_ms": None,
    }
