"""Shared fixtures for contact form tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from contact_form.services.plain import Customer, PlainResult, Thread


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons and dependency overrides between tests."""
    yield

    # 1. Settings LRU cache
    from contact_form.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import contact_form.services.http_client as http_mod

    http_mod._client = None

    # 3. FastAPI dependency overrides
    from contact_form.main import app

    app.dependency_overrides.clear()


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from contact_form.config import Settings, get_settings

    test_settings = Settings(
        plain_api_key="test-plain-key",
        plain_api_url="https://plain.test/graphql/v1",
        plain_label_type_id_bug="lt_bug",
        plain_label_type_id_demo="lt_demo",
        plain_label_type_id_feature="lt_feature",
        plain_label_type_id_question=None,
        plain_label_type_id_security="lt_security",
    )

    get_settings.cache_clear()
    monkeypatch.setattr("contact_form.config.get_settings", lambda: test_settings)

    # Modules that did `from contact_form.config import get_settings`
    for mod_path in ["contact_form.main"]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


class FakePlainClient:
    """Records calls and returns canned results in place of PlainClient."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []
        self.upsert_result = PlainResult(
            data=Customer(id="c_123", full_name="Grace Hopper")
        )
        self.thread_result = PlainResult(data=Thread(id="th_456", title="Bug report"))

    async def upsert_customer(self, email: str, full_name: str) -> PlainResult:
        self.calls.append(("upsert_customer", {"email": email, "full_name": full_name}))
        return self.upsert_result

    async def create_thread(self, **kwargs) -> PlainResult:
        self.calls.append(("create_thread", kwargs))
        return self.thread_result

    @property
    def operations(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def fake_plain() -> FakePlainClient:
    return FakePlainClient()


@pytest.fixture
async def api_client(mock_settings, fake_plain):
    """AsyncClient talking to the app in-process, with Plain faked out."""
    from contact_form.main import app
    from contact_form.routers.contact_form import get_plain_client

    app.dependency_overrides[get_plain_client] = lambda: fake_plain
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
