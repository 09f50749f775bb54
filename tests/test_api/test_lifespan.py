import pytest
from fastapi.testclient import TestClient

import api.main
from api.dependencies import deps
from domain.exceptions.currency import UpstreamUnavailableError
from infrastructure.cache.rate_cache import RateCacheService


@pytest.fixture
def fake_init(monkeypatch, provider, registry, clock):
    def init_dependencies():
        deps.provider = provider
        deps.registry = registry
        deps.rate_cache = RateCacheService(provider=provider, registry=registry, clock=clock)

    monkeypatch.setattr(api.main, 'init_dependencies', init_dependencies)


async def wait_for(task):
    await task


def test_startup_bootstraps_and_shutdown_cleans_up(fake_init, provider, registry):
    provider.queue({'EUR': 0.9, 'GBP': 0.8})

    with TestClient(api.main.app) as client:
        assert deps.bootstrap_task is not None
        client.portal.call(wait_for, deps.bootstrap_task)
        assert registry.codes == ('EUR', 'GBP')

        response = client.get('/api/gbp')

        assert response.status_code == 200
        assert response.json() == {'currencyCode': 'GBP', 'exchangeRate': 0.8}

    assert provider.closed
    assert deps.provider is None
    assert deps.rate_cache is None
    assert deps.bootstrap_task is None


def test_startup_survives_failed_bootstrap(fake_init, provider, registry):
    provider.queue(UpstreamUnavailableError('apilayer request failed: ConnectError'), {'EUR': 0.9})

    with TestClient(api.main.app) as client:
        client.portal.call(wait_for, deps.bootstrap_task)
        assert not registry.is_populated

        response = client.get('/api/eur')

    assert response.status_code == 200
    assert registry.codes == ('EUR',)
    assert provider.calls == 2
