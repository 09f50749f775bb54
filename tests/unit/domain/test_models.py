# nosec B101


from datetime import UTC, datetime, timedelta

import pytest

from domain.models.currency import CacheState, RateSnapshot, utc_now

NOW = datetime(2025, 11, 5, 10, 0, 0, tzinfo=UTC)


def test_snapshot_defaults_to_usd_base():
    snapshot = RateSnapshot(rates={'EUR': 0.9}, fetched_at=NOW)

    assert snapshot.base == 'USD'
    assert not snapshot.is_empty


def test_snapshot_rates_are_read_only_copy():
    source = {'EUR': 0.9}
    snapshot = RateSnapshot(rates=source, fetched_at=NOW)

    source['GBP'] = 0.8
    with pytest.raises(TypeError):
        snapshot.rates['EUR'] = 1.0

    assert dict(snapshot.rates) == {'EUR': 0.9}


def test_cache_state_requires_snapshot_and_expiry_together():
    with pytest.raises(ValueError):
        CacheState(snapshot=RateSnapshot(rates={}, fetched_at=NOW))
    with pytest.raises(ValueError):
        CacheState(expires_at=NOW)


def test_cache_state_freshness_boundary():
    state = CacheState(
        snapshot=RateSnapshot(rates={}, fetched_at=NOW),
        expires_at=NOW + timedelta(hours=1),
    )

    assert state.is_fresh(NOW + timedelta(minutes=59))
    assert not state.is_fresh(NOW + timedelta(hours=1))
    assert not CacheState().is_fresh(NOW)


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo is UTC
