"""Forex snapshot sources: bundled fixture and an HTTP rates API.

Snapshots quote "base units per one foreign unit". The HTTP source quotes the
opposite direction ("foreign units per one base unit") and is inverted.
"""

import json
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import httpx

from tripsync.config import Settings
from tripsync.models.common import ForexSnapshot

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


class ForexSourceError(Exception):
    """The rates source answered with something that is not a rate table."""

    pass


def load_fixture_snapshot(base_currency: str) -> ForexSnapshot:
    """Load a snapshot from the bundled fixture.

    Args:
        base_currency: Base currency code (e.g., "AUD")

    Returns:
        ForexSnapshot; empty (base only) if the fixture has no table for it
    """
    fixtures_path = FIXTURES_DIR / "fx_rates.json"
    with open(fixtures_path) as f:
        data = json.load(f)

    table = data.get(base_currency)
    if not table:
        return ForexSnapshot(base_currency=base_currency)

    return ForexSnapshot(
        base_currency=base_currency,
        rates={code: Decimal(rate) for code, rate in table["rates"].items()},
        last_updated=datetime.fromisoformat(table["last_updated"]),
    )


async def fetch_forex_snapshot(
    base_currency: str,
    base_url: str = "https://open.er-api.com/v6/latest",
    client: httpx.AsyncClient | None = None,
    timeout_s: float = 4.0,
) -> ForexSnapshot:
    """Fetch a fresh snapshot from an ExchangeRate-API style endpoint.

    Args:
        base_currency: Base currency code
        base_url: Endpoint root; the base currency is appended as a path segment
        client: Optional httpx client (for testing with mocks)
        timeout_s: Request timeout when no client is given

    Returns:
        ForexSnapshot in the base currency

    Raises:
        httpx.HTTPError: On network or HTTP errors
        ForexSourceError: If the payload is not JSON, not a successful rate table,
            or carries a malformed rate or timestamp
    """
    close_client = False
    if client is None:
        client = httpx.AsyncClient(timeout=timeout_s)
        close_client = True

    try:
        response = await client.get(f"{base_url.rstrip('/')}/{base_currency}")
        response.raise_for_status()
        data = response.json()
    except ValueError as e:
        raise ForexSourceError(f"Rates source returned invalid JSON for {base_currency}") from e
    finally:
        if close_client:
            await client.aclose()

    # Response structure: {result, base_code, time_last_update_unix, rates: {code: per_base}}
    if not isinstance(data, dict):
        raise ForexSourceError(f"Rates source returned {type(data).__name__}, expected an object")
    if data.get("result") != "success" or not isinstance(data.get("rates"), dict):
        raise ForexSourceError(f"Rates source error for {base_currency}: {data.get('result')}")

    rates: dict[str, Decimal] = {}
    for code, per_base in data["rates"].items():
        if code == base_currency or per_base is None:
            continue
        try:
            quoted = Decimal(str(per_base))
        except InvalidOperation as e:
            raise ForexSourceError(f"Non-numeric rate for {code}: {per_base!r}") from e
        if not quoted.is_finite():
            raise ForexSourceError(f"Non-finite rate for {code}: {per_base!r}")
        if quoted <= 0:
            continue
        rates[code] = Decimal(1) / quoted

    return ForexSnapshot(
        base_currency=base_currency,
        rates=rates,
        last_updated=_parse_update_time(data.get("time_last_update_unix")),
    )


def _parse_update_time(updated_unix: Any) -> datetime:
    if updated_unix is None:
        return datetime.now()
    try:
        return datetime.fromtimestamp(updated_unix)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise ForexSourceError(f"Invalid update timestamp: {updated_unix!r}") from e


def is_snapshot_stale(snapshot: ForexSnapshot, now: datetime, ttl_hours: int) -> bool:
    return now - snapshot.last_updated > timedelta(hours=ttl_hours)


async def refresh_forex_snapshot(
    current: ForexSnapshot,
    settings: Settings,
    now: datetime | None = None,
    client: httpx.AsyncClient | None = None,
) -> ForexSnapshot:
    """Replace a snapshot older than the configured TTL.

    Already-recorded Money values keep their own rates; only expenses
    recorded after the refresh use the new table.

    Returns:
        ``current`` if still fresh, otherwise a newly fetched snapshot

    Raises:
        httpx.HTTPError: On network or HTTP errors
        ForexSourceError: If the source answers with anything but a valid rate table
    """
    if not is_snapshot_stale(current, now or datetime.now(), settings.fx_ttl_hours):
        return current

    return await fetch_forex_snapshot(
        current.base_currency,
        settings.forex_api_url,
        client=client,
        timeout_s=settings.forex_timeout_s,
    )
