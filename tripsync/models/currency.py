"""Default currencies and snapshot-based conversion."""

from decimal import Decimal

from tripsync.models.common import ForexSnapshot, Money

DEFAULT_CURRENCY = "USD"

# Country name -> ISO 4217 code
COUNTRY_CURRENCIES: dict[str, str] = {
    "Australia": "AUD",
    "United States": "USD",
    "Vietnam": "VND",
    "Japan": "JPY",
    "France": "EUR",
    "Indonesia": "IDR",
    "Italy": "EUR",
    "Germany": "EUR",
    "Netherlands": "EUR",
    "Spain": "EUR",
    "United Kingdom": "GBP",
    "New Zealand": "NZD",
    "Singapore": "SGD",
    "Thailand": "THB",
    "Malaysia": "MYR",
    "Philippines": "PHP",
    "South Korea": "KRW",
    "China": "CNY",
    "India": "INR",
    "Canada": "CAD",
    "Switzerland": "CHF",
}


def default_currency_for(country: str) -> str:
    """Look up the default currency for a country name.

    Unmapped countries fall back to USD rather than raising.
    """
    return COUNTRY_CURRENCIES.get(country.strip(), DEFAULT_CURRENCY)


def money_from_snapshot(amount: Decimal, currency: str, snapshot: ForexSnapshot) -> Money:
    """Record an expense at the snapshot's current rate.

    A currency the snapshot does not quote produces a Money with no rate,
    i.e. an unresolved conversion.
    """
    return Money(amount=amount, currency=currency, exchange_rate=snapshot.rate_for(currency))


def base_amount(money: Money | None) -> Decimal:
    """Best-effort base-currency value of a money field.

    Uses the recorded conversion when there is one, otherwise the raw amount.
    Absent money counts as zero.
    """
    if money is None:
        return Decimal(0)
    if money.converted_amount is not None:
        return money.converted_amount
    return money.amount
