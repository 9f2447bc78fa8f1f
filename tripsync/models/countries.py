"""Country display helpers."""

DEFAULT_FLAG = "🌍"

COUNTRY_FLAGS: dict[str, str] = {
    "Australia": "🇦🇺",
    "United States": "🇺🇸",
    "Vietnam": "🇻🇳",
    "Japan": "🇯🇵",
    "France": "🇫🇷",
    "Germany": "🇩🇪",
    "United Kingdom": "🇬🇧",
    "Canada": "🇨🇦",
    "Singapore": "🇸🇬",
    "Thailand": "🇹🇭",
    "Indonesia": "🇮🇩",
    "Malaysia": "🇲🇾",
    "Philippines": "🇵🇭",
    "South Korea": "🇰🇷",
    "China": "🇨🇳",
    "India": "🇮🇳",
    "Italy": "🇮🇹",
    "Spain": "🇪🇸",
    "Netherlands": "🇳🇱",
    "Switzerland": "🇨🇭",
    "New Zealand": "🇳🇿",
}

# Order shown in country pickers
POPULAR_COUNTRIES: list[str] = list(COUNTRY_FLAGS)


def flag_for(country: str) -> str:
    """Flag emoji for a country name, or a globe for unknown names."""
    return COUNTRY_FLAGS.get(country.strip(), DEFAULT_FLAG)
