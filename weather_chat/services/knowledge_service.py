"""Static weather knowledge base for Pakistan cities.

Holds seasonal patterns, notable features and safety tips per city. The table
is built once at import time and is read-only afterwards.
"""
import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from weather_chat.models import CityWeatherRecord
from weather_chat.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'knowledge')

KNOWLEDGE_BASE_HEADER = "PAKISTAN WEATHER KNOWLEDGE BASE:"


def _record(key: str, city: str, climate: str, seasons: dict,
            notable_features: List[str], safety_tips: List[str]) -> CityWeatherRecord:
    return CityWeatherRecord(
        key=key,
        city=city,
        climate=climate,
        summer=seasons["summer"],
        monsoon=seasons["monsoon"],
        winter=seasons["winter"],
        spring=seasons["spring"],
        notable_features=tuple(notable_features),
        safety_tips=tuple(safety_tips),
    )


_RECORDS = (
    _record(
        "lahore",
        city="Lahore",
        climate="Semi-arid with hot summers and mild winters",
        seasons={
            "summer": "Extremely hot (May-June), temperatures can reach 45-48°C. Heatwaves are common.",
            "monsoon": "Heavy rainfall during July-August, occasional flooding in low-lying areas.",
            "winter": "Mild and pleasant (Dec-Feb), but severe smog pollution from November to January.",
            "spring": "Moderate temperatures (March-April), pleasant weather.",
        },
        notable_features=[
            "Severe smog during winter months (Nov-Jan)",
            "High humidity during monsoon season",
            "Dust storms possible in summer",
        ],
        safety_tips=[
            "During smog: Wear N95 masks, limit outdoor activities, use air purifiers indoors",
            "During heatwaves: Stay hydrated, avoid sun exposure 11 AM - 4 PM, wear light clothing",
            "During monsoon: Avoid low-lying areas, be cautious of flash floods",
        ],
    ),
    _record(
        "karachi",
        city="Karachi",
        climate="Hot desert climate with high humidity due to Arabian Sea",
        seasons={
            "summer": "Very hot and humid (April-September), temperatures 35-40°C with high humidity.",
            "monsoon": "Moderate rainfall (July-August), sea breeze provides relief in evenings.",
            "winter": "Mild and pleasant (Nov-Feb), temperatures 15-25°C, best time to visit.",
            "spring": "Warm and dry (March), pleasant before summer heat sets in.",
        },
        notable_features=[
            "Sea breeze (Breeze) in evenings provides natural cooling",
            "High humidity year-round",
            "Occasional cyclones from Arabian Sea",
        ],
        safety_tips=[
            "Stay hydrated due to high humidity",
            "Use sunscreen and protective clothing",
            "Be aware of cyclone warnings during monsoon",
            "Enjoy evening sea breeze for natural cooling",
        ],
    ),
    _record(
        "islamabad",
        city="Islamabad",
        climate="Humid subtropical with cooler temperatures than other major cities",
        seasons={
            "summer": "Warm but not extreme (May-August), temperatures 30-35°C, occasional thunderstorms.",
            "monsoon": "Heavy rainfall (July-August), beautiful green landscapes, "
                       "occasional landslides in Margalla Hills.",
            "winter": "Cool with foggy mornings (Dec-Feb), temperatures 5-15°C, occasional light frost.",
            "spring": "Pleasant and mild (March-April), blooming flowers, ideal weather.",
        },
        notable_features=[
            "Cooler nights compared to other cities",
            "Foggy winter mornings",
            "Beautiful spring season",
            "Landslide risk in Margalla Hills during heavy rain",
        ],
        safety_tips=[
            "During fog: Drive carefully, use fog lights, allow extra travel time",
            "During monsoon: Avoid hiking in Margalla Hills, beware of landslides",
            "Layer clothing in winter for temperature variations",
        ],
    ),
    _record(
        "peshawar",
        city="Peshawar",
        climate="Hot semi-arid with continental influences",
        seasons={
            "summer": "Very hot and dry (May-August), temperatures can exceed 40°C.",
            "monsoon": "Moderate rainfall (July-August), less than other regions.",
            "winter": "Cool and dry (Dec-Feb), temperatures 5-20°C, occasional cold spells.",
            "spring": "Pleasant (March-April), moderate temperatures.",
        },
        notable_features=[
            "Dry heat in summer",
            "Less humidity than coastal areas",
            "Dust storms possible",
        ],
        safety_tips=[
            "Stay hydrated during hot summers",
            "Protect from dust storms",
            "Layer clothing for winter temperature drops",
        ],
    ),
    _record(
        "quetta",
        city="Quetta",
        climate="Cold semi-arid with significant temperature variations",
        seasons={
            "summer": "Warm days, cool nights (May-August), temperatures 25-35°C.",
            "monsoon": "Light rainfall (July-August), less than other regions.",
            "winter": "Cold and dry (Dec-Feb), temperatures can drop below freezing, occasional snowfall.",
            "spring": "Mild and pleasant (March-April), ideal weather.",
        },
        notable_features=[
            "Significant day-night temperature differences",
            "Coldest winters among major cities",
            "Occasional snowfall in winter",
        ],
        safety_tips=[
            "Bundle up in winter, temperatures can be very cold",
            "Prepare for snowfall and icy conditions",
            "Layer clothing for temperature variations",
        ],
    ),
    _record(
        "multan",
        city="Multan",
        climate="Hot desert with extreme summer temperatures",
        seasons={
            "summer": "Extremely hot (May-August), temperatures can reach 48-50°C, one of the hottest cities.",
            "monsoon": "Moderate rainfall (July-August), provides some relief.",
            "winter": "Mild and pleasant (Dec-Feb), temperatures 10-25°C.",
            "spring": "Warm (March-April), temperatures rising.",
        },
        notable_features=[
            "One of the hottest cities in Pakistan",
            "Dry heat",
            "Dust storms common",
        ],
        safety_tips=[
            "Extreme heat precautions essential in summer",
            "Stay indoors during peak heat hours",
            "Hydrate constantly",
            "Protect from dust storms",
        ],
    ),
    _record(
        "northern-areas",
        city="Northern Areas (Gilgit-Baltistan, Khyber Pakhtunkhwa mountains)",
        climate="Alpine and highland climate with cold winters",
        seasons={
            "summer": "Mild and pleasant (June-August), ideal for tourism, temperatures 15-25°C.",
            "monsoon": "Heavy rainfall and risk of landslides (July-August), some areas inaccessible.",
            "winter": "Cold with heavy snowfall (Dec-Feb), temperatures below freezing, many areas snowbound.",
            "spring": "Cool with melting snow (March-May), beautiful landscapes.",
        },
        notable_features=[
            "Heavy snowfall in winter (Dec-Feb)",
            "Landslide risk during monsoon season",
            "Avalanche risk in high-altitude areas",
            "Beautiful summer weather for tourism",
        ],
        safety_tips=[
            "Winter: Prepare for extreme cold, snow, and potential road closures",
            "Monsoon: Avoid travel, high landslide risk",
            "Check weather forecasts and road conditions before travel",
            "Carry appropriate gear for cold weather",
            "Be aware of avalanche warnings in high-altitude areas",
        ],
    ),
)

PAKISTAN_CITIES_WEATHER: Mapping[str, CityWeatherRecord] = MappingProxyType(
    {record.key: record for record in _RECORDS}
)


class KnowledgeService:
    """Read-only access to the static weather knowledge base."""

    def __init__(self, table: Mapping[str, CityWeatherRecord] = PAKISTAN_CITIES_WEATHER):
        """Initialize knowledge service.

        Args:
            table: Mapping of lowercase keys to records, in declaration order
        """
        self._table = table

    def lookup(self, city_query: str) -> Optional[CityWeatherRecord]:
        """Find the record for a city.

        An exact key match wins. Otherwise the first record, in table order,
        whose key contains the query or is contained in it is returned.

        Args:
            city_query: Free-form city name, e.g. "Karachi, Sindh"

        Returns:
            Matching CityWeatherRecord or None
        """
        normalized = city_query.strip().lower()
        if not normalized:
            return None

        record = self._table.get(normalized)
        if record is not None:
            return record

        for key, record in self._table.items():
            if key in normalized or normalized in key:
                plugin_logger.debug(f"📚 Partial match '{normalized}' -> {record.city}")
                return record

        return None

    def list_cities(self) -> List[str]:
        """Get city display names in table order."""
        return [record.city for record in self._table.values()]

    def render_all(self) -> str:
        """Format the whole knowledge base as text for prompt injection.

        Returns:
            Header followed by one block per record, each ending with a blank line
        """
        parts = [f"{KNOWLEDGE_BASE_HEADER}\n\n"]
        for record in self._table.values():
            parts.append(
                f"CITY: {record.city}\n"
                f"Climate: {record.climate}\n"
                f"Seasons:\n"
                f"  Summer: {record.summer}\n"
                f"  Monsoon: {record.monsoon}\n"
                f"  Winter: {record.winter}\n"
                f"  Spring: {record.spring}\n"
                f"Notable Features: {', '.join(record.notable_features)}\n"
                f"Safety Tips: {' | '.join(record.safety_tips)}\n\n"
            )
        return "".join(parts)
