"""
Reference design conditions
Outdoor design data for major Indian cities and standard indoor comfort classes
"""

import logging
from typing import Any, Dict

from coolload.domain.calculations.psychrometrics import calculate_psychrometrics
from coolload.errors import UnknownLookupKeyError

logger = logging.getLogger(__name__)

SEASONS = ('summer', 'monsoon', 'winter')

# db/wb in °F, rh in %, elevation in m
INDIAN_CLIMATE_DATA = {
    'Delhi': {
        'summer': {'db': 113, 'wb': 84.2, 'rh': 35},
        'monsoon': {'db': 95, 'wb': 86, 'rh': 75},
        'winter': {'db': 77, 'wb': 59, 'rh': 55},
        'elevation': 216, 'latitude': 28.6, 'longitude': 77.2,
    },
    'Mumbai': {
        'summer': {'db': 91.4, 'wb': 82.4, 'rh': 75},
        'monsoon': {'db': 86, 'wb': 82, 'rh': 85},
        'winter': {'db': 86, 'wb': 68, 'rh': 60},
        'elevation': 11, 'latitude': 19.1, 'longitude': 72.9,
    },
    'Kolkata': {
        'summer': {'db': 100.4, 'wb': 86, 'rh': 70},
        'monsoon': {'db': 91.4, 'wb': 86, 'rh': 85},
        'winter': {'db': 82.4, 'wb': 64.4, 'rh': 65},
        'elevation': 6, 'latitude': 22.6, 'longitude': 88.4,
    },
    'Chennai': {
        'summer': {'db': 100.4, 'wb': 84.2, 'rh': 65},
        'monsoon': {'db': 95, 'wb': 84.2, 'rh': 80},
        'winter': {'db': 86, 'wb': 75.2, 'rh': 70},
        'elevation': 6, 'latitude': 13.1, 'longitude': 80.3,
    },
    'Bangalore': {
        'summer': {'db': 95, 'wb': 73.4, 'rh': 55},
        'monsoon': {'db': 82.4, 'wb': 73.4, 'rh': 80},
        'winter': {'db': 82.4, 'wb': 64.4, 'rh': 60},
        'elevation': 920, 'latitude': 12.9, 'longitude': 77.6,
    },
    'Hyderabad': {
        'summer': {'db': 109.4, 'wb': 82.4, 'rh': 45},
        'monsoon': {'db': 91.4, 'wb': 80.6, 'rh': 75},
        'winter': {'db': 86, 'wb': 64.4, 'rh': 55},
        'elevation': 542, 'latitude': 17.4, 'longitude': 78.5,
    },
    'Pune': {
        'summer': {'db': 104, 'wb': 77, 'rh': 45},
        'monsoon': {'db': 86, 'wb': 78.8, 'rh': 80},
        'winter': {'db': 86, 'wb': 59, 'rh': 50},
        'elevation': 560, 'latitude': 18.5, 'longitude': 73.9,
    },
    'Ahmedabad': {
        'summer': {'db': 113, 'wb': 82.4, 'rh': 35},
        'monsoon': {'db': 95, 'wb': 84.2, 'rh': 70},
        'winter': {'db': 86, 'wb': 59, 'rh': 50},
        'elevation': 53, 'latitude': 23.0, 'longitude': 72.6,
    },
    'Jaipur': {
        'summer': {'db': 113, 'wb': 82.4, 'rh': 30},
        'monsoon': {'db': 100.4, 'wb': 84.2, 'rh': 65},
        'winter': {'db': 77, 'wb': 55.4, 'rh': 50},
        'elevation': 431, 'latitude': 26.9, 'longitude': 75.8,
    },
    'Lucknow': {
        'summer': {'db': 113, 'wb': 86, 'rh': 40},
        'monsoon': {'db': 95, 'wb': 86, 'rh': 80},
        'winter': {'db': 77, 'wb': 59, 'rh': 60},
        'elevation': 123, 'latitude': 26.8, 'longitude': 80.9,
    },
}

# ASHRAE Standard 55 / ISHRAE indoor design classes
STANDARD_INDOOR_CONDITIONS = {
    'GENERAL_COMFORT': {
        'summer': {'db': 75.2, 'rh': 50},
        'winter': {'db': 71.6, 'rh': 50},
        'description': 'Offices, Residences, Hotels, Hospitals',
    },
    'RETAIL_SHOPS': {
        'summer': {'db': 75.2, 'rh': 50},
        'winter': {'db': 71.6, 'rh': 50},
        'description': 'Department Stores, Banks, Supermarkets',
    },
    'LOW_SENSIBLE_HEAT_FACTORS': {
        'summer': {'db': 75.2, 'rh': 60},
        'winter': {'db': 71.6, 'rh': 60},
        'description': 'Restaurants, Kitchens, Auditoriums, Theaters',
    },
    'FACTORY_COMFORT': {
        'summer': {'db': 78.8, 'rh': 45},
        'winter': {'db': 68, 'rh': 45},
        'description': 'Light Manufacturing, Assembly Areas',
    },
    'DATA_CENTER': {
        'summer': {'db': 75.2, 'rh': 45},
        'winter': {'db': 75.2, 'rh': 45},
        'description': 'Server Rooms, Computer Centers',
    },
    'PRECISION_MANUFACTURING': {
        'summer': {'db': 73.4, 'rh': 45},
        'winter': {'db': 73.4, 'rh': 45},
        'description': 'Clean Rooms, Precision Assembly',
    },
}


def _find_key(table: Dict[str, Any], key: str, table_name: str) -> str:
    wanted = (key or '').strip().lower().replace(' ', '_')
    for candidate in table:
        if candidate.lower() == wanted:
            return candidate
    raise UnknownLookupKeyError(table_name, key)


def get_climate_data(city: str, season: str = 'summer') -> Dict[str, Any]:
    """
    Outdoor design state for a city and season

    Args:
        city: City name (case-insensitive)
        season: 'summer', 'monsoon' or 'winter'

    Returns:
        Psychrometric state (from DB + WB) plus city, season and location
    """
    city_key = _find_key(INDIAN_CLIMATE_DATA, city, 'INDIAN_CLIMATE_DATA')
    season_key = (season or '').strip().lower()
    if season_key not in SEASONS:
        raise UnknownLookupKeyError('SEASONS', season)

    city_data = INDIAN_CLIMATE_DATA[city_key]
    season_data = city_data[season_key]
    state = calculate_psychrometrics(season_data['db'], wb_f=season_data['wb'])

    return {
        **state.to_json(),
        'city': city_key,
        'season': season_key,
        'elevation': city_data['elevation'],
        'latitude': city_data['latitude'],
        'longitude': city_data['longitude'],
    }


def get_standard_indoor_conditions(application: str) -> Dict[str, Any]:
    """Summer indoor design state for an application class"""
    key = _find_key(STANDARD_INDOOR_CONDITIONS, application, 'STANDARD_INDOOR_CONDITIONS')
    data = STANDARD_INDOOR_CONDITIONS[key]
    summer = data['summer']
    state = calculate_psychrometrics(summer['db'], rh=summer['rh'])

    return {
        **state.to_json(),
        'application': key,
        'description': data['description'],
        'winter_conditions': dict(data['winter']),
    }
