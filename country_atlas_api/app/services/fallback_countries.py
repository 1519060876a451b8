"""
Built-in sample countries.

Used by ``/initialize`` when the restcountries API cannot be reached.
Records have the same shape as restcountries v3.1 responses so that a
single mapping function handles both sources.
"""

from typing import Any, Dict, List


def _emoji_flag(cca2: str) -> str:
    """Build the regional-indicator emoji for an alpha-2 code."""
    return "".join(chr(0x1F1E6 + ord(letter) - ord("A")) for letter in cca2.upper())


def _sample(
    common: str,
    official: str,
    cca2: str,
    cca3: str,
    capital: List[str],
    region: str,
    subregion: str,
    population: int,
    area: int,
    google_maps: str,
    start_of_week: str = "monday",
) -> Dict[str, Any]:
    return {
        "name": {"common": common, "official": official},
        "cca2": cca2,
        "cca3": cca3,
        "capital": capital,
        "region": region,
        "subregion": subregion,
        "population": population,
        "area": area,
        "flags": {"svg": f"https://flagcdn.com/{cca2.lower()}.svg"},
        "independent": True,
        "unMember": True,
        "maps": {"googleMaps": google_maps},
        "startOfWeek": start_of_week,
        "flag": _emoji_flag(cca2),
    }


FALLBACK_COUNTRIES: List[Dict[str, Any]] = [
    _sample("United States", "United States of America", "US", "USA", ["Washington, D.C."],
            "Americas", "North America", 329484123, 9372610,
            "https://goo.gl/maps/e8M246zY4BSjkjAv6", "sunday"),
    _sample("Germany", "Federal Republic of Germany", "DE", "DEU", ["Berlin"],
            "Europe", "Western Europe", 83240525, 357114,
            "https://goo.gl/maps/mD9FBMq1nvXUBrkv6"),
    _sample("Japan", "Japan", "JP", "JPN", ["Tokyo"],
            "Asia", "Eastern Asia", 125836021, 377930,
            "https://goo.gl/maps/NGTLSCSrA8bMrvnX9"),
    _sample("Brazil", "Federative Republic of Brazil", "BR", "BRA", ["Brasília"],
            "Americas", "South America", 212559409, 8515767,
            "https://goo.gl/maps/waCKk21HeeqFzkNC9"),
    _sample("India", "Republic of India", "IN", "IND", ["New Delhi"],
            "Asia", "Southern Asia", 1380004385, 3287590,
            "https://goo.gl/maps/WSk3fLwG4vtPQetp7"),
    _sample("South Africa", "Republic of South Africa", "ZA", "ZAF",
            ["Pretoria", "Cape Town", "Bloemfontein"],
            "Africa", "Southern Africa", 59308690, 1221037,
            "https://goo.gl/maps/CLCZ1R8Uz1KpYhRv6"),
    _sample("United Kingdom", "United Kingdom of Great Britain and Northern Ireland", "GB", "GBR",
            ["London"], "Europe", "Northern Europe", 67215293, 242900,
            "https://goo.gl/maps/FoDtc3UKMkFsXAjHA"),
    _sample("France", "French Republic", "FR", "FRA", ["Paris"],
            "Europe", "Western Europe", 67391582, 551695,
            "https://goo.gl/maps/g7QxxSFsWyTPKuzd7"),
    _sample("Australia", "Commonwealth of Australia", "AU", "AUS", ["Canberra"],
            "Oceania", "Australia and New Zealand", 25687041, 7692024,
            "https://goo.gl/maps/DcjaDa7UbhnZTndH6"),
    _sample("Russia", "Russian Federation", "RU", "RUS", ["Moscow"],
            "Europe", "Eastern Europe", 144104080, 17098242,
            "https://goo.gl/maps/4F4PpDhGJgVvLby57"),
    _sample("China", "People's Republic of China", "CN", "CHN", ["Beijing"],
            "Asia", "Eastern Asia", 1402112000, 9706961,
            "https://goo.gl/maps/p9qC6vgiFRRXzvGi7"),
    _sample("Canada", "Canada", "CA", "CAN", ["Ottawa"],
            "Americas", "North America", 38005238, 9984670,
            "https://goo.gl/maps/jmEVLugreeqiZXxbA", "sunday"),
    _sample("Mexico", "United Mexican States", "MX", "MEX", ["Mexico City"],
            "Americas", "North America", 128932753, 1964375,
            "https://goo.gl/maps/s5g7imNPMDEePxzbA"),
    _sample("Italy", "Italian Republic", "IT", "ITA", ["Rome"],
            "Europe", "Southern Europe", 59554023, 301336,
            "https://goo.gl/maps/8M1K27TDj7StTRTq8"),
    _sample("Spain", "Kingdom of Spain", "ES", "ESP", ["Madrid"],
            "Europe", "Southern Europe", 47351567, 505992,
            "https://goo.gl/maps/138JaXW8EZzRVitY9"),
    _sample("Switzerland", "Swiss Confederation", "CH", "CHE", ["Bern"],
            "Europe", "Western Europe", 8654622, 41284,
            "https://goo.gl/maps/uVuZcXaxSx5jLyEC9"),
    _sample("Egypt", "Arab Republic of Egypt", "EG", "EGY", ["Cairo"],
            "Africa", "Northern Africa", 100000000, 1002450,
            "https://goo.gl/maps/uoDRhXbsqjG6L7VG7", "saturday"),
    _sample("Nigeria", "Federal Republic of Nigeria", "NG", "NGA", ["Abuja"],
            "Africa", "Western Africa", 206139587, 923768,
            "https://goo.gl/maps/LTn417qWwBPFszuV9"),
    _sample("Saudi Arabia", "Kingdom of Saudi Arabia", "SA", "SAU", ["Riyadh"],
            "Asia", "Western Asia", 34813867, 2149690,
            "https://goo.gl/maps/5PSjvdJ1AyaLFRrG9", "sunday"),
    _sample("Argentina", "Argentine Republic", "AR", "ARG", ["Buenos Aires"],
            "Americas", "South America", 45376763, 2780400,
            "https://goo.gl/maps/Z9DXNxhf2o93kvyc6"),
    _sample("Sweden", "Kingdom of Sweden", "SE", "SWE", ["Stockholm"],
            "Europe", "Northern Europe", 10353442, 450295,
            "https://goo.gl/maps/iqygE491ADVgnBW39"),
    _sample("Norway", "Kingdom of Norway", "NO", "NOR", ["Oslo"],
            "Europe", "Northern Europe", 5379475, 323802,
            "https://goo.gl/maps/htWRrphA7vNgQNdSA"),
]
