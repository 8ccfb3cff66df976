"""Fixed city coordinates and the state-to-city lookup used by summaries."""

from weathermcp.models.location import City

_NYC = City("New York City", 40.7128, -74.0060)
_LA = City("Los Angeles", 34.0522, -118.2437)
_SF = City("San Francisco", 37.7749, -122.4194)

# Keys are lower-case; aliases point at the same City instance.
CITY_TABLE: dict[str, City] = {
    "new york": _NYC,
    "nyc": _NYC,
    "los angeles": _LA,
    "la": _LA,
    "chicago": City("Chicago", 41.8781, -87.6298),
    "houston": City("Houston", 29.7604, -95.3698),
    "phoenix": City("Phoenix", 33.4484, -112.0740),
    "philadelphia": City("Philadelphia", 39.9526, -75.1652),
    "san antonio": City("San Antonio", 29.4241, -98.4936),
    "san diego": City("San Diego", 32.7157, -117.1611),
    "dallas": City("Dallas", 32.7767, -96.7970),
    "san jose": City("San Jose", 37.3382, -121.8863),
    "austin": City("Austin", 30.2672, -97.7431),
    "jacksonville": City("Jacksonville", 30.3322, -81.6557),
    "san francisco": _SF,
    "sf": _SF,
    "columbus": City("Columbus", 39.9612, -82.9988),
    "charlotte": City("Charlotte", 35.2271, -80.8431),
    "fort worth": City("Fort Worth", 32.7555, -97.3308),
    "indianapolis": City("Indianapolis", 39.7684, -86.1581),
    "seattle": City("Seattle", 47.6062, -122.3321),
    "denver": City("Denver", 39.7392, -104.9903),
    "boston": City("Boston", 42.3601, -71.0589),
    "el paso": City("El Paso", 31.7619, -106.4850),
    "detroit": City("Detroit", 42.3314, -83.0458),
    "nashville": City("Nashville", 36.1627, -86.7816),
    "portland": City("Portland", 45.5152, -122.6784),
    "oklahoma city": City("Oklahoma City", 35.4676, -97.5164),
    "las vegas": City("Las Vegas", 36.1699, -115.1398),
    "louisville": City("Louisville", 38.2527, -85.7585),
    "baltimore": City("Baltimore", 39.2904, -76.6122),
    "milwaukee": City("Milwaukee", 43.0389, -87.9065),
    "albuquerque": City("Albuquerque", 35.0844, -106.6504),
    "tucson": City("Tucson", 32.2226, -110.9747),
    "fresno": City("Fresno", 36.7378, -119.7871),
    "sacramento": City("Sacramento", 38.5816, -121.4944),
    "kansas city": City("Kansas City", 39.0997, -94.5786),
    "mesa": City("Mesa", 33.4152, -111.8315),
    "atlanta": City("Atlanta", 33.7490, -84.3880),
    "colorado springs": City("Colorado Springs", 38.8339, -104.8214),
    "raleigh": City("Raleigh", 35.7796, -78.6382),
    "omaha": City("Omaha", 41.2565, -95.9345),
    "miami": City("Miami", 25.7617, -80.1918),
    "long beach": City("Long Beach", 33.7701, -118.1937),
    "virginia beach": City("Virginia Beach", 36.8529, -75.9780),
    "oakland": City("Oakland", 37.8044, -122.2711),
    "minneapolis": City("Minneapolis", 44.9778, -93.2650),
    "tulsa": City("Tulsa", 36.1540, -95.9928),
    "tampa": City("Tampa", 27.9506, -82.4572),
    "arlington": City("Arlington", 32.7357, -97.1081),
    "new orleans": City("New Orleans", 29.9511, -90.0715),
}

# Representative cities per state, most prominent first. Aliases are omitted
# so the first entries are always distinct cities.
STATE_CITIES: dict[str, list[str]] = {
    "CA": ["los angeles", "san francisco", "san diego", "san jose",
           "sacramento", "fresno", "long beach", "oakland"],
    "NY": ["new york"],
    "TX": ["houston", "san antonio", "dallas", "austin", "fort worth",
           "el paso", "arlington"],
    "FL": ["jacksonville", "miami", "tampa"],
    "IL": ["chicago"],
    "AZ": ["phoenix", "tucson", "mesa"],
    "PA": ["philadelphia"],
    "OH": ["columbus"],
    "NC": ["charlotte", "raleigh"],
    "IN": ["indianapolis"],
    "WA": ["seattle"],
    "CO": ["denver", "colorado springs"],
    "MA": ["boston"],
    "MI": ["detroit"],
    "TN": ["nashville"],
    "OR": ["portland"],
    "OK": ["oklahoma city", "tulsa"],
    "NV": ["las vegas"],
    "KY": ["louisville"],
    "MD": ["baltimore"],
    "WI": ["milwaukee"],
    "NM": ["albuquerque"],
    "MO": ["kansas city"],
    "GA": ["atlanta"],
    "NE": ["omaha"],
    "VA": ["virginia beach"],
    "MN": ["minneapolis"],
    "LA": ["new orleans"],
}
