"""Static geography tables used to classify guesses by continent."""

from typing import NamedTuple

from ..models.geo import Continent

_EU = Continent.EUROPE
_AS = Continent.ASIA
_AF = Continent.AFRICA
_NA = Continent.NORTH_AMERICA
_SA = Continent.SOUTH_AMERICA
_OC = Continent.OCEANIA

# Keys use the English, Title Case names returned by the reverse geocoder.
COUNTRY_CONTINENTS: dict[str, Continent] = {
    # Europe
    "Albania": _EU, "Andorra": _EU, "Austria": _EU, "Belarus": _EU,
    "Belgium": _EU, "Bosnia and Herzegovina": _EU, "Bulgaria": _EU, "Croatia": _EU,
    "Czech Republic": _EU, "Denmark": _EU, "Estonia": _EU, "Finland": _EU,
    "France": _EU, "Germany": _EU, "Greece": _EU, "Hungary": _EU,
    "Iceland": _EU, "Ireland": _EU, "Italy": _EU, "Latvia": _EU,
    "Lithuania": _EU, "Luxembourg": _EU, "Malta": _EU, "Moldova": _EU,
    "Monaco": _EU, "Montenegro": _EU, "Netherlands": _EU, "North Macedonia": _EU,
    "Norway": _EU, "Poland": _EU, "Portugal": _EU, "Romania": _EU,
    "Russia": _EU, "San Marino": _EU, "Serbia": _EU, "Slovakia": _EU,
    "Slovenia": _EU, "Spain": _EU, "Sweden": _EU, "Switzerland": _EU,
    "Ukraine": _EU, "United Kingdom": _EU, "Vatican City": _EU,
    # Asia
    "Afghanistan": _AS, "Armenia": _AS, "Azerbaijan": _AS, "Bahrain": _AS,
    "Bangladesh": _AS, "Bhutan": _AS, "Brunei": _AS, "Cambodia": _AS,
    "China": _AS, "Cyprus": _AS, "Georgia": _AS, "India": _AS,
    "Indonesia": _AS, "Iran": _AS, "Iraq": _AS, "Israel": _AS,
    "Japan": _AS, "Jordan": _AS, "Kazakhstan": _AS, "Kuwait": _AS,
    "Kyrgyzstan": _AS, "Laos": _AS, "Lebanon": _AS, "Malaysia": _AS,
    "Maldives": _AS, "Mongolia": _AS, "Myanmar": _AS, "Nepal": _AS,
    "North Korea": _AS, "Oman": _AS, "Pakistan": _AS, "Palestine": _AS,
    "Philippines": _AS, "Qatar": _AS, "Saudi Arabia": _AS, "Singapore": _AS,
    "South Korea": _AS, "Sri Lanka": _AS, "Syria": _AS, "Taiwan": _AS,
    "Tajikistan": _AS, "Thailand": _AS, "Timor-Leste": _AS, "Turkey": _AS,
    "Turkmenistan": _AS, "United Arab Emirates": _AS, "Uzbekistan": _AS, "Vietnam": _AS,
    "Yemen": _AS,
    # Africa
    "Algeria": _AF, "Angola": _AF, "Benin": _AF, "Botswana": _AF,
    "Burkina Faso": _AF, "Burundi": _AF, "Cameroon": _AF, "Cape Verde": _AF,
    "Central African Republic": _AF, "Chad": _AF, "Comoros": _AF, "Congo": _AF,
    "Democratic Republic of the Congo": _AF, "Djibouti": _AF, "Egypt": _AF, "Equatorial Guinea": _AF,
    "Eritrea": _AF, "Eswatini": _AF, "Ethiopia": _AF, "Gabon": _AF,
    "Gambia": _AF, "Ghana": _AF, "Guinea": _AF, "Guinea-Bissau": _AF,
    "Ivory Coast": _AF, "Kenya": _AF, "Lesotho": _AF, "Liberia": _AF,
    "Libya": _AF, "Madagascar": _AF, "Malawi": _AF, "Mali": _AF,
    "Mauritania": _AF, "Mauritius": _AF, "Morocco": _AF, "Mozambique": _AF,
    "Namibia": _AF, "Niger": _AF, "Nigeria": _AF, "Rwanda": _AF,
    "São Tomé and Príncipe": _AF, "Senegal": _AF, "Seychelles": _AF, "Sierra Leone": _AF,
    "Somalia": _AF, "South Africa": _AF, "South Sudan": _AF, "Sudan": _AF,
    "Tanzania": _AF, "Togo": _AF, "Tunisia": _AF, "Uganda": _AF,
    "Zambia": _AF, "Zimbabwe": _AF,
    # North America
    "Antigua and Barbuda": _NA, "Bahamas": _NA, "Barbados": _NA, "Belize": _NA,
    "Canada": _NA, "Costa Rica": _NA, "Cuba": _NA, "Dominica": _NA,
    "Dominican Republic": _NA, "El Salvador": _NA, "Grenada": _NA, "Guatemala": _NA,
    "Haiti": _NA, "Honduras": _NA, "Jamaica": _NA, "Mexico": _NA,
    "Nicaragua": _NA, "Panama": _NA, "Saint Kitts and Nevis": _NA, "Saint Lucia": _NA,
    "Saint Vincent and the Grenadines": _NA, "Trinidad and Tobago": _NA, "United States": _NA,
    # South America
    "Argentina": _SA, "Bolivia": _SA, "Brazil": _SA, "Chile": _SA,
    "Colombia": _SA, "Ecuador": _SA, "Guyana": _SA, "Paraguay": _SA,
    "Peru": _SA, "Suriname": _SA, "Uruguay": _SA, "Venezuela": _SA,
    # Oceania
    "Australia": _OC, "Fiji": _OC, "Kiribati": _OC, "Marshall Islands": _OC,
    "Micronesia": _OC, "Nauru": _OC, "New Zealand": _OC, "Palau": _OC,
    "Papua New Guinea": _OC, "Samoa": _OC, "Solomon Islands": _OC, "Tonga": _OC,
    "Tuvalu": _OC, "Vanuatu": _OC,
}

COUNTRY_CONTINENTS_LOWER: dict[str, Continent] = {
    name.lower(): continent for name, continent in COUNTRY_CONTINENTS.items()
}


class BoundingBox(NamedTuple):
    continent: Continent
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.lat_min <= latitude <= self.lat_max
            and self.lon_min <= longitude <= self.lon_max
        )


# Checked in order, first match wins. The boxes overlap on purpose (western
# Russia and Turkey sit in both Europe and Asia, north Africa in Europe and
# Africa); the order decides those seams.
CONTINENT_BOUNDS: tuple[BoundingBox, ...] = (
    BoundingBox(_EU, 35, 71, -25, 40),
    BoundingBox(_AS, -35, 81, 25, 180),
    BoundingBox(_AF, -35, 37, -20, 52),
    BoundingBox(_NA, 5, 83, -180, -30),
    BoundingBox(_SA, -60, 15, -85, -30),
    BoundingBox(_OC, -50, -5, 110, 180),
)
