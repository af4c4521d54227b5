from types import MappingProxyType

# Coded sky cover -> phrase
SKY_COVER = MappingProxyType({
    "FEW": "few clouds",
    "SCT": "scattered clouds",
    "BKN": "broken clouds",
    "OVC": "overcast",
})

# Convective cloud suffix on a sky layer (e.g. BKN030CB)
CLOUD_TYPES = MappingProxyType({
    "CB": "cumulonimbus",
    "TCU": "towering cumulus",
})

WEATHER_PHENOMENA = MappingProxyType({
    "RA": "rain",
    "SN": "snow",
    "DZ": "drizzle",
    "TS": "thunderstorm",
    "FG": "fog",
    "BR": "mist",
    "HZ": "haze",
    "SQ": "squalls",
    "GR": "hail",
    "GS": "snow pellets",
    "UP": "unknown precipitation",
    "FU": "smoke",
    "SA": "sand",
    "DU": "dust",
})

# Descriptors are matched so they don't get read as phenomena, but aren't rendered
WEATHER_DESCRIPTORS = ("MI", "PR", "BC", "DR", "BL", "SH", "TS", "FZ")

INTENSITY = MappingProxyType({
    "-": "light ",
    "+": "heavy ",
    "VC": "in vicinity ",
})

CLEAR_SKY_METAR = ("CLR", "SKC", "CAVOK")
# TAFs never carry CLR (automated-station only), so it isn't accepted there
CLEAR_SKY_TAF = ("SKC", "CAVOK")

CHANGE_INDICATORS = ("TEMPO", "BECMG")
