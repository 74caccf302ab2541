"""NOTAM abbreviation dictionary (ICAO Doc 8400 subset).

Keys are upper-case ICAO abbreviations or multi-word phrases; values are the
plain-language expansion. Expansions never contain an upper-case word that is
itself a key with a different expansion, so decoding already-decoded text
changes nothing.
"""

ABBREVIATIONS = {
    # Facilities & locations
    "AD": "Aerodrome", "AERODROME": "Aerodrome", "RWY": "Runway", "TWY": "Taxiway",
    "APRON": "Apron", "APN": "Apron", "THR": "Threshold", "TDZ": "Touchdown Zone",
    "DTHR": "Displaced Threshold", "SFC": "Surface", "GND": "Ground",
    "ACFT": "Aircraft", "AP": "Airport", "HP": "Heliport", "HEL": "Helicopter",
    "STAND": "Stand", "PRKG": "Parking",

    # Status / conditions
    "CLSD": "Closed", "OPN": "Open", "OPEN": "Open", "AVBL": "Available",
    "NOT AVBL": "Not Available", "U/S": "Unserviceable", "UNSERVICEABLE": "Unserviceable",
    "SKED": "Scheduled", "UNSKED": "Unscheduled", "ACT": "Active", "INACT": "Inactive",
    "ESTB": "Established", "ESTABLISHED": "Established", "WDN": "Withdrawn", "RESUMED": "Resumed",

    # Work / actions
    "WIP": "Work in Progress", "MAINT": "Maintenance", "CONSTR": "Construction",
    "REPAIR": "Repair", "INSP": "Inspection", "INSPECTION": "Inspection",
    "OPER": "Operational", "OPS": "Operations", "PROC": "Procedure",
    "RESURFACING": "Resurfacing", "CLEARING": "Clearing",

    # Reasons
    "DUE": "Due to", "DUE TO": "Due to",

    # Time
    "HR": "Hours", "HRS": "Hours", "H24": "24 Hours / Continuous",
    "DAILY": "Daily", "PERM": "Permanent", "TEMPO": "Temporary",
    "TIL": "Until", "UFN": "Until Further Notice", "WEF": "With Effect From",
    "BTN": "Between", "FM": "From", "EST": "Estimated",
    "SR": "Sunrise", "SS": "Sunset", "MON": "Monday", "TUE": "Tuesday",
    "WED": "Wednesday", "THU": "Thursday", "FRI": "Friday", "SAT": "Saturday", "SUN": "Sunday",

    # Lighting
    "LGT": "Lighting", "LGTD": "Lighted", "UNLGTD": "Unlighted",
    "ALS": "Approach Lighting System", "PAPI": "PAPI", "VASI": "VASI",
    "ABN": "Aerodrome Beacon", "REIL": "Runway End Identifier Lights",
    "CL": "Centreline", "EDGE": "Edge",

    # Navigation aids
    "NAV": "Navigation", "NAVAID": "Navigation Aid",
    "ILS": "Instrument Landing System",
    "ILS/DME": "Instrument Landing System with Distance Measuring Equipment",
    "VOR": "VOR", "VOR/DME": "VOR with Distance Measuring Equipment", "NDB": "NDB",
    "DME": "Distance Measuring Equipment", "GP": "Glide Path",
    "LOC": "Localizer", "TACAN": "TACAN", "GNSS": "GNSS",
    "RNAV": "Area Navigation", "RNP": "Required Navigation Performance",
    "PBN": "Performance Based Navigation",

    # Communication
    "COM": "Communication", "FREQ": "Frequency", "RTF": "Radiotelephony",
    "VHF": "VHF", "UHF": "UHF", "HF": "HF",
    "ATIS": "ATIS", "VOLMET": "VOLMET", "ACARS": "ACARS",
    "CPDLC": "CPDLC", "SELCAL": "SELCAL", "SATCOM": "Satellite Communication",
    "CTAF": "Common Traffic Advisory Frequency",

    # Obstacles
    "OBST": "Obstacle", "CRANE": "Crane", "BLDG": "Building",
    "ANT": "Antenna", "TOWER": "Tower", "POLE": "Pole",
    "STACK": "Chimney/Stack", "MAST": "Mast", "ELEV": "Elevation",
    "HGT": "Height", "AGL": "Above Ground Level", "AMSL": "Above Mean Sea Level",

    # Cautions / warnings
    "CTN": "Caution", "ADZ": "Advise", "REQ": "Required",
    "AUTH": "Authorized", "PROHIBITED": "Prohibited", "PROH": "Prohibited",
    "RESTRICTED": "Restricted", "RSTR": "Restricted",
    "DANGER": "Danger", "HAZ": "Hazard", "BIRD": "Bird",
    "WILDLIFE": "Wildlife", "FOD": "Foreign Object Debris",

    # Airspace
    "CTA": "Control Area", "TMA": "Terminal Control Area",
    "CTR": "Control Zone", "FIR": "Flight Information Region",
    "UIR": "Upper Information Region", "UTA": "Upper Control Area",
    "OCA": "Oceanic Control Area", "ATZ": "Aerodrome Traffic Zone",
    "ADIZ": "Air Defense Identification Zone",
    "P": "Prohibited Area", "R": "Restricted Area", "D": "Danger Area",
    "TRA": "Temporary Reserved Area", "TSA": "Temporary Segregated Area",
    "WI": "Within", "RADIUS": "Radius", "AREA": "Area",

    # ATS
    "ATS": "Air Traffic Services", "ATC": "Air Traffic Control",
    "TWR": "Tower", "APP": "Approach", "ACC": "Area Control Centre",
    "FIS": "Flight Information Service", "AFIS": "Aerodrome Flight Information Service",
    "ARR": "Arrival", "DEP": "Departure", "APCH": "Approach",
    "SID": "Standard Instrument Departure", "STAR": "Standard Arrival Route",
    "IAP": "Instrument Approach Procedure", "MAP": "Missed Approach Procedure",
    "HOLD": "Holding", "RVSM": "RVSM", "TKOF": "Take-off", "LDG": "Landing",

    # Meteorological
    "MET": "Meteorological", "METAR": "METAR", "TAF": "TAF",
    "SIGMET": "Significant Meteorological Information",
    "AIRMET": "Airmen Meteorological Information",
    "CB": "Cumulonimbus", "TS": "Thunderstorm", "FG": "Fog",
    "ICE": "Ice/Icing", "TURB": "Turbulence", "WIND": "Wind",
    "VIS": "Visibility", "RVR": "Runway Visual Range",

    # NOTAM types
    "NOTAM": "Notice to Air Missions", "NOTAMN": "New Notice to Air Missions",
    "NOTAMR": "Replacement Notice to Air Missions", "NOTAMC": "Cancellation Notice to Air Missions",
    "ASHTAM": "Volcanic Ash Notice", "SNOWTAM": "Snow Condition Notice",
    "BIRDTAM": "Bird Activity Notice",

    # Runway surface
    "ASPH": "Asphalt", "CONC": "Concrete", "GRS": "Grass",
    "WET": "Wet", "DRY": "Dry", "SNOW": "Snow covered",
    "ICY": "Icy", "GRVL": "Gravel", "BRKG": "Braking",

    # Direction
    "N": "North", "S": "South", "E": "East", "W": "West",
    "NE": "Northeast", "NW": "Northwest", "SE": "Southeast", "SW": "Southwest",

    # Units
    "FT": "Feet", "M": "Metres", "KT": "Knots", "KM": "Kilometres",
    "NM": "Nautical Miles", "FL": "Flight Level",
    "QNH": "Altimeter Setting",

    # Miscellaneous
    "TFC": "Traffic", "PAX": "Passengers", "CRW": "Crew",
    "EMERG": "Emergency", "SAR": "Search and Rescue",
    "MIL": "Military", "CIV": "Civil", "EXER": "Exercise", "EXERCISE": "Exercise",
    "PPR": "Prior Permission Required", "PN": "Prior Notice",
    "ABV": "Above", "BLW": "Below",
    "VIC": "Vicinity", "BCST": "Broadcast",
    "OAT": "Outside Air Temperature",
    "MAX": "Maximum", "MIN": "Minimum",
    "PSN": "Position", "COORD": "Coordinates",
    "ACAS": "Airborne Collision Avoidance System",
    "TCAS": "Traffic Collision Avoidance System",
    "EFF": "Effective", "POSS": "Possible", "EXPT": "Expect",
}
