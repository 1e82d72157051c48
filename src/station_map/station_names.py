"""Registered VWSN station names keyed by numeric station id."""
from __future__ import annotations

from typing import Dict

MAX_STATIONS = 201
UNKNOWN_STATION = 'Unknown'

# Retired stations have no entry.
STATION_NAMES: Dict[int, str] = {
    1: "Ian Stewart Complex/Mt. Douglas High School",
    3: "Strawberry Vale Elementary School",
    4: "Oaklands Elementary School",
    5: "Cedar Hill Middle School",
    6: "Marigold Elementary School/Spectrum High School",
    7: "Campus View Elementary",
    8: "Victoria High School",
    9: "Frank Hobbs Elementary School",
    10: "MacAulay Elementary School",
    11: "James Bay Elementary School",
    12: "Victoria West Elementary School",
    13: "Shoreline Middle School",
    14: "Willows Elementary School",
    15: "Sir James Douglas Elementary School",
    16: "Tillicum Elementary School",
    17: "Eagle View Elementary School",
    18: "Torquay Elementary School",
    19: "Monterey Middle School",
    20: "Lake Hill Elementary School",
    21: "Rogers Elementary School",
    22: "Cloverdale Elementary School",
    24: "Hillcrest Elementary School",
    25: "Lansdowne Middle School",
    26: "Doncaster Elementary School",
    27: "Glanford Middle School",
    28: "Sundance Elementary School",
    29: "George Jay Elementary School",
    30: "Northridge Elementary School",
    31: "Sangster Elementary School",
    32: "Colwood Elementary School",
    33: "Reynolds High School",
    34: "Crystal View Elementary School",
    35: "David Cameron Elementary School",
    36: "Hans Helgesen Elementary School",
    37: "John Muir Elementary School",
    39: "Lakewood Elementary School",
    40: "Ruth King Elementary School",
    41: "CTV Victoria",
    42: "Butchart Gardens",
    46: "CTV Nanaimo",
    50: "Ocean Trails Resort",
    55: "Savory Elementary School",
    56: "Willway Elementary School",
    57: "Wishart Elementary School",
    58: "Dunsmuir Middle School",
    59: "Journey Middle School/Poirier Elementary School",
    60: "Esquimalt High School",
    61: "Cordova Bay Elementary School",
    62: "Deep Cove Elementary School",
    63: "Keating Elementary School",
    64: "Lochside Elementary School",
    66: "Prospect Lake Elementary School",
    67: "Sidney Elementary School",
    68: "Bayside Middle School",
    70: "Parkland Secondary School",
    71: "Cal Revelle Nature Sanctuary",
    72: "Race Rocks Ecological Reserve",
    73: "Craigflower Elementary School",
    75: "Central Middle School",
    76: "Lambrick Park High School",
    77: "McKenzie Elementary School",
    78: "SJ Willis Alternative School",
    79: "Arbutus Middle School",
    80: "Gordon Head Middle School",
    81: "Braefoot Elementary School",
    82: "Colquitz Middle School",
    83: "Winchelsea Elementary School",
    84: "Qualicum Beach Middle School",
    85: "Palsson Elementary School",
    86: "Randerson Ridge Elementary School",
    88: "PASS/Woodwinds Alternate School",
    89: "Springwood Middle School",
    90: "View Royal Elementary School",
    91: "French Creek Community School",
    92: "False Bay School",
    93: "Shawnigan Lake Museum",
    94: "Pender Islands Elementary and Secondary School",
    95: "Arrowview Elementary School",
    96: "Bowser Elementary School",
    97: "Qualicum Beach Elementary School",
    98: "Margaret Jenkins Elementary School",
    99: "East Highlands District Firehall",
    100: "District of Highlands Office",
    101: "West Highlands District Firehall",
    103: "Frances Kelsey Secondary School",
    104: "Happy Valley Elementary School",
    105: "Port Renfrew Elementary School",
    106: "Edward Milne Community School",
    107: "Millstream Elementary School",
    108: "Alberni Weather",
    109: "Brentwood Elementary School",
    110: "Nanoose Bay Elementary School",
    111: "Parksville Elementary School",
    112: "Saturna Elementary School",
    113: "Mayne Island Elementary &amp; Junior Secondary School",
    114: "Galiano Island Community School",
    115: "L'Ecole Victor Brodeur",
    117: "Salt Spring Elementary School &amp;Saltspring Middle School",
    119: "Fernwood Elementary School",
    120: "Fulford Elementary School",
    121: "Gulf Islands Secondary School",
    122: "Phoenix Elementary School",
    123: "Vancouver Island University",
    124: "Seaview Elementary School",
    125: "St. Patrick's Elementary School",
    126: "Quamichan Middle School",
    127: "Cowichan Valley Open Learning Cooperative",
    128: "John Stubbs Memorial School",
    129: "G.R. Paine Horticultural Training Centre",
    131: "Glenlyon Norfolk Junior School",
    132: "Shawnigan Lake",
    133: "Discovery Elementary School",
    134: "Swan Lake Nature House",
    136: "Pleasant Valley Elementary School",
    137: "McGirr Elementary School",
    138: "Bayview Elementary School",
    139: "L'Ecole Hammond Bay Elementary",
    140: "Uplands Park Elementary",
    141: "Mountain View Elementary",
    142: "View Royal Fire Department",
    143: "UVic Science Building",
    144: "Elizabeth Buckley School - Cridge Centre",
    145: "Chilliwack Education Centre",
    159: "Camosun College Lansdowne",
    160: "Shawnigan Lake School",
    161: "Bamfield Marine Sciences Centre",
    162: "St. Michaels University School Senior Campus",
    163: "UVic Social Sciences and Mathematics Building",
    165: "Alberni Elementary School",
    166: "Maquinna Elementary School",
    167: "Wikaninnish Community School",
    168: "Ucluelet High School",
    169: "Lighthouse Christian Academy",
    174: "Kelset Elementary School",
    176: "St. Michaels University School Junior Campus",
    177: "Ladysmith Secondary School",
    179: "Ray Watkins Elementary",
    180: "Captain Meares Elementary Secondary School",
    181: "West-Mont Montessori School",
    182: "Pacific Biological Station, DFO-MPO",
    183: "Brentwood College",
    184: "NEPTUNE Port Alberni",
    185: "Mt. Washington Alpine Resort-Nordic",
    186: "Mt. Washington Alpine Resort-Alpine",
    187: "Portage Inlet",
    188: "North Saanich Middle School",
    189: "Airport Elementary School",
    190: "Courtenay Elementary School",
    191: "Cumberland Junior Secondary School",
    192: "Denman Island Community School",
    193: "Hornby Island Community School",
    194: "Miracle Beach Elementary",
    195: "North Island Distance Education School",
    196: "Valley View Elementary School",
    197: "RASC Victoria Centre",
    199: "Trial Island Lightstation",
    200: "Longacre",
}


def get_station_name(station_id: int) -> str:
    if station_id < 0 or station_id >= MAX_STATIONS:
        return UNKNOWN_STATION
    return STATION_NAMES.get(station_id, UNKNOWN_STATION)
