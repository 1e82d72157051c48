#!/usr/bin/env python3
"""Generate the VWSN temperature map (HTML) from the plot input file."""
from __future__ import annotations

import argparse
import math
import os
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO
from urllib.parse import quote

import pandas as pd

from station_map.readings import active_readings, load_readings
from station_map.station_names import get_station_name

INPUT_FILE = Path(os.environ.get('VWSN_INPUT_FILE', 'Plotinput.txt'))
OUTPUT_FILE = Path(os.environ.get('VWSN_OUTPUT_FILE', 'Plotoutput.html'))
MAPS_KEY = os.environ.get('VWSN_MAPS_KEY', '')

REFERENCE_LAT = 48.46104  # ECS Building
REFERENCE_LNG = -123.31153
REFERENCE_LABEL = 'ECS Building'
LOCAL_RADIUS_KM = 2.0
EARTH_RADIUS_KM = 6371.0

# Field capacities of the marker record; values must stay strictly shorter.
MAX_NAME_LENGTH = 100
MAX_TEXT_LENGTH = 1000

MARKER_ICONS = {
    'red': 'http://maps.google.com/mapfiles/ms/icons/red-dot.png',
    'green': 'http://maps.google.com/mapfiles/ms/icons/green-dot.png',
    'blue': 'http://maps.google.com/mapfiles/ms/icons/blue-dot.png',
    'purple': 'http://maps.google.com/mapfiles/ms/icons/purple-dot.png',
    'yellow': 'http://maps.google.com/mapfiles/ms/icons/yellow-dot.png',
}


class NoActiveReadingsError(RuntimeError):
    """Raised when no station reported a non-zero temperature."""


class MarkerError(RuntimeError):
    """Raised when a marker cannot be written without corrupting the page."""


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = abs(phi1 - phi2)
    d_lam = abs(math.radians(lng1) - math.radians(lng2))
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lam / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.asin(math.sqrt(min(a, 1.0)))


def population_mean(df: pd.DataFrame) -> float:
    """Mean temperature of the active stations.

    The sum runs over every parsed record while only non-zero records are
    counted; zero temperatures add nothing, so this equals the active mean.
    """
    active_count = int((df['temperature'] != 0).sum())
    if active_count == 0:
        raise NoActiveReadingsError('No data: no station reported a non-zero temperature')
    return float(df['temperature'].sum()) / active_count


def localized_mean(
    df: pd.DataFrame,
    lat: float = REFERENCE_LAT,
    lng: float = REFERENCE_LNG,
    radius_km: float = LOCAL_RADIUS_KM,
) -> Optional[float]:
    active = active_readings(df)
    if active.empty:
        return None
    distances = active.apply(
        lambda row: haversine_km(lat, lng, row['latitude'], row['longitude']),
        axis=1,
    )
    nearby = active[distances <= radius_km]
    if nearby.empty:
        return None
    return float(nearby['temperature'].mean())


def classify_delta(delta: float) -> str:
    if delta < -1:
        return 'blue'
    elif delta < 0:
        return 'green'
    elif delta < 1:
        return 'yellow'
    return 'red'


def build_station_markers(df: pd.DataFrame, mean: float) -> List[Dict]:
    markers = []
    for row in active_readings(df).to_dict(orient='records'):
        name = get_station_name(int(row['station_id']))
        stamp = f"({row['hour']}:{row['minute']} {row['month']}/{row['day']}/{row['year']})"
        markers.append(
            {
                'lat': float(row['latitude']),
                'lng': float(row['longitude']),
                'name': name,
                'text': f"<b>{name}</b>: {row['temperature']:1.2f} degrees {stamp}",
                'markerClass': classify_delta(row['temperature'] - mean),
            }
        )
    return markers


def build_reference_marker(mean: Optional[float]) -> Dict:
    if mean is None:
        text = f"<b>{REFERENCE_LABEL}</b>: no stations within {LOCAL_RADIUS_KM:.1f} km"
    else:
        text = f"<b>{REFERENCE_LABEL}</b>: {mean:1.2f} degrees"
    return {
        'lat': REFERENCE_LAT,
        'lng': REFERENCE_LNG,
        'name': REFERENCE_LABEL,
        'text': text,
        'markerClass': 'purple',
    }


def escape_js_string(value: str) -> str:
    return value.replace('\\', '\\\\').replace("'", "\\'")


def _maps_script_src() -> str:
    src = 'http://maps.googleapis.com/maps/api/js?sensor=true'
    if MAPS_KEY:
        src += f'&key={quote(MAPS_KEY, safe="")}'
    return src


PROLOGUE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta name="viewport" content="initial-scale=1.0, user-scalable=no" />
<style type="text/css">
  html { height: 100% }
  body { height: 100%; margin: 0; padding: 0 }
  #map_canvas { height: 100% }
</style>
<script type="text/javascript"
    src="__VWSN_MAPS_SRC__">
</script>
<script type="text/javascript">
  function initialize() {
    var latlng = new google.maps.LatLng(48.447,236.643);
    var myOptions = {
      zoom: 13,
      center: latlng,
      mapTypeId: google.maps.MapTypeId.ROADMAP
    };
    var map = new google.maps.Map(document.getElementById("map_canvas"),
             myOptions);
"""

EPILOGUE = """  }
</script>
</head>
<body onload="initialize()">
  <div id="map_canvas" style="width:100%; height:100%"></div>
</body>
</html>
"""


def write_prologue(f: Optional[TextIO]) -> None:
    if f is None:
        raise MarkerError('write_prologue error: output file is None')
    f.write(PROLOGUE_TEMPLATE.replace('__VWSN_MAPS_SRC__', _maps_script_src()))


def write_epilogue(f: Optional[TextIO]) -> None:
    if f is None:
        raise MarkerError('write_epilogue error: output file is None')
    f.write(EPILOGUE)


def _check_field(marker: Dict, key: str, capacity: int) -> str:
    value = marker.get(key)
    if not isinstance(value, str) or '\x00' in value or len(value) >= capacity:
        raise MarkerError(f'write_point error: marker {key} is not a valid string')
    return value


def write_point(f: Optional[TextIO], marker: Optional[Dict], marker_num: int) -> None:
    if f is None:
        raise MarkerError('write_point error: output file is None')
    if marker is None:
        raise MarkerError('write_point error: marker is None')
    name = _check_field(marker, 'name', MAX_NAME_LENGTH)
    text = _check_field(marker, 'text', MAX_TEXT_LENGTH)
    icon = MARKER_ICONS.get(marker.get('markerClass'))
    if icon is None:
        raise MarkerError(f"write_point error: invalid marker class {marker.get('markerClass')!r}")
    f.write(f"\tvar iw{marker_num} = new google.maps.InfoWindow({{content: '{escape_js_string(text)}'}});\n")
    f.write(
        f"\tvar marker{marker_num} = new google.maps.Marker({{position: new google.maps.LatLng("
        f"{marker['lat']:f},{marker['lng']:f}), map: map, title: '{escape_js_string(name)}', icon: '{icon}'}});\n"
    )
    f.write(
        f"\tgoogle.maps.event.addListener(marker{marker_num}, 'click', "
        f"function(){{ iw{marker_num}.open(map,marker{marker_num}); }} );\n"
    )


def render_station_map(markers: Iterable[Optional[Dict]], f: Optional[TextIO]) -> int:
    write_prologue(f)
    count = 0
    for marker_num, marker in enumerate(markers):
        write_point(f, marker, marker_num)
        count += 1
    write_epilogue(f)
    return count


def _display_path(path: Path) -> Path:
    try:
        return path.resolve().relative_to(Path.cwd())
    except ValueError:
        return path


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Plot VWSN station temperatures on a Google map.')
    parser.add_argument('input', nargs='?', default=str(INPUT_FILE), help='Station readings file')
    parser.add_argument('output', nargs='?', default=str(OUTPUT_FILE), help='HTML file to write')
    args = parser.parse_args(argv)
    input_path = Path(args.input)
    output_path = Path(args.output)

    try:
        df = load_readings(input_path)
    except OSError:
        print(f"File {input_path} cannot be opened", file=sys.stderr)
        return 1

    try:
        mean = population_mean(df)
    except NoActiveReadingsError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    local_mean = localized_mean(df)
    markers = build_station_markers(df, mean) + [build_reference_marker(local_mean)]
    local_text = 'n/a' if local_mean is None else f'{local_mean:.2f}'
    print(f"{len(markers) - 1} active stations, mean {mean:.2f}, {REFERENCE_LABEL} {local_text}")

    try:
        handle = output_path.open('w', encoding='utf-8')
    except OSError:
        print(f"File {output_path} cannot be opened", file=sys.stderr)
        return 1
    with handle:
        try:
            render_station_map(markers, handle)
        except MarkerError as exc:
            print(str(exc), file=sys.stderr)
            return 1
    print(f"✔️  Wrote {_display_path(output_path)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
