"""Interactive map of the day: stops, GPX waypoints, walking track and user markers.

Writes a standalone folium/Leaflet HTML page.
"""

import html
import os
import webbrowser
from typing import Iterable, Optional, Sequence

import folium
from folium import plugins

from .config import CONFIG
from .models import Activity, Coordinate, Waypoint

TRACK_COLOR = "#991B1B"


def navigation_url(act: Activity) -> str:
    """Link that opens turn-by-turn directions to the activity"""
    if act.google_maps_url:
        return act.google_maps_url
    return (
        "https://www.google.com/maps/dir/?api=1"
        f"&destination={act.coords.lat},{act.coords.lon}"
    )


def activity_popup(act: Activity) -> str:
    popup = (
        f"<b>{html.escape(act.title)}</b><br>"
        f"<i>{html.escape(act.location_name)}</i><br>"
        f"{act.start_time} - {act.end_time}<br>"
        f"{html.escape(act.description)}<br>"
        f'<a href="{html.escape(navigation_url(act))}" target="_blank">Directions</a>'
    )
    if act.audio_guide_text:
        popup += f"<br>Audio guide: python -m shoretrip --speak {html.escape(act.id)}"
    return popup


def build_map(itinerary: Sequence[Activity],
              waypoints: Iterable[Waypoint] = (),
              track: Sequence[tuple[float, float]] = (),
              user_location: Optional[Coordinate] = None,
              focus: Optional[Coordinate] = None,
              user_markers: Iterable[Waypoint] = ()) -> folium.Map:
    """Build the trip map; ``focus`` centers it on one point at street zoom"""
    if focus:
        center, zoom = [focus.lat, focus.lon], CONFIG["focus_zoom"]
    else:
        center, zoom = list(CONFIG["map_center"]), CONFIG["map_zoom"]

    m = folium.Map(location=center, zoom_start=zoom, tiles=None)
    folium.TileLayer("OpenStreetMap", name="OpenStreetMap").add_to(m)
    folium.TileLayer("CartoDB positron", name="Light").add_to(m)

    stops_group = folium.FeatureGroup(name="Itinerary", show=True)
    for act in itinerary:
        if act.is_critical:
            color = "red"
        elif act.completed:
            color = "green"
        else:
            color = "darkred"
        folium.Marker(
            [act.coords.lat, act.coords.lon],
            tooltip=act.title,
            popup=folium.Popup(activity_popup(act), max_width=260),
            icon=folium.Icon(color=color, icon="ok-sign" if act.completed else "map-marker"),
        ).add_to(stops_group)
    stops_group.add_to(m)

    waypoints_group = folium.FeatureGroup(name="Walk waypoints", show=True)
    for wpt in waypoints:
        folium.CircleMarker(
            location=[wpt.lat, wpt.lon],
            radius=6,
            color="#ffffff",
            weight=2,
            fill=True,
            fill_color=TRACK_COLOR,
            fill_opacity=0.8,
            popup=folium.Popup(html.escape(wpt.name), max_width=200),
        ).add_to(waypoints_group)
    waypoints_group.add_to(m)

    if track:
        folium.PolyLine(
            [list(p) for p in track],
            color=TRACK_COLOR,
            weight=4,
            opacity=0.7,
            dash_array="8, 12",
            tooltip="Roman walk",
        ).add_to(m)

    markers_group = folium.FeatureGroup(name="My markers", show=True)
    for marker in user_markers:
        folium.Marker(
            [marker.lat, marker.lon],
            tooltip=marker.name,
            popup=folium.Popup(f"#{marker.id} {html.escape(marker.name)}", max_width=200),
            icon=folium.Icon(color="orange", icon="star"),
        ).add_to(markers_group)
    markers_group.add_to(m)

    if user_location:
        folium.CircleMarker(
            location=[user_location.lat, user_location.lon],
            radius=8,
            color="white",
            weight=3,
            fill=True,
            fill_color="#3b82f6",
            fill_opacity=1,
            popup="You are here",
        ).add_to(m)

    folium.LayerControl().add_to(m)
    plugins.Fullscreen().add_to(m)
    return m


def save_map(m: folium.Map, output_path: str, open_browser: bool = True) -> str:
    """Write the map to HTML and optionally open it. Returns the absolute path."""
    m.save(output_path)
    abs_path = os.path.abspath(output_path)
    print(f"Map saved to: {abs_path}")
    if open_browser:
        webbrowser.open(f"file://{abs_path}")
    return abs_path
