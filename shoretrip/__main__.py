#!/usr/bin/env python3
"""
Shore trip companion - itinerary, map, budget and guide for a cruise port day

Usage:
    python -m shoretrip [options]

Options:
    --itinerary FILE  Load the day's plan from a JSON file
    --at HH:MM        Pin the clock (preview the timeline at another time)
    --lat LAT         Current latitude (for testing without GPS)
    --lon LON         Current longitude (for testing without GPS)
    --heading DEG     Device heading (for testing without a compass)
    --gps             Read position and heading from the device (Termux)
    --playback FILE   Replay a recorded position/heading trace
    --watch           Live view; refreshes every minute and on sensor updates
    --budget          Print the budget summary
    --guide           Print the guide (summary, weather, phrases, SOS)
    --no-weather      Skip the weather fetch in the guide
    --html FILE       Write the trip map to an HTML file
    --focus ID        Center the map on one activity
    --speak ID        Read an activity's audio guide aloud
    --phrase N|WORD   Say an Italian phrase from the guide
    --add-marker NAME Save a map marker at --lat/--lon
    --list-markers    List saved map markers
    --delete-marker N Delete a saved map marker
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from .app import Companion
from .budget import budget_lines
from .config import CONFIG
from .data import (
    GPX_WAYPOINTS,
    PORT_ARRIVAL_TIME,
    PRONUNCIATIONS,
    ROMAN_WALK_TRACK_POINTS,
    SHIP_ONBOARD_TIME,
    initial_itinerary,
)
from .guide import guide_lines, port_summary
from .itinerary import find_activity, load_itinerary
from .logger import Logger
from .map_view import build_map, save_map
from .markers import MarkerDB
from .sensors import GPS, Compass, FixedHeading, FixedPosition, GPSPlayback
from .weather import WeatherFetcher, daily_forecast, hourly_forecast


def _parse_clock(text: str) -> datetime:
    try:
        pinned = datetime.strptime(text, "%H:%M")
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected HH:MM, got {text!r}")
    return datetime.now().replace(hour=pinned.hour, minute=pinned.minute,
                                  second=0, microsecond=0)


def _marker_commands(args, parser) -> bool:
    """Handle marker flags. Returns True if one was given."""
    if not (args.add_marker or args.list_markers or args.delete_marker is not None):
        return False

    markers = MarkerDB(args.db)
    logger = Logger(args.log, echo=False)
    try:
        if args.add_marker:
            if args.lat is None:
                parser.error("--add-marker requires --lat and --lon")
            marker_id = markers.add_marker(args.add_marker, args.lat, args.lon)
            print(f"Saved marker #{marker_id}: {args.add_marker}")
            logger.log("Marker added", {"id": marker_id, "name": args.add_marker,
                                        "lat": args.lat, "lon": args.lon})
        if args.delete_marker is not None:
            if markers.delete_marker(args.delete_marker):
                print(f"Deleted marker #{args.delete_marker}")
                logger.log("Marker deleted", {"id": args.delete_marker})
            else:
                print(f"No marker #{args.delete_marker}")
        if args.list_markers:
            saved = markers.get_markers()
            if not saved:
                print("No saved markers")
            for marker in saved:
                print(f"  #{marker.id:<4} {marker.name:30} {marker.lat:.5f}, {marker.lon:.5f}")
    finally:
        markers.close()
        logger.close()
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Shore trip companion - itinerary, map, budget and guide for a cruise port day"
    )
    parser.add_argument("--itinerary", metavar="FILE",
                        help="Load the itinerary from a JSON file")
    parser.add_argument("--at", type=_parse_clock, metavar="HH:MM",
                        help="Pin the clock to this time today")
    parser.add_argument("--lat", type=float, metavar="LAT",
                        help="Current latitude (for testing without GPS)")
    parser.add_argument("--lon", type=float, metavar="LON",
                        help="Current longitude (for testing without GPS)")
    parser.add_argument("--heading", type=float, metavar="DEG",
                        help="Device heading in degrees (for testing without a compass)")
    parser.add_argument("--gps", action="store_true",
                        help="Read position and heading from the device (Termux)")
    parser.add_argument("--playback", metavar="FILE",
                        help="Replay a recorded position/heading trace")
    parser.add_argument("--speed", type=float, default=1.0,
                        help="Playback speed multiplier (default: 1.0)")
    parser.add_argument("--watch", action="store_true",
                        help="Live view, refreshed every minute and on sensor updates")
    parser.add_argument("--budget", action="store_true",
                        help="Print the budget summary")
    parser.add_argument("--guide", action="store_true",
                        help="Print the guide: port summary, weather, phrases, SOS link")
    parser.add_argument("--no-weather", action="store_true",
                        help="Skip the weather fetch in the guide")
    parser.add_argument("--html", metavar="FILE",
                        help="Write the trip map to an HTML file")
    parser.add_argument("--focus", metavar="ID",
                        help="Center the map on an activity")
    parser.add_argument("--speak", metavar="ID",
                        help="Read an activity's audio guide aloud")
    parser.add_argument("--phrase", metavar="N|WORD",
                        help="Say an Italian phrase from the guide, by number or word")
    parser.add_argument("--add-marker", metavar="NAME",
                        help="Save a map marker at --lat/--lon")
    parser.add_argument("--list-markers", action="store_true",
                        help="List saved map markers")
    parser.add_argument("--delete-marker", type=int, metavar="ID",
                        help="Delete a saved map marker")
    parser.add_argument("--db", metavar="FILE", default=CONFIG["markers_db"],
                        help=f"Markers database (default: {CONFIG['markers_db']})")
    parser.add_argument("--log", metavar="FILE",
                        help="Log file path")

    args = parser.parse_args()

    # Validate lat/lon - must provide both or neither
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be used together")

    if args.playback and (args.gps or args.lat is not None):
        parser.error("--playback cannot be combined with --gps or --lat/--lon")

    # Marker edits: early exit
    if _marker_commands(args, parser):
        return

    if args.itinerary:
        if not Path(args.itinerary).exists():
            print(f"Itinerary file not found: {args.itinerary}")
            sys.exit(1)
        itinerary = load_itinerary(args.itinerary)
    else:
        itinerary = initial_itinerary()

    # Position and orientation sources
    position_source = None
    orientation_source = None
    if args.playback:
        if not Path(args.playback).exists():
            print(f"Playback file not found: {args.playback}")
            sys.exit(1)
        playback = GPSPlayback(args.playback, args.speed)
        position_source = orientation_source = playback
    elif args.gps:
        position_source = GPS()
        orientation_source = Compass()
    if args.lat is not None:
        position_source = FixedPosition(args.lat, args.lon)
    if args.heading is not None:
        orientation_source = FixedHeading(args.heading)

    companion = Companion(
        itinerary,
        onboard_time=SHIP_ONBOARD_TIME,
        log_path=args.log,
        position_source=position_source,
        orientation_source=orientation_source,
        pinned_time=args.at,
        echo_log=args.log is None and not args.watch,
    )

    if args.speak:
        if not companion.speak_guide(args.speak):
            print(f"No audio guide for: {args.speak}")
            sys.exit(1)
        companion.close()
        return

    if args.phrase:
        if not companion.speak_phrase(args.phrase):
            print(f"Unknown phrase: {args.phrase}")
            sys.exit(1)
        companion.close()
        return

    if args.watch:
        companion.run()
        return

    companion.sample_sensors()

    if args.html:
        focus = None
        if args.focus:
            act = find_activity(itinerary, args.focus)
            if not act:
                parser.error(f"unknown activity: {args.focus}")
            focus = act.coords
        markers = MarkerDB(args.db)
        try:
            user_markers = markers.get_markers()
        finally:
            markers.close()
        m = build_map(
            itinerary,
            waypoints=GPX_WAYPOINTS,
            track=ROMAN_WALK_TRACK_POINTS,
            user_location=companion.position.get(),
            focus=focus,
            user_markers=user_markers,
        )
        save_map(m, args.html)
    elif args.budget:
        print("\n".join(budget_lines(itinerary)))
    elif args.guide:
        forecast, today = [], None
        if not args.no_weather:
            data = WeatherFetcher.fetch(logger=companion.logger)
            forecast, today = hourly_forecast(data), daily_forecast(data)
        summary = port_summary(itinerary, ROMAN_WALK_TRACK_POINTS,
                               PORT_ARRIVAL_TIME, SHIP_ONBOARD_TIME)
        print("\n".join(guide_lines(summary, PRONUNCIATIONS, forecast,
                                    companion.position.get(), today)))
    else:
        print(companion.render())

    companion.close()


if __name__ == "__main__":
    main()
