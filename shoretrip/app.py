"""Main companion application: live timeline driven by clock, GPS and compass."""

import queue
import sys
import threading
import time
from datetime import datetime
from typing import Optional

from .audio import Audio
from .config import CONFIG
from .data import PRONUNCIATIONS
from .engine import build_activity_views
from .geo import bearing_to_compass
from .guide import find_phrase, speak_phrase
from .itinerary import find_activity, toggle_complete
from .logger import Logger
from .models import Activity, ActivityView, Coordinate
from .sensors import LatestValue
from .ticker import PeriodicTask, watch_position, listen_orientation
from .timeutils import format_countdown


def progress_bar(percent: float, width: int = 20) -> str:
    filled = int(round(percent / 100 * width))
    return "[" + "#" * filled + "." * (width - filled) + "]"


def format_view(view: ActivityView) -> list[str]:
    """Text lines for one activity (and the gap before it)"""
    act = view.activity
    lines = []
    if view.gap:
        kind = "free time" if view.gap.kind == "free" else "transfer"
        lines.append(f"   : {view.gap.label} {kind} {progress_bar(view.gap.progress, 10)}")
        lines.append("   :")

    check = "[x]" if act.completed else "[ ]"
    flag = "  !! CRITICAL" if act.is_critical else ""
    lines.append(f"{check} {act.start_time}-{act.end_time} ({view.duration})  {act.title}{flag}")
    lines.append(f"    {progress_bar(view.progress)} {view.progress:3.0f}%  {act.location_name}")

    if view.distance is not None:
        if view.arrived:
            lines.append(f"    {view.distance}  ARRIVED")
        else:
            compass = bearing_to_compass(view.bearing)
            lines.append(
                f"    {view.distance}  {compass} ({view.bearing:.0f}°), "
                f"turn arrow {view.arrow_rotation:+.0f}°"
            )
    if act.contingency_note:
        lines.append(f"    CONTINGENCY: {act.contingency_note}")
    return lines


class Companion:
    """Main application"""

    def __init__(self, itinerary: list[Activity],
                 onboard_time: Optional[str] = None,
                 log_path: Optional[str] = None,
                 position_source=None,
                 orientation_source=None,
                 pinned_time: Optional[datetime] = None,
                 echo_log: bool = True):
        self.itinerary = itinerary
        self.onboard_time = onboard_time or CONFIG["onboard_time"]
        self.logger = Logger(log_path, echo=echo_log)
        self.position_source = position_source
        self.orientation_source = orientation_source
        self.pinned_time = pinned_time

        # Latest sensor readings, one writer each
        self.ticks: LatestValue[int] = LatestValue(0)
        self.position: LatestValue[Coordinate] = LatestValue()
        self.heading: LatestValue[float] = LatestValue()

        self.subscriptions: list[PeriodicTask] = []
        self.commands: "queue.Queue[str]" = queue.Queue()
        self._dirty = threading.Event()
        self.last_log_update = 0.0

    def now(self) -> datetime:
        if self.pinned_time:
            return self.pinned_time
        return datetime.now()

    def views(self) -> list[ActivityView]:
        return build_activity_views(
            self.itinerary, self.now(), self.position.get(), self.heading.get()
        )

    def get_state(self) -> dict:
        """Get current state as dict for logging"""
        state = {
            "time": self.now().strftime("%H:%M"),
            "ticks": self.ticks.get(),
            "heading": self.heading.get(),
            "completed": [a.id for a in self.itinerary if a.completed],
        }
        location = self.position.get()
        if location:
            state["location"] = location.to_dict()
        if self.position_source is not None and hasattr(self.position_source, "get_status"):
            state["gps_status"] = self.position_source.get_status()
        return state

    # Sensor and clock callbacks. Each only writes its own cell and flags a redraw.

    def on_tick(self):
        self.ticks.set(self.ticks.get() + 1)
        self._dirty.set()
        now = time.time()
        if now - self.last_log_update >= CONFIG["log_interval"]:
            self.logger.log("STATE", self.get_state())
            self.last_log_update = now

    def on_position(self):
        self._dirty.set()

    def on_position_error(self):
        status = "unknown"
        if hasattr(self.position_source, "get_status"):
            status = self.position_source.get_status()
        self.logger.log("GPS fix failed", {"status": status})

    def on_heading(self):
        self._dirty.set()

    def on_playback_finished(self):
        self.logger.log("Playback finished", self.get_state())
        self._dirty.set()

    def start(self):
        """Acquire the clock tick, position watch and orientation listener"""
        if self.subscriptions:
            return
        self.subscriptions.append(PeriodicTask(CONFIG["tick_interval"], self.on_tick, name="clock"))
        if self.position_source is not None:
            self.subscriptions.append(watch_position(
                self.position_source, self.position, CONFIG["gps_poll_interval"],
                on_update=self.on_position, on_error=self.on_position_error,
                on_finished=self.on_playback_finished,
            ))
        if self.orientation_source is not None:
            self.subscriptions.append(listen_orientation(
                self.orientation_source, self.heading, CONFIG["compass_poll_interval"],
                on_update=self.on_heading,
            ))
        for task in self.subscriptions:
            task.start()
        self.logger.log("Subscriptions started", {"tasks": [t.name for t in self.subscriptions]})

    def stop(self):
        """Release every subscription acquired by start()"""
        for task in self.subscriptions:
            task.cancel(timeout=5)
        if self.subscriptions:
            self.logger.log("Subscriptions released", {"tasks": [t.name for t in self.subscriptions]})
        self.subscriptions = []

    def close(self):
        self.stop()
        self.logger.close()

    def __enter__(self) -> "Companion":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def sample_sensors(self):
        """Take one reading from each source without starting subscriptions"""
        if self.position_source is not None:
            location = self.position_source.get_location()
            if location:
                self.position.set(location)
        if self.orientation_source is not None:
            heading = self.orientation_source.get_heading()
            if heading is not None:
                self.heading.set(heading)

    def toggle_complete(self, activity_id: str) -> Optional[Activity]:
        act = toggle_complete(self.itinerary, activity_id)
        if act:
            self.logger.log("Toggled completion", {"activity": act.id, "completed": act.completed})
            self._dirty.set()
        return act

    def speak_guide(self, activity_id: str) -> bool:
        act = find_activity(self.itinerary, activity_id)
        if not act or not act.audio_guide_text:
            return False
        self.logger.log("Playing audio guide", {"activity": act.id})
        Audio.speak(act.audio_guide_text, CONFIG["guide_voice"])
        return True

    def speak_phrase(self, key: str) -> bool:
        """Say an Italian phrase, picked by number or by word"""
        item = find_phrase(PRONUNCIATIONS, key)
        if not item:
            return False
        self.logger.log("Speaking phrase", {"word": item.word})
        speak_phrase(item)
        return True

    def render(self) -> str:
        now = self.now()
        lines = [
            f"=== Shore day {now.strftime('%H:%M')} | all aboard {self.onboard_time} "
            f"in {format_countdown(self.onboard_time, now)} ===",
        ]
        if self.position.get() is None:
            lines.append("(no GPS fix: distances hidden)")
        elif self.heading.get() is None:
            lines.append("(no compass: arrows relative to north)")
        lines.append("")
        for view in self.views():
            lines.extend(format_view(view))
            lines.append("")
        return "\n".join(lines)

    def handle_command(self, line: str) -> bool:
        """Apply one interactive command. Returns False to quit."""
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return True
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        if cmd in ("q", "quit"):
            return False
        elif cmd == "done":
            if not self.toggle_complete(arg):
                print(f"Unknown activity: {arg}")
        elif cmd == "speak":
            if not self.speak_guide(arg):
                print(f"No audio guide for: {arg}")
        elif cmd == "say":
            if not self.speak_phrase(arg):
                print(f"Unknown phrase: {arg}")
        else:
            print("Commands: done <id>, speak <id>, say <phrase #>, q")
        return True

    def _read_stdin(self):
        for line in sys.stdin:
            self.commands.put(line)
        self.commands.put("q")

    def run(self):
        """Run the live view until 'q' or Ctrl+C"""
        print("Commands: done <id>, speak <id>, say <phrase #>, q")
        reader = threading.Thread(target=self._read_stdin, name="stdin", daemon=True)
        reader.start()
        self.start()
        self._dirty.set()
        try:
            running = True
            while running:
                if self._dirty.wait(timeout=0.2):
                    self._dirty.clear()
                    print(self.render())
                while running and not self.commands.empty():
                    running = self.handle_command(self.commands.get())
        except KeyboardInterrupt:
            print("\nStopped")
            self.logger.log("Interrupted by user")
        finally:
            self.logger.log("Session summary", self.get_state())
            self.close()
