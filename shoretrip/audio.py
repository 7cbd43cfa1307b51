"""Text-to-speech for audio guides and phrase practice."""

import re
import subprocess
from typing import Optional, Callable

from .config import CONFIG


class Audio:
    """Speaks text in a given language"""

    callback: Optional[Callable[[str, str], None]] = None  # Class-level observer of every utterance

    @classmethod
    def set_callback(cls, callback: Optional[Callable[[str, str], None]]):
        """Set callback function for audio events"""
        cls.callback = callback

    @staticmethod
    def find_voice(voices, lang: str):
        """First pyttsx3 voice for a language code such as "it" or "es".

        Drivers report languages as strings ("it_IT") or as espeak-style
        bytes (b"\x05it"); the voice id is checked as a last resort.
        """
        for voice in voices or []:
            for code in getattr(voice, "languages", None) or []:
                if isinstance(code, bytes):
                    code = code[1:].decode("ascii", errors="ignore")
                if str(code).lower().replace("-", "_").split("_")[0] == lang:
                    return voice
        for voice in voices or []:
            if lang in re.split(r"[^a-z]+", str(getattr(voice, "id", "")).lower()):
                return voice
        return None

    @staticmethod
    def speak(text: str, lang: Optional[str] = None):
        """Speak text using espeak (available in Termux)"""
        lang = lang or CONFIG["guide_voice"]
        if Audio.callback:
            Audio.callback(text, lang)

        try:
            subprocess.run(
                ["espeak", "-v", lang, "-s", str(CONFIG["speech_rate"]), text],
                capture_output=True,
                timeout=120
            )
        except FileNotFoundError:
            # Fallback: try pyttsx3
            try:
                import pyttsx3
                engine = pyttsx3.init()
                voice = Audio.find_voice(engine.getProperty("voices"), lang)
                if voice:
                    engine.setProperty("voice", voice.id)
                engine.say(text)
                engine.runAndWait()
            except Exception:
                print(f"[AUDIO:{lang}] {text}")
        except Exception as e:
            print(f"Audio error: {e}")
            print(f"[AUDIO:{lang}] {text}")
