"""
Message translation for turn instructions.

A ``Translation`` maps message keys to ``str.format`` templates with positional
fields (``"turn {0} onto {1}"``). The guidance code only ever asks for keys and
never builds language-specific text itself.
"""

import warnings
from typing import Dict, Mapping, Optional

# English defaults for every key the turn-description policy uses
DEFAULT_EN: Dict[str, str] = {
    "finish": "finish!",
    "stopover": "stopover {0}",
    "continue": "continue",
    "continue_onto": "continue onto {0}",
    "turn": "turn {0}",
    "turn_onto": "turn {0} onto {1}",
    "sharp_left": "sharp left",
    "left": "left",
    "slight_left": "slight left",
    "slight_right": "slight right",
    "right": "right",
    "sharp_right": "sharp right",
}


class Translation:
    """
    Message table for a single locale.

    Keys are case-insensitive. A missing key emits a ``UserWarning`` and
    returns the key itself, so a gap in a locale file degrades the text
    instead of breaking the route.

    Parameters
    ----------
    messages : mapping of str to str
        Key to template. Templates use ``str.format`` positional fields.
    locale : str, default='en'
        Locale tag, informational only.

    Examples
    --------
    >>> tr = Translation(DEFAULT_EN)
    >>> tr.tr("turn_onto", tr.tr("left"), "Oak Ave")
    'turn left onto Oak Ave'
    """

    def __init__(self, messages: Mapping[str, str], locale: str = "en"):
        self.locale = locale
        self._messages = {k.lower(): v for k, v in messages.items()}

    def tr(self, key: str, *args) -> str:
        template = self._messages.get(key.lower())
        if not template:
            warnings.warn(f"No translation for key '{key}' in locale '{self.locale}'.")
            return key
        return template.format(*args)

    def __contains__(self, key):
        return key.lower() in self._messages

    def __repr__(self):
        return f"Translation(locale={self.locale!r}, keys={len(self._messages)})"


class TranslationMap:
    """
    Translations for several locales with fallback.

    ``get()`` matches the full tag first (``de_AT``), then the language part
    (``de``), then the fallback locale.
    """

    def __init__(self, fallback: str = "en"):
        self.fallback = fallback
        self._translations: Dict[str, Translation] = {}
        if fallback == "en":
            self.add(Translation(DEFAULT_EN, locale="en"))

    def add(self, translation: Translation) -> "TranslationMap":
        self._translations[_normalize_locale(translation.locale)] = translation
        return self

    def get(self, locale: Optional[str] = None) -> Translation:
        if locale:
            key = _normalize_locale(locale)
            if key in self._translations:
                return self._translations[key]
            lang = key.split("_")[0]
            if lang in self._translations:
                return self._translations[lang]
        try:
            return self._translations[_normalize_locale(self.fallback)]
        except KeyError:
            raise ValueError(f"No translation registered for fallback locale '{self.fallback}'.") from None

    def locales(self):
        return sorted(self._translations)


def _normalize_locale(locale: str) -> str:
    return locale.replace("-", "_").lower()


def default_translation() -> Translation:
    """English translation with the built-in message table."""
    return Translation(DEFAULT_EN, locale="en")
