"""Internationalization support for the analyzer output.

Usage:
    from machi.ui.i18n import t, set_language, translate_pattern

    set_language("en")                  # Switch to English
    t("label.shanten", n=1)             # -> "1-shanten"
    translate_pattern("chiitoitsu")     # -> "Seven Pairs"
"""


class I18n:
    """Singleton internationalization manager."""

    _lang: str = "zh"
    _translations: dict = {}
    _loaded: bool = False

    @classmethod
    def set_language(cls, lang: str):
        cls._lang = lang
        cls._load_translations()

    @classmethod
    def _load_translations(cls):
        """Load translations for the current language."""
        if cls._lang == "ja":
            from machi.ui.locales.ja import TRANSLATIONS
        elif cls._lang == "en":
            from machi.ui.locales.en import TRANSLATIONS
        else:
            from machi.ui.locales.zh import TRANSLATIONS
        cls._translations = TRANSLATIONS
        cls._loaded = True

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments."""
        if not cls._loaded:
            cls._load_translations()
        text = cls._translations.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    @classmethod
    def get_language(cls) -> str:
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    I18n.set_language(lang)


def get_language() -> str:
    return I18n.get_language()


def translate_pattern(pattern_value: str) -> str:
    """Translate a hand pattern from its romanized key to the current language."""
    return I18n.get(f"pattern.{pattern_value}")
