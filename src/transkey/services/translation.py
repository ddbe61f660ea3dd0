"""Translation service — holds per-locale translations and resolves keys.

The service does no locking. Load translations before handing the service
to other threads, or guard ``update_translations`` with your own lock.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from transkey.content import LocaleTranslations, Message, Replacer, Text, Translation
from transkey.errors import TranslationNotFoundError
from transkey.keys import KeyLike, TranslationKey
from transkey.locales import LocaleLike, LocaleSource
from transkey.services.reader import Root, load_all
from transkey.services.settings import Settings

log = logging.getLogger(__name__)


class TranslationService:
    """Per-locale translation store with default-locale fallback."""

    def __init__(
        self,
        default_locale: Optional[LocaleLike] = None,
        *,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        if default_locale is None:
            default_locale = self.settings["default_locale"]
        self._default: Optional[LocaleSource] = (
            LocaleSource.of(default_locale) if default_locale else None
        )
        self._translations: Dict[LocaleSource, LocaleTranslations] = {}

    # ── Store ─────────────────────────────────────────────────────

    def update_translations(
        self, translations: Iterable[LocaleTranslations], *, replace: bool = False
    ) -> None:
        """Install *translations*, swapping whole locales.

        A locale that appears again replaces its earlier entry entirely, both
        within *translations* and against what is already stored. With
        ``replace=True`` every stored locale is dropped first.
        """
        incoming: Dict[LocaleSource, LocaleTranslations] = {}
        for locale_translations in translations:
            incoming[locale_translations.locale] = locale_translations

        if replace:
            self._translations.clear()
        self._translations.update(incoming)
        log.info(
            "Updated translations for %s (%d locales loaded)",
            ", ".join(str(locale) for locale in incoming) or "no locales",
            len(self._translations),
        )
        if self._default is not None and self._default not in self._translations:
            log.warning("Default locale %s has no translations loaded", self._default)

    def clear(self) -> None:
        self._translations.clear()

    @property
    def default_locale(self) -> Optional[LocaleSource]:
        return self._default

    def set_default_locale(self, locale: Optional[LocaleLike]) -> None:
        self._default = LocaleSource.of(locale) if locale is not None else None

    @property
    def default_translations(self) -> Optional[LocaleTranslations]:
        if self._default is None:
            return None
        return self._translations.get(self._default)

    @property
    def loaded_locales(self) -> List[LocaleSource]:
        return list(self._translations)

    @property
    def loaded_translations(self) -> List[LocaleTranslations]:
        return list(self._translations.values())

    @property
    def number_of_locales(self) -> int:
        return len(self._translations)

    def __contains__(self, locale: object) -> bool:
        if not isinstance(locale, (str, LocaleSource)):
            return False
        return self.find_locale_translations(locale) is not None

    # ── Lookup ────────────────────────────────────────────────────

    def find_locale_translations(self, locale: LocaleLike) -> Optional[LocaleTranslations]:
        return self._translations.get(LocaleSource.of(locale))

    def find_locale_translations_or_default(
        self, locale: Optional[LocaleLike] = None
    ) -> Optional[LocaleTranslations]:
        if locale is not None:
            found = self.find_locale_translations(locale)
            if found is not None:
                return found
        return self.default_translations

    def _candidates(self, locale: Optional[LocaleLike]) -> List[LocaleTranslations]:
        """Requested locale first, then the default one."""
        candidates = []
        if locale is not None:
            requested = self.find_locale_translations(locale)
            if requested is not None:
                candidates.append(requested)
        default = self.default_translations
        if default is not None and all(default is not c for c in candidates):
            candidates.append(default)
        return candidates

    def find(self, key: KeyLike, locale: Optional[LocaleLike] = None) -> Optional[Translation]:
        key = TranslationKey.of(key)
        for candidate in self._candidates(locale):
            found = candidate.find(key)
            if found is not None:
                return found
        return None

    def find_text(self, key: KeyLike, locale: Optional[LocaleLike] = None) -> Optional[Text]:
        key = TranslationKey.of(key)
        for candidate in self._candidates(locale):
            found = candidate.find_text(key)
            if found is not None:
                return found
        return None

    def find_message(self, key: KeyLike, locale: Optional[LocaleLike] = None) -> Optional[Message]:
        key = TranslationKey.of(key)
        for candidate in self._candidates(locale):
            found = candidate.find_message(key)
            if found is not None:
                return found
        return None

    # ── Resolve ───────────────────────────────────────────────────

    def _replacer(self, args: tuple, kwargs: Dict[str, Any]) -> Replacer:
        prefix = self.settings["placeholder_prefix"]
        suffix = self.settings["placeholder_suffix"]
        replacer = Replacer()
        index = 0
        for arg in args:
            if isinstance(arg, Replacer):
                replacer.replacements.update(arg.replacements)
                continue
            replacer.set(f"{prefix}{index}{suffix}", arg)
            index += 1
        for name, value in kwargs.items():
            replacer.set(f"{prefix}{name}{suffix}", value)
        return replacer

    def resolve(
        self, key: KeyLike, locale: Optional[LocaleLike] = None, /, *args: Any, **kwargs: Any
    ) -> str:
        """Return the display string for *key*.

        Looks in *locale* first and falls back to the default locale. Message
        lines are joined with the configured line separator. Positional
        arguments fill ``{0}``, ``{1}``, ...; keyword arguments fill
        ``{name}``; a :class:`Replacer` argument adds its own pairs.
        *key* and *locale* are positional-only, so ``{key}`` and ``{locale}``
        can be filled by keyword.
        """
        translation = self.find(key, locale)
        if translation is None:
            raise TranslationNotFoundError(
                TranslationKey.of(key), LocaleSource.of(locale) if locale is not None else self._default
            )

        if isinstance(translation, Message):
            result = translation.join(self.settings["line_separator"])
        else:
            result = translation.content

        if args or kwargs:
            result = self._replacer(args, kwargs).apply(result)
        return result

    def __repr__(self) -> str:
        return f"TranslationService(default={self._default}, locales={self.loaded_locales})"


def fill(
    path: Root, service: TranslationService, *, settings: Optional[Settings] = None
) -> List[LocaleTranslations]:
    """Load every file under *path* into *service* and return what was loaded."""
    loaded = load_all(path, settings=settings or service.settings)
    service.update_translations(loaded)
    return loaded
