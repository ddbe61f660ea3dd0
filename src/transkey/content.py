"""Translation content: texts, multi-line messages and per-locale maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from transkey.keys import KeyLike, TranslationKey
from transkey.locales import LocaleSource


class Replacer:
    """Ordered placeholder -> replacement pairs applied by literal substitution."""

    def __init__(self, replacements: Optional[Mapping[str, Any]] = None):
        self.replacements: Dict[str, str] = {}
        for placeholder, value in (replacements or {}).items():
            self.set(placeholder, value)

    def set(self, placeholder: str, value: Any) -> Replacer:
        self.replacements[placeholder] = str(value)
        return self

    def apply(self, text: str) -> str:
        for placeholder, value in self.replacements.items():
            # Pairs with an empty placeholder or value are skipped
            if placeholder and value:
                text = text.replace(placeholder, value)
        return text

    def __bool__(self) -> bool:
        return bool(self.replacements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Replacer):
            return NotImplemented
        return self.replacements == other.replacements

    def __repr__(self) -> str:
        return f"Replacer({self.replacements!r})"


@dataclass(frozen=True)
class Text:
    """A single non-blank translation string."""
    content: str

    def __post_init__(self):
        if not isinstance(self.content, str) or not self.content.strip():
            raise ValueError("Text content must be a non-blank string")

    def replace(self, field: str, value: Any) -> Text:
        if not field or value is None or str(value) == "" or field not in self.content:
            return self
        return Text(self.content.replace(field, str(value)))

    def replace_all(self, values: Union[Replacer, Mapping[str, Any]]) -> Text:
        replacer = values if isinstance(values, Replacer) else Replacer(values)
        if not replacer:
            return self
        content = replacer.apply(self.content)
        if content == self.content:
            return self
        return Text(content)

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True)
class Message:
    """An ordered, non-empty sequence of lines."""
    lines: Tuple[str, ...]

    def __post_init__(self):
        lines = tuple(self.lines)
        if not lines:
            raise ValueError("Message must have at least one line")
        if not all(isinstance(line, str) for line in lines):
            raise ValueError("Message lines must be strings")
        object.__setattr__(self, "lines", lines)

    def join(self, separator: str = "\n") -> str:
        return separator.join(self.lines)

    def replace(self, field: str, value: Any) -> Message:
        if not field or value is None or str(value) == "":
            return self
        if not any(field in line for line in self.lines):
            return self
        return Message(tuple(line.replace(field, str(value)) for line in self.lines))

    def replace_all(self, values: Union[Replacer, Mapping[str, Any]]) -> Message:
        replacer = values if isinstance(values, Replacer) else Replacer(values)
        if not replacer:
            return self
        lines = tuple(replacer.apply(line) for line in self.lines)
        if lines == self.lines:
            return self
        return Message(lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return self.join()


Translation = Union[Text, Message]


@dataclass(frozen=True)
class LocaleTranslations:
    """All texts and messages read from one translation file."""
    locale: LocaleSource
    texts: Mapping[TranslationKey, Text] = field(default_factory=dict)
    messages: Mapping[TranslationKey, Message] = field(default_factory=dict)

    def __post_init__(self):
        texts = dict(self.texts)
        messages = dict(self.messages)
        both = texts.keys() & messages.keys()
        if both:
            names = ", ".join(sorted(str(k) for k in both))
            raise ValueError(f"Keys present as both text and message: {names}")
        object.__setattr__(self, "texts", MappingProxyType(texts))
        object.__setattr__(self, "messages", MappingProxyType(messages))

    @classmethod
    def from_flat(
        cls, locale: LocaleSource, mapping: Mapping[TranslationKey, Translation]
    ) -> LocaleTranslations:
        """Partition a flattened map into texts and messages."""
        texts: Dict[TranslationKey, Text] = {}
        messages: Dict[TranslationKey, Message] = {}
        for key, value in mapping.items():
            if isinstance(value, Message):
                messages[key] = value
            elif isinstance(value, Text):
                texts[key] = value
            else:
                raise TypeError(f"Unsupported translation for {key}: {type(value).__name__}")
        return cls(locale, texts, messages)

    def find_text(self, key: KeyLike) -> Optional[Text]:
        return self.texts.get(TranslationKey.of(key))

    def find_message(self, key: KeyLike) -> Optional[Message]:
        return self.messages.get(TranslationKey.of(key))

    def find(self, key: KeyLike) -> Optional[Translation]:
        key = TranslationKey.of(key)
        found = self.texts.get(key)
        if found is None:
            found = self.messages.get(key)
        return found

    def keys(self) -> List[TranslationKey]:
        return [*self.texts.keys(), *self.messages.keys()]

    @property
    def number_of_texts(self) -> int:
        return len(self.texts)

    @property
    def number_of_messages(self) -> int:
        return len(self.messages)

    def to_tree(self) -> Dict[str, Union[str, List[str]]]:
        """Return the already-flat plain structure, suitable for re-flattening."""
        tree: Dict[str, Union[str, List[str]]] = {}
        for key, text in self.texts.items():
            tree[key.value] = text.content
        for key, message in self.messages.items():
            tree[key.value] = list(message.lines)
        return tree

    def __contains__(self, key: object) -> bool:
        try:
            return self.find(key) is not None  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __len__(self) -> int:
        return len(self.texts) + len(self.messages)
