from dataclasses import dataclass, field
from typing import Any


@dataclass
class SetDescriptor:
    name: str
    description: str = ""
    default_language: str = ""
    translation_language: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "defaultLanguage": self.default_language,
            "translationLanguage": self.translation_language,
        }


@dataclass
class FlashcardRecord:
    content: str
    translation: str
    language: str = ""
    translation_lang: str = ""
    known: bool = False

    def is_well_formed(self) -> bool:
        """Both sides must carry text once surrounding whitespace is gone."""
        return bool(self.content.strip()) and bool(self.translation.strip())

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "translation": self.translation,
            "language": self.language,
            "translationLang": self.translation_lang,
            "known": self.known,
        }


@dataclass
class ImportPayload:
    set: SetDescriptor
    flashcards: list[FlashcardRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "set": self.set.to_dict(),
            "flashcards": [card.to_dict() for card in self.flashcards],
        }


@dataclass
class SetRecord:
    """A set as stored by the backend, carrying its server-assigned id."""

    id: str
    name: str
    description: str = ""
    default_language: str = ""
    translation_language: str = ""
    owner: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SetRecord":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            description=data.get("description") or "",
            default_language=data.get("defaultLanguage") or "",
            translation_language=data.get("translationLanguage") or "",
            owner=data.get("owner") or "",
        )
