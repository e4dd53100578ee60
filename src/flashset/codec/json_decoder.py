import json
from typing import Any

from ..logging import get_logger
from ..set_entry import FlashcardRecord, ImportPayload, SetDescriptor
from .errors import CodecError, ErrorKind


logger = get_logger("flashset.codec.json")


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _card_from_dict(data: dict[str, Any]) -> FlashcardRecord:
    return FlashcardRecord(
        content=_text(data, "content"),
        translation=_text(data, "translation"),
        language=_text(data, "language"),
        translation_lang=_text(data, "translationLang"),
        known=data.get("known") is True,
    )


def decode_json(text: str) -> ImportPayload:
    """Decode a JSON set document.

    Cards are taken as written; unlike CSV rows they get no language
    fallback from the set. Entries that are not objects are skipped and
    non-string fields read as empty.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        logger.debug("Unparsable JSON: %s", exc)
        raise CodecError(ErrorKind.INVALID_JSON) from exc

    raw_set = data.get("set") if isinstance(data, dict) else None
    if not isinstance(raw_set, dict) or not _text(raw_set, "name"):
        raise CodecError(ErrorKind.MISSING_SET_INFO)

    raw_cards = data.get("flashcards", [])
    if raw_cards is None:
        raw_cards = []
    if not isinstance(raw_cards, list):
        raise CodecError(ErrorKind.INVALID_JSON, "'flashcards' must be a list")

    card_set = SetDescriptor(
        name=_text(raw_set, "name"),
        description=_text(raw_set, "description"),
        default_language=_text(raw_set, "defaultLanguage"),
        translation_language=_text(raw_set, "translationLanguage"),
    )
    flashcards: list[FlashcardRecord] = []
    for idx, item in enumerate(raw_cards):
        if not isinstance(item, dict):
            logger.debug("Skipping flashcard entry %d: not an object", idx + 1)
            continue
        flashcards.append(_card_from_dict(item))

    logger.info("Decoded JSON set '%s' with %d flashcards", card_set.name, len(flashcards))
    return ImportPayload(set=card_set, flashcards=flashcards)
