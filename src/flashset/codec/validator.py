from ..logging import get_logger
from ..set_entry import ImportPayload
from .errors import CodecError, ErrorKind


logger = get_logger("flashset.codec.validator")


def validate_payload(payload: ImportPayload) -> ImportPayload:
    """Final check before a decoded payload may be submitted.

    Returns a new payload holding only well-formed flashcards. An empty set
    of cards is valid; a set without a name is not.
    """
    if payload.set is None or not payload.set.name.strip():
        raise CodecError(ErrorKind.MISSING_SET_INFO)

    kept = [card for card in payload.flashcards if card.is_well_formed()]
    if len(kept) != len(payload.flashcards):
        logger.info(
            "Dropped %d malformed flashcards from set '%s'",
            len(payload.flashcards) - len(kept),
            payload.set.name,
        )
    return ImportPayload(set=payload.set, flashcards=kept)
