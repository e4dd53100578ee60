from ..logging import get_logger
from ..set_entry import FlashcardRecord, ImportPayload, SetDescriptor
from .csv_line import split_line
from .errors import CodecError, ErrorKind


logger = get_logger("flashset.codec.csv")

MIN_COLUMNS = 8
FALLBACK_DEFAULT_LANGUAGE = "EN"
FALLBACK_TRANSLATION_LANGUAGE = "PL"

# Set Name, Description, Default Language, Translation Language,
# Content, Translation, Language, Translation Lang, Known[, Date]
COL_SET_NAME = 0
COL_DESCRIPTION = 1
COL_DEFAULT_LANGUAGE = 2
COL_TRANSLATION_LANGUAGE = 3
COL_CONTENT = 4
COL_TRANSLATION = 5
COL_LANGUAGE = 6
COL_TRANSLATION_LANG = 7
COL_KNOWN = 8


def _field(fields: list[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def _set_from_row(fields: list[str]) -> SetDescriptor:
    return SetDescriptor(
        name=fields[COL_SET_NAME],
        description=fields[COL_DESCRIPTION],
        default_language=fields[COL_DEFAULT_LANGUAGE] or FALLBACK_DEFAULT_LANGUAGE,
        translation_language=fields[COL_TRANSLATION_LANGUAGE] or FALLBACK_TRANSLATION_LANGUAGE,
    )


def _card_from_row(fields: list[str], card_set: SetDescriptor) -> FlashcardRecord:
    return FlashcardRecord(
        content=_field(fields, COL_CONTENT),
        translation=_field(fields, COL_TRANSLATION),
        language=_field(fields, COL_LANGUAGE) or card_set.default_language,
        translation_lang=_field(fields, COL_TRANSLATION_LANG) or card_set.translation_language,
        known=_field(fields, COL_KNOWN) == "true",
    )


def decode_csv(text: str) -> ImportPayload:
    """Decode an exported-set CSV document.

    The first line is a header and is never read. Set metadata is taken from
    the first data row only; later rows are expected to repeat it, but their
    first four columns are ignored. Rows without content or translation are
    dropped.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if len(lines) < 2:
        raise CodecError(ErrorKind.INVALID_CSV)

    rows = lines[1:]
    first = split_line(rows[0])
    if len(first) < MIN_COLUMNS:
        logger.debug("First data row has %d columns, %d required", len(first), MIN_COLUMNS)
        raise CodecError(ErrorKind.INSUFFICIENT_COLUMNS)

    card_set = _set_from_row(first)

    flashcards: list[FlashcardRecord] = []
    for idx, line in enumerate(rows):
        fields = first if idx == 0 else split_line(line)
        card = _card_from_row(fields, card_set)
        if not card.is_well_formed():
            logger.debug("Skipping CSV data row %d: empty content or translation", idx + 1)
            continue
        flashcards.append(card)

    logger.info(
        "Decoded CSV set '%s': %d data rows, %d flashcards",
        card_set.name,
        len(rows),
        len(flashcards),
    )
    return ImportPayload(set=card_set, flashcards=flashcards)
