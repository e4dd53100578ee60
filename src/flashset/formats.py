import json

from .codec.csv_line import join_line
from .set_entry import FlashcardRecord, ImportPayload, SetDescriptor


CSV_HEADER = [
    "Set Name",
    "Description",
    "Default Language",
    "Translation Language",
    "Content",
    "Translation",
    "Language",
    "Translation Lang",
    "Known",
    "Date",
]

SAMPLE = ImportPayload(
    set=SetDescriptor(
        name="My Set",
        description="Description",
        default_language="EN",
        translation_language="PL",
    ),
    flashcards=[
        FlashcardRecord(
            content="Hello",
            translation="Cześć",
            language="EN",
            translation_lang="PL",
            known=False,
        )
    ],
)
SAMPLE_DATE = "2024-01-01"


def sample_json() -> str:
    return json.dumps(SAMPLE.to_dict(), indent=2, ensure_ascii=False)


def sample_csv() -> str:
    """Header plus one row per sample card, set columns repeated on every row."""
    s = SAMPLE.set
    lines = [join_line(CSV_HEADER)]
    for card in SAMPLE.flashcards:
        lines.append(
            join_line([
                s.name,
                s.description,
                s.default_language,
                s.translation_language,
                card.content,
                card.translation,
                card.language,
                card.translation_lang,
                "true" if card.known else "false",
                SAMPLE_DATE,
            ])
        )
    return "\n".join(lines) + "\n"
