"""Import and export of bilingual flashcard sets (JSON and CSV)."""

__version__ = "0.1.0"
