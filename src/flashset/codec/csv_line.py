"""Single-line CSV tokenizing for the set import format.

Only what a one-line record needs: commas split fields, double quotes group
them and ``""`` inside a quoted span is a literal quote. Every field comes
back trimmed. Quotes are never checked for balance; an unterminated span
simply runs to the end of the line.
"""

import csv
import io

QUOTE = '"'
SEPARATOR = ","


def split_line(line: str) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    i = 0
    while i < len(line):
        char = line[i]
        if char == QUOTE:
            if in_quotes and line[i + 1 : i + 2] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == SEPARATOR and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def join_line(fields: list[str]) -> str:
    """Write one record with minimal quoting, the inverse of ``split_line``.

    Surrounding whitespace is not preserved: ``split_line`` trims every field.
    """
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="").writerow(fields)
    return buffer.getvalue()
