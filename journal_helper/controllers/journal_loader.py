# journal_helper/controllers/journal_loader.py
from __future__ import annotations

import logging
from pathlib import Path

from journal_helper.data_model import Journal
from journal_helper.data_model.parsers_emitters import JournalParserEmitter
from journal_helper.utilities.core_util import open_for_read

log = logging.getLogger(__name__)


def parse_journal_text(text: str) -> Journal:
    """Parse the full text of a journal."""
    return JournalParserEmitter().parse(text)


def load_journal(path: Path, encoding: str = "utf-8") -> Journal:
    """
    Read and parse the journal file at ``path``.

    The whole file is read into memory before parsing. Parse errors propagate
    unchanged; see ``parse_journal``.
    """
    path = Path(path)
    log.info("Loading journal: %s", path)
    with open_for_read(path=path, encoding=encoding) as f:
        text = f.read()
    journal = parse_journal_text(text)
    log.debug("Loaded %d transactions from %s", len(journal.transactions), path)
    return journal


def save_journal(journal: Journal, path: Path, encoding: str = "utf-8") -> None:
    """Write ``journal`` to ``path`` in canonical journal text."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=encoding, newline="\n") as f:
        f.write(JournalParserEmitter().emit(journal))
    log.info("Wrote %d transactions to %s", len(journal.transactions), path)
