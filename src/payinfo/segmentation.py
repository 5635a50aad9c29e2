"""Table boundary detection for pay stub reports.

Scans the raw report line by line and cuts out every region that starts at a
"Pay Details" header line and ends at the travel pay footer note.  Text outside
those regions is discarded.
"""

import logging

from payinfo.classifiers import is_table_footer, is_table_header, split_lines

logger = logging.getLogger(__name__)


def split_tables(text: str) -> list[str]:
    """Return each table region of *text* as a newline-joined block.

    Header and footer lines are kept in their block.  A header seen inside an
    open block just keeps appending, so a missing footer merges the following
    table into the current block.  A block still open at end of input is
    returned as-is and left for the record parser to accept or reject.
    """
    blocks: list[list[str]] = [[]]
    in_table = False

    for line in split_lines(text):
        if is_table_header(line):
            in_table = True

        if in_table:
            blocks[-1].append(line)

        if is_table_footer(line):
            blocks.append([])
            in_table = False

    if in_table:
        logger.debug("Table block of %d lines has no footer", len(blocks[-1]))

    # A footer with no open table leaves an empty pending block behind, as does the last footer
    tables = ["\n".join(block) for block in blocks if block]
    logger.debug("Segmented %d table blocks", len(tables))
    return tables
