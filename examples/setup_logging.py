"""Logging setup for the webim examples."""

import logging


def setup_logging(level=logging.INFO, show_rejection_counts=False):
    """
    Send webim diagnostics to stderr.

    Rejected records are reported as warnings by the mapper; per-batch
    rejection counts are debug entries and only shown on request.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)-7s %(name)s | %(message)s",
    )
    logging.getLogger("webim").setLevel(level)
    if show_rejection_counts:
        logging.getLogger("webim.backend.message_mapper").setLevel(logging.DEBUG)
