"""Payment status policy for work records."""

from ledger_dashboard.domain.constants import STATUS_PAID, STATUS_PENDING


def classify_work_status(note: str) -> str:
    """Return the payment status described by a work note.

    Args:
        note: Free-text note from the works sheet.

    Returns:
        str: ``Paid`` for notes such as "Paid" or "PAID in full",
        ``Pending`` otherwise.
    """
    lowered = note.strip().lower()
    if lowered == "paid" or lowered.startswith("paid "):
        return STATUS_PAID
    return STATUS_PENDING


__all__ = ["classify_work_status"]
