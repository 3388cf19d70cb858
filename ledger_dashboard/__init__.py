"""Dashboard for spreadsheet-published work and expense ledgers."""
