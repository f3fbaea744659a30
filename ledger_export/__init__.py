"""Render finalized ledger transactions into general-ledger batch files."""
