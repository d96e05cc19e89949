"""Core feed rendering logic for feedstamp."""
