"""Screens and presenters for hcpstatus."""
