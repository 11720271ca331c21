"""Data models for hcpstatus."""
