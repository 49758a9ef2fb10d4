"""Human-readable identifiers for incidents and reports"""

from datetime import datetime


def format_incident_id(epoch_millis: int, sequence: int) -> str:
    """
    INC-<epoch ms>-<sequence, zero padded to 4>.

    The sequence keeps ids unique. Past 9999 it widens, so string order of
    ids minted in the same millisecond is no longer creation order; listings
    order by the stored sequence field instead.
    """
    return f"INC-{epoch_millis}-{sequence:04d}"


def generate_report_id(now: datetime, sequence: int) -> str:
    """RPT-<yyyymmdd>-<sequence, zero padded to 4>; sequence comes from a counter"""
    return f"RPT-{now.strftime('%Y%m%d')}-{sequence:04d}"
