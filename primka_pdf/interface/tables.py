"""DataFrame helpers for the Streamlit preview."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from ..domain.record import RECORD_FIELDS, Record


def records_to_frame(records: Sequence[Record]) -> pd.DataFrame:
    """One row per record, Croatian header labels as columns, values as text."""
    columns = [label for _, label in RECORD_FIELDS]
    df = pd.DataFrame([r.as_labeled_dict() for r in records], columns=columns)
    return df.astype("string")


def receipt_summary(records: Sequence[Record]) -> pd.DataFrame:
    """Row count per receipt number, in order of first appearance."""
    df = pd.DataFrame({"Broj primke": [r.receipt_number for r in records]})
    if df.empty:
        return pd.DataFrame({"Broj primke": pd.Series(dtype="string"), "Redaka": pd.Series(dtype="int64")})
    counts = df.groupby("Broj primke", sort=False).size().reset_index(name="Redaka")
    return counts
