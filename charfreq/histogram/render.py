"""
Histogram report rendering.
Reason: sort, threshold, and format finished counts in one deterministic pass.
"""
from typing import List, Mapping

import pandas as pd

from charfreq.config import BAR_CHAR, MIN_PERCENTAGE
from charfreq.models import ReportEntry

COLUMNS = ["character", "occurrences", "percentage"]


def report_frame(counts: Mapping[str, int], total: int) -> pd.DataFrame:
    """
    Parameters:
        counts (Mapping[str, int]): Character -> occurrence count.
        total (int): Number of counted characters (sum of counts).

    Returns:
        pd.DataFrame: character/occurrences/percentage rows in report order.

    Does:
        Sorts by count descending then character ascending, converts counts to
        percentages of total, and drops rows under MIN_PERCENTAGE. An empty
        histogram (total 0) yields an empty frame instead of dividing by zero.
    """
    if not total or not counts:
        return pd.DataFrame(columns=COLUMNS)

    df = pd.DataFrame(list(counts.items()), columns=["character", "occurrences"])
    df = df.sort_values(["occurrences", "character"], ascending=[False, True])
    df["percentage"] = df["occurrences"] / total * 100
    df = df[df["percentage"] >= MIN_PERCENTAGE]
    return df.reset_index(drop=True)


def report_entries(counts: Mapping[str, int], total: int) -> List[ReportEntry]:
    df = report_frame(counts, total)
    return [
        ReportEntry(character=r.character, occurrences=int(r.occurrences), percentage=float(r.percentage))
        for r in df.itertuples(index=False)
    ]


def format_entry(entry: ReportEntry) -> str:
    # round() is half-to-even: 2.5 -> 2, 3.5 -> 4
    bar = BAR_CHAR * round(entry.percentage)
    return f"{entry.character}: {bar} {entry.percentage:.2f}%"


def render(counts: Mapping[str, int], total: int) -> str:
    return "\n".join(format_entry(e) for e in report_entries(counts, total))
