from typing import Dict, List

import pandas as pd

from uxsim.sim.model import APPEAL_WEIGHT_FIELDS, EXTENDED_TRAITS, Segment, SimulationOutput

REQUIRED_COLS = ["key", "name"] + list(APPEAL_WEIGHT_FIELDS.values())
ARM_COLS = ["arm", "name", "visitors", "conversions", "conversion_rate", "observed_rate", "revenue"]


def load_segments_csv(path: str) -> Dict[str, Segment]:
    # robust read: allow UTF-8 and skip any bad lines
    df = pd.read_csv(path, encoding="utf-8", on_bad_lines="skip")
    df.columns = [c.strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    df = df.copy()
    df["key"] = df["key"].fillna("").astype(str).str.strip()
    df["name"] = df["name"].fillna("").astype(str).str.strip()
    blank = [c for c in ("key", "name") if (df[c] == "").any()]
    if blank:
        raise ValueError(f"Segment key/name must not be empty; blank values in: {blank}")
    if df["key"].duplicated().any():
        dupes = df.loc[df["key"].duplicated(), "key"].unique().tolist()
        raise ValueError(f"Duplicate segment keys: {dupes}")

    weight_cols = list(APPEAL_WEIGHT_FIELDS.values()) + [t for t in EXTENDED_TRAITS if t in df.columns]
    for col in weight_cols:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    bad = [c for c in weight_cols if (df[c].isna() | (df[c] < 0) | (df[c] > 1)).any()]
    if bad:
        raise ValueError(f"Weights must be numbers in [0, 1]; bad columns: {bad}")

    basis = df["research_basis"].fillna("").astype(str) if "research_basis" in df.columns else None
    trait_cols = [t for t in EXTENDED_TRAITS if t in df.columns]

    segments = {}
    for i, row in df.iterrows():
        segments[row["key"]] = Segment(
            key=row["key"],
            name=row["name"],
            price_sensitivity=float(row["price_sensitivity"]),
            convenience_preference=float(row["convenience_preference"]),
            urgency_response=float(row["urgency_response"]),
            speed_preference=float(row["speed_preference"]),
            research_basis=basis[i] if basis is not None else "",
            traits={t: float(row[t]) for t in trait_cols},
        )
    return segments


def output_to_frame(out: SimulationOutput) -> pd.DataFrame:
    """One row per arm, for table display."""
    rows = []
    for arm, res in (("A", out.variant_a), ("B", out.variant_b)):
        rows.append([arm, res.name, res.visitors, res.conversions,
                     res.conversion_rate, res.observed_rate, res.revenue])
    return pd.DataFrame(rows, columns=ARM_COLS)


def outputs_to_frame(rows: List[Dict]) -> pd.DataFrame:
    """
    Flatten a list of {"output": SimulationOutput, **labels} dicts into one
    row each; labels (test key, segment key, seed...) come first.
    """
    flat = []
    for r in rows:
        labels = {k: v for k, v in r.items() if k != "output"}
        d = r["output"].to_dict()
        for arm in ("variant_a", "variant_b"):
            for k, v in d.pop(arm).items():
                labels[f"{arm}_{k}"] = v
        labels.update(d)
        flat.append(labels)
    return pd.DataFrame(flat)
