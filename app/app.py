# app/app.py
from __future__ import annotations

import logging
import math
from typing import List, Tuple

import gradio as gr
import pandas as pd

from uxsim import config
from uxsim.data.experiments import HISTORICAL_TESTS, RESEARCH_SOURCES, TEST_CATEGORIES, choices_for_category, get_test
from uxsim.data.loader import ARM_COLS, output_to_frame
from uxsim.data.segments import CUSTOMER_SEGMENTS, DEFAULT_SEGMENT, average_order_value, get_segment
from uxsim.sim.engine import simulate
from uxsim.sim.inputs import SimulationInputError, build_simulation_input
from uxsim.sim.planning import plan_test

logger = logging.getLogger("uxsim.app")

HISTORY_COLS = ["company", "test", "winner", "lift", "duration", "traffic"]
SEGMENT_COLS = ["trait", "value"]


# -----------------------------------------------------------------------------
# Gradio glue
# -----------------------------------------------------------------------------
def category_changed(category_key: str):
    choices = choices_for_category(category_key)
    return gr.update(choices=choices, value=None)


def segment_profile(segment_key: str) -> pd.DataFrame:
    seg = CUSTOMER_SEGMENTS.get(segment_key)
    if seg is None:
        return pd.DataFrame([], columns=SEGMENT_COLS)
    rows: List[List] = [
        ["price_sensitivity", seg.price_sensitivity],
        ["convenience_preference", seg.convenience_preference],
        ["urgency_response", seg.urgency_response],
        ["speed_preference", seg.speed_preference],
    ]
    rows += [[k, v] for k, v in seg.traits.items()]
    rows.append(["average_order_value", average_order_value(segment_key)])
    return pd.DataFrame(rows, columns=SEGMENT_COLS)


def run_simulation(
    category_key, test_key, segment_key, traffic_split, visitors, use_seed, seed
) -> Tuple[str, pd.DataFrame, str]:
    try:
        inp = build_simulation_input(
            category_key, test_key, segment_key, traffic_split, visitors,
            seeded=use_seed, seed=int(seed) if seed is not None else None,
        )
    except SimulationInputError as e:
        return f"⚠️ {e}", pd.DataFrame([], columns=ARM_COLS), ""

    out = simulate(inp)
    logger.info("simulated %s/%s for %s: winner=%s confidence=%.1f%%",
                category_key, test_key, segment_key, out.winner, out.confidence_percent)

    header = []
    header.append(
        f"**Winner**: {out.winner} ({(out.variant_b if out.winner == 'B' else out.variant_a).name}), "
        f"improvement {out.improvement_percent:.1f}%"
    )
    header.append(
        f"**Confidence**: {out.confidence_percent:.1f}% "
        f"(z={out.z_score:.2f}, p={out.p_value:.3f})"
    )
    header.append(
        f"**Revenue**: A={out.variant_a.revenue:,.0f}, B={out.variant_b.revenue:,.0f}, "
        f"lift {out.revenue_lift_percent:+.1f}%"
    )
    header.append(
        f"**Projected B - A revenue**: daily {out.daily_revenue_delta:+,.0f}, "
        f"monthly {out.monthly_revenue_delta:+,.0f}, annual {out.annual_revenue_delta:+,.0f}"
    )
    need = out.required_visitors_per_arm
    if not math.isnan(need):
        header.append(
            f"**Power**: {out.power_percent:.0f}% with this traffic; "
            f"≈ {int(need):,} visitors per arm for 80% power"
        )
    header.append("")
    header.append(out.recommendation.text.replace("\n", "\n\n"))

    evidence = "\n\n".join([out.recommendation.research_support, research_markdown(), case_study_markdown()])
    return "\n\n".join(header), output_to_frame(out), evidence


def research_markdown() -> str:
    return "**Research sources**\n\n" + "\n".join(f"- {s}" for s in RESEARCH_SOURCES)

def case_study_markdown() -> str:
    lines = [f"- {t['company']}: {t['test']}, {t['winner']} won {t['lift']} over {t['duration']}"
             for t in HISTORICAL_TESTS]
    return "**Company case studies**\n\n" + "\n".join(lines)


# --- Test planning: modeled gap vs the catalog's usual traffic ----------------
def plan_markdown(category_key, test_key, segment_key) -> str:
    if not category_key or not test_key or not segment_key:
        return "Select a category, a test and a segment."
    try:
        test = get_test(category_key, test_key)
        segment = get_segment(segment_key)
    except KeyError as e:
        return f"⚠️ {e}"

    plan = plan_test(test, segment)
    per_arm = plan["catalog_visitors_per_arm"]
    lines = [
        f"Modeled rates: A={plan['rate_a']:.2%}, B={plan['rate_b']:.2%} "
        f"(gap {plan['gap']:.3%})",
    ]
    need = plan["required_visitors_per_arm"]
    if math.isnan(need):
        lines.append("The variants model the same rate here; no traffic will separate them.")
    else:
        verdict = "enough" if plan["catalog_size_enough"] else "not enough"
        lines.append(
            f"≈ **{int(need):,} visitors per arm** for {config.POWER:.0%} power; "
            f"the usual {test.meta.sample_size_needed:,} total ({per_arm:,} per arm) is {verdict}."
        )
        lines.append(f"Power at the usual size: {plan['power_at_catalog_size']:.0%}.")
    lines.append(
        f"With {per_arm:,} per arm the smallest detectable lift is ≈ {plan['detectable_lift']:.3%}."
    )
    return "\n\n".join(lines)


# -----------------------------------------------------------------------------
# UI
# -----------------------------------------------------------------------------
def build_ui() -> gr.Blocks:
    with gr.Blocks(title="UI/UX A/B Test Simulator") as demo:
        gr.Markdown(
            "# UI/UX A/B Test Simulator\n"
            "Preview how a UI change might perform before running a real A/B test."
        )
        with gr.Tab("Simulate"):
            with gr.Row():
                with gr.Column(scale=1):
                    cat_in = gr.Dropdown(
                        choices=[(c.name, c.key) for c in TEST_CATEGORIES.values()],
                        label="Test category",
                    )
                    test_in = gr.Dropdown(choices=[], label="Test")
                    seg_in = gr.Dropdown(
                        choices=[(s.name, s.key) for s in CUSTOMER_SEGMENTS.values()],
                        value=DEFAULT_SEGMENT,
                        label="Target segment",
                    )
                    split_in = gr.Slider(10, 90, value=config.DEFAULT_TRAFFIC_SPLIT, step=5,
                                         label="Traffic to A (%)")
                    visitors_in = gr.Number(value=config.DEFAULT_VISITORS, precision=0,
                                            label="Visitors")
                    seed_on = gr.Checkbox(value=False, label="Reproducible (seeded)")
                    seed_in = gr.Number(value=config.DEFAULT_SEED, precision=0, label="Seed")
                    go = gr.Button("Run simulation", variant="primary")
                with gr.Column(scale=2):
                    memo_md = gr.Markdown(value="—")
                    arms_table = gr.Dataframe(
                        headers=ARM_COLS,
                        col_count=(len(ARM_COLS), "fixed"),
                        interactive=False,
                        label="Per-variant results",
                    )
                    research_md = gr.Markdown(value="")
                    profile_table = gr.Dataframe(
                        value=segment_profile(DEFAULT_SEGMENT),
                        headers=SEGMENT_COLS,
                        interactive=False,
                        label="Segment profile",
                    )

            cat_in.change(category_changed, inputs=[cat_in], outputs=[test_in])
            seg_in.change(segment_profile, inputs=[seg_in], outputs=[profile_table])
            go.click(
                run_simulation,
                inputs=[cat_in, test_in, seg_in, split_in, visitors_in, seed_on, seed_in],
                outputs=[memo_md, arms_table, research_md],
                api_name="simulate",
            )

        with gr.Tab("Power"):
            plan_cat = gr.Dropdown(
                choices=[(c.name, c.key) for c in TEST_CATEGORIES.values()],
                label="Test category",
            )
            plan_test_in = gr.Dropdown(choices=[], label="Test")
            plan_seg = gr.Dropdown(
                choices=[(s.name, s.key) for s in CUSTOMER_SEGMENTS.values()],
                value=DEFAULT_SEGMENT,
                label="Target segment",
            )
            out = gr.Markdown("—")
            calc = gr.Button("Compute")
            plan_cat.change(category_changed, inputs=[plan_cat], outputs=[plan_test_in])
            calc.click(plan_markdown, inputs=[plan_cat, plan_test_in, plan_seg], outputs=[out])

        with gr.Tab("Reference tests"):
            gr.Dataframe(
                value=pd.DataFrame(HISTORICAL_TESTS, columns=HISTORY_COLS),
                interactive=False,
                label="Published A/B results",
            )
            gr.Markdown(research_markdown())

        gr.Markdown(
            "—\nNumbers are simulated, not measured. Confidence uses a Welch-style "
            "two-proportion test on the sampled conversions.\n"
        )

    return demo


if __name__ == "__main__":
    config.configure_logging()
    demo = build_ui()
    demo.launch(server_name=config.HOST, server_port=config.PORT, share=False, inbrowser=False)
