import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import seaborn as sns  # noqa: E402

import pandas as pd

BAR_COLOR = "#4a90e2"


def create_frequency_chart(frequencies: pd.DataFrame, title: str):
    """
    Bar chart of a name/count frame.

    Bars keep the row order of the frame (first-seen order), they are not
    sorted by label or count.

    Returns:
        matplotlib Figure; the caller owns it and should close it
    """
    fig, ax = plt.subplots(figsize=(6, 3.5))

    if frequencies.empty:
        ax.text(0.5, 0.5, "No values", ha="center", va="center")
        ax.set_axis_off()
    else:
        sns.barplot(
            data=frequencies,
            x="name",
            y="count",
            order=list(frequencies["name"]),
            color=BAR_COLOR,
            ax=ax,
        )
        ax.set_xlabel("")
        ax.set_ylabel("count")
        ax.grid(axis="y", linestyle="--", alpha=0.5)
        ax.tick_params(axis="x", labelsize=9, labelrotation=30)

    ax.set_title(title)
    fig.tight_layout()
    return fig
