"""Example charts: a bar chart from literal columns and a CSV-backed dot plot."""
import altair as alt

from bindings import bind_channels
from tabular import build_table, column, load_csv

# ----------------- Settings -----------------
GISTEMP_CSV = "data/gistemp.csv"
Y_LABEL = "Temperature anomaly (°C)"
Y_TICK_FORMAT = "+f"
# Vega has no blue-to-red scheme; red-to-blue reversed puts cold values in blue
COLOR_SCHEME = "redblue"


def people_table():
    return build_table({
        "id": [1, 2, 3],
        "name": ["Alice", "Bob", "Charlie"],
        "age": [35, 25, 45],
    })


async def table_bar_chart() -> alt.Chart:
    """One bar per row of the people table: name on x, age on y."""
    data = people_table()
    frame, fields = bind_channels({"x": column(data, "name"), "y": column(data, "age")})
    return alt.Chart(frame).mark_bar().encode(
        x=alt.X(fields["x"], type="nominal", sort=None),
        y=alt.Y(fields["y"], type="quantitative"),
    )


async def gistemp_anomaly_chart() -> alt.LayerChart:
    """Temperature anomalies from GISTEMP_CSV as signed, diverging-colored dots over a zero rule.

    The bundled data/gistemp.csv is an illustrative sample, one row every five
    years, not an official GISTEMP extract.
    """
    data = await load_csv(GISTEMP_CSV)

    y = alt.Y(
        "Anomaly",
        type="quantitative",
        title=Y_LABEL,
        axis=alt.Axis(format=Y_TICK_FORMAT, grid=True),
    )

    zero = alt.Chart(build_table({"Anomaly": [0]})).mark_rule().encode(y=y)

    frame, fields = bind_channels({"x": "Date", "y": "Anomaly", "stroke": "Anomaly"}, table=data)
    dots = alt.Chart(frame).mark_point().encode(
        x=alt.X(fields["x"], type="temporal"),
        y=y,
        stroke=alt.Stroke(
            fields["stroke"],
            type="quantitative",
            scale=alt.Scale(scheme=COLOR_SCHEME, reverse=True, domainMid=0),
        ),
    )

    return alt.layer(zero, dots)


GALLERY = {
    "Bar chart from columns": table_bar_chart,
    "Temperature anomaly (sample data)": gistemp_anomaly_chart,
}
