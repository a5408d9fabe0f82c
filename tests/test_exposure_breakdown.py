from leverage_dashboard.frontend import charts, tables


EXPOSURES = [
    {"symbol": "/ES", "quantity": -2, "multiplier": 50, "price": 4500.0, "notional": 450000.0},
    {"symbol": "/CL", "quantity": 1, "multiplier": 1000, "price": 50.0, "notional": 50000.0},
]


def test_empty_exposures():
    df = tables.build_exposure_dataframe([])
    assert df.empty
    assert list(df.columns) == tables.EXPOSURE_COLUMNS


def test_exposure_dataframe_sorted_with_share():
    df = tables.build_exposure_dataframe(list(reversed(EXPOSURES)))
    assert list(df["Symbol"]) == ["/ES", "/CL"]
    assert df["Share %"].tolist() == [90.0, 10.0]
    assert df.loc[0, "Qty"] == -2


def test_exposure_figure_colors_short_positions():
    df = tables.build_exposure_dataframe(EXPOSURES)
    fig = charts.build_exposure_figure(df)
    bar = fig.data[0]
    assert list(bar.x) == ["/ES", "/CL"]
    assert list(bar.marker.color) == [charts.COLORS["negative"], charts.COLORS["positive"]]
