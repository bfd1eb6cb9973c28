import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.patches import FancyArrow

import pca_plots.plotting as plotting
from pca_plots import (
    DimensionError,
    EmptyInputError,
    InvalidValueError,
    LabelCountMismatch,
    TypeMismatch,
    render_pca,
)


def _texts(ax):
    return [(t.get_text(), tuple(np.round(t.get_position(), 6))) for t in ax.texts]


def test_variables_render_correlation_circle(variable_coords):
    fig = render_pca(variable_coords, verbose=False, save=False)
    ax = fig.axes[0]

    assert ax.get_title() == "PCA: Variables (Correlation Circle)"
    assert ax.get_xlim() == pytest.approx((-1.1, 1.1))
    assert ax.get_ylim() == pytest.approx((-1.1, 1.1))
    assert ax.get_legend() is None
    assert ax.get_xlabel() == "PC1"
    assert ax.get_ylabel() == "PC2"

    arrows = [p for p in ax.patches if isinstance(p, FancyArrow)]
    assert len(arrows) == 2

    assert _texts(ax) == [("X1", (0.88, 0.55)), ("X2", (0.55, 0.77))]


def test_correlation_circle_is_a_closed_unit_path(variable_coords):
    fig = render_pca(variable_coords, verbose=False, save=False)
    circle = fig.axes[0].lines[0]
    x, y = circle.get_xdata(), circle.get_ydata()
    np.testing.assert_allclose(np.hypot(x, y), 1.0)
    assert x[0] == pytest.approx(x[-1])
    assert y[0] == pytest.approx(y[-1])


def test_reference_lines_are_dashed(variable_coords, individual_coords):
    for coords in (variable_coords, individual_coords):
        ax = render_pca(coords, verbose=False, save=False).axes[0]
        dashed = [line for line in ax.lines if line.get_linestyle() == "--"]
        assert len(dashed) == 2


def test_individuals_render_scatter(individual_coords):
    fig = render_pca(individual_coords, verbose=False, save=False)
    ax = fig.axes[0]

    assert ax.get_title() == "PCA: Individuals"
    assert ax.get_legend() is None
    np.testing.assert_allclose(ax.collections[0].get_offsets(), individual_coords)
    assert ax.get_xlim() == pytest.approx((0.3 - 0.5, 1.2 + 0.5))
    assert ax.get_ylim() == pytest.approx((0.5 - 0.5, 1.0 + 0.5))
    assert _texts(ax) == [
        ("Ind1", (1.2, 0.65)),
        ("Ind2", (0.8, 1.15)),
        ("Ind3", (0.3, 0.85)),
    ]
    assert not [p for p in ax.patches if isinstance(p, FancyArrow)]


def test_custom_labels_and_title(individual_coords):
    fig = render_pca(individual_coords, labels=["A", "B", "C"], title="My Title",
                     verbose=False, save=False)
    ax = fig.axes[0]
    assert ax.get_title() == "My Title"
    assert [t.get_text() for t in ax.texts] == ["A", "B", "C"]
    assert len(ax.collections) == 1


def test_single_point_has_non_degenerate_limits():
    fig = render_pca([[0.5, 0.5]], verbose=False, save=False)
    ax = fig.axes[0]
    assert [t.get_text() for t in ax.texts] == ["X1"]

    fig = render_pca([[3.0, -2.0]], verbose=False, save=False)
    ax = fig.axes[0]
    assert ax.get_xlim() == pytest.approx((2.5, 3.5))
    assert ax.get_ylim() == pytest.approx((-2.5, -1.5))
    assert [t.get_text() for t in ax.texts] == ["Ind1"]


def test_large_random_matrix():
    coords = np.random.default_rng(0).normal(size=(100, 2)) * 3
    fig = render_pca(coords, verbose=False, save=False)
    assert len(fig.axes[0].texts) == 100


def test_repeated_calls_give_identical_placements(individual_coords):
    first = render_pca(individual_coords, verbose=False, save=False)
    second = render_pca(individual_coords, verbose=False, save=False)
    assert first is not second
    ax1, ax2 = first.axes[0], second.axes[0]
    assert _texts(ax1) == _texts(ax2)
    assert ax1.get_title() == ax2.get_title()
    assert ax1.get_xlim() == ax2.get_xlim()
    np.testing.assert_array_equal(ax1.collections[0].get_offsets(), ax2.collections[0].get_offsets())


def test_verbose_prints_diagnostics(variable_coords, capsys):
    render_pca(variable_coords, verbose=True, save=False)
    out = capsys.readouterr().out
    assert "PCA PLOT DIAGNOSTICS" in out
    assert "Matrix dimensions: 2 × 2" in out
    assert "Plot type detected: variables" in out
    assert "PC1 range: [0.5, 0.8]" in out
    assert "PC2 range: [0.5, 0.7]" in out
    assert "Labels: ['X1', 'X2']" in out
    assert "Output directory" not in out


def test_verbose_reports_output_directory_when_saving(individual_coords, tmp_path, capsys):
    out_dir = tmp_path / "plots"
    render_pca(individual_coords, verbose=True, save=True, output_dir=out_dir)
    out = capsys.readouterr().out
    assert f"Output directory: {out_dir}" in out
    assert "Plot type detected: individuals" in out
    assert "✓ Plot saved to:" in out


def test_quiet_mode_prints_nothing(variable_coords, capsys):
    render_pca(variable_coords, verbose=False, save=False)
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "matrix, labels, exc_type",
    [
        ("not a matrix", None, TypeMismatch),
        ([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], None, DimensionError),
        (np.zeros((0, 2)), None, EmptyInputError),
        ([[1.0, 2.0], [np.nan, 3.0]], None, InvalidValueError),
        ([[1.0, 2.0], [np.inf, 3.0]], None, InvalidValueError),
        ([[1.2, 0.5], [0.8, 1.0], [0.3, 0.7]], ["A", "B"], LabelCountMismatch),
    ],
)
def test_validation_errors_propagate_without_output(matrix, labels, exc_type, tmp_path, capsys):
    with pytest.raises(exc_type):
        render_pca(matrix, labels=labels, verbose=True, save=True, output_dir=tmp_path / "never")
    assert capsys.readouterr().out == ""
    assert plt.get_fignums() == []
    assert not (tmp_path / "never").exists()


def test_unexpected_error_is_reported_and_reraised(individual_coords, monkeypatch, capsys):
    def _fail(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(plotting, "save_figure", _fail)
    with pytest.raises(OSError, match="disk full"):
        render_pca(individual_coords, verbose=False, save=True)

    out = capsys.readouterr().out
    assert "UNEXPECTED ERROR occurred in render_pca()" in out
    assert "Error type: OSError" in out
    assert "Error message: disk full" in out
    assert "Stack trace:" in out
    assert plt.get_fignums() == []
