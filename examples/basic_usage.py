"""
Basic usage example for PCA Plots.

This script demonstrates how to:
1. Compute a PCA with scikit-learn
2. Plot variable loadings as a correlation circle
3. Plot individual scores as a labelled scatter
4. Customize the style and handle invalid inputs
"""

import numpy as np
from sklearn.datasets import load_iris
from sklearn.decomposition import PCA
from sklearn.preprocessing import StandardScaler

from pca_plots import PCAPlotError, PlotStyle, render_pca


def _iris_pca():
    iris = load_iris()
    X = StandardScaler().fit_transform(iris.data)
    pca = PCA(n_components=2, random_state=0)
    scores = pca.fit_transform(X)
    # Correlations between standardized variables and components
    loadings = pca.components_.T * np.sqrt(pca.explained_variance_)
    loadings = np.clip(loadings, -1.0, 1.0)
    names = [name.replace(" (cm)", "") for name in iris.feature_names]
    return scores, loadings, names


def example_variables():
    """Example: Correlation circle of the iris variables."""

    print("=== Variables Example ===\n")
    _, loadings, names = _iris_pca()
    render_pca(loadings, labels=names, title="Iris variables", output_dir="results/pca_plots")
    print("\n✓ Correlation circle done!")


def example_individuals():
    """Example: Scatter of the first 20 iris flowers."""

    print("\n=== Individuals Example ===\n")
    scores, _, _ = _iris_pca()
    style = PlotStyle(figsize=(8.0, 8.0), dpi=150, marker_color="darkgreen")
    render_pca(scores[:20], verbose=False, output_dir="results/pca_plots", style=style)
    print("✓ Individuals scatter done!")


def example_invalid_input():
    """Example: Validation errors are raised before anything is drawn."""

    print("\n=== Invalid Input Example ===\n")
    try:
        render_pca([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], save=False)
    except PCAPlotError as exc:
        print(f"Caught {type(exc).__name__}: {exc}")


if __name__ == "__main__":
    print("PCA Plots - Usage Examples")
    print("=" * 50)

    example_variables()
    example_individuals()
    example_invalid_input()

    print("\n" + "=" * 50)
    print("Figures written to results/pca_plots/")
