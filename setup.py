"""
PCA Plots - Correlation circles and individuals maps from precomputed PCA coordinates
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read long description from README
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="pca-plots",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Correlation circle and individuals plots for 2D PCA results",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/pca-plots",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Visualization",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.5.0",
        "pandas>=1.3.0",
        "pyyaml>=5.4.0",
        "omegaconf>=2.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
            "isort>=5.10.0",
        ],
        "examples": [
            "scikit-learn>=1.0.0",
        ],
        "all": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "scikit-learn>=1.0.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords=[
        "pca",
        "principal-component-analysis",
        "correlation-circle",
        "biplot",
        "visualization",
        "matplotlib",
    ],
    project_urls={
        "Bug Reports": "https://github.com/yourusername/pca-plots/issues",
        "Source": "https://github.com/yourusername/pca-plots",
    },
)
